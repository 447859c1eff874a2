"""Ladder League: ranking engine for round-based ladder leagues.

Present players are split into groups of 4 and 3, each group's matches
produce a placement, and placements feed a promotion/relegation step that
recalculates the ladder while absent players keep their order.
"""

# Ladder League
# Copyright (C) 2025  Ladder League developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from ladderleague.exceptions import (
    InsufficientPlayersException,
    InvalidRankException,
    LadderLeagueException,
    NoValidGroupingException,
    PlayerNotFoundException,
)
from ladderleague.models import LeagueConfig, MatchId, MatchScore, Player, RoundSnapshot
from ladderleague.ranking import (
    calculate_new_ranks,
    generate_groups,
    reorder_player_ranks,
    resolve_group_placements,
)

__version__ = "0.3.0"

__all__ = [
    "InsufficientPlayersException",
    "InvalidRankException",
    "LadderLeagueException",
    "LeagueConfig",
    "MatchId",
    "MatchScore",
    "NoValidGroupingException",
    "Player",
    "PlayerNotFoundException",
    "RoundSnapshot",
    "calculate_new_ranks",
    "generate_groups",
    "reorder_player_ranks",
    "resolve_group_placements",
]
