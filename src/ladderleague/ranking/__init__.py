"""Ranking engine: grouping, group results and ladder recalculation."""

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

from ladderleague.ranking.manual import reorder_player_ranks
from ladderleague.ranking.partitioner import find_group_sizes, generate_groups
from ladderleague.ranking.reconciler import (
    apply_boundary_swaps,
    calculate_new_ranks,
    merge_into_ladder,
)
from ladderleague.ranking.resolver import (
    bracket_winner,
    expected_match_ids,
    iter_group_matches,
    resolve_group_placements,
)

__all__ = [
    "apply_boundary_swaps",
    "bracket_winner",
    "calculate_new_ranks",
    "expected_match_ids",
    "find_group_sizes",
    "generate_groups",
    "iter_group_matches",
    "merge_into_ladder",
    "reorder_player_ranks",
    "resolve_group_placements",
]
