"""Administrative correction of a single player's rank."""

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

from typing import Sequence

from ladderleague.exceptions import PlayerNotFoundException
from ladderleague.models.player import Player
from ladderleague.type_hints import PlayerId, Players
from ladderleague.utils import setup_logger
from ladderleague.utils.validation import validate_rank_strict

logger = setup_logger(__name__)


def reorder_player_ranks(
    players: Sequence[Player], player_id: PlayerId, new_rank: int
) -> Players:
    """Move one player to ``new_rank`` and renumber the ladder.

    The other players keep their relative order; everyone between the old
    and the new position shifts by one.

    Args:
        players: Full ladder, rank 1 first
        player_id: Id of the player to move
        new_rank: Target rank, 1..N

    Returns:
        New ladder ranked 1..N, or ``players`` itself when the player
        already holds ``new_rank``

    Raises:
        InvalidRankException: If new_rank is outside 1..N
        PlayerNotFoundException: If no player has ``player_id``
    """
    validate_rank_strict(new_rank, len(players))

    target = next((p for p in players if p.id == player_id), None)
    if target is None:
        raise PlayerNotFoundException(f"Player not found: {player_id}")

    if target.rank == new_rank:
        return players

    others = [p for p in players if p.id != player_id]
    others.insert(new_rank - 1, target)
    logger.info("Moved %s from rank %s to %s", target.name, target.rank, new_rank)
    return [p.with_rank(index + 1) for index, p in enumerate(others)]
