"""Merging group placements back into the full ladder.

Present players are re-ordered as one block: the group placements are
concatenated, and at every boundary between neighbouring groups the last
player of the stronger group swaps with the first player of the weaker group
(promotion/relegation). The block is then laid back onto the ladder slots
the present players occupied before the round, so absent players keep both
their slots and their order relative to each other.
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

from collections import Counter
from typing import AbstractSet, Dict, Iterable, List, Optional, Sequence

from ladderleague.exceptions import PlacementMismatchException
from ladderleague.models.player import Player
from ladderleague.type_hints import GroupPlacement, PlayerId, Players
from ladderleague.utils import setup_logger

logger = setup_logger(__name__)


def apply_boundary_swaps(
    group_placements: Sequence[GroupPlacement],
    players_by_id: Optional[Dict[PlayerId, Player]] = None,
) -> List[GroupPlacement]:
    """Swap players across every adjacent group boundary.

    Boundaries are processed top to bottom. For each one the tail of the
    higher group and the head of the lower group trade places. Groups hold
    at least two players, so a group's head and tail are distinct and each
    boundary swap is independent of its neighbours.

    Args:
        group_placements: Placements in group order, each best to worst
        players_by_id: Full player records to substitute for swapped players

    Returns:
        New list of new placement lists; the input is left untouched
    """
    placements = [list(placement) for placement in group_placements]
    lookup = players_by_id or {}

    for index in range(len(placements) - 1):
        higher = placements[index]
        lower = placements[index + 1]
        if not higher or not lower:
            continue

        relegated = higher.pop()
        promoted = lower.pop(0)
        higher.append(lookup.get(promoted.id, promoted))
        lower.insert(0, lookup.get(relegated.id, relegated))
        logger.debug(
            "Boundary %s/%s: %s promoted, %s relegated",
            index + 1,
            index + 2,
            promoted.name,
            relegated.name,
        )

    return placements


def merge_into_ladder(
    all_players: Sequence[Player],
    present_player_ids: AbstractSet[PlayerId],
    present_final_order: Sequence[Player],
) -> Players:
    """Lay the present players' final order onto the ladder.

    Walks the original ladder slot by slot. A slot owned by a present player
    takes the next player of ``present_final_order``, a slot owned by an
    absent player keeps that player. Ranks are renumbered 1..N.

    Raises:
        PlacementMismatchException: If the number of present slots differs
            from the length of ``present_final_order``
    """
    present_slots = sum(1 for p in all_players if p.id in present_player_ids)
    if present_slots != len(present_final_order):
        raise PlacementMismatchException(
            f"{present_slots} present players on the ladder but "
            f"{len(present_final_order)} placed in groups"
        )

    incoming = iter(present_final_order)
    merged: Players = []
    for player in all_players:
        owner = next(incoming) if player.id in present_player_ids else player
        merged.append(owner.with_rank(len(merged) + 1))
    return merged


def _check_placements(
    placed_ids: Iterable[PlayerId],
    present_player_ids: AbstractSet[PlayerId],
    players_by_id: Dict[PlayerId, Player],
) -> None:
    counts = Counter(placed_ids)
    duplicates = sorted(str(pid) for pid, n in counts.items() if n > 1)
    if duplicates:
        raise PlacementMismatchException(
            f"Players placed more than once: {', '.join(duplicates)}"
        )
    unknown = sorted(str(pid) for pid in counts if pid not in players_by_id)
    if unknown:
        raise PlacementMismatchException(
            f"Placed players missing from the ladder: {', '.join(unknown)}"
        )
    if set(counts) != set(present_player_ids):
        raise PlacementMismatchException(
            "Group placements do not cover exactly the present players"
        )


def calculate_new_ranks(
    all_players: Sequence[Player],
    present_players: Sequence[Player],
    present_player_ids: Optional[AbstractSet[PlayerId]],
    group_placements: Sequence[GroupPlacement],
) -> Players:
    """Compute the ladder after a round.

    Args:
        all_players: Full ladder in its current order, rank 1 first
        present_players: Players who took part, best rank first
        present_player_ids: Ids of the players who took part; derived from
            ``present_players`` when None
        group_placements: Placements in group order, each best to worst

    Returns:
        New list of new Player records ranked 1..N

    Raises:
        PlacementMismatchException: If the placements and present set disagree
    """
    if present_player_ids is None:
        present_player_ids = {p.id for p in present_players}
    else:
        present_player_ids = set(present_player_ids)

    players_by_id = {p.id: p for p in all_players}
    # Ids outside the ladder own no slot
    present_on_ladder = {pid for pid in present_player_ids if pid in players_by_id}

    _check_placements(
        (p.id for placement in group_placements for p in placement),
        present_on_ladder,
        players_by_id,
    )

    swapped = apply_boundary_swaps(group_placements, players_by_id)
    present_final_order = [
        players_by_id[p.id] for placement in swapped for p in placement
    ]

    new_ladder = merge_into_ladder(all_players, present_on_ladder, present_final_order)
    logger.info(
        "Recalculated ladder: %s players, %s present in %s groups",
        len(new_ladder),
        len(present_final_order),
        len(group_placements),
    )
    return new_ladder
