"""Splitting present players into groups for one round.

Groups hold four or three players each, filled from the top of the ladder
down so the strongest players meet each other. A round with exactly two
players present is a single exhibition match.
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

from typing import List, Sequence

from ladderleague.constants import (
    BRACKET_GROUP_SIZE,
    EXHIBITION_GROUP_SIZE,
    MIN_PRESENT_PLAYERS,
    ROUND_ROBIN_GROUP_SIZE,
)
from ladderleague.exceptions import (
    InsufficientPlayersException,
    NoValidGroupingException,
)
from ladderleague.models.player import Player
from ladderleague.type_hints import Group, GroupSizes
from ladderleague.utils import setup_logger

logger = setup_logger(__name__)


def find_group_sizes(num_players: int) -> GroupSizes:
    """Decompose ``num_players`` into groups of 4 and 3.

    The number of 4-groups is maximised: it is scanned downward from
    ``num_players // 4`` and the first count leaving a multiple of 3 wins.

    Args:
        num_players: Number of present players, at least 3

    Returns:
        Tuple of (number of 4-groups, number of 3-groups)

    Raises:
        NoValidGroupingException: If no decomposition exists (only 5 among n >= 3)
    """
    for fours in range(num_players // BRACKET_GROUP_SIZE, -1, -1):
        remainder = num_players - fours * BRACKET_GROUP_SIZE
        if remainder % ROUND_ROBIN_GROUP_SIZE == 0:
            return fours, remainder // ROUND_ROBIN_GROUP_SIZE

    raise NoValidGroupingException(
        f"Cannot split {num_players} players into groups of 3 or 4. "
        "Allowed counts are 3, 4, 6, 7, 8, 9 and more."
    )


def generate_groups(
    present_players: Sequence[Player], allow_exhibition_match: bool = True
) -> List[Group]:
    """Split present players into round groups.

    Args:
        present_players: Players taking part, best rank first
        allow_exhibition_match: Treat exactly two players as one 2-player group

    Returns:
        New list of groups; 4-groups first, then 3-groups, each taking the
        next best-ranked players

    Raises:
        InsufficientPlayersException: If fewer than two players are present
        NoValidGroupingException: If the count cannot be split into groups
    """
    num_players = len(present_players)

    if num_players < MIN_PRESENT_PLAYERS:
        raise InsufficientPlayersException(
            f"At least {MIN_PRESENT_PLAYERS} players are needed to create matches, "
            f"got {num_players}."
        )

    if num_players == EXHIBITION_GROUP_SIZE:
        if not allow_exhibition_match:
            raise NoValidGroupingException(
                "Exhibition matches are disabled; 2 players cannot form a group."
            )
        logger.info("Two players present, creating a single exhibition match")
        return [list(present_players)]

    fours, threes = find_group_sizes(num_players)
    logger.info(
        "Splitting %s players into %s groups of 4 and %s groups of 3",
        num_players,
        fours,
        threes,
    )

    groups: List[Group] = []
    start = 0
    for size, count in ((BRACKET_GROUP_SIZE, fours), (ROUND_ROBIN_GROUP_SIZE, threes)):
        for _ in range(count):
            groups.append(list(present_players[start : start + size]))
            start += size
    return groups
