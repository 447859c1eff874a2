"""Turning one group's match scores into a placement.

Group formats:

- 4 players: single-elimination mini-bracket. Round 1 pits seed 1 against
  seed 4 and seed 2 against seed 3; round 2 has the final (winners) and the
  consolation match (losers).
- 3 players: round robin (1v2, 1v3, 2v3) ordered by wins. A three-way cycle
  (one win each) is broken by point differential; any other tie keeps ladder
  order.
- 2 players: a single exhibition match.

Missing or non-numeric scores never raise. In the bracket an unparsable side
counts as 0 and a level score advances the first listed player; in the other
formats the match is simply ignored.
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

from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ladderleague.constants import (
    BRACKET_CONSOLATION,
    BRACKET_FINAL,
    BRACKET_FIRST_ROUND,
    BRACKET_GROUP_SIZE,
    EXHIBITION_GROUP_SIZE,
    ROUND_ROBIN_GROUP_SIZE,
    ROUND_ROBIN_PAIRS,
)
from ladderleague.exceptions import GroupingException
from ladderleague.models.match_score import MatchId, MatchScore, normalize_scores
from ladderleague.models.player import Player
from ladderleague.type_hints import GroupPlacement, MatchScoreMap, PlayerId
from ladderleague.utils import setup_logger

logger = setup_logger(__name__)

# (match id, first player, second player, score or None)
ScheduledMatch = Tuple[MatchId, Player, Player, Optional[MatchScore]]


def bracket_winner(
    first: Player, second: Player, score: Optional[MatchScore]
) -> Tuple[Player, Player]:
    """Decide a bracket match.

    Args:
        first: Player listed first in the match key
        second: Player listed second
        score: Entered score, or None if nothing was entered

    Returns:
        Tuple of (winner, loser)
    """
    if score is None or score.as_ints() is None:
        logger.warning(
            "Score for %s vs %s is unset or invalid, counting missing sides as 0",
            first.name,
            second.name,
        )
    s1, s2 = (score or MatchScore()).as_ints_or_zero()
    if s2 > s1:
        return second, first
    return first, second


def _resolve_bracket(
    group: Sequence[Player], group_number: int, scores: MatchScoreMap
) -> GroupPlacement:
    winners = []
    losers = []
    for match_number, (i, j) in BRACKET_FIRST_ROUND.items():
        match_id = MatchId.bracket(group_number, 1, match_number)
        winner, loser = bracket_winner(group[i], group[j], scores.get(match_id))
        winners.append(winner)
        losers.append(loser)

    final_round, final_match = BRACKET_FINAL
    first, second = bracket_winner(
        winners[0],
        winners[1],
        scores.get(MatchId.bracket(group_number, final_round, final_match)),
    )
    consolation_round, consolation_match = BRACKET_CONSOLATION
    third, fourth = bracket_winner(
        losers[0],
        losers[1],
        scores.get(
            MatchId.bracket(group_number, consolation_round, consolation_match)
        ),
    )
    return [first, second, third, fourth]


def _resolve_round_robin(
    group: Sequence[Player], group_number: int, scores: MatchScoreMap
) -> GroupPlacement:
    wins: Dict[PlayerId, int] = {p.id: 0 for p in group}
    differential: Dict[PlayerId, int] = {p.id: 0 for p in group}

    for match_number, (i, j) in ROUND_ROBIN_PAIRS.items():
        score = scores.get(MatchId.group(group_number, match_number))
        parsed = score.as_ints() if score is not None else None
        if parsed is None:
            logger.debug("Group %s match %s has no usable score", group_number, match_number)
            continue

        s1, s2 = parsed
        first, second = group[i], group[j]
        if s1 > s2:
            wins[first.id] += 1
        elif s2 > s1:
            wins[second.id] += 1
        differential[first.id] += s1 - s2
        differential[second.id] += s2 - s1

    three_way_cycle = all(count == 1 for count in wins.values())
    if three_way_cycle:
        logger.debug(
            "Group %s is a three-way cycle, breaking by point differential",
            group_number,
        )
        # Stable sort keeps seed order when differentials are level too
        return sorted(group, key=lambda p: (-wins[p.id], -differential[p.id]))
    return sorted(group, key=lambda p: (-wins[p.id], p.rank))


def _resolve_exhibition(
    group: Sequence[Player], group_number: int, scores: MatchScoreMap
) -> GroupPlacement:
    first, second = group
    score = scores.get(MatchId.group(group_number, 1))
    parsed = score.as_ints() if score is not None else None
    if parsed is None:
        return [first, second]
    s1, s2 = parsed
    if s2 > s1:
        return [second, first]
    return [first, second]


_RESOLVERS = {
    BRACKET_GROUP_SIZE: _resolve_bracket,
    ROUND_ROBIN_GROUP_SIZE: _resolve_round_robin,
    EXHIBITION_GROUP_SIZE: _resolve_exhibition,
}


def resolve_group_placements(
    group: Sequence[Player],
    group_number: int,
    scores: Optional[Mapping] = None,
) -> GroupPlacement:
    """Order a group best-to-worst from its match scores.

    Args:
        group: Players of the group, best seed first
        group_number: 1-based position of the group in the round
        scores: Score map for the round, keyed by MatchId or key string

    Returns:
        New list holding the same players in placement order

    Raises:
        GroupingException: If the group does not have 2, 3 or 4 players
    """
    resolver = _RESOLVERS.get(len(group))
    if resolver is None:
        raise GroupingException(
            f"Group {group_number} has {len(group)} players; groups hold 2, 3 or 4"
        )
    placement = resolver(group, group_number, normalize_scores(scores))
    logger.debug(
        "Group %s placement: %s", group_number, ", ".join(p.name for p in placement)
    )
    return placement


def iter_group_matches(
    group: Sequence[Player], group_number: int, scores: Optional[Mapping] = None
) -> Iterator[ScheduledMatch]:
    """Yield the matches a group actually played, in key order.

    Round-2 bracket matches are only known once both round-1 matches carry
    valid scores; until then they are not yielded.
    """
    typed = normalize_scores(scores)
    size = len(group)

    if size == BRACKET_GROUP_SIZE:
        first_round: List[Tuple[Player, Player]] = []
        for match_number, (i, j) in BRACKET_FIRST_ROUND.items():
            match_id = MatchId.bracket(group_number, 1, match_number)
            score = typed.get(match_id)
            yield match_id, group[i], group[j], score
            if score is not None and score.as_ints() is not None:
                first_round.append(bracket_winner(group[i], group[j], score))

        if len(first_round) == len(BRACKET_FIRST_ROUND):
            (w1, l1), (w2, l2) = first_round
            final_id = MatchId.bracket(group_number, *BRACKET_FINAL)
            yield final_id, w1, w2, typed.get(final_id)
            consolation_id = MatchId.bracket(group_number, *BRACKET_CONSOLATION)
            yield consolation_id, l1, l2, typed.get(consolation_id)

    elif size == ROUND_ROBIN_GROUP_SIZE:
        for match_number, (i, j) in ROUND_ROBIN_PAIRS.items():
            match_id = MatchId.group(group_number, match_number)
            yield match_id, group[i], group[j], typed.get(match_id)

    elif size == EXHIBITION_GROUP_SIZE:
        match_id = MatchId.group(group_number, 1)
        yield match_id, group[0], group[1], typed.get(match_id)


def expected_match_ids(group_size: int, group_number: int) -> List[MatchId]:
    """All match keys a group of the given size can carry."""
    if group_size == BRACKET_GROUP_SIZE:
        return [
            MatchId.bracket(group_number, r, m) for r in (1, 2) for m in (1, 2)
        ]
    if group_size == ROUND_ROBIN_GROUP_SIZE:
        return [MatchId.group(group_number, m) for m in ROUND_ROBIN_PAIRS]
    if group_size == EXHIBITION_GROUP_SIZE:
        return [MatchId.group(group_number, 1)]
    return []
