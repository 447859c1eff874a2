"""Normalized match records for a completed round.

Each played match becomes one row carrying both player ids and their final
numeric scores, keyed by the round identifier.
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

from typing import List, Mapping, Optional, Sequence, Union

from ladderleague.models.round_snapshot import MatchRecord
from ladderleague.ranking.resolver import iter_group_matches
from ladderleague.type_hints import Group
from ladderleague.utils import setup_logger

logger = setup_logger(__name__)


def generate_matches(
    groups: Sequence[Group],
    scores: Optional[Mapping],
    round_id: Union[str, int],
) -> List[MatchRecord]:
    """Build match rows for every match with a usable score.

    Args:
        groups: Groups of the round in group order, best seed first
        scores: Score map for the round
        round_id: Identifier stored on every row

    Returns:
        List of MatchRecord in group, then key order
    """
    records: List[MatchRecord] = []
    for group_index, group in enumerate(groups):
        group_number = group_index + 1
        for match_id, first, second, score in iter_group_matches(
            group, group_number, scores
        ):
            if score is None:
                continue
            parsed = score.as_ints()
            if parsed is None:
                logger.debug("Skipping match %s without usable score", match_id)
                continue
            records.append(
                MatchRecord(
                    round_id=round_id,
                    player_one_id=first.id,
                    player_two_id=second.id,
                    player_one_score=parsed[0],
                    player_two_score=parsed[1],
                )
            )

    logger.debug("Generated %s match records for round %s", len(records), round_id)
    return records
