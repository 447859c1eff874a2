"""Match keys and scores.

Match keys follow the ``g<group>-r<round>-m<match>`` scheme for 4-player
brackets and ``g<group>-m<match>`` for 3- and 2-player groups. Stored rounds
and exports use the same strings, so rendering must stay byte-for-byte stable.
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

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ladderleague.constants import (
    BRACKET_MATCH_ID_TEMPLATE,
    DEFAULT_BRACKET_SCORE,
    GROUP_MATCH_ID_TEMPLATE,
    MATCH_ID_PATTERN,
)
from ladderleague.exceptions import InvalidMatchIdException
from ladderleague.type_hints import MatchScoreMap
from ladderleague.utils.validation import parse_score

_MATCH_ID_RE = re.compile(MATCH_ID_PATTERN)


@dataclass(frozen=True)
class MatchId:
    """Validated key of one match within a round.

    Attributes:
        group_number: 1-based group number
        match_number: 1-based match number within the group (or bracket round)
        round_number: Bracket round (1 or 2) for 4-player groups, None otherwise
    """

    group_number: int
    match_number: int
    round_number: Optional[int] = None

    def __post_init__(self):
        for label, value in (
            ("group", self.group_number),
            ("match", self.match_number),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise InvalidMatchIdException(
                    f"Match id {label} number must be a positive integer, got {value!r}"
                )
        if self.round_number is not None and (
            isinstance(self.round_number, bool)
            or not isinstance(self.round_number, int)
            or self.round_number < 1
        ):
            raise InvalidMatchIdException(
                f"Match id round number must be a positive integer, got {self.round_number!r}"
            )

    @classmethod
    def bracket(cls, group_number: int, round_number: int, match_number: int) -> MatchId:
        """Key of a 4-player bracket match."""
        return cls(group_number, match_number, round_number)

    @classmethod
    def group(cls, group_number: int, match_number: int) -> MatchId:
        """Key of a round-robin or exhibition match."""
        return cls(group_number, match_number)

    @classmethod
    def parse(cls, key: Union[str, MatchId]) -> MatchId:
        """Parse a stored key string.

        Raises:
            InvalidMatchIdException: If the key does not follow the scheme
        """
        if isinstance(key, MatchId):
            return key
        match = _MATCH_ID_RE.match(str(key))
        if match is None:
            raise InvalidMatchIdException(f"Invalid match id: {key!r}")
        round_number = match.group("round")
        return cls(
            group_number=int(match.group("group")),
            match_number=int(match.group("match")),
            round_number=int(round_number) if round_number is not None else None,
        )

    @property
    def is_bracket(self) -> bool:
        return self.round_number is not None

    def __str__(self) -> str:
        if self.round_number is not None:
            return BRACKET_MATCH_ID_TEMPLATE.format(
                group=self.group_number,
                round=self.round_number,
                match=self.match_number,
            )
        return GROUP_MATCH_ID_TEMPLATE.format(
            group=self.group_number, match=self.match_number
        )


@dataclass(frozen=True)
class MatchScore:
    """Scores entered for one match.

    Scores are kept as entered (strings). A side that is an empty string
    leaves the match unset, a side that does not parse as a number makes it
    invalid. Neither is an error; callers pick a fallback.

    Attributes:
        score1: Score of the first listed player
        score2: Score of the second listed player
        note: Optional free-text remark
    """

    score1: str = ""
    score2: str = ""
    note: Optional[str] = None

    @property
    def is_set(self) -> bool:
        """Both sides have been filled in."""
        return self.score1 != "" and self.score2 != ""

    def as_ints(self) -> Optional[Tuple[int, int]]:
        """Both scores as integers, or None if unset or invalid."""
        if not self.is_set:
            return None
        s1 = parse_score(self.score1)
        s2 = parse_score(self.score2)
        if s1 is None or s2 is None:
            return None
        return s1, s2

    def as_ints_or_zero(self) -> Tuple[int, int]:
        """Both scores as integers, each unset or invalid side counted as 0."""
        s1 = parse_score(self.score1)
        s2 = parse_score(self.score2)
        return (
            s1 if s1 is not None else DEFAULT_BRACKET_SCORE,
            s2 if s2 is not None else DEFAULT_BRACKET_SCORE,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize score to dictionary."""
        data: Dict[str, Any] = {"score1": self.score1, "score2": self.score2}
        if self.note is not None:
            data["note"] = self.note
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MatchScore:
        """Deserialize score from dictionary."""
        return cls(
            score1=_as_entry(data.get("score1", "")),
            score2=_as_entry(data.get("score2", "")),
            note=data.get("note"),
        )


def _as_entry(value: Any) -> str:
    # Stored rounds occasionally carry plain numbers
    if value is None:
        return ""
    return str(value)


def normalize_scores(scores: Optional[Mapping[Any, Any]]) -> MatchScoreMap:
    """Build a typed score map from raw or already typed entries.

    Args:
        scores: Mapping of match key (string or MatchId) to MatchScore or a
            ``{"score1", "score2", "note"?}`` dictionary

    Returns:
        Dict keyed by MatchId

    Raises:
        InvalidMatchIdException: If a key does not follow the match id scheme
    """
    normalized: MatchScoreMap = {}
    if not scores:
        return normalized
    for key, value in scores.items():
        match_id = MatchId.parse(key)
        if isinstance(value, MatchScore):
            normalized[match_id] = value
        else:
            normalized[match_id] = MatchScore.from_dict(value)
    return normalized


def scores_to_dict(scores: MatchScoreMap) -> Dict[str, Dict[str, Any]]:
    """Render a typed score map with string keys, the stored form."""
    return {str(match_id): score.to_dict() for match_id, score in scores.items()}
