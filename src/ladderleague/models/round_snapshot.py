"""Data models for a completed round."""

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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from dateutil.parser import isoparse

from ladderleague.models.match_score import normalize_scores, scores_to_dict
from ladderleague.models.player import Player
from ladderleague.type_hints import Group, GroupPlacement, MatchScoreMap, PlayerId


@dataclass
class MatchRecord:
    """Normalized match row, one per played match.

    Attributes
    ----------
    round_id : str or int
        Identifier of the round the match belongs to.
    player_one_id, player_two_id : str
        Players in the order the match key lists them.
    player_one_score, player_two_score : int
        Final numeric scores.
    """

    round_id: Union[str, int]
    player_one_id: PlayerId
    player_two_id: PlayerId
    player_one_score: int
    player_two_score: int

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match record to dictionary."""
        return {
            "round_id": self.round_id,
            "player_one_id": self.player_one_id,
            "player_two_id": self.player_two_id,
            "player_one_score": self.player_one_score,
            "player_two_score": self.player_two_score,
        }


# Stored rounds without a date sort before every dated round
UNDATED = datetime.min.replace(tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` with a timezone, reading naive times as UTC."""
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


def _parse_date(value: Union[str, datetime, None]) -> datetime:
    if value is None:
        return UNDATED
    if isinstance(value, datetime):
        return as_utc(value)
    return as_utc(isoparse(value))


def _players_from(data: List[Dict[str, Any]]) -> List[Player]:
    return [Player.from_dict(p) for p in data]


@dataclass
class RoundSnapshot:
    """Everything needed to redisplay or re-export a completed round.

    Attributes
    ----------
    id : str or int
        Round identifier assigned by whoever stores the round.
    date : datetime
        When the round was completed.
    groups : list of list of Player
        Groups as generated, best seed first.
    scores : dict
        Typed score map keyed by MatchId.
    final_placements : list of list of Player
        Per-group placements, best to worst.
    players_before : list of Player
        Full ladder before the round.
    players_after : list of Player
        Full ladder after the round.
    present_player_ids : list of str
        Players who took part, in ladder order.
    """

    id: Union[str, int]
    date: datetime
    groups: List[Group] = field(default_factory=list)
    scores: MatchScoreMap = field(default_factory=dict)
    final_placements: List[GroupPlacement] = field(default_factory=list)
    players_before: List[Player] = field(default_factory=list)
    players_after: List[Player] = field(default_factory=list)
    present_player_ids: List[PlayerId] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round snapshot to dictionary (stored key names)."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "groups": [[p.to_dict() for p in group] for group in self.groups],
            "scores": scores_to_dict(self.scores),
            "finalPlacements": [
                [p.to_dict() for p in placement]
                for placement in self.final_placements
            ],
            "playersBefore": [p.to_dict() for p in self.players_before],
            "playersAfter": [p.to_dict() for p in self.players_after],
            "presentPlayerIds": list(self.present_player_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundSnapshot":
        """Deserialize round snapshot from dictionary.

        Older rounds store the present players as ``present_players`` or not
        at all; in the latter case they are taken from the groups.
        """
        groups = [_players_from(group) for group in data.get("groups", [])]
        present: Optional[List[PlayerId]] = data.get("presentPlayerIds")
        if present is None:
            present = data.get("present_players")
        if present is None:
            present = [p.id for group in groups for p in group]

        return cls(
            id=data.get("id"),
            date=_parse_date(data.get("date")),
            groups=groups,
            scores=normalize_scores(data.get("scores", {})),
            final_placements=[
                _players_from(placement)
                for placement in data.get("finalPlacements", [])
            ],
            players_before=_players_from(data.get("playersBefore", [])),
            players_after=_players_from(data.get("playersAfter", [])),
            present_player_ids=list(present),
        )
