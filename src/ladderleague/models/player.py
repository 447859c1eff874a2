"""Player data class."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict

from ladderleague.type_hints import PlayerId


@dataclass
class Player:
    """A player on the ladder.

    Attributes
    ----------
    id : str
        Stable unique identifier, shared with the roster store.
    name : str
        Display name.
    rank : int
        Position on the ladder, 1 is best.
    """

    id: PlayerId
    name: str
    rank: int

    def with_rank(self, rank: int) -> Player:
        """Return a copy of this player placed at ``rank``."""
        return replace(self, rank=rank)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {"id": self.id, "name": self.name, "rank": self.rank}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Player:
        """Deserialize player from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            rank=int(data["rank"]),
        )

    def __str__(self) -> str:
        return f"{self.rank}. {self.name}"
