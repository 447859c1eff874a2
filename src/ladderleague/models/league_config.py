"""LeagueConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict

from ladderleague.constants import DEFAULT_LEAGUE_NAME


@dataclass
class LeagueConfig:
    """League configuration settings.

    Attributes
    ----------
    name : str
        League name.
    allow_exhibition_match : bool
        Whether exactly two present players form a single exhibition group.
        When False, a two-player round is rejected like any other count that
        cannot be split into groups of 3 and 4.
    """

    name: str = DEFAULT_LEAGUE_NAME
    allow_exhibition_match: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "allow_exhibition_match": self.allow_exhibition_match,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LeagueConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_LEAGUE_NAME),
            allow_exhibition_match=data.get("allow_exhibition_match", True),
        )
