"""Type hints used in Ladder League."""

from typing import TYPE_CHECKING, Dict, List, Literal, Tuple

if TYPE_CHECKING:
    from ladderleague.models.match_score import MatchId, MatchScore
    from ladderleague.models.player import Player

# Stable player identifier (database ids are stringified)
PlayerId = str

# Ordered players of one group, best seed first
Group = List["Player"]
# Group reordered best-to-worst by match outcomes
GroupPlacement = List["Player"]
# Whole ladder, rank 1 first
Players = List["Player"]

MatchScoreMap = Dict["MatchId", "MatchScore"]
# Raw score entry as handed over by the UI or a stored round
RawScore = Dict[str, str]

Outcome = Literal["W", "L", "T"]
# (number of 4-groups, number of 3-groups)
GroupSizes = Tuple[int, int]
