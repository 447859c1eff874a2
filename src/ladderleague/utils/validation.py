"""Validation utilities for Ladder League.

This module provides reusable validation functions with consistent error handling.
"""

import re
from typing import Any, Optional, Sequence

from ladderleague.exceptions import (
    DuplicatePlayerException,
    InvalidRankException,
)

# Leading integer, the same prefix rule score entry has always used ("3pts" -> 3)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Score Validation ==========


def parse_score(value: Any) -> Optional[int]:
    """Parse one side of a match score.

    Args:
        value: Score as entered, usually a string

    Returns:
        The integer score, or None when the value is empty or not numeric

    Example:
        >>> parse_score("10")
        10
        >>> parse_score("") is None
        True
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)

    match = _LEADING_INT.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def validate_score(value: Any) -> ValidationResult:
    """Validate one side of a match score.

    Args:
        value: Score as entered

    Returns:
        ValidationResult whose sanitized value is the parsed integer
    """
    if value is None or (isinstance(value, str) and value == ""):
        return ValidationResult(is_valid=False, error_message="Score is not set")

    parsed = parse_score(value)
    if parsed is None:
        return ValidationResult(
            is_valid=False, error_message=f"Score is not a number: {value!r}"
        )
    return ValidationResult(is_valid=True, sanitized_value=parsed)


# ========== Rank Validation ==========


def validate_rank(rank: Any, num_players: int) -> ValidationResult:
    """Validate a target ladder position.

    Args:
        rank: Requested rank (1 = best)
        num_players: Number of players on the ladder

    Returns:
        ValidationResult with the rank as sanitized value
    """
    if isinstance(rank, bool) or not isinstance(rank, int):
        return ValidationResult(
            is_valid=False, error_message=f"Rank must be an integer, got {rank!r}"
        )
    if rank < 1 or rank > num_players:
        return ValidationResult(
            is_valid=False,
            error_message=f"Rank must be between 1 and {num_players}, got {rank}",
        )
    return ValidationResult(is_valid=True, sanitized_value=rank)


def validate_rank_strict(rank: Any, num_players: int) -> int:
    """Validate rank and raise exception if invalid.

    Raises:
        InvalidRankException: If rank is outside 1..num_players
    """
    result = validate_rank(rank, num_players)
    if not result.is_valid:
        raise InvalidRankException(result.error_message)
    return result.sanitized_value


# ========== Roster Validation ==========


def validate_roster(players: Sequence[Any]) -> ValidationResult:
    """Check that player ids are unique and ranks form 1..N.

    Args:
        players: Full ladder as a sequence of Player records

    Returns:
        ValidationResult, sanitized value is the list of ids in rank order
    """
    seen = set()
    for player in players:
        if player.id in seen:
            return ValidationResult(
                is_valid=False, error_message=f"Duplicate player id: {player.id}"
            )
        seen.add(player.id)

    ranks = sorted(player.rank for player in players)
    if ranks != list(range(1, len(players) + 1)):
        return ValidationResult(
            is_valid=False,
            error_message=f"Ranks must be a permutation of 1..{len(players)}",
        )

    ordered = sorted(players, key=lambda p: p.rank)
    return ValidationResult(is_valid=True, sanitized_value=[p.id for p in ordered])


def validate_roster_strict(players: Sequence[Any]) -> None:
    """Validate roster and raise exception if invalid.

    Raises:
        DuplicatePlayerException: If a player id appears twice
        InvalidRankException: If ranks are not contiguous
    """
    result = validate_roster(players)
    if result.is_valid:
        return
    if result.error_message.startswith("Duplicate"):
        raise DuplicatePlayerException(result.error_message)
    raise InvalidRankException(result.error_message)
