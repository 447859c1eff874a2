"""Exceptions for use in Ladder League"""

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


# ========== Base Application Exception ==========


class LadderLeagueException(Exception):
    """Base exception for all Ladder League errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Grouping Exceptions ==========


class GroupingException(LadderLeagueException):
    """Base exception for errors while splitting present players into groups."""

    pass


class InsufficientPlayersException(GroupingException):
    """Raised when fewer than two players are present for a round."""

    pass


class NoValidGroupingException(GroupingException):
    """Raised when the present-player count cannot be split into groups of 3 and 4."""

    pass


class PlacementMismatchException(GroupingException):
    """Raised when group placements do not cover exactly the present players."""

    pass


# ========== Rank Exceptions ==========


class RankException(LadderLeagueException):
    """Base exception for ranking errors."""

    pass


class InvalidRankException(RankException):
    """Raised when a requested rank lies outside 1..N."""

    pass


# ========== Player Exceptions ==========


class PlayerException(LadderLeagueException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player cannot be found."""

    pass


class DuplicatePlayerException(PlayerException):
    """Raised when the same player id appears more than once in a roster."""

    pass


# ========== Score Exceptions ==========


class ScoreException(LadderLeagueException):
    """Base exception for score entry errors."""

    pass


class InvalidMatchIdException(ScoreException):
    """Raised when a match key does not follow the g<N>-r<R>-m<M> / g<N>-m<M> scheme."""

    pass


# ========== Round Exceptions ==========


class RoundException(LadderLeagueException):
    """Base exception for round-related errors."""

    pass


class RoundStateException(RoundException):
    """Raised when a round is in an invalid state for the requested operation."""

    pass
