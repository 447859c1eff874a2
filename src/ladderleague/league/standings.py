"""Win/loss statistics and current streaks across the round history."""

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
from typing import Dict, List, Sequence, Tuple

from ladderleague.constants import OUTCOME_LOSS, OUTCOME_TIE, OUTCOME_WIN
from ladderleague.models.player import Player
from ladderleague.models.round_snapshot import RoundSnapshot, as_utc
from ladderleague.ranking.resolver import iter_group_matches
from ladderleague.type_hints import Outcome, PlayerId, Players
from ladderleague.utils import setup_logger

logger = setup_logger(__name__)


def _chronological(round_history: Sequence[RoundSnapshot]) -> List[RoundSnapshot]:
    return sorted(round_history, key=lambda r: as_utc(r.date))


@dataclass
class PlayerStats:
    """Match totals for one player."""

    wins: int = 0
    losses: int = 0
    matches: int = 0


@dataclass
class Streaks:
    """Current run of consecutive wins or losses."""

    win_streak: int = 0
    loss_streak: int = 0


class StandingsCalculator:
    """Calculates per-player statistics from completed rounds.

    Only matches with two numeric scores count. A level score is a tie: it
    counts as a match, is neither a win nor a loss, and ends any streak.
    Players no longer on the roster are ignored.
    """

    def calculate(
        self, players: Sequence[Player], round_history: Sequence[RoundSnapshot]
    ) -> Tuple[Dict[PlayerId, PlayerStats], Dict[PlayerId, Streaks]]:
        """Calculate statistics and streaks for all current players.

        Args:
            players: Current roster
            round_history: Completed rounds in any order

        Returns:
            Tuple of (stats by player id, streaks by player id)
        """
        stats: Dict[PlayerId, PlayerStats] = {p.id: PlayerStats() for p in players}
        outcomes: Dict[PlayerId, List[Outcome]] = {p.id: [] for p in players}

        # Oldest first so streaks end at the most recent match
        for snapshot in _chronological(round_history):
            for group_index, group in enumerate(snapshot.groups):
                for _, first, second, score in iter_group_matches(
                    group, group_index + 1, snapshot.scores
                ):
                    parsed = score.as_ints() if score is not None else None
                    if parsed is None:
                        continue
                    self._record_match(stats, outcomes, first.id, second.id, *parsed)

        streaks = {
            player_id: self.current_streak(results)
            for player_id, results in outcomes.items()
        }
        logger.debug(
            "Calculated standings for %s players over %s rounds",
            len(stats),
            len(round_history),
        )
        return stats, streaks

    def _record_match(
        self,
        stats: Dict[PlayerId, PlayerStats],
        outcomes: Dict[PlayerId, List[Outcome]],
        first_id: PlayerId,
        second_id: PlayerId,
        score1: int,
        score2: int,
    ) -> None:
        if score1 > score2:
            results = ((first_id, OUTCOME_WIN), (second_id, OUTCOME_LOSS))
        elif score2 > score1:
            results = ((first_id, OUTCOME_LOSS), (second_id, OUTCOME_WIN))
        else:
            results = ((first_id, OUTCOME_TIE), (second_id, OUTCOME_TIE))

        for player_id, outcome in results:
            if player_id not in stats:
                continue
            player_stats = stats[player_id]
            player_stats.matches += 1
            if outcome == OUTCOME_WIN:
                player_stats.wins += 1
            elif outcome == OUTCOME_LOSS:
                player_stats.losses += 1
            outcomes[player_id].append(outcome)

    @staticmethod
    def current_streak(results: Sequence[Outcome]) -> Streaks:
        """Count identical W or L results at the end of ``results``.

        A trailing tie, or no results at all, gives no streak.
        """
        if not results or results[-1] == OUTCOME_TIE:
            return Streaks()

        last = results[-1]
        count = 0
        for outcome in reversed(results):
            if outcome != last:
                break
            count += 1

        if last == OUTCOME_WIN:
            return Streaks(win_streak=count)
        return Streaks(loss_streak=count)

    @staticmethod
    def starting_ranks(round_history: Sequence[RoundSnapshot]) -> Dict[PlayerId, int]:
        """Rank of each player in the oldest stored ladder that lists them."""
        ranks: Dict[PlayerId, int] = {}
        for snapshot in _chronological(round_history):
            for player in snapshot.players_before:
                ranks.setdefault(player.id, player.rank)
        return ranks

    def progression(
        self, players: Sequence[Player], round_history: Sequence[RoundSnapshot]
    ) -> Dict[PlayerId, int]:
        """Places gained since each player's starting rank.

        Positive means the player climbed. A player missing from every
        stored ladder, such as a newcomer added after the last round, has
        progression 0.
        """
        start = self.starting_ranks(round_history)
        return {p.id: start.get(p.id, p.rank) - p.rank for p in players}

    @staticmethod
    def sort_by_progression(
        players: Sequence[Player], progression: Dict[PlayerId, int]
    ) -> Players:
        """Biggest climbers first, equal progression by name."""
        return sorted(players, key=lambda p: (-progression.get(p.id, 0), p.name))
