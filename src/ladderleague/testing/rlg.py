"""Random League Generator (RLG) - Internal testing system for the ranking engine.

This module generates rosters, attendance and match scores, and plays whole
seasons through RoundManager so the engine can be exercised end to end.
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

import json
import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from ladderleague.constants import (
    BRACKET_CONSOLATION,
    BRACKET_FINAL,
    BRACKET_FIRST_ROUND,
    BRACKET_GROUP_SIZE,
    EXHIBITION_GROUP_SIZE,
    ROUND_ROBIN_GROUP_SIZE,
    ROUND_ROBIN_PAIRS,
)
from ladderleague.league.round_manager import RoundManager
from ladderleague.models.match_score import MatchId, MatchScore
from ladderleague.models.player import Player
from ladderleague.ranking.resolver import bracket_winner
from ladderleague.type_hints import Group, MatchScoreMap
from ladderleague.utils import setup_logger

logger = setup_logger(__name__)

# Present-player counts that admit no grouping
_UNGROUPABLE_COUNTS = {0, 1, 5}


class ScorePattern(Enum):
    """Score generation patterns for simulated matches."""

    FAVOURITES = "favourites"
    UPSETS = "upsets"
    RANDOM = "random"
    PARTIAL = "partial"


@dataclass
class RLGConfig:
    """Configuration for Random League Generator."""

    num_players: int
    num_rounds: int
    attendance_rate: float = 0.8
    score_pattern: ScorePattern = ScorePattern.FAVOURITES
    seed: Optional[int] = None
    winning_score: int = 11
    # Only used by ScorePattern.PARTIAL
    missing_score_rate: float = 0.2


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


class RosterFactory:
    """Factory for creating ladders of numbered players."""

    def __init__(self, config: RLGConfig):
        self.config = config

    def create_players(self) -> List[Player]:
        """Create players ranked 1..N."""
        players = [
            Player(id=f"p{i:03d}", name=f"Player-{i:03d}", rank=i)
            for i in range(1, self.config.num_players + 1)
        ]
        logger.info("Created %s players", len(players))
        return players


class ScoreSimulator:
    """Simulates match scores for generated groups."""

    def __init__(self, config: RLGConfig):
        self.config = config
        self.random = _rng(config.seed)

    def _first_wins(self, first: Player, second: Player) -> bool:
        pattern = self.config.score_pattern
        if pattern == ScorePattern.RANDOM:
            return self.random.random() < 0.5
        favourite_first = first.rank < second.rank
        favourite_odds = 0.3 if pattern == ScorePattern.UPSETS else 0.75
        roll = self.random.random() < favourite_odds
        return roll if favourite_first else not roll

    def play(self, first: Player, second: Player) -> Optional[MatchScore]:
        """Score of one match, or None when the pattern leaves it blank."""
        if (
            self.config.score_pattern == ScorePattern.PARTIAL
            and self.random.random() < self.config.missing_score_rate
        ):
            return None

        winning = self.config.winning_score
        losing = self.random.randint(0, winning - 1)
        if self._first_wins(first, second):
            return MatchScore(score1=str(winning), score2=str(losing))
        return MatchScore(score1=str(losing), score2=str(winning))

    def simulate_group(self, group: Group, group_number: int) -> MatchScoreMap:
        """Scores for every match of one group."""
        scores: MatchScoreMap = {}

        def record(match_id: MatchId, first: Player, second: Player) -> None:
            score = self.play(first, second)
            if score is not None:
                scores[match_id] = score

        if len(group) == BRACKET_GROUP_SIZE:
            winners, losers = [], []
            for match_number, (i, j) in BRACKET_FIRST_ROUND.items():
                match_id = MatchId.bracket(group_number, 1, match_number)
                record(match_id, group[i], group[j])
                winner, loser = bracket_winner(group[i], group[j], scores.get(match_id))
                winners.append(winner)
                losers.append(loser)
            record(MatchId.bracket(group_number, *BRACKET_FINAL), *winners)
            record(MatchId.bracket(group_number, *BRACKET_CONSOLATION), *losers)
        elif len(group) == ROUND_ROBIN_GROUP_SIZE:
            for match_number, (i, j) in ROUND_ROBIN_PAIRS.items():
                record(MatchId.group(group_number, match_number), group[i], group[j])
        elif len(group) == EXHIBITION_GROUP_SIZE:
            record(MatchId.group(group_number, 1), group[0], group[1])

        return scores


class RandomLeagueGenerator:
    """Main Random League Generator class."""

    def __init__(self, config: RLGConfig):
        self.config = config
        self.random = _rng(config.seed)
        self.roster_factory = RosterFactory(config)
        self.score_simulator = ScoreSimulator(config)

    def choose_present(self, players: List[Player]) -> List[str]:
        """Pick the players attending a round, avoiding ungroupable counts."""
        present = [
            p.id for p in players if self.random.random() < self.config.attendance_rate
        ]
        chosen = set(present)
        absent = [p.id for p in players if p.id not in chosen]

        while len(present) in _UNGROUPABLE_COUNTS and absent:
            present.append(absent.pop(self.random.randrange(len(absent))))
        if len(present) in _UNGROUPABLE_COUNTS and len(present) > 2:
            present.pop(self.random.randrange(len(present)))
        return present

    def generate_complete_league(self) -> Dict[str, Any]:
        """Play ``num_rounds`` rounds on a fresh ladder.

        Returns:
            Dict with initial and final ladders, round snapshots and match records
        """
        players = self.roster_factory.create_players()
        manager = RoundManager(players)
        start = datetime(2025, 1, 1, 18, 0, tzinfo=timezone.utc)
        records = []

        for round_index in range(self.config.num_rounds):
            present = self.choose_present(manager.players)
            groups = manager.start_round(present)
            for group_index, group in enumerate(groups):
                manager.record_scores(
                    self.score_simulator.simulate_group(group, group_index + 1)
                )
            _, round_records = manager.complete_round(
                round_id=round_index + 1,
                date=start + timedelta(weeks=round_index),
            )
            records.extend(round_records)

        logger.info(
            "Generated league: %s players, %s rounds, %s matches",
            len(players),
            len(manager.history),
            len(records),
        )
        return {
            "players_initial": players,
            "players": manager.players,
            "rounds": manager.history,
            "records": records,
            "manager": manager,
        }

    def export_json_format(self, league_data: Dict[str, Any]) -> str:
        """Export generated league as JSON."""
        payload = {
            "config": {
                "num_players": self.config.num_players,
                "num_rounds": self.config.num_rounds,
                "attendance_rate": self.config.attendance_rate,
                "score_pattern": self.config.score_pattern.value,
                "seed": self.config.seed,
            },
            "players": [p.to_dict() for p in league_data["players"]],
            "rounds": [r.to_dict() for r in league_data["rounds"]],
            "matches": [m.to_dict() for m in league_data["records"]],
        }
        return json.dumps(payload, indent=2)
