"""Round management for a ladder league.

This module drives one round from group generation through score entry to
the recalculated ladder, and keeps the history of completed rounds.
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

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from ladderleague.exceptions import (
    InvalidMatchIdException,
    PlayerNotFoundException,
    RoundStateException,
)
from ladderleague.league.matches import generate_matches
from ladderleague.league.standings import PlayerStats, StandingsCalculator, Streaks
from ladderleague.models.league_config import LeagueConfig
from ladderleague.models.match_score import MatchId, MatchScore, normalize_scores
from ladderleague.models.player import Player
from ladderleague.models.round_snapshot import (
    MatchRecord,
    RoundSnapshot,
    as_utc,
)
from ladderleague.ranking import (
    calculate_new_ranks,
    expected_match_ids,
    generate_groups,
    reorder_player_ranks,
    resolve_group_placements,
)
from ladderleague.type_hints import Group, MatchScoreMap, PlayerId, Players
from ladderleague.utils import setup_logger
from ladderleague.utils.validation import validate_roster_strict

logger = setup_logger(__name__)


class RoundManager:
    """Manages rounds of a ladder league.

    This class is responsible for:
    - Generating groups from the players marked present
    - Collecting scores under validated match keys
    - Resolving placements and recalculating the ladder
    - Keeping the snapshots of completed rounds
    """

    def __init__(
        self,
        players: Sequence[Player],
        config: Optional[LeagueConfig] = None,
        history: Optional[Iterable[RoundSnapshot]] = None,
    ):
        """Initialize the round manager.

        Args:
            players: Full ladder; ids unique, ranks 1..N
            config: League settings, defaults used when None
            history: Previously completed rounds

        Raises:
            DuplicatePlayerException: If a player id appears twice
            InvalidRankException: If ranks are not 1..N
        """
        validate_roster_strict(players)
        self.config = config or LeagueConfig()
        self.players: Players = sorted(players, key=lambda p: p.rank)
        self.history: List[RoundSnapshot] = list(history or [])

        self.present_player_ids: List[PlayerId] = []
        self.groups: List[Group] = []
        self.scores: MatchScoreMap = {}

    @property
    def round_in_progress(self) -> bool:
        """Whether groups exist for a round that is not yet completed."""
        return bool(self.groups)

    @property
    def present_players(self) -> Players:
        """Present players in ladder order."""
        present = set(self.present_player_ids)
        return [p for p in self.players if p.id in present]

    def start_round(self, present_player_ids: Iterable[PlayerId]) -> List[Group]:
        """Generate groups for a new round.

        Args:
            present_player_ids: Ids of the players taking part

        Returns:
            Generated groups, best players first

        Raises:
            RoundStateException: If a round is already in progress
            PlayerNotFoundException: If an id is not on the ladder
            InsufficientPlayersException: If fewer than two players are present
            NoValidGroupingException: If the count cannot be split into groups
        """
        if self.round_in_progress:
            raise RoundStateException(
                "A round is already in progress; complete or cancel it first"
            )

        requested = set(present_player_ids)
        known = {p.id for p in self.players}
        unknown = requested - known
        if unknown:
            raise PlayerNotFoundException(
                f"Players not on the ladder: {', '.join(sorted(map(str, unknown)))}"
            )

        self.present_player_ids = [p.id for p in self.players if p.id in requested]
        self.groups = generate_groups(
            self.present_players,
            allow_exhibition_match=self.config.allow_exhibition_match,
        )
        self.scores = {}
        logger.info(
            "Started round with %s present players in %s groups",
            len(self.present_player_ids),
            len(self.groups),
        )
        return [list(group) for group in self.groups]

    def cancel_round(self) -> bool:
        """Discard the round in progress.

        Returns:
            True if a round was discarded, False if none was in progress
        """
        if not self.round_in_progress:
            logger.warning("Cannot cancel: no round in progress")
            return False

        self.present_player_ids = []
        self.groups = []
        self.scores = {}
        logger.info("Round cancelled")
        return True

    def _check_match_id(self, match_id: MatchId) -> None:
        if not self.round_in_progress:
            raise RoundStateException("No round in progress; start a round first")
        if match_id.group_number > len(self.groups):
            raise InvalidMatchIdException(
                f"Match {match_id} refers to group {match_id.group_number}, "
                f"but the round has {len(self.groups)} groups"
            )
        group = self.groups[match_id.group_number - 1]
        if match_id not in expected_match_ids(len(group), match_id.group_number):
            raise InvalidMatchIdException(
                f"Match {match_id} does not exist in a group of {len(group)} players"
            )

    def record_score(
        self,
        match_id: Union[str, MatchId],
        score1: str,
        score2: str,
        note: Optional[str] = None,
    ) -> MatchId:
        """Store the score of one match, replacing any earlier entry.

        Returns:
            The validated match key

        Raises:
            RoundStateException: If no round is in progress
            InvalidMatchIdException: If the key is malformed or not in this round
        """
        key = MatchId.parse(match_id)
        self._check_match_id(key)
        self.scores[key] = MatchScore(
            score1=str(score1), score2=str(score2), note=note
        )
        logger.debug("Recorded %s: %s-%s", key, score1, score2)
        return key

    def record_scores(self, scores: Mapping) -> None:
        """Store several scores at once, keyed by match key.

        Raises:
            RoundStateException: If no round is in progress
            InvalidMatchIdException: If any key is malformed or not in this round
        """
        typed = normalize_scores(scores)
        for key in typed:
            self._check_match_id(key)
        self.scores.update(typed)

    def complete_round(
        self,
        round_id: Optional[Union[str, int]] = None,
        date: Optional[datetime] = None,
    ) -> Tuple[RoundSnapshot, List[MatchRecord]]:
        """Resolve all groups and recalculate the ladder.

        Args:
            round_id: Identifier for the snapshot, next sequence number if None
            date: Completion time, now (UTC) if None; naive times are read as UTC

        Returns:
            Tuple of (round snapshot, match records)

        Raises:
            RoundStateException: If no round is in progress
        """
        if not self.round_in_progress:
            raise RoundStateException("No round in progress; start a round first")

        if round_id is None:
            round_id = len(self.history) + 1

        players_before = list(self.players)
        present_players = self.present_players
        placements = [
            resolve_group_placements(group, index + 1, self.scores)
            for index, group in enumerate(self.groups)
        ]
        players_after = calculate_new_ranks(
            players_before,
            present_players,
            set(self.present_player_ids),
            placements,
        )

        snapshot = RoundSnapshot(
            id=round_id,
            date=as_utc(date) if date else datetime.now(timezone.utc),
            groups=[list(group) for group in self.groups],
            scores=dict(self.scores),
            final_placements=placements,
            players_before=players_before,
            players_after=players_after,
            present_player_ids=list(self.present_player_ids),
        )
        records = generate_matches(snapshot.groups, snapshot.scores, round_id)

        self.players = players_after
        self.history.append(snapshot)
        self.present_player_ids = []
        self.groups = []
        self.scores = {}

        logger.info(
            "Round %s completed: %s groups, %s match records",
            round_id,
            len(placements),
            len(records),
        )
        return snapshot, records

    def update_player_rank(self, player_id: PlayerId, new_rank: int) -> Players:
        """Move one player to a new rank outside the round flow.

        Raises:
            RoundStateException: If a round is in progress
            InvalidRankException: If new_rank is outside 1..N
            PlayerNotFoundException: If the player is not on the ladder
        """
        if self.round_in_progress:
            raise RoundStateException("Cannot edit ranks while a round is in progress")
        self.players = list(reorder_player_ranks(self.players, player_id, new_rank))
        return list(self.players)

    def calculate_standings(
        self,
    ) -> Tuple[Dict[PlayerId, PlayerStats], Dict[PlayerId, Streaks]]:
        """Statistics and streaks of the current roster over all completed rounds."""
        return StandingsCalculator().calculate(self.players, self.history)

    def calculate_progression(self) -> Dict[PlayerId, int]:
        """Places each current player gained since their starting rank."""
        return StandingsCalculator().progression(self.players, self.history)

    def players_by_progression(self) -> Players:
        """Current players, biggest climbers first, ties by name."""
        return StandingsCalculator.sort_by_progression(
            self.players, self.calculate_progression()
        )
