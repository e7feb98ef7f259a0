"""Round management for tournaments.

This module handles all round-related operations including pairing generation,
round progression, and round history management.
"""

# Duo Pairing
# Copyright (C) 2025  Duo Pairing developers
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

from typing import Any, Optional

from duopairing.constants import ALGORITHM_ROUND_ROBIN, MIN_TEAMS, ROUND_OPEN
from duopairing.exceptions import (
    NotEnoughTeamsException,
    PendingResultsException,
    RoundConflictException,
    RoundNotFoundException,
    RoundSequenceException,
    TournamentCompleteException,
    TournamentStateException,
)
from duopairing.models.round_data import RoundData, RoundView
from duopairing.pairing import generate, round_robin_total_rounds
from duopairing.tournament.store import TournamentStore
from duopairing.utils import setup_logger
from duopairing.utils.validation import validate_tournament_settings

logger = setup_logger(__name__)


class RoundManager:
    """Manages round progression and pairing generation for tournaments.

    This class is responsible for:
    - Checking the preconditions of every round transition
    - Asking the tournament's pairing strategy for the next round
    - Handing the result to the store, which enforces round uniqueness
    """

    def __init__(self, store: TournamentStore, rng: Optional[Any] = None):
        """Initialize the round manager.

        Args:
            store: Where rounds, pairings and the roster live
            rng: Entropy source for the random strategy
        """
        self.store = store
        self.rng = rng

    @property
    def current_round(self) -> Optional[RoundData]:
        """The latest round, or None if the tournament has not started."""
        return self.store.latest_round()

    @property
    def current_round_number(self) -> int:
        """The current round number, 0 before the start."""
        latest = self.current_round
        return latest.round_number if latest else 0

    @property
    def is_started(self) -> bool:
        return self.current_round is not None

    @property
    def is_complete(self) -> bool:
        """Last round generated and every decisive game in it resolved."""
        latest = self.current_round
        if latest is None or not latest.is_last:
            return False
        view = self.store.get_round_view(latest.round_number)
        return view is not None and view.is_resolved

    def get_round(self, round_number: int) -> RoundView:
        """Get a round with its pairings in board order.

        Raises:
            RoundNotFoundException: If the round does not exist
        """
        view = self.store.get_round_view(round_number)
        if view is None:
            raise RoundNotFoundException(f"Round {round_number} does not exist")
        return view

    def start(self, algorithm: str, total_rounds: Any = None) -> RoundView:
        """Create round 1 for the whole roster.

        Args:
            algorithm: "swiss", "round_robin" or "random"
            total_rounds: Number of rounds (1-20); ignored for round robin

        Raises:
            TournamentStateException: Already started
            NotEnoughTeamsException: Fewer than two teams registered
            InvalidConfigurationException: Unknown algorithm or rounds out of range
        """
        if self.is_started:
            raise TournamentStateException(
                "Tournament already started; reset it before starting again"
            )

        teams = self.store.list_teams()
        if len(teams) < MIN_TEAMS:
            raise NotEnoughTeamsException(
                f"At least {MIN_TEAMS} teams are needed to start, got {len(teams)}"
            )

        algorithm, total_rounds = validate_tournament_settings(algorithm, total_rounds)
        if algorithm == ALGORITHM_ROUND_ROBIN:
            computed = round_robin_total_rounds(len(teams))
            if total_rounds is not None and total_rounds != computed:
                logger.info(
                    "Round robin with %s teams needs %s rounds, ignoring %s",
                    len(teams),
                    computed,
                    total_rounds,
                )
            total_rounds = computed

        new_pairings = generate(teams, [], 1, algorithm, rng=self.rng)
        round_data = RoundData(
            round_number=1,
            total_rounds=total_rounds,
            status=ROUND_OPEN,
            algorithm=algorithm,
        )
        self.store.create_round(round_data, new_pairings)

        logger.info(
            "Tournament started: %s, %s rounds, %s teams",
            algorithm,
            total_rounds,
            len(teams),
        )
        return self.get_round(1)

    def generate_next(self, round_number: Optional[int] = None) -> RoundView:
        """Close the open round and pair the next one.

        Args:
            round_number: The round to create; must be the current round + 1.
                Defaults to exactly that.

        Raises:
            TournamentStateException: Not started yet
            RoundConflictException: The round already exists
            RoundSequenceException: The number skips ahead
            TournamentCompleteException: Every scheduled round exists
            PendingResultsException: The open round has unresolved games
        """
        latest = self.current_round
        if latest is None:
            raise TournamentStateException("Tournament has not started")

        if round_number is None:
            round_number = latest.round_number + 1
        if round_number <= latest.round_number:
            raise RoundConflictException(f"Round {round_number} already exists")
        if round_number != latest.round_number + 1:
            raise RoundSequenceException(
                f"Cannot create round {round_number}: "
                f"round {latest.round_number + 1} comes first"
            )
        if latest.is_last:
            raise TournamentCompleteException(
                f"All {latest.total_rounds} rounds have been generated"
            )

        pending = [
            p for p in self.store.list_pairings(latest.round_number) if p.is_pending
        ]
        if pending:
            boards = ", ".join(str(p.board_num) for p in pending)
            raise PendingResultsException(
                f"Round {latest.round_number} still has {len(pending)} game(s) "
                f"without a result (boards {boards})"
            )

        teams = self.store.list_teams()
        history = self.store.list_pairings()
        new_pairings = generate(
            teams, history, round_number, latest.algorithm, rng=self.rng
        )
        round_data = RoundData(
            round_number=round_number,
            total_rounds=latest.total_rounds,
            status=ROUND_OPEN,
            algorithm=latest.algorithm,
        )
        self.store.create_round(round_data, new_pairings)

        logger.info(
            "Round %s of %s generated: %s boards",
            round_number,
            latest.total_rounds,
            len(new_pairings),
        )
        return self.get_round(round_number)

    def reset(self) -> None:
        """Delete every round and pairing, keeping the roster."""
        rounds = len(self.store.list_rounds())
        self.store.clear_rounds()
        logger.info("Tournament reset: removed %s round(s); roster kept", rounds)
