"""Tournament facade tying the roster, the store and the pairing engine together."""

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

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from duopairing.constants import SAVE_FILE_EXTENSION
from duopairing.exceptions import (
    FileLoadException,
    FileSaveException,
    TournamentCompleteException,
    TournamentStateException,
)
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.round_data import RoundData, RoundView
from duopairing.models.standing import Standing
from duopairing.models.status import TournamentStatus
from duopairing.models.team import Team
from duopairing.models.tournament_config import TournamentConfig
from duopairing.pairing import generate
from duopairing.scoring import score, standings
from duopairing.tournament.result_recorder import ResultRecorder
from duopairing.tournament.round_manager import RoundManager
from duopairing.tournament.store import InMemoryTournamentStore, TournamentStore
from duopairing.type_hints import TeamId
from duopairing.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """A tournament of two-player teams.

    All state lives in the store; this class only sequences the calls to the
    round manager, the result recorder and the scoring functions.
    """

    def __init__(
        self,
        name: str = "Untitled Tournament",
        teams: Optional[Iterable[Team]] = None,
        store: Optional[TournamentStore] = None,
        rng: Optional[Any] = None,
    ) -> None:
        self.config = TournamentConfig(name=name)
        self.store = store if store is not None else InMemoryTournamentStore()
        for team in teams or []:
            self.store.add_team(team)

        self.round_manager = RoundManager(self.store, rng=rng)
        self.result_recorder = ResultRecorder(self.store)

        latest = self.store.latest_round()
        if latest is not None:
            self.config.algorithm = latest.algorithm
            self.config.total_rounds = latest.total_rounds

    @property
    def name(self) -> str:
        return self.config.name

    # ========== Roster ==========

    @property
    def teams(self) -> List[Team]:
        return self.store.list_teams()

    def add_team(self, team: Team) -> None:
        """Register a team; only allowed before round 1 is paired.

        Raises:
            TournamentStateException: The tournament has already started
            DuplicateTeamException: The id is taken
        """
        if self.round_manager.is_started:
            raise TournamentStateException(
                "Teams cannot be added once the tournament has started"
            )
        self.store.add_team(team)
        logger.info("Team registered: %s (%r)", team.display_name, team.id)

    def get_team(self, team_id: TeamId) -> Optional[Team]:
        return next((t for t in self.teams if t.id == team_id), None)

    # ========== Rounds ==========

    def start(self, algorithm: str, total_rounds: Any = None) -> RoundView:
        """Pair round 1. See ``RoundManager.start``."""
        view = self.round_manager.start(algorithm, total_rounds)
        self.config.algorithm = view.round.algorithm
        self.config.total_rounds = view.round.total_rounds
        return view

    def generate_next(self, round_number: Optional[int] = None) -> RoundView:
        """Pair the next round. See ``RoundManager.generate_next``."""
        return self.round_manager.generate_next(round_number)

    def preview_next(self) -> List[NewPairing]:
        """Compute the pairings the next round would get, storing nothing.

        Before the start this previews round 1 with the configured algorithm.
        Pending games of the open round score nothing for either team.

        Raises:
            TournamentCompleteException: Every scheduled round exists
        """
        latest = self.current_round
        if latest is None:
            return generate(
                self.teams, [], 1, self.config.algorithm, rng=self.round_manager.rng
            )
        if latest.is_last:
            raise TournamentCompleteException(
                f"All {latest.total_rounds} rounds have been generated"
            )
        return generate(
            self.teams,
            self.pairings(),
            latest.round_number + 1,
            latest.algorithm,
            rng=self.round_manager.rng,
        )

    def reset(self) -> None:
        """Drop all rounds and results; the roster stays."""
        self.round_manager.reset()
        self.config.total_rounds = None

    @property
    def current_round(self) -> Optional[RoundData]:
        return self.round_manager.current_round

    @property
    def rounds(self) -> List[RoundData]:
        return self.store.list_rounds()

    def get_round(self, round_number: int) -> RoundView:
        return self.round_manager.get_round(round_number)

    def pairings(self, round_number: Optional[int] = None) -> List[Pairing]:
        return self.store.list_pairings(round_number)

    # ========== Results ==========

    def enter_result(self, pairing_id: int, result: str) -> Pairing:
        """Record a result. See ``ResultRecorder.enter_result``."""
        return self.result_recorder.enter_result(pairing_id, result)

    def enter_results(self, results: Iterable[Tuple[int, str]]) -> List[Pairing]:
        """Record several results in order; stops at the first invalid entry."""
        return self.result_recorder.enter_results(results)

    # ========== Queries ==========

    def score(self, team_id: TeamId) -> float:
        return score(team_id, self.pairings())

    def standings(self) -> List[Standing]:
        """Standings over the whole history, best first."""
        return standings(self.teams, self.pairings())

    def status(self) -> TournamentStatus:
        latest = self.current_round
        if latest is None:
            return TournamentStatus(started=False)
        return TournamentStatus(
            started=True,
            current_round=latest.round_number,
            total_rounds=latest.total_rounds,
            algorithm=latest.algorithm,
            completed=self.round_manager.is_complete,
        )

    @property
    def is_complete(self) -> bool:
        return self.round_manager.is_complete

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament state to dictionary."""
        return {
            "config": self.config.to_dict(),
            "teams": [t.to_dict() for t in self.teams],
            "rounds": [r.to_dict() for r in self.rounds],
            "pairings": [p.to_dict() for p in self.pairings()],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], rng: Optional[Any] = None) -> "Tournament":
        """Deserialize a tournament into a fresh in-memory store."""
        config = TournamentConfig.from_dict(data.get("config", {}))
        store = InMemoryTournamentStore()
        store.restore(
            teams=[Team.from_dict(t) for t in data.get("teams", [])],
            rounds=[RoundData.from_dict(r) for r in data.get("rounds", [])],
            pairings=[Pairing.from_dict(p) for p in data.get("pairings", [])],
        )
        tournament = cls(name=config.name, store=store, rng=rng)
        if tournament.current_round is None:
            tournament.config.algorithm = config.algorithm
        return tournament

    def save(self, path: Union[str, Path]) -> Path:
        """Write the tournament to a JSON file.

        A path without a suffix gets SAVE_FILE_EXTENSION appended.

        Returns:
            The path actually written

        Raises:
            FileSaveException: The file cannot be written
        """
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(SAVE_FILE_EXTENSION)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(self.to_dict(), f, indent=4)
        except (OSError, TypeError) as e:
            raise FileSaveException(f"Could not save tournament to {path}: {e}") from e
        logger.info("Tournament saved to %s", path)
        return path

    @classmethod
    def load(cls, path: Union[str, Path], rng: Optional[Any] = None) -> "Tournament":
        """Read a tournament from a JSON file.

        Raises:
            FileLoadException: The file is missing, unreadable or malformed
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise FileLoadException(
                f"Could not load tournament from {path}: {e}"
            ) from e

        try:
            tournament = cls.from_dict(data, rng=rng)
        except (KeyError, TypeError, ValueError) as e:
            raise FileLoadException(f"Malformed tournament file {path}: {e}") from e
        logger.info(
            "Tournament loaded from %s: %s teams, %s rounds",
            path,
            len(tournament.teams),
            len(tournament.rounds),
        )
        return tournament
