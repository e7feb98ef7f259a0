"""Storage collaborator for the tournament orchestrator.

The orchestrator never reaches into ambient state: it is handed a store that
owns the roster, the rounds and the pairings. ``InMemoryTournamentStore`` is
the implementation shipped with the package; a database-backed store only has
to honour the same contract, in particular the atomicity of
``create_round``.
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

import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional, Sequence

from duopairing.exceptions import (
    DuplicateTeamException,
    PairingNotFoundException,
    RoundConflictException,
    RoundSequenceException,
)
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.round_data import RoundData, RoundView
from duopairing.models.team import Team
from duopairing.pairing.base import check_round
from duopairing.utils import setup_logger, utcnow
from duopairing.utils.validation import ensure_unique_ids

logger = setup_logger(__name__)


class TournamentStore(ABC):
    """What the orchestrator needs from persistence."""

    # ========== Roster ==========

    @abstractmethod
    def list_teams(self) -> List[Team]:
        """All registered teams, in registration order."""

    @abstractmethod
    def add_team(self, team: Team) -> None:
        """Register a team."""

    # ========== Rounds ==========

    @abstractmethod
    def list_rounds(self) -> List[RoundData]:
        """All rounds, ordered by round number."""

    @abstractmethod
    def get_round(self, round_number: int) -> Optional[RoundData]:
        """A single round, or None."""

    @abstractmethod
    def get_round_view(self, round_number: int) -> Optional[RoundView]:
        """A round and its pairings in board order, read together, or None."""

    @abstractmethod
    def create_round(
        self, round_data: RoundData, new_pairings: Sequence[NewPairing]
    ) -> List[Pairing]:
        """Atomically close the previous round and insert a new one.

        Raises:
            RoundConflictException: The round number already exists
            RoundSequenceException: The number does not follow the latest round
        """

    @abstractmethod
    def clear_rounds(self) -> None:
        """Delete every round and pairing; the roster stays."""

    # ========== Pairings ==========

    @abstractmethod
    def list_pairings(self, round_number: Optional[int] = None) -> List[Pairing]:
        """Pairings in creation order, optionally for one round only."""

    @abstractmethod
    def get_pairing(self, pairing_id: int) -> Optional[Pairing]:
        """A single pairing, or None."""

    @abstractmethod
    def set_result(self, pairing_id: int, result: Optional[str]) -> Pairing:
        """Store a result and return the updated pairing."""

    def latest_round(self) -> Optional[RoundData]:
        rounds = self.list_rounds()
        return rounds[-1] if rounds else None


class InMemoryTournamentStore(TournamentStore):
    """Thread-safe store keeping everything in process memory.

    Every access goes through one re-entrant lock, and reads hand out copies,
    so readers always see a consistent snapshot.
    """

    def __init__(self, teams: Optional[Iterable[Team]] = None) -> None:
        self._lock = threading.RLock()
        self._teams: List[Team] = []
        self._rounds: Dict[int, RoundData] = {}
        self._pairings: List[Pairing] = []
        self._next_pairing_id = 1
        for team in teams or []:
            self.add_team(team)

    # ========== Roster ==========

    def list_teams(self) -> List[Team]:
        with self._lock:
            return list(self._teams)

    def add_team(self, team: Team) -> None:
        with self._lock:
            if any(existing.id == team.id for existing in self._teams):
                raise DuplicateTeamException(
                    f"Team id {team.id!r} already registered"
                )
            self._teams.append(team)

    # ========== Rounds ==========

    def list_rounds(self) -> List[RoundData]:
        with self._lock:
            return [self._rounds[n] for n in sorted(self._rounds)]

    def get_round(self, round_number: int) -> Optional[RoundData]:
        with self._lock:
            return self._rounds.get(round_number)

    def get_round_view(self, round_number: int) -> Optional[RoundView]:
        with self._lock:
            round_data = self._rounds.get(round_number)
            if round_data is None:
                return None
            pairings = [p for p in self._pairings if p.round_number == round_number]
        return RoundView(
            round=round_data, pairings=sorted(pairings, key=lambda p: p.board_num)
        )

    def create_round(
        self, round_data: RoundData, new_pairings: Sequence[NewPairing]
    ) -> List[Pairing]:
        number = round_data.round_number
        with self._lock:
            if number in self._rounds:
                raise RoundConflictException(f"Round {number} already exists")

            latest = max(self._rounds) if self._rounds else 0
            if number != latest + 1:
                raise RoundSequenceException(
                    f"Round {number} cannot follow round {latest}"
                )

            check_round(new_pairings)

            if latest:
                self._rounds[latest] = self._rounds[latest].mark_done()

            created_at = utcnow()
            created = []
            for new_pairing in new_pairings:
                pairing = Pairing.from_new(
                    new_pairing,
                    round_number=number,
                    pairing_id=self._next_pairing_id,
                    created_at=created_at,
                )
                self._next_pairing_id += 1
                created.append(pairing)

            self._rounds[number] = round_data
            self._pairings.extend(created)

        logger.debug("Stored round %s with %s pairings", number, len(created))
        return created

    def clear_rounds(self) -> None:
        with self._lock:
            self._rounds.clear()
            self._pairings.clear()
            self._next_pairing_id = 1

    # ========== Pairings ==========

    def list_pairings(self, round_number: Optional[int] = None) -> List[Pairing]:
        with self._lock:
            if round_number is None:
                return list(self._pairings)
            return [p for p in self._pairings if p.round_number == round_number]

    def get_pairing(self, pairing_id: int) -> Optional[Pairing]:
        with self._lock:
            return next((p for p in self._pairings if p.id == pairing_id), None)

    def set_result(self, pairing_id: int, result: Optional[str]) -> Pairing:
        with self._lock:
            for i, pairing in enumerate(self._pairings):
                if pairing.id == pairing_id:
                    updated = pairing.with_result(result)
                    self._pairings[i] = updated
                    return updated
        raise PairingNotFoundException(f"Pairing {pairing_id} not found")

    # ========== Snapshots ==========

    def restore(
        self,
        teams: Iterable[Team],
        rounds: Iterable[RoundData],
        pairings: Iterable[Pairing],
    ) -> None:
        """Replace the whole content, e.g. when loading a saved tournament."""
        teams = list(teams)
        ensure_unique_ids(team.id for team in teams)
        with self._lock:
            self._teams = teams
            self._rounds = {r.round_number: r for r in rounds}
            self._pairings = list(pairings)
            ids = [p.id for p in self._pairings if p.id is not None]
            self._next_pairing_id = max(ids, default=0) + 1
