"""Common interface and board bookkeeping for pairing strategies."""

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

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from duopairing.constants import MIN_TEAMS
from duopairing.exceptions import (
    InvalidPairingException,
    InvariantViolationException,
    NotEnoughTeamsException,
)
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.team import Team
from duopairing.type_hints import BLACK, WHITE, Colour, MaybeTeamId, TeamId
from duopairing.utils.validation import ensure_unique_ids


class PairingStrategy(ABC):
    """One way of turning a roster and its history into a round.

    Strategies hold no tournament state: everything they need is passed to
    ``generate`` and nothing they are given is mutated.
    """

    #: Registry key, also stored on every round of a tournament
    name: str = ""

    def generate(
        self,
        roster: Sequence[Team],
        prior_pairings: Sequence[Pairing],
        round_number: int,
    ) -> List[NewPairing]:
        """Produce the pairings for one round.

        Args:
            roster: Teams taking part
            prior_pairings: Pairings of every earlier round, oldest first
            round_number: The round being paired (1-indexed)

        Returns:
            Pairings in board order, a scheduled bye on the last board

        Raises:
            NotEnoughTeamsException: Fewer than two teams
            InvalidPairingException: Duplicate team ids or bad round number
            InvariantViolationException: The strategy produced a broken round
        """
        check_roster(roster)
        if round_number < 1:
            raise InvalidPairingException(f"Invalid round number: {round_number}")

        pairings = self._pair(list(roster), list(prior_pairings), round_number)
        check_round(pairings, roster)
        return pairings

    @abstractmethod
    def _pair(
        self,
        roster: List[Team],
        prior_pairings: List[Pairing],
        round_number: int,
    ) -> List[NewPairing]:
        """Strategy-specific pairing, on an already validated roster."""


class BoardSheet:
    """Collects decided boards and numbers them densely from 1."""

    def __init__(self) -> None:
        self._boards: List[NewPairing] = []

    def __len__(self) -> int:
        return len(self._boards)

    def add_game(
        self, team1_id: TeamId, team2_id: TeamId, color1: Colour
    ) -> NewPairing:
        board = NewPairing(
            board_num=len(self._boards) + 1,
            team1_id=team1_id,
            team2_id=team2_id,
            color1=color1,
        )
        self._boards.append(board)
        return board

    def add_bye(self, team_id: TeamId) -> NewPairing:
        board = NewPairing(board_num=len(self._boards) + 1, team1_id=team_id)
        self._boards.append(board)
        return board

    def finish(self, bye_team_id: MaybeTeamId = None) -> List[NewPairing]:
        """Close the sheet, appending the scheduled bye on the last board."""
        if bye_team_id is not None:
            self.add_bye(bye_team_id)
        return list(self._boards)


def check_roster(roster: Sequence[Team]) -> None:
    """Refuse rosters on which no round is possible."""
    if len(roster) < MIN_TEAMS:
        raise NotEnoughTeamsException(
            f"At least {MIN_TEAMS} teams are needed to pair a round, got {len(roster)}"
        )
    ensure_unique_ids(team.id for team in roster)


def check_round(
    pairings: Sequence[NewPairing], roster: Optional[Sequence[Team]] = None
) -> None:
    """Verify the structural invariants of a freshly generated round.

    Raises:
        InvariantViolationException: A team appears twice, plays itself, is
            not on the roster, a game lacks a color, or boards are not dense
    """
    known = {team.id for team in roster} if roster is not None else None
    seen = set()
    for expected_board, pairing in enumerate(pairings, start=1):
        if pairing.board_num != expected_board:
            raise InvariantViolationException(
                f"Board numbers are not dense: expected {expected_board}, "
                f"got {pairing.board_num}"
            )
        if pairing.team1_id == pairing.team2_id:
            raise InvariantViolationException(
                f"Team {pairing.team1_id!r} paired with itself"
            )
        if not pairing.is_bye and pairing.color1 not in (WHITE, BLACK):
            raise InvariantViolationException(
                f"Board {pairing.board_num} has no color assigned"
            )
        if pairing.is_bye and pairing.color1 is not None:
            raise InvariantViolationException(
                f"Bye on board {pairing.board_num} carries a color"
            )
        for team_id in (pairing.team1_id, pairing.team2_id):
            if team_id is None:
                continue
            if team_id in seen:
                raise InvariantViolationException(
                    f"Team {team_id!r} paired twice in the same round"
                )
            if known is not None and team_id not in known:
                raise InvariantViolationException(
                    f"Team {team_id!r} is not on the roster"
                )
            seen.add(team_id)

    if known is not None and seen != known:
        missing = ", ".join(repr(t) for t in known - seen)
        raise InvariantViolationException(f"Teams left out of the round: {missing}")
