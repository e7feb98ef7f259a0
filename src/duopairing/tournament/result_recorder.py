"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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

from typing import Iterable, List, Tuple

from duopairing.exceptions import ByeResultException, PairingNotFoundException
from duopairing.models.pairing import Pairing
from duopairing.tournament.store import TournamentStore
from duopairing.utils import setup_logger
from duopairing.utils.validation import validate_result_strict

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Rejecting results for byes and unknown pairings
    - Accepting only the three result literals
    - Writing the result through the store
    """

    def __init__(self, store: TournamentStore):
        self.store = store

    def enter_result(self, pairing_id: int, result: str) -> Pairing:
        """Record the result of a single pairing.

        Args:
            pairing_id: Id of the pairing
            result: "1-0", "0-1" or "1/2-1/2", from team1's point of view

        Returns:
            The updated pairing

        Raises:
            PairingNotFoundException: Unknown pairing id
            ByeResultException: The pairing is a bye
            InvalidResultException: Result literal not accepted
        """
        pairing = self.store.get_pairing(pairing_id)
        if pairing is None:
            raise PairingNotFoundException(f"Pairing {pairing_id} not found")

        if pairing.is_bye:
            raise ByeResultException(
                f"Pairing {pairing_id} is a bye for {pairing.team1_id!r}; "
                "no result applies"
            )

        result = validate_result_strict(result)

        if pairing.result is not None and pairing.result != result:
            logger.warning(
                "Round %s board %s: overwriting result %s with %s",
                pairing.round_number,
                pairing.board_num,
                pairing.result,
                result,
            )

        updated = self.store.set_result(pairing_id, result)
        logger.debug(
            "Recorded: round %s board %s, %r vs %r -> %s",
            updated.round_number,
            updated.board_num,
            updated.team1_id,
            updated.team2_id,
            result,
        )
        return updated

    def enter_results(self, results: Iterable[Tuple[int, str]]) -> List[Pairing]:
        """Record several results; stops at the first invalid entry."""
        return [self.enter_result(pairing_id, result) for pairing_id, result in results]
