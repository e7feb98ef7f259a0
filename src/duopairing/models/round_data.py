"""Data model for tournament round."""

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

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List

from duopairing.constants import DEFAULT_ALGORITHM, ROUND_DONE, ROUND_OPEN
from duopairing.models.pairing import Pairing


@dataclass(frozen=True)
class RoundData:
    """Container for the bookkeeping of a single tournament round.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    total_rounds : int
        Ceiling fixed when the tournament started.
    status : str
        "open" while results are being entered, "done" once the next round
        has been generated.
    algorithm : str
        Pairing algorithm, identical for every round of one tournament.
    """

    round_number: int
    total_rounds: int
    status: str = ROUND_OPEN
    algorithm: str = DEFAULT_ALGORITHM

    @property
    def is_open(self) -> bool:
        return self.status == ROUND_OPEN

    @property
    def is_done(self) -> bool:
        return self.status == ROUND_DONE

    @property
    def is_last(self) -> bool:
        return self.round_number >= self.total_rounds

    def mark_done(self) -> "RoundData":
        return replace(self, status=ROUND_DONE)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary."""
        return {
            "round_number": self.round_number,
            "total_rounds": self.total_rounds,
            "status": self.status,
            "algorithm": self.algorithm,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize round data from dictionary."""
        return cls(
            round_number=int(data["round_number"]),
            total_rounds=int(data["total_rounds"]),
            status=data.get("status", ROUND_OPEN),
            algorithm=data.get("algorithm", DEFAULT_ALGORITHM),
        )


@dataclass(frozen=True)
class RoundView:
    """A round together with its pairings, in board order."""

    round: RoundData
    pairings: List[Pairing] = field(default_factory=list)

    @property
    def pending(self) -> List[Pairing]:
        """Two-sided pairings still without a result."""
        return [p for p in self.pairings if p.is_pending]

    @property
    def is_resolved(self) -> bool:
        return not self.pending
