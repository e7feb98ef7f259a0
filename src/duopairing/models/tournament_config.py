"""TournamentConfig data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from duopairing.constants import DEFAULT_ALGORITHM
from duopairing.utils.validation import validate_tournament_settings


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    algorithm : str
        Pairing algorithm used for every round. Supported values are
        "swiss", "round_robin" and "random".
    total_rounds : int or None
        Number of rounds; None until the tournament is started.
    """

    name: str = "Untitled Tournament"
    algorithm: str = DEFAULT_ALGORITHM
    total_rounds: Optional[int] = None

    def validated(self) -> "TournamentConfig":
        """Return a normalized copy, raising InvalidConfigurationException."""
        algorithm, total_rounds = validate_tournament_settings(
            self.algorithm, self.total_rounds
        )
        return TournamentConfig(
            name=self.name, algorithm=algorithm, total_rounds=total_rounds
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "algorithm": self.algorithm,
            "total_rounds": self.total_rounds,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", "Untitled Tournament"),
            algorithm=data.get("algorithm", DEFAULT_ALGORITHM),
            total_rounds=data.get("total_rounds"),
        )
