"""A two-player team registered for the tournament."""

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
from typing import Any, Dict

from duopairing.type_hints import TeamId


@dataclass(frozen=True)
class Team:
    """A registered team of two players.

    Attributes
    ----------
    id : hashable
        Opaque identifier handed over by the registration layer.
    player1 : str
        Name of the first player.
    player2 : str
        Name of the second player.
    rating1 : float
        Rating of the first player.
    rating2 : float
        Rating of the second player.
    name : str
        Team name, for display only.
    """

    id: TeamId
    player1: str
    player2: str
    rating1: float = 0
    rating2: float = 0
    name: str = ""

    @property
    def average_rating(self) -> float:
        """Seed rating: mean of both player ratings."""
        return (self.rating1 + self.rating2) / 2

    @property
    def display_name(self) -> str:
        """Team name, or the two player names when the team has none."""
        return self.name or f"{self.player1} / {self.player2}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize team to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "player1": self.player1,
            "player2": self.player2,
            "rating1": self.rating1,
            "rating2": self.rating2,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        """Deserialize team from dictionary."""
        return cls(
            id=data["id"],
            player1=data.get("player1", ""),
            player2=data.get("player2", ""),
            rating1=data.get("rating1", 0),
            rating2=data.get("rating2", 0),
            name=data.get("name", ""),
        )
