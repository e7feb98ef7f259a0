"""Duo Pairing: pairing and standings for two-player team chess tournaments."""

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

from duopairing.models import NewPairing, Pairing, Standing, Team
from duopairing.pairing import generate
from duopairing.scoring import score, standings
from duopairing.tournament import InMemoryTournamentStore, Tournament

__version__ = "1.0.0"

__all__ = [
    "generate",
    "score",
    "standings",
    "Tournament",
    "InMemoryTournamentStore",
    "Team",
    "Pairing",
    "NewPairing",
    "Standing",
]
