"""Data models shared by the pairing engine and the tournament orchestrator."""

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

from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.round_data import RoundData, RoundView
from duopairing.models.standing import Standing
from duopairing.models.status import TournamentStatus
from duopairing.models.team import Team
from duopairing.models.tournament_config import TournamentConfig

__all__ = [
    "Team",
    "Pairing",
    "NewPairing",
    "RoundData",
    "RoundView",
    "Standing",
    "TournamentConfig",
    "TournamentStatus",
]
