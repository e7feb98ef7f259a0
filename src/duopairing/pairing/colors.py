"""Color allocation for a decided pair."""

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

from typing import Optional, Sequence

from duopairing.history import last_color_of
from duopairing.models.pairing import Pairing
from duopairing.type_hints import BLACK, WHITE, Colour, TeamId


def wants_white(last_colour: Optional[Colour]) -> bool:
    """A team wants white after playing black, or before its first game."""
    return last_colour is None or last_colour == BLACK


def assign_colour(
    team1_id: TeamId, team2_id: TeamId, prior_pairings: Sequence[Pairing]
) -> Colour:
    """Pick team1's color, alternating from each team's last color.

    team1 is the higher-ranked side and wins a conflict: when both want the
    same color, team1 gets it and team2 takes the other.

    Returns:
        The color for team1 ("W" or "B")
    """
    wants1 = wants_white(last_color_of(team1_id, prior_pairings))
    wants2 = wants_white(last_color_of(team2_id, prior_pairings))

    if wants1 and not wants2:
        return WHITE
    if wants2 and not wants1:
        return BLACK
    return WHITE if wants1 else BLACK
