"""Queries over the pairing history used by the pairing strategies."""

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

from typing import Dict, Iterable, Optional, Sequence, Set

from duopairing.models.pairing import Pairing
from duopairing.type_hints import Colour, TeamId


def opponents_of(team_id: TeamId, pairings: Iterable[Pairing]) -> Set[TeamId]:
    """Every team the given team has been paired against. Byes are skipped."""
    opponents = set()
    for pairing in pairings:
        if pairing.is_bye:
            continue
        if pairing.team1_id == team_id:
            opponents.add(pairing.team2_id)
        elif pairing.team2_id == team_id:
            opponents.add(pairing.team1_id)
    return opponents


def opponent_index(
    team_ids: Iterable[TeamId], pairings: Sequence[Pairing]
) -> Dict[TeamId, Set[TeamId]]:
    """Map each team id to the set of its past opponents."""
    return {team_id: opponents_of(team_id, pairings) for team_id in team_ids}


def have_played(a: TeamId, b: TeamId, pairings: Iterable[Pairing]) -> bool:
    """Whether the two teams already met in a two-sided pairing."""
    return any(
        not p.is_bye and {p.team1_id, p.team2_id} == {a, b} for p in pairings
    )


def last_color_of(team_id: TeamId, pairings: Sequence[Pairing]) -> Optional[Colour]:
    """Color the team held in its most recent two-sided pairing.

    Args:
        team_id: Team to look up
        pairings: History, oldest first

    Returns:
        "W", "B", or None if the team never played a colored game
    """
    for pairing in reversed(pairings):
        if pairing.is_bye:
            continue
        colour = pairing.colour_of(team_id)
        if colour is not None:
            return colour
    return None


def bye_recipients(pairings: Iterable[Pairing]) -> Set[TeamId]:
    """Teams that have already received a bye."""
    return {p.team1_id for p in pairings if p.is_bye}
