"""Scores and standings, replayed from the pairing history.

Nothing here is cached: every call walks the full list of pairings, so the
functions are safe to call repeatedly and from several threads at once.
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

from typing import Iterable, List, Sequence

from duopairing.constants import (
    BYE_SCORE,
    DRAW_SCORE,
    LOSS_SCORE,
    RESULT_BYE,
    RESULT_DRAW,
    RESULT_TEAM1_WIN,
    RESULT_TEAM2_WIN,
    WIN_SCORE,
)
from duopairing.models.pairing import Pairing
from duopairing.models.standing import Standing
from duopairing.models.team import Team
from duopairing.type_hints import RankedTeam, TeamId


def points_for(team_id: TeamId, pairing: Pairing) -> float:
    """Points the team earned from a single pairing (0 if pending or absent)."""
    if pairing.result is None or not pairing.involves(team_id):
        return LOSS_SCORE

    is_team1 = pairing.team1_id == team_id
    if pairing.result == RESULT_BYE:
        return BYE_SCORE
    if pairing.result == RESULT_TEAM1_WIN:
        return WIN_SCORE if is_team1 else LOSS_SCORE
    if pairing.result == RESULT_TEAM2_WIN:
        return LOSS_SCORE if is_team1 else WIN_SCORE
    if pairing.result == RESULT_DRAW:
        return DRAW_SCORE
    return LOSS_SCORE


def score(team_id: TeamId, pairings: Iterable[Pairing]) -> float:
    """Cumulative score of a team: win 1, draw 0.5, loss 0, bye 1."""
    return sum(points_for(team_id, p) for p in pairings)


def games_played(team_id: TeamId, pairings: Iterable[Pairing]) -> int:
    """Number of resolved pairings the team took part in, byes included."""
    return sum(1 for p in pairings if p.result is not None and p.involves(team_id))


def rank_teams(roster: Sequence[Team], pairings: Sequence[Pairing]) -> List[RankedTeam]:
    """Order the roster by descending score, then descending seed rating.

    Teams tied on both keep their roster order.
    """
    scored = [(team, score(team.id, pairings)) for team in roster]
    return sorted(scored, key=lambda entry: (-entry[1], -entry[0].average_rating))


def score_groups(ranked: Sequence[RankedTeam]) -> List[List[Team]]:
    """Cut a ranked list into groups of teams sharing the same score."""
    groups: List[List[Team]] = []
    last_score = None
    for team, team_score in ranked:
        if not groups or team_score != last_score:
            groups.append([])
            last_score = team_score
        groups[-1].append(team)
    return groups


def standings(roster: Sequence[Team], pairings: Sequence[Pairing]) -> List[Standing]:
    """Build the standings table.

    Args:
        roster: All registered teams
        pairings: Every pairing of every round

    Returns:
        One Standing per team, rank 1 first
    """
    return [
        Standing(
            rank=position,
            team=team,
            score=team_score,
            games_played=games_played(team.id, pairings),
        )
        for position, (team, team_score) in enumerate(
            rank_teams(roster, pairings), start=1
        )
    ]
