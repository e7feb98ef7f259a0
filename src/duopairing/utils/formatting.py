"""Plain-text rendering of rounds, standings and status for the terminal tools."""

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

from typing import Dict, Iterable, List, Optional, Sequence, Union

from duopairing.constants import ALGORITHM_NAMES
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.round_data import RoundView
from duopairing.models.standing import Standing
from duopairing.models.status import TournamentStatus
from duopairing.models.team import Team
from duopairing.type_hints import WHITE, TeamId

AnyPairing = Union[Pairing, NewPairing]


def _team_label(team_id: Optional[TeamId], teams: Dict[TeamId, Team]) -> str:
    if team_id is None:
        return "-"
    team = teams.get(team_id)
    return team.display_name if team else str(team_id)


def format_pairings(
    pairings: Sequence[AnyPairing], teams: Iterable[Team]
) -> List[str]:
    """One line per board: White first, then Black, then the result."""
    by_id = {team.id: team for team in teams}
    lines = []
    for pairing in sorted(pairings, key=lambda p: p.board_num):
        pairing_id = getattr(pairing, "id", None)
        prefix = f"[{pairing_id:>3}] " if pairing_id is not None else ""
        if pairing.is_bye:
            lines.append(
                f"{prefix}Board {pairing.board_num:>2}: "
                f"{_team_label(pairing.team1_id, by_id)} gets the bye"
            )
            continue

        if pairing.color1 == WHITE:
            white, black = pairing.team1_id, pairing.team2_id
        else:
            white, black = pairing.team2_id, pairing.team1_id
        result = getattr(pairing, "result", None)
        lines.append(
            f"{prefix}Board {pairing.board_num:>2}: "
            f"{_team_label(white, by_id)} (W) vs {_team_label(black, by_id)} (B)"
            f"  {result or 'pending'}"
        )
    return lines


def format_round(view: RoundView, teams: Iterable[Team]) -> str:
    header = (
        f"Round {view.round.round_number} of {view.round.total_rounds} "
        f"({view.round.status})"
    )
    return "\n".join([header] + format_pairings(view.pairings, teams))


def format_standings(rows: Sequence[Standing]) -> str:
    lines = [f"{'#':>3}  {'Team':<30} {'Pts':>5} {'G':>3} {'Avg':>7}"]
    for row in rows:
        lines.append(
            f"{row.rank:>3}  {row.team.display_name[:30]:<30} "
            f"{row.score:>5g} {row.games_played:>3} {row.team.average_rating:>7.1f}"
        )
    return "\n".join(lines)


def format_status(status: TournamentStatus) -> str:
    if not status.started:
        return "Tournament not started"
    algorithm = ALGORITHM_NAMES.get(status.algorithm, status.algorithm)
    state = "completed" if status.completed else "in progress"
    return (
        f"Round {status.current_round} of {status.total_rounds}, "
        f"{algorithm}, {state}"
    )


def format_teams(teams: Sequence[Team]) -> str:
    lines = []
    for team in teams:
        lines.append(
            f"{str(team.id):>4}  {team.display_name:<30} "
            f"{team.player1} ({team.rating1}) / {team.player2} ({team.rating2})"
        )
    return "\n".join(lines) if lines else "No teams registered"
