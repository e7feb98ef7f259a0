"""Round robin pairing using the circle method."""

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

from typing import List, Optional, Sequence

from duopairing.constants import ALGORITHM_ROUND_ROBIN
from duopairing.exceptions import InvalidPairingException
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.team import Team
from duopairing.pairing.base import BoardSheet, PairingStrategy
from duopairing.type_hints import BLACK, WHITE, MaybeTeamId
from duopairing.utils import setup_logger

logger = setup_logger(__name__)


def round_robin_total_rounds(num_teams: int) -> int:
    """Rounds needed for everyone to meet once: n-1 when even, n when odd."""
    if num_teams < 2:
        return 0
    return num_teams - 1 if num_teams % 2 == 0 else num_teams


def circle_schedule(
    team_ids: Sequence[MaybeTeamId], round_number: int
) -> List[tuple]:
    """Pairs of the circle method for one round.

    The first id stays fixed and the others rotate n/2 - 1 places per round,
    which gives the Berger tables: with the upper arc on white, every team
    alternates colors except for at most one repeat around its game with
    the fixed team. For an odd count a None placeholder is appended; whoever
    meets it sits out.

    Returns:
        List of (upper, lower) tuples, the fixed team's pair first
    """
    ids: List[Optional[MaybeTeamId]] = list(team_ids)
    if len(ids) % 2 == 1:
        ids.append(None)
    n = len(ids)

    rotating = ids[1:]
    shift = ((round_number - 1) * (n // 2 - 1)) % (n - 1)
    if shift:
        rotating = rotating[-shift:] + rotating[:-shift]

    pairs = [(ids[0], rotating[0])]
    for i in range(1, n // 2):
        pairs.append((rotating[i], rotating[n - 1 - i]))
    return pairs


class RoundRobinStrategy(PairingStrategy):
    """Everyone meets everyone once; scores and history are never consulted.

    Teams are placed on the circle in roster order and rotated as in the
    Berger tables. The fixed team alternates colors from round to round, and
    in every other pair the team on the upper arc takes white.
    """

    name = ALGORITHM_ROUND_ROBIN

    def _pair(
        self,
        roster: List[Team],
        prior_pairings: List[Pairing],
        round_number: int,
    ) -> List[NewPairing]:
        total = round_robin_total_rounds(len(roster))
        if round_number > total:
            raise InvalidPairingException(
                f"Round robin with {len(roster)} teams has only {total} rounds, "
                f"cannot pair round {round_number}"
            )

        fixed_id = roster[0].id
        sheet = BoardSheet()
        bye_team_id = None

        for upper, lower in circle_schedule([t.id for t in roster], round_number):
            if upper is None or lower is None:
                bye_team_id = lower if upper is None else upper
                continue
            if upper == fixed_id:
                colour = WHITE if round_number % 2 == 1 else BLACK
            else:
                colour = WHITE
            sheet.add_game(upper, lower, colour)

        pairings = sheet.finish(bye_team_id)
        logger.info(
            "Round robin round %s of %s: %s games, bye: %s",
            round_number,
            total,
            len(pairings) - (1 if bye_team_id is not None else 0),
            bye_team_id,
        )
        return pairings
