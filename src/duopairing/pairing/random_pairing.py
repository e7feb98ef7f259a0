"""Random pairing with rematch avoidance."""

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

import random
from typing import Any, List, Optional, Tuple

from duopairing.constants import ALGORITHM_RANDOM
from duopairing.history import bye_recipients, opponent_index
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.team import Team
from duopairing.pairing.base import BoardSheet, PairingStrategy
from duopairing.type_hints import WHITE, TeamId
from duopairing.utils import setup_logger

logger = setup_logger(__name__)


def id_sort_key(team_id: TeamId) -> Tuple[int, Any]:
    """Order ids numerically when they are numbers, as text otherwise."""
    if isinstance(team_id, (int, float)) and not isinstance(team_id, bool):
        return (0, team_id)
    return (1, str(team_id))


class RandomStrategy(PairingStrategy):
    """Shuffle the roster and pair neighbours, avoiding known rematches.

    Args:
        rng: Entropy source; anything with a ``shuffle`` method. Pass a seeded
            ``random.Random`` for repeatable rounds.
    """

    name = ALGORITHM_RANDOM

    def __init__(self, rng: Optional[Any] = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def _pair(
        self,
        roster: List[Team],
        prior_pairings: List[Pairing],
        round_number: int,
    ) -> List[NewPairing]:
        order = [team.id for team in roster]
        self.rng.shuffle(order)

        bye_team_id = None
        if len(order) % 2 == 1:
            already_had_bye = bye_recipients(prior_pairings)
            bye_team_id = next(
                (t for t in reversed(order) if t not in already_had_bye), order[-1]
            )
            order.remove(bye_team_id)

        opponents = opponent_index(order, prior_pairings)
        paired = set()
        sheet = BoardSheet()

        for i, team_id in enumerate(order):
            if team_id in paired:
                continue
            later = [t for t in order[i + 1 :] if t not in paired]
            if not later:
                logger.warning(
                    "Round %s: %r cannot be paired, giving an emergency bye",
                    round_number,
                    team_id,
                )
                sheet.add_bye(team_id)
                paired.add(team_id)
                continue

            partner = next((t for t in later if t not in opponents[team_id]), None)
            if partner is None:
                partner = later[0]
                logger.warning(
                    "No fresh opponent left for %r; forcing a rematch with %r",
                    team_id,
                    partner,
                )

            first, second = sorted((team_id, partner), key=id_sort_key)
            sheet.add_game(first, second, WHITE)
            paired.update((team_id, partner))

        pairings = sheet.finish(bye_team_id)
        logger.info(
            "Random round %s: %s games, bye: %s",
            round_number,
            sum(1 for p in pairings if not p.is_bye),
            bye_team_id,
        )
        return pairings
