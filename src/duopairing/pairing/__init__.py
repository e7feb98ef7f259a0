"""Pairing strategies and the dispatcher selecting one by name."""

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

from typing import Any, Dict, List, Optional, Sequence, Type

from duopairing.constants import DEFAULT_ALGORITHM
from duopairing.exceptions import InvalidConfigurationException
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.team import Team
from duopairing.pairing.base import PairingStrategy, check_round
from duopairing.pairing.colors import assign_colour
from duopairing.pairing.dutch_swiss import DutchSwissStrategy
from duopairing.pairing.random_pairing import RandomStrategy
from duopairing.pairing.round_robin import (
    RoundRobinStrategy,
    round_robin_total_rounds,
)
from duopairing.utils.validation import validate_algorithm

STRATEGIES: Dict[str, Type[PairingStrategy]] = {
    DutchSwissStrategy.name: DutchSwissStrategy,
    RoundRobinStrategy.name: RoundRobinStrategy,
    RandomStrategy.name: RandomStrategy,
}


def get_strategy(algorithm: str, rng: Optional[Any] = None) -> PairingStrategy:
    """Instantiate the strategy registered under ``algorithm``.

    Args:
        algorithm: "swiss", "round_robin" or "random"
        rng: Entropy source, only used by the random strategy

    Raises:
        InvalidConfigurationException: Unknown algorithm name
    """
    validation = validate_algorithm(algorithm)
    if not validation:
        raise InvalidConfigurationException(validation.error_message)

    strategy_cls = STRATEGIES[validation.sanitized_value]
    if strategy_cls is RandomStrategy:
        return RandomStrategy(rng=rng)
    return strategy_cls()


def generate(
    roster: Sequence[Team],
    prior_pairings: Sequence[Pairing],
    round_number: int,
    algorithm: str = DEFAULT_ALGORITHM,
    rng: Optional[Any] = None,
) -> List[NewPairing]:
    """Pair one round with the named algorithm."""
    return get_strategy(algorithm, rng=rng).generate(
        roster, prior_pairings, round_number
    )


__all__ = [
    "PairingStrategy",
    "DutchSwissStrategy",
    "RoundRobinStrategy",
    "RandomStrategy",
    "STRATEGIES",
    "assign_colour",
    "check_round",
    "generate",
    "get_strategy",
    "round_robin_total_rounds",
]
