"""Random Tournament Generator (RTG) for duo tournaments.

Builds a roster of random teams, then plays a whole tournament through the
public Tournament API with simulated results. Everything is driven by seeded
``random.Random`` instances, so a seed reproduces the same tournament.
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

import json
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from duopairing.constants import (
    ALGORITHM_ROUND_ROBIN,
    DEFAULT_ALGORITHM,
    RESULT_DRAW,
    RESULT_TEAM1_WIN,
    RESULT_TEAM2_WIN,
)
from duopairing.models.pairing import Pairing
from duopairing.models.team import Team
from duopairing.pairing import round_robin_total_rounds
from duopairing.tournament import Tournament
from duopairing.type_hints import BLACK, WHITE
from duopairing.utils import setup_logger

logger = setup_logger(__name__)

TEAM_PLACES = [
    "Pasay",
    "Libertad",
    "Baclaran",
    "Harrison",
    "Taft",
    "Quirino",
    "Imus",
    "Bacoor",
    "Kawit",
    "Noveleta",
    "Rosario",
    "Naic",
]

TEAM_MASCOTS = [
    "Rooks",
    "Knights",
    "Bishops",
    "Queens",
    "Pawns",
    "Gambiteers",
    "Tactics",
    "Mates",
    "Endgames",
    "Kings",
]

FIRST_NAMES = [
    "Carlos",
    "Maria",
    "Jose",
    "Anna",
    "Ramon",
    "Liza",
    "Miguel",
    "Grace",
    "Eduardo",
    "Cynthia",
    "Roberto",
    "Patricia",
    "Elena",
    "Vicente",
]

LAST_NAMES = [
    "Reyes",
    "Santos",
    "Garcia",
    "Flores",
    "Torres",
    "Mendoza",
    "Lim",
    "Tan",
    "Ramos",
    "Castro",
    "Navarro",
    "Aquino",
]


class RatingDistribution(Enum):
    """Rating distribution patterns for generated players."""

    UNIFORM = "uniform"
    NORMAL = "normal"
    CLUB = "club"


class ResultPattern(Enum):
    """Result generation patterns for simulated games."""

    REALISTIC = "realistic"
    PREDICTABLE = "predictable"
    RANDOM = "random"


@dataclass
class RTGConfig:
    """Configuration for Random Tournament Generator."""

    num_teams: int
    num_rounds: int
    algorithm: str = DEFAULT_ALGORITHM
    rating_distribution: RatingDistribution = RatingDistribution.NORMAL
    rating_range: Tuple[int, int] = (1200, 2200)
    result_pattern: ResultPattern = ResultPattern.REALISTIC
    seed: Optional[int] = None
    draw_percentage: int = 30


def _make_random(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


class TeamFactory:
    """Factory for creating random two-player teams."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = _make_random(config.seed)

    def create_teams(self) -> List[Team]:
        """Create teams based on configuration; ids run from 1."""
        teams = []
        for i in range(self.config.num_teams):
            teams.append(
                Team(
                    id=i + 1,
                    name=self._generate_team_name(i),
                    player1=self._generate_player_name(),
                    player2=self._generate_player_name(),
                    rating1=self._generate_rating(),
                    rating2=self._generate_rating(),
                )
            )

        logger.info(
            "Created %s teams with %s distribution",
            len(teams),
            self.config.rating_distribution.value,
        )
        return teams

    def _generate_rating(self) -> int:
        min_rating, max_rating = self.config.rating_range
        if self.config.rating_distribution == RatingDistribution.UNIFORM:
            return self.random.randint(min_rating, max_rating)
        if self.config.rating_distribution == RatingDistribution.NORMAL:
            mean = (min_rating + max_rating) / 2
            std_dev = (max_rating - min_rating) / 6
            rating = int(self.random.gauss(mean, std_dev))
            return max(min_rating, min(max_rating, rating))
        if self.config.rating_distribution == RatingDistribution.CLUB:
            base = self.random.choice([1200, 1400, 1600, 1800, 2000])
            rating = self.random.randint(base - 100, base + 100)
            return max(min_rating, min(max_rating, rating))
        return self.random.randint(min_rating, max_rating)

    def _generate_team_name(self, index: int) -> str:
        place = TEAM_PLACES[index % len(TEAM_PLACES)]
        mascot = TEAM_MASCOTS[(index // len(TEAM_PLACES)) % len(TEAM_MASCOTS)]
        cycle = index // (len(TEAM_PLACES) * len(TEAM_MASCOTS))
        return f"{place} {mascot}" + (f" {cycle + 1}" if cycle else "")

    def _generate_player_name(self) -> str:
        return f"{self.random.choice(FIRST_NAMES)} {self.random.choice(LAST_NAMES)}"


class ResultSimulator:
    """Simulates game results between two teams."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.random = _make_random(config.seed)

    def simulate_pairing_result(self, pairing: Pairing, teams: Dict[int, Team]) -> str:
        """Return the result literal, from team1's point of view."""
        team1 = teams[pairing.team1_id]
        team2 = teams[pairing.team2_id]
        white, black = (team1, team2) if pairing.color1 == WHITE else (team2, team1)

        if self.config.result_pattern == ResultPattern.RANDOM:
            white_score = self.random.choice([1.0, 0.5, 0.0])
        elif self.config.result_pattern == ResultPattern.PREDICTABLE:
            white_score = self._predictable_result(white, black)
        else:
            white_score = self._realistic_result(white, black)

        if white_score == 0.5:
            return RESULT_DRAW
        team1_won = (white_score == 1.0) == (pairing.color1 == WHITE)
        return RESULT_TEAM1_WIN if team1_won else RESULT_TEAM2_WIN

    def _realistic_result(self, white: Team, black: Team) -> float:
        if white.average_rating == black.average_rating:
            stronger_color = WHITE
        else:
            stronger_color = (
                WHITE if white.average_rating > black.average_rating else BLACK
            )

        rating_diff = abs(white.average_rating - black.average_rating)
        expected_value = math.erfc(rating_diff * (-7.0 / math.sqrt(2.0) / 2000.0)) / 2.0
        draw_probability = min(
            self.config.draw_percentage / 100.0, 2.0 - expected_value * 2.0
        )

        random_value = self.random.random()
        if random_value < draw_probability:
            return 0.5

        threshold = expected_value + draw_probability / 2.0
        white_wins = random_value < threshold
        if stronger_color == BLACK:
            white_wins = not white_wins
        return 1.0 if white_wins else 0.0

    def _predictable_result(self, white: Team, black: Team) -> float:
        rating_diff = white.average_rating - black.average_rating
        win_prob = max(0.05, min(0.95, 0.5 + rating_diff / 200))
        draw_prob = 0.05
        total_prob = win_prob + draw_prob
        win_prob /= total_prob
        draw_prob /= total_prob
        rand = self.random.random()
        if rand < win_prob:
            return 1.0
        if rand < win_prob + draw_prob:
            return 0.5
        return 0.0


class RandomTournamentGenerator:
    """Main tournament generator: roster creation, pairing and results."""

    def __init__(self, config: RTGConfig):
        self.config = config
        self.team_factory = TeamFactory(config)
        self.result_simulator = ResultSimulator(config)
        self.random = _make_random(config.seed)

    def generate_complete_tournament(self) -> Tournament:
        """Play every round of a tournament and return it.

        Round robin ignores ``num_rounds`` and plays its full schedule.
        """
        logger.info(
            "Generating tournament: %s teams, %s rounds, %s",
            self.config.num_teams,
            self.config.num_rounds,
            self.config.algorithm,
        )

        teams = self.team_factory.create_teams()
        by_id = {team.id: team for team in teams}
        tournament = Tournament(
            name=f"RTG {self.config.algorithm} #{self.config.seed}",
            teams=teams,
            rng=self.random,
        )

        view = tournament.start(self.config.algorithm, self.config.num_rounds)
        while True:
            for pairing in view.pending:
                result = self.result_simulator.simulate_pairing_result(pairing, by_id)
                tournament.enter_result(pairing.id, result)
            if view.round.is_last:
                break
            view = tournament.generate_next()

        logger.info("Tournament generation complete")
        return tournament

    def export_json_format(self, tournament: Tournament) -> str:
        export_data = tournament.to_dict()
        export_data["rtg_config"] = {
            "num_teams": self.config.num_teams,
            "num_rounds": self.config.num_rounds,
            "algorithm": self.config.algorithm,
            "rating_distribution": self.config.rating_distribution.value,
            "result_pattern": self.config.result_pattern.value,
            "seed": self.config.seed,
            "draw_percentage": self.config.draw_percentage,
        }
        return json.dumps(export_data, indent=2)


def create_small_tournament(
    num_teams: int = 8, seed: Optional[int] = None, algorithm: str = DEFAULT_ALGORITHM
) -> RandomTournamentGenerator:
    """Create small tournament for testing."""
    config = RTGConfig(
        num_teams=num_teams,
        num_rounds=max(3, min(num_teams - 1, 7)),
        algorithm=algorithm,
        seed=seed,
    )
    return RandomTournamentGenerator(config)


def create_round_robin_tournament(
    num_teams: int = 6, seed: Optional[int] = None
) -> RandomTournamentGenerator:
    """Create an all-play-all tournament."""
    config = RTGConfig(
        num_teams=num_teams,
        num_rounds=round_robin_total_rounds(num_teams),
        algorithm=ALGORITHM_ROUND_ROBIN,
        seed=seed,
    )
    return RandomTournamentGenerator(config)
