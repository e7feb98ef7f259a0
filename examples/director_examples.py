"""Example script demonstrating the Duo Pairing tournament flow.

This script shows how to run a tournament programmatically, starting from the
rows of a registration table, and how to drive the same flow from the
command-line interface.
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

import random
import sys
import tempfile
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from duopairing.exceptions import PendingResultsException
from duopairing.tournament import Tournament
from duopairing.utils.api_adapters import teams_from_rows
from duopairing.utils.formatting import format_round, format_standings

REGISTRATIONS = [
    {"id": 1, "team_name": "Pasay Rooks", "player1": "Carlos Reyes",
     "rating1": 2105, "player2": "Maria Santos", "rating2": 1980},
    {"id": 2, "team_name": "Libertad Knights", "player1": "Jose dela Cruz",
     "rating1": 2050, "player2": "Anna Villanueva", "rating2": 1870},
    {"id": 3, "team_name": "Baclaran Bishops", "player1": "Ramon Garcia",
     "rating1": 1990, "player2": "Liza Flores", "rating2": 1820},
    {"id": 4, "team_name": "Harrison Queens", "player1": "Miguel Torres",
     "rating1": 1960, "player2": "Grace Mendoza", "rating2": 1750},
    {"id": 5, "team_name": "Taft Pawns", "player1": "Eduardo Cruz",
     "rating1": 1920, "player2": "Cynthia Lopez", "rating2": 1700},
]  # fmt: skip


def example_swiss_event():
    """Example: A three-round Swiss event from registration rows."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Swiss event")
    print("=" * 70 + "\n")

    rng = random.Random(2025)
    tournament = Tournament(name="Duo Open", teams=teams_from_rows(REGISTRATIONS))
    view = tournament.start("swiss", 3)

    try:
        tournament.generate_next()
    except PendingResultsException as e:
        print(f"As expected, round 2 waits for results: {e}\n")

    while True:
        print(format_round(view, tournament.teams))
        print()

        for pairing in view.pending:
            tournament.enter_result(pairing.id, rng.choice(["1-0", "0-1", "1/2-1/2"]))

        if view.round.is_last:
            break
        view = tournament.generate_next()

    print("Final standings")
    print(format_standings(tournament.standings()))

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "duo_open.json"
        tournament.save(path)
        restored = Tournament.load(path)
        print(f"\nReloaded from {path.name}: {restored.status().to_dict()}")


def example_cli_usage():
    """Example: The same flow from the command line."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Command-line usage")
    print("=" * 70 + "\n")

    print("  # Simulate a seeded round robin")
    print("  duo-pairing simulate --teams 6 --algorithm round_robin --seed 7\n")
    print("  # Preview the next round of a saved event")
    print("  duo-pairing pair --file duo_open.json\n")
    print("  # Run the event from the director console")
    print("  duo-pairing shell --file duo_open.json\n")


if __name__ == "__main__":
    example_swiss_event()
    example_cli_usage()
