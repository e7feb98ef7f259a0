"""Command line interface for Duo Pairing."""

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

import argparse
import logging
import sys
from typing import List, Optional

from duopairing.constants import ALGORITHMS, DEFAULT_ALGORITHM
from duopairing.exceptions import DuoPairingException
from duopairing.testing.rtg import (
    RandomTournamentGenerator,
    RatingDistribution,
    ResultPattern,
    RTGConfig,
)
from duopairing.tournament import Tournament
from duopairing.utils import set_log_level, setup_logger
from duopairing.utils.formatting import (
    format_pairings,
    format_round,
    format_standings,
    format_status,
)

logger = setup_logger(__name__)


def run_simulate_command(args: argparse.Namespace) -> int:
    """Play a whole random tournament and print every round."""
    config = RTGConfig(
        num_teams=args.teams,
        num_rounds=args.rounds,
        algorithm=args.algorithm,
        rating_distribution=RatingDistribution[args.distribution.upper()],
        result_pattern=ResultPattern[args.pattern.upper()],
        seed=args.seed,
        draw_percentage=args.draw_percentage,
    )
    rtg = RandomTournamentGenerator(config)
    tournament = rtg.generate_complete_tournament()

    for round_data in tournament.rounds:
        view = tournament.get_round(round_data.round_number)
        print(format_round(view, tournament.teams))
        print()

    print("Final standings")
    print(format_standings(tournament.standings()))

    if args.output:
        saved_to = tournament.save(args.output)
        print(f"\nTournament saved to: {saved_to}")
    return 0


def run_pair_command(args: argparse.Namespace) -> int:
    """Print the next round of a saved tournament without changing the file."""
    tournament = Tournament.load(args.file)
    latest = tournament.current_round
    next_round = latest.round_number + 1 if latest else 1
    print(f"Round {next_round} (preview)")
    for line in format_pairings(tournament.preview_next(), tournament.teams):
        print(line)
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    tournament = Tournament.load(args.file)
    print(format_status(tournament.status()))
    print(format_standings(tournament.standings()))
    return 0


def run_shell_command(args: argparse.Namespace) -> int:
    from duopairing.shell import run_interactive_mode

    return run_interactive_mode(args.file)


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="duo-pairing",
        description="Pairing and standings for two-player team chess tournaments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Simulate a seeded Swiss tournament
  duo-pairing simulate --teams 12 --rounds 5 --seed 42

  # Show the next round of a saved tournament
  duo-pairing pair --file tournament.json

  # Run the tournament director console
  duo-pairing shell --file tournament.json
        """,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    sim_parser = subparsers.add_parser("simulate", help="Simulate a random tournament")
    sim_parser.add_argument("--teams", type=int, default=8, help="Number of teams")
    sim_parser.add_argument(
        "--rounds",
        type=int,
        default=5,
        help="Number of rounds (ignored for round robin)",
    )
    sim_parser.add_argument(
        "--algorithm", choices=ALGORITHMS, default=DEFAULT_ALGORITHM
    )
    sim_parser.add_argument("--seed", type=int, help="Random seed")
    sim_parser.add_argument(
        "--draw-percentage", type=int, default=30, help="Draw rate in percent"
    )
    sim_parser.add_argument(
        "--distribution",
        choices=[d.value for d in RatingDistribution],
        default=RatingDistribution.NORMAL.value,
    )
    sim_parser.add_argument(
        "--pattern",
        choices=[p.value for p in ResultPattern],
        default=ResultPattern.REALISTIC.value,
    )
    sim_parser.add_argument("--output", help="Save the tournament as JSON")
    sim_parser.set_defaults(func=run_simulate_command)

    pair_parser = subparsers.add_parser("pair", help="Preview the next round")
    pair_parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    pair_parser.set_defaults(func=run_pair_command)

    stand_parser = subparsers.add_parser("standings", help="Print standings")
    stand_parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    stand_parser.set_defaults(func=run_standings_command)

    shell_parser = subparsers.add_parser("shell", help="Interactive director console")
    shell_parser.add_argument("--file", help="Tournament file (JSON) to open")
    shell_parser.set_defaults(func=run_shell_command)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for duo-pairing CLI.

    Returns:
        Exit code
    """
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level(logging.DEBUG)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except DuoPairingException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.error("Command failed: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
