"""Interactive tournament director console."""

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

import shlex
from pathlib import Path
from typing import Dict, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from duopairing.constants import ALGORITHMS, ENTERABLE_RESULTS
from duopairing.exceptions import DuoPairingException
from duopairing.models.team import Team
from duopairing.tournament import Tournament
from duopairing.utils import setup_logger
from duopairing.utils.formatting import (
    format_round,
    format_standings,
    format_status,
    format_teams,
)
from duopairing.utils.validation import validate_rating

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


COMMANDS: Dict[str, Dict] = {
    "teams": {"description": "List registered teams", "options": {}},
    "add": {
        "description": "Register a team before the start",
        "options": {
            "<player1> <rating1> <player2> <rating2>": "Both players",
            "[name]": "Optional team name",
        },
    },
    "start": {
        "description": "Pair round 1",
        "options": {
            "<algorithm>": ", ".join(ALGORITHMS),
            "<rounds>": "Number of rounds (ignored for round_robin)",
        },
    },
    "round": {
        "description": "Show a round (the current one by default)",
        "options": {"[n]": "Round number"},
    },
    "result": {
        "description": "Enter one or more results, read from the first team's side",
        "options": {
            "<id>": "Pairing id, shown in brackets",
            "<result>": ", ".join(ENTERABLE_RESULTS),
            "[<id> <result> ...]": "More results, entered in order",
        },
    },
    "next": {"description": "Pair the next round", "options": {}},
    "standings": {"description": "Show standings", "options": {}},
    "status": {"description": "Show tournament status", "options": {}},
    "reset": {"description": "Delete all rounds, keep the teams", "options": {}},
    "save": {
        "description": "Save the tournament as JSON",
        "options": {"[file]": "Target file (defaults to the opened file)"},
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "quit": {"description": "Leave the console", "options": {}},
}


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for the console."""
    completions: Dict[str, Optional[Dict]] = {cmd: None for cmd in COMMANDS}
    completions["start"] = {algorithm: None for algorithm in ALGORITHMS}
    completions["help"] = {cmd: None for cmd in COMMANDS}
    completions["exit"] = None
    return NestedCompleter.from_nested_dict(completions)


class DirectorShell:
    """Line-oriented console driving a single tournament."""

    def __init__(self, tournament: Tournament, path: Optional[str] = None):
        self.tournament = tournament
        self.path = path

    def execute(self, line: str) -> bool:
        """Run one command line; returns False once the user asked to leave."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
            return True
        if not parts:
            return True

        command, args = parts[0].lstrip("/").lower(), parts[1:]
        if command in ("quit", "exit", "q"):
            return False

        handler = getattr(self, f"do_{command}", None)
        if handler is None:
            print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
            print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
            return True

        try:
            handler(args)
        except DuoPairingException as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return True

    # ========== Commands ==========

    def do_teams(self, args: List[str]) -> None:
        print(format_teams(self.tournament.teams))

    def do_add(self, args: List[str]) -> None:
        if len(args) < 4:
            print("Usage: add <player1> <rating1> <player2> <rating2> [name]")
            return
        ratings = [validate_rating(args[1]), validate_rating(args[3])]
        for rating in ratings:
            if not rating:
                print(f"{Colors.FAIL}Error: {rating.error_message}{Colors.ENDC}")
                return

        numeric_ids = [t.id for t in self.tournament.teams if isinstance(t.id, int)]
        team = Team(
            id=max(numeric_ids, default=0) + 1,
            player1=args[0],
            rating1=ratings[0].sanitized_value,
            player2=args[2],
            rating2=ratings[1].sanitized_value,
            name=" ".join(args[4:]),
        )
        self.tournament.add_team(team)
        print(f"{Colors.OKGREEN}Added team {team.id}: {team.display_name}{Colors.ENDC}")

    def do_start(self, args: List[str]) -> None:
        if not args:
            print("Usage: start <algorithm> <rounds>")
            return
        rounds = args[1] if len(args) > 1 else None
        view = self.tournament.start(args[0], rounds)
        print(format_round(view, self.tournament.teams))

    def do_round(self, args: List[str]) -> None:
        if args:
            try:
                number = int(args[0])
            except ValueError:
                print(f"{Colors.FAIL}Error: not a round number: {args[0]}{Colors.ENDC}")
                return
        else:
            current = self.tournament.current_round
            if current is None:
                print(format_status(self.tournament.status()))
                return
            number = current.round_number
        print(format_round(self.tournament.get_round(number), self.tournament.teams))

    def do_result(self, args: List[str]) -> None:
        if not args or len(args) % 2:
            print("Usage: result <id> <result> [<id> <result> ...]")
            return
        entries = []
        for raw_id, result in zip(args[::2], args[1::2]):
            try:
                entries.append((int(raw_id), result))
            except ValueError:
                print(
                    f"{Colors.FAIL}Error: not a pairing id: {raw_id}{Colors.ENDC}"
                )
                return
        for pairing in self.tournament.enter_results(entries):
            print(
                f"{Colors.OKGREEN}Round {pairing.round_number} board "
                f"{pairing.board_num}: {pairing.result}{Colors.ENDC}"
            )

    def do_next(self, args: List[str]) -> None:
        view = self.tournament.generate_next()
        print(format_round(view, self.tournament.teams))

    def do_standings(self, args: List[str]) -> None:
        print(format_standings(self.tournament.standings()))

    def do_status(self, args: List[str]) -> None:
        print(format_status(self.tournament.status()))

    def do_reset(self, args: List[str]) -> None:
        self.tournament.reset()
        print(f"{Colors.WARNING}All rounds deleted; teams kept{Colors.ENDC}")

    def do_save(self, args: List[str]) -> None:
        path = args[0] if args else self.path
        if not path:
            print("Usage: save <file>")
            return
        self.path = str(self.tournament.save(path))
        print(f"{Colors.OKGREEN}Tournament saved to: {self.path}{Colors.ENDC}")

    def do_help(self, args: List[str]) -> None:
        if args:
            print_command_help(args[0].lstrip("/"))
        else:
            print_commands_list()

    # ========== Loop ==========

    def run(self) -> int:
        style = Style.from_dict({"prompt": "#00aa00 bold"})
        session = PromptSession(
            completer=create_completer(),
            history=InMemoryHistory(),
            style=style,
        )

        print(f"{Colors.OKBLUE}{self.tournament.name}{Colors.ENDC}")
        print(format_status(self.tournament.status()))
        print(f"Type {Colors.BOLD}help{Colors.ENDC} to see all available commands")

        while True:
            try:
                line = session.prompt("duo-pairing> ").strip()
            except KeyboardInterrupt:
                print(f"\n{Colors.WARNING}Use 'quit' to leave{Colors.ENDC}")
                continue
            except EOFError:
                break
            if not self.execute(line):
                break

        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
        return 0


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:12}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")
    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:42}{Colors.ENDC} {description}")
    print()


def run_interactive_mode(path: Optional[str] = None) -> int:
    """Open the console on a saved tournament, or on a new one."""
    if path and Path(path).exists():
        tournament = Tournament.load(path)
    else:
        tournament = Tournament()
        if path:
            logger.info("%s does not exist yet; starting an empty tournament", path)
    return DirectorShell(tournament, path=path).run()
