import json
import logging

import pytest

from duopairing.cli import main
from duopairing.shell import DirectorShell
from duopairing.tournament import Tournament
from duopairing.utils import set_log_level


@pytest.fixture
def saved(tmp_path, five_teams):
    tournament = Tournament(name="Club Night", teams=five_teams)
    view = tournament.start("swiss", 3)
    for pairing in view.pending:
        tournament.enter_result(pairing.id, "1-0")
    path = tmp_path / "club.json"
    tournament.save(path)
    return path


def test_simulate_prints_rounds_and_standings(capsys, tmp_path):
    output = tmp_path / "sim.json"
    code = main(
        [
            "simulate",
            "--teams",
            "6",
            "--rounds",
            "3",
            "--seed",
            "5",
            "--draw-percentage",
            "10",
            "--output",
            str(output),
        ]
    )
    out = capsys.readouterr().out

    assert code == 0
    assert "Round 3 of 3" in out
    assert "Final standings" in out
    assert len(json.loads(output.read_text(encoding="utf-8"))["rounds"]) == 3


def test_simulate_round_robin(capsys):
    assert main(["simulate", "--teams", "4", "--algorithm", "round_robin"]) == 0
    assert "Round 3 of 3" in capsys.readouterr().out


def test_pair_previews_without_writing(capsys, saved):
    before = saved.read_text(encoding="utf-8")
    assert main(["pair", "--file", str(saved)]) == 0

    out = capsys.readouterr().out
    assert "Round 2 (preview)" in out
    assert "gets the bye" in out
    assert saved.read_text(encoding="utf-8") == before


def test_standings_command(capsys, saved):
    assert main(["standings", "--file", str(saved)]) == 0
    out = capsys.readouterr().out
    assert "Round 1 of 3" in out
    assert "Team 1" in out


def test_errors_exit_with_status_one(capsys, tmp_path):
    assert main(["standings", "--file", str(tmp_path / "missing.json")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "duo-pairing" in capsys.readouterr().out


# ========== Director console ==========


def test_shell_session(capsys, tmp_path, four_teams):
    shell = DirectorShell(Tournament(teams=four_teams))

    assert shell.execute("start swiss 2")
    first = shell.tournament.get_round(1).pairings
    for pairing in first:
        assert shell.execute(f"result {pairing.id} 1/2-1/2")
    assert shell.execute("next")
    assert shell.tournament.current_round.round_number == 2
    assert shell.execute("standings")
    assert shell.execute(f"save {tmp_path / 'shell.json'}")
    assert (tmp_path / "shell.json").exists()
    assert not shell.execute("quit")

    out = capsys.readouterr().out
    assert "Round 2 of 2" in out


def test_shell_reports_errors_and_keeps_going(capsys, four_teams):
    shell = DirectorShell(Tournament(teams=four_teams))

    assert shell.execute("next")
    assert shell.execute("start swiss 2")
    assert shell.execute("result 1 2-0")
    assert shell.execute("bogus")
    assert shell.execute("round 7")

    out = capsys.readouterr().out
    assert "has not started" in out
    assert "Invalid result" in out
    assert "Unknown command: bogus" in out
    assert "Round 7 does not exist" in out


def test_shell_add_team_and_reset(capsys):
    shell = DirectorShell(Tournament())
    assert shell.execute('add Ann 1800 Bob 1600 "Rook Duo"')
    assert shell.execute("add Cy 1500 Di 1500")
    assert [t.id for t in shell.tournament.teams] == [1, 2]
    assert shell.tournament.teams[0].name == "Rook Duo"

    assert shell.execute("start random 1")
    assert shell.execute("reset")
    assert not shell.tournament.status().started
    assert shell.execute("help result")
    assert "Command: result" in capsys.readouterr().out


def test_shell_enters_several_results_at_once(capsys, four_teams):
    shell = DirectorShell(Tournament(teams=four_teams))
    assert shell.execute("start swiss 2")
    first, second = shell.tournament.get_round(1).pairings

    assert shell.execute(f"result {first.id} 1-0 {second.id} 0-1")
    assert [p.result for p in shell.tournament.get_round(1).pairings] == ["1-0", "0-1"]

    assert shell.execute(f"result {first.id}")
    assert "Usage: result" in capsys.readouterr().out


def test_save_adds_json_extension(capsys, tmp_path, four_teams):
    shell = DirectorShell(Tournament(teams=four_teams))
    assert shell.execute(f"save {tmp_path / 'club'}")

    assert (tmp_path / "club.json").exists()
    assert shell.path == str(tmp_path / "club.json")
    assert Tournament.load(tmp_path / "club.json").teams == four_teams


def test_verbose_leaves_other_loggers_alone():
    root = logging.getLogger()
    before = root.level
    package_logger = logging.getLogger("duopairing.tournament.round_manager")
    try:
        set_log_level(logging.DEBUG)
        assert root.level == before
        assert package_logger.level == logging.DEBUG
    finally:
        set_log_level(logging.INFO)
