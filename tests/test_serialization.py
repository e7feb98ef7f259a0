import json

import pytest

from duopairing.exceptions import FileLoadException
from duopairing.models import Pairing, RoundData, Team, TournamentConfig
from duopairing.tournament import Tournament


@pytest.fixture
def played(five_teams):
    tournament = Tournament(name="Spring Duo", teams=five_teams)
    view = tournament.start("swiss", 3)
    for pairing in view.pending:
        tournament.enter_result(pairing.id, "1-0")
    tournament.generate_next()
    return tournament


def test_snapshot_round_trip(played):
    restored = Tournament.from_dict(played.to_dict())

    assert restored.name == "Spring Duo"
    assert restored.teams == played.teams
    assert restored.rounds == played.rounds
    assert restored.pairings() == played.pairings()
    assert restored.standings() == played.standings()
    assert restored.status() == played.status()


def test_restored_tournament_continues(played):
    restored = Tournament.from_dict(played.to_dict())
    for pairing in restored.get_round(2).pending:
        restored.enter_result(pairing.id, "0-1")
    view = restored.generate_next()

    assert view.round.round_number == 3
    ids = [p.id for p in restored.pairings()]
    assert len(ids) == len(set(ids))


def test_save_and_load(played, tmp_path):
    path = tmp_path / "spring.json"
    played.save(path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["config"]["algorithm"] == "swiss"
    assert len(data["pairings"]) == 6

    loaded = Tournament.load(path)
    assert loaded.pairings() == played.pairings()


def test_load_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        Tournament.load(tmp_path / "nope.json")


def test_load_malformed_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(FileLoadException):
        Tournament.load(path)


def test_load_file_with_missing_fields(tmp_path):
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"rounds": [{"status": "open"}]}), encoding="utf-8")
    with pytest.raises(FileLoadException):
        Tournament.load(path)


def test_model_dicts():
    team = Team(id="t1", player1="A", player2="B", rating1=1500, rating2=1700)
    assert Team.from_dict(team.to_dict()) == team

    round_data = RoundData(round_number=2, total_rounds=5, status="done")
    assert RoundData.from_dict(round_data.to_dict()) == round_data

    config = TournamentConfig(name="X", algorithm="Round-Robin", total_rounds=None)
    assert config.validated().algorithm == "round_robin"

    pairing = Pairing(
        round_number=1,
        board_num=1,
        team1_id="t1",
        team2_id="t2",
        color1="W",
        result="1/2-1/2",
        id=3,
    )
    assert Pairing.from_dict(pairing.to_dict()) == pairing
