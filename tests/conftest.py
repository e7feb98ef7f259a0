import pytest

from duopairing.models import Pairing, Team


def make_team(team_id, average, name=None):
    """Team whose two players both carry ``average``."""
    return Team(
        id=team_id,
        player1=f"P{team_id}a",
        player2=f"P{team_id}b",
        rating1=average,
        rating2=average,
        name=name or f"Team {team_id}",
    )


def game(round_number, board, team1, team2, color1="W", result=None, pairing_id=None):
    return Pairing(
        round_number=round_number,
        board_num=board,
        team1_id=team1,
        team2_id=team2,
        color1=color1,
        result=result,
        id=pairing_id,
    )


def bye(round_number, board, team_id, pairing_id=None):
    return Pairing(
        round_number=round_number,
        board_num=board,
        team1_id=team_id,
        result="bye",
        id=pairing_id,
    )


@pytest.fixture
def four_teams():
    return [
        make_team(1, 2000),
        make_team(2, 1900),
        make_team(3, 1850),
        make_team(4, 1800),
    ]


@pytest.fixture
def five_teams(four_teams):
    return four_teams + [make_team(5, 1700)]


@pytest.fixture
def six_teams():
    return [make_team(i, 2100 - 50 * i) for i in range(1, 7)]
