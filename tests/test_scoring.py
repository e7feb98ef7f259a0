import pytest

from conftest import bye, game, make_team
from duopairing.scoring import (
    games_played,
    points_for,
    rank_teams,
    score,
    score_groups,
    standings,
)


@pytest.mark.parametrize(
    "result, team1_points, team2_points",
    [
        ("1-0", 1.0, 0.0),
        ("0-1", 0.0, 1.0),
        ("1/2-1/2", 0.5, 0.5),
        (None, 0.0, 0.0),
    ],
)
def test_points_are_read_from_team1_side(result, team1_points, team2_points):
    # team1 holds black here: the result still refers to team1
    pairing = game(1, 1, "a", "b", color1="B", result=result)
    assert points_for("a", pairing) == team1_points
    assert points_for("b", pairing) == team2_points


def test_bye_scores_a_full_point():
    assert points_for("a", bye(1, 3, "a")) == 1.0


def test_uninvolved_team_scores_nothing():
    assert points_for("c", game(1, 1, "a", "b", result="1-0")) == 0.0


def test_score_accumulates_over_rounds():
    history = [
        game(1, 1, 1, 2, result="1-0"),
        game(2, 1, 3, 1, result="1/2-1/2"),
        bye(3, 2, 1),
        game(4, 1, 1, 4, result="0-1"),
    ]
    assert score(1, history) == 2.5
    assert score(2, history) == 0.0
    assert score(3, history) == 0.5
    assert score(4, history) == 1.0


def test_score_never_exceeds_games_played():
    history = [
        game(1, 1, 1, 2, result="1-0"),
        game(2, 1, 1, 3),
        bye(3, 2, 1),
    ]
    assert games_played(1, history) == 2
    assert 0 <= score(1, history) <= games_played(1, history)


def test_rank_teams_sorts_by_score_then_rating(four_teams):
    history = [
        game(1, 1, 1, 2, result="0-1"),
        game(1, 2, 3, 4, result="1/2-1/2"),
    ]
    ranked = rank_teams(four_teams, history)
    assert [team.id for team, _ in ranked] == [2, 3, 4, 1]
    assert [points for _, points in ranked] == [1.0, 0.5, 0.5, 0.0]


def test_rank_teams_keeps_roster_order_on_full_tie():
    roster = [make_team("x", 1500), make_team("y", 1500), make_team("z", 1500)]
    assert [team.id for team, _ in rank_teams(roster, [])] == ["x", "y", "z"]


def test_score_groups(four_teams):
    history = [
        game(1, 1, 1, 2, result="1-0"),
        game(1, 2, 3, 4, result="1-0"),
    ]
    groups = score_groups(rank_teams(four_teams, history))
    assert [[team.id for team in group] for group in groups] == [[1, 3], [2, 4]]


def test_standings_ranks_are_one_based(five_teams):
    history = [
        game(1, 1, 1, 2, result="0-1"),
        game(1, 2, 3, 4, result="1-0"),
        bye(1, 3, 5),
    ]
    table = standings(five_teams, history)
    assert [row.rank for row in table] == [1, 2, 3, 4, 5]
    assert [row.team_id for row in table] == [2, 3, 5, 1, 4]
    assert table[2].games_played == 1


def test_standings_is_idempotent(five_teams):
    history = [game(1, 1, 1, 2, result="1/2-1/2"), bye(1, 3, 5)]
    assert standings(five_teams, history) == standings(five_teams, history)
