from datetime import datetime, timezone

import pytest

from duopairing.exceptions import InvalidPairingException
from duopairing.utils.api_adapters import (
    pairing_from_row,
    pairings_from_rows,
    team_from_row,
)


def test_team_from_row():
    team = team_from_row(
        {
            "id": 7,
            "team_name": " Pasay Rooks ",
            "player1": "Carlos Reyes",
            "player2": "Maria Santos",
            "rating1": 2105,
            "rating2": "1980",
            "mobile": "09000000000",
        }
    )
    assert team.id == 7
    assert team.name == "Pasay Rooks"
    assert team.rating2 == 1980
    assert team.average_rating == 2042.5


def test_team_row_with_missing_or_bad_ratings():
    team = team_from_row(
        {"id": 1, "team_name": "", "player1": "A", "player2": "B", "rating2": "n/a"}
    )
    assert team.rating1 == 0
    assert team.rating2 == 0
    assert team.display_name == "A / B"


def test_team_row_needs_id():
    with pytest.raises(InvalidPairingException):
        team_from_row({"team_name": "X", "player1": "A", "player2": "B"})


def test_pairing_from_row():
    pairing = pairing_from_row(
        {
            "id": 12,
            "round": 3,
            "board_num": 2,
            "team1_id": 4,
            "team2_id": 9,
            "color1": "B",
            "result": "0-1",
            "created_at": "2025-03-01 10:15:00",
        }
    )
    assert pairing.round_number == 3
    assert pairing.black_id == 4
    assert pairing.white_id == 9
    assert pairing.result == "0-1"
    assert pairing.created_at == datetime(2025, 3, 1, 10, 15)


def test_bye_row():
    pairing = pairing_from_row(
        {
            "id": 13,
            "round": 3,
            "board_num": 5,
            "team1_id": 6,
            "team2_id": None,
            "color1": None,
            "result": "bye",
            "created_at": datetime(2025, 3, 1, tzinfo=timezone.utc),
        }
    )
    assert pairing.is_bye
    assert not pairing.is_pending
    assert pairing.created_at.tzinfo is not None


def test_pending_row_without_timestamp():
    [pairing] = pairings_from_rows(
        [
            {
                "id": 1,
                "round": 1,
                "board_num": 1,
                "team1_id": 1,
                "team2_id": 2,
                "color1": "w",
                "result": None,
                "created_at": None,
            }
        ]
    )
    assert pairing.color1 == "W"
    assert pairing.is_pending
    assert pairing.created_at is None


@pytest.mark.parametrize(
    "field, value", [("color1", "red"), ("result", "2-0")]
)
def test_invalid_pairing_row(field, value):
    row = {
        "id": 1,
        "round": 1,
        "board_num": 1,
        "team1_id": 1,
        "team2_id": 2,
        "color1": "W",
        "result": None,
    }
    row[field] = value
    with pytest.raises(InvalidPairingException):
        pairing_from_row(row)
