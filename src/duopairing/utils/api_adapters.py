"""Adapters converting rows of the registration and pairing tables to models."""

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

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from dateutil import parser as date_parser

from duopairing.constants import ALL_RESULTS
from duopairing.exceptions import InvalidPairingException
from duopairing.models.pairing import Pairing
from duopairing.models.team import Team
from duopairing.type_hints import BLACK, WHITE
from duopairing.utils import setup_logger
from duopairing.utils.validation import validate_rating

logger = setup_logger(__name__)


def _rating(row: Dict[str, Any], key: str) -> float:
    validation = validate_rating(row.get(key))
    if not validation:
        logger.warning("Team %r: %s, using 0", row.get("id"), validation.error_message)
        return 0
    return validation.sanitized_value


def _timestamp(value: Any) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    try:
        return date_parser.parse(str(value))
    except (ValueError, OverflowError):
        logger.debug("Could not parse timestamp: %s", value)
        return None


def team_from_row(row: Dict[str, Any]) -> Team:
    """Convert a registration row to a Team.

    Args:
        row: Mapping with ``id``, ``team_name``, ``player1``, ``player2``,
            ``rating1`` and ``rating2``; missing ratings count as 0

    Example:
        >>> team_from_row({"id": 7, "team_name": "Knights", "player1": "Ann",
        ...                "player2": "Bob", "rating1": 1800, "rating2": "1600"})
        Team(id=7, player1='Ann', player2='Bob', rating1=1800, rating2=1600, name='Knights')
    """
    if row.get("id") is None:
        raise InvalidPairingException("Team row without an id")

    return Team(
        id=row["id"],
        player1=(row.get("player1") or "").strip(),
        player2=(row.get("player2") or "").strip(),
        rating1=_rating(row, "rating1"),
        rating2=_rating(row, "rating2"),
        name=(row.get("team_name") or "").strip(),
    )


def pairing_from_row(row: Dict[str, Any]) -> Pairing:
    """Convert a pairing row to a Pairing.

    The round column is called ``round`` in the table; ``created_at`` may be
    a datetime or any string dateutil understands.
    """
    color1 = row.get("color1")
    if color1 is not None:
        color1 = str(color1).strip().upper()[:1]
        if color1 not in (WHITE, BLACK):
            raise InvalidPairingException(
                f"Pairing {row.get('id')!r}: invalid color {row.get('color1')!r}"
            )

    result = row.get("result")
    if result is not None and result not in ALL_RESULTS:
        raise InvalidPairingException(
            f"Pairing {row.get('id')!r}: invalid result {result!r}"
        )

    team2_id = row.get("team2_id")
    return Pairing(
        id=row.get("id"),
        round_number=int(row["round"]),
        board_num=int(row["board_num"]),
        team1_id=row["team1_id"],
        team2_id=team2_id,
        color1=color1 if team2_id is not None else None,
        result=result,
        created_at=_timestamp(row.get("created_at")),
    )


def teams_from_rows(rows: Iterable[Dict[str, Any]]) -> List[Team]:
    return [team_from_row(row) for row in rows]


def pairings_from_rows(rows: Iterable[Dict[str, Any]]) -> List[Pairing]:
    return [pairing_from_row(row) for row in rows]


__all__ = [
    "team_from_row",
    "pairing_from_row",
    "teams_from_rows",
    "pairings_from_rows",
]
