"""Pairing records: what a strategy emits and what the store keeps."""

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

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

from dateutil import parser as date_parser

from duopairing.constants import RESULT_BYE
from duopairing.type_hints import WHITE, Colour, MaybeTeamId, TeamId, opposite


@dataclass(frozen=True)
class NewPairing:
    """A single board decided by a pairing strategy.

    Attributes
    ----------
    board_num : int
        Board number (1-based).
    team1_id : hashable
        The team listed first; always present.
    team2_id : hashable or None
        The opponent, or None for a bye.
    color1 : str or None
        Color held by team1 ("W" or "B"), None for a bye.
    """

    board_num: int
    team1_id: TeamId
    team2_id: MaybeTeamId = None
    color1: Optional[Colour] = None

    @property
    def is_bye(self) -> bool:
        return self.team2_id is None


@dataclass(frozen=True)
class Pairing:
    """A stored pairing of one round.

    Results are always read from team1's point of view: "1-0" means team1
    won, whichever color it held.

    Attributes
    ----------
    id : int or None
        Identifier assigned by the store.
    round_number : int
        Round the pairing belongs to.
    board_num : int
        Board number (1-based, dense within the round).
    team1_id : hashable
        First team; always present.
    team2_id : hashable or None
        Second team, None for a bye.
    color1 : str or None
        Color of team1, None only for byes.
    result : str or None
        "1-0", "0-1", "1/2-1/2", "bye", or None while pending.
    created_at : datetime or None
        Creation time, set by the store.
    """

    round_number: int
    board_num: int
    team1_id: TeamId
    team2_id: MaybeTeamId = None
    color1: Optional[Colour] = None
    result: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_bye(self) -> bool:
        """A pairing without an opponent."""
        return self.team2_id is None

    @property
    def is_pending(self) -> bool:
        """A two-sided pairing still waiting for its result."""
        return not self.is_bye and self.result is None

    def involves(self, team_id: TeamId) -> bool:
        return team_id == self.team1_id or (
            self.team2_id is not None and team_id == self.team2_id
        )

    def colour_of(self, team_id: TeamId) -> Optional[Colour]:
        """Color held by the given team in this pairing, None for byes."""
        if self.is_bye or self.color1 is None:
            return None
        if team_id == self.team1_id:
            return self.color1
        if team_id == self.team2_id:
            return opposite(self.color1)
        return None

    @property
    def white_id(self) -> MaybeTeamId:
        if self.is_bye:
            return None
        return self.team1_id if self.color1 == WHITE else self.team2_id

    @property
    def black_id(self) -> MaybeTeamId:
        if self.is_bye:
            return None
        return self.team2_id if self.color1 == WHITE else self.team1_id

    def with_result(self, result: Optional[str]) -> "Pairing":
        """Return a copy carrying the given result."""
        return replace(self, result=result)

    @classmethod
    def from_new(
        cls,
        new_pairing: NewPairing,
        round_number: int,
        pairing_id: Optional[int] = None,
        created_at: Optional[datetime] = None,
    ) -> "Pairing":
        """Build a stored pairing from a strategy's output.

        A bye is stored already resolved, with result "bye".
        """
        return cls(
            round_number=round_number,
            board_num=new_pairing.board_num,
            team1_id=new_pairing.team1_id,
            team2_id=new_pairing.team2_id,
            color1=new_pairing.color1,
            result=RESULT_BYE if new_pairing.is_bye else None,
            id=pairing_id,
            created_at=created_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize pairing to dictionary."""
        return {
            "id": self.id,
            "round_number": self.round_number,
            "board_num": self.board_num,
            "team1_id": self.team1_id,
            "team2_id": self.team2_id,
            "color1": self.color1,
            "result": self.result,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pairing":
        """Deserialize pairing from dictionary."""
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = date_parser.isoparse(created_at)
        return cls(
            round_number=int(data["round_number"]),
            board_num=int(data["board_num"]),
            team1_id=data["team1_id"],
            team2_id=data.get("team2_id"),
            color1=data.get("color1"),
            result=data.get("result"),
            id=data.get("id"),
            created_at=created_at,
        )
