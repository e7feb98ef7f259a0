"""Standing rows, a projection of the roster over the pairing history."""

from dataclasses import dataclass

from duopairing.models.team import Team


@dataclass(frozen=True)
class Standing:
    """One line of the standings table. Never stored."""

    rank: int
    team: Team
    score: float
    games_played: int = 0

    @property
    def team_id(self):
        return self.team.id
