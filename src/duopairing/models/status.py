"""Tournament status as shown on the public pairings page."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TournamentStatus:
    """Snapshot of where the tournament stands.

    Attributes:
        started: Whether round 1 exists
        current_round: Number of the latest round, None before the start
        total_rounds: Ceiling fixed at the start, None before the start
        algorithm: Pairing algorithm, None before the start
        completed: Last round generated and every game in it resolved
    """

    started: bool
    current_round: Optional[int] = None
    total_rounds: Optional[int] = None
    algorithm: Optional[str] = None
    completed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "started": self.started,
            "current_round": self.current_round,
            "total_rounds": self.total_rounds,
            "algorithm": self.algorithm,
            "completed": self.completed,
        }
