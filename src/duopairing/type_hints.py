"""Type hints used in Duo Pairing."""

from typing import Hashable, Literal, Optional, Tuple

# Chess color string constants (for runtime use)
WHITE = "W"
BLACK = "B"

# Basically, white or black
Colour = Literal["W", "B"]

# Team ids are opaque: whatever the registration layer hands us (int or str)
TeamId = Hashable
MaybeTeamId = Optional[Hashable]

# A team paired with its running score
RankedTeam = Tuple["Team", float]


def opposite(colour: Colour) -> Colour:
    """Return the other color."""
    return BLACK if colour == WHITE else WHITE

#  LocalWords:  RankedTeam
