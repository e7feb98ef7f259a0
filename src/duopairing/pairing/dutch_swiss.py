"""Dutch Swiss Pairing System Implementation.

A lightweight, greedy take on the Dutch system: teams are ranked by score
and seed rating, and each team is paired with the nearest team below it that
it has not met yet. This is not a globally optimal matching; when the greedy
walk runs out of fresh opponents it falls back to a rematch, and a team left
without any partner gets an emergency bye. A round is always produced.
"""

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

from typing import Dict, List, Optional, Set

from duopairing.constants import ALGORITHM_SWISS
from duopairing.history import bye_recipients, opponent_index
from duopairing.models.pairing import NewPairing, Pairing
from duopairing.models.team import Team
from duopairing.pairing.base import BoardSheet, PairingStrategy
from duopairing.pairing.colors import assign_colour
from duopairing.scoring import rank_teams, score_groups
from duopairing.type_hints import RankedTeam, TeamId
from duopairing.utils import setup_logger

logger = setup_logger(__name__)


def select_bye_team(
    ranked: List[RankedTeam], prior_pairings: List[Pairing]
) -> Team:
    """Pick the bye for an odd roster.

    Scans the standings from the bottom up and returns the lowest-ranked team
    that has not had a bye yet. When every team already had one, the bottom
    team gets a second bye.
    """
    already_had_bye = bye_recipients(prior_pairings)
    for team, team_score in reversed(ranked):
        if team.id not in already_had_bye:
            logger.debug("Bye goes to %s (score %s)", team.display_name, team_score)
            return team

    bottom, bottom_score = ranked[-1]
    logger.warning(
        "Every team has already had a bye; assigning second bye to %s (score %s)",
        bottom.display_name,
        bottom_score,
    )
    return bottom


def _find_partner(
    index: int,
    ranked: List[RankedTeam],
    paired: Set[TeamId],
    opponents: Dict[TeamId, Set[TeamId]],
) -> Optional[int]:
    """Index of the nearest unpaired team below ``index`` it has not played.

    Falls back to the nearest unpaired team regardless of history (a forced
    rematch). Returns None when nobody below is left.
    """
    team = ranked[index][0]
    fallback = None
    for j in range(index + 1, len(ranked)):
        candidate = ranked[j][0]
        if candidate.id in paired:
            continue
        if fallback is None:
            fallback = j
        if candidate.id not in opponents[team.id]:
            return j

    if fallback is not None:
        logger.warning(
            "No fresh opponent left for %s; forcing a rematch with %s",
            team.display_name,
            ranked[fallback][0].display_name,
        )
    return fallback


def create_dutch_swiss_pairings(
    roster: List[Team], prior_pairings: List[Pairing], round_number: int
) -> List[NewPairing]:
    """Create pairings for a Swiss-system round.

    - roster: teams taking part, already validated
    - prior_pairings: every pairing of earlier rounds, oldest first
    - round_number: the 1-based round being paired (for logging only)
    Returns: new pairings in board order, a scheduled bye last.
    """
    ranked = rank_teams(roster, prior_pairings)
    scores = {team.id: team_score for team, team_score in ranked}
    opponents = opponent_index(scores, prior_pairings)
    logger.debug(
        "Round %s score groups: %s",
        round_number,
        " | ".join(
            ",".join(str(team.id) for team in group) for group in score_groups(ranked)
        ),
    )

    paired: Set[TeamId] = set()
    sheet = BoardSheet()

    bye_team = None
    if len(ranked) % 2 == 1:
        bye_team = select_bye_team(ranked, prior_pairings)
        paired.add(bye_team.id)

    for i, (team, team_score) in enumerate(ranked):
        if team.id in paired:
            continue

        j = _find_partner(i, ranked, paired, opponents)
        if j is None:
            # Cannot happen with an even pool; keep producing a round anyway
            logger.warning(
                "Round %s: %s cannot be paired, giving an emergency bye",
                round_number,
                team.display_name,
            )
            sheet.add_bye(team.id)
            paired.add(team.id)
            continue

        partner, partner_score = ranked[j]
        if partner_score != team_score:
            logger.debug(
                "Float: %s (%s) paired down to %s (%s)",
                team.display_name,
                team_score,
                partner.display_name,
                partner_score,
            )

        colour = assign_colour(team.id, partner.id, prior_pairings)
        sheet.add_game(team.id, partner.id, colour)
        paired.add(team.id)
        paired.add(partner.id)

    pairings = sheet.finish(bye_team.id if bye_team is not None else None)
    logger.info(
        "Swiss round %s: %s games, bye: %s",
        round_number,
        sum(1 for p in pairings if not p.is_bye),
        bye_team.display_name if bye_team else "None",
    )
    return pairings


class DutchSwissStrategy(PairingStrategy):
    """Score-ordered greedy pairing with rematch avoidance."""

    name = ALGORITHM_SWISS

    def _pair(
        self,
        roster: List[Team],
        prior_pairings: List[Pairing],
        round_number: int,
    ) -> List[NewPairing]:
        return create_dutch_swiss_pairings(roster, prior_pairings, round_number)
