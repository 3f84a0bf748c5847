"""
Team balancing domain service.

Handles skill statistics and balance scoring of a candidate split.
"""

import math
from collections.abc import Sequence

from domain.models.candidate_split import CandidateSplit
from domain.models.faction import Faction
from domain.models.player import Player


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if not values:
        return 0.0
    return sum(values) / len(values)


def population_stdev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by n, not n - 1); 0.0 for an empty sequence."""
    if not values:
        return 0.0
    avg = mean(values)
    return math.sqrt(sum((v - avg) ** 2 for v in values) / len(values))


class TeamBalancingService:
    """
    Pure domain service for team balancing logic.

    Responsibilities:
    - Compute each side's faction-adjusted skill statistics
    - Score skill parity between the two sides
    - Sum the repeat-team fairness score
    """

    def team_skills(self, players: Sequence[Player], faction: Faction) -> list[float]:
        """Faction-adjusted skills of one side, as floats."""
        return [float(p.adjusted_skill(faction)) for p in players]

    def calculate_parity(
        self, marine_skills: Sequence[float], alien_skills: Sequence[float]
    ) -> tuple[float, float, float]:
        """
        Parity score between two sides (lower = more balanced).

        Returns:
            Tuple of (score, mean difference, standard deviation difference)
            where score = sqrt(diff_mean^2 + diff_std^2)
        """
        diff_mean = abs(mean(marine_skills) - mean(alien_skills))
        diff_std = abs(population_stdev(marine_skills) - population_stdev(alien_skills))
        return math.hypot(diff_mean, diff_std), diff_mean, diff_std

    def calculate_repeat_score(self, marines: Sequence[Player], aliens: Sequence[Player]) -> float:
        """Sum of each player's repeat score on the faction this split assigns them."""
        marine_repeat = sum(p.marine.repeat_score for p in marines)
        alien_repeat = sum(p.alien.repeat_score for p in aliens)
        return marine_repeat + alien_repeat

    def score_split(self, marines: Sequence[Player], aliens: Sequence[Player]) -> CandidateSplit:
        """
        Score one candidate split.

        Args:
            marines: Players assigned to the Marine side
            aliens: Players assigned to the Alien side

        Returns:
            CandidateSplit carrying the parity score, its components and the repeat score
        """
        score, diff_mean, diff_std = self.calculate_parity(
            self.team_skills(marines, Faction.MARINE),
            self.team_skills(aliens, Faction.ALIEN),
        )
        return CandidateSplit(
            marines=tuple(marines),
            aliens=tuple(aliens),
            diff_mean=diff_mean,
            diff_std=diff_std,
            score=score,
            repeat_score=self.calculate_repeat_score(marines, aliens),
        )
