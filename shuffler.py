"""
Balanced team shuffling algorithm.
"""

import logging
from collections.abc import Iterator, Sequence

from config import SHUFFLER_SETTINGS
from domain.models.candidate_split import CandidateSplit, Selection
from domain.models.player import Player
from domain.services.split_enumerator import count_splits, iter_splits
from domain.services.split_selector import SplitSelector
from domain.services.team_balancing_service import TeamBalancingService

logger = logging.getLogger("ns2_shuffle.shuffler")


class BalancedShuffler:
    """
    Implements exhaustive balanced team shuffling.

    Every equal-size Marine/Alien split of the roster is scored on skill
    parity and repeat-team fairness, and one is selected by the
    cutoff-and-tie-break policy.
    """

    def __init__(
        self,
        score_cutoff: float | None = None,
        max_roster_size: int | None = None,
        balancing_service: TeamBalancingService | None = None,
    ):
        """
        Initialize the shuffler.

        Args:
            score_cutoff: Parity score below which repeat score decides (default 100)
            max_roster_size: Largest roster enumerated (default 20)
            balancing_service: Scorer for candidate splits
        """
        settings = SHUFFLER_SETTINGS
        self.score_cutoff = score_cutoff if score_cutoff is not None else settings["score_cutoff"]
        self.max_roster_size = (
            max_roster_size if max_roster_size is not None else settings["max_roster_size"]
        )
        self.balancing_service = balancing_service or TeamBalancingService()
        self.selector = SplitSelector(self.score_cutoff)

    def check_roster_size(self, roster_size: int) -> None:
        """Raise ValueError when the roster cannot be split into two equal teams within the size cap."""
        if roster_size < 2:
            raise ValueError(f"Need at least 2 players, got {roster_size}")
        if roster_size % 2:
            raise ValueError(f"Need an even number of players, got {roster_size}")
        if roster_size > self.max_roster_size:
            raise ValueError(
                f"Roster of {roster_size} exceeds the maximum of {self.max_roster_size} players"
            )

    def iter_candidates(self, players: Sequence[Player]) -> Iterator[CandidateSplit]:
        """Lazily score every split; team 1 plays Marine, team 2 plays Alien."""
        for team1_indices, team2_indices in iter_splits(len(players)):
            marines = [players[i] for i in team1_indices]
            aliens = [players[i] for i in team2_indices]
            yield self.balancing_service.score_split(marines, aliens)

    def shuffle(self, players: Sequence[Player]) -> Selection:
        """
        Shuffle players into two balanced teams.

        Args:
            players: Roster in request order, ratings already applied

        Returns:
            Selection whose winner lists players in roster order
        """
        self.check_roster_size(len(players))
        logger.info(f"Evaluating {count_splits(len(players))} splits for {len(players)} players")

        selection = self.selector.select(self.iter_candidates(players))
        if selection is None:
            raise ValueError("No candidate splits were generated")

        winner = selection.winner
        logger.info(
            f"SELECTED: score {winner.score:.2f} (mean diff {winner.diff_mean:.2f}, "
            f"std diff {winner.diff_std:.2f}), repeat score {winner.repeat_score:.2f}, "
            f"{selection.below_cutoff}/{selection.evaluated} under cutoff {self.score_cutoff:.0f}"
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"  Marines: {', '.join(str(p) for p in winner.marines)}")
            logger.debug(f"  Aliens: {', '.join(str(p) for p in winner.aliens)}")
        return selection
