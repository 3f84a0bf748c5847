"""
Shuffle orchestration: history refresh, roster validation and team selection.
"""

import logging
import threading
import time
from collections.abc import Sequence

from config import SHUFFLE_VERSION
from domain.models.shuffle_result import PlayerSkill, ShuffleResult
from domain.models.skill_snapshot import SkillSnapshot
from domain.services.skill_model_service import SkillModelService
from repositories.interfaces import IHistoryRepository
from services import error_codes
from services.interfaces import IShuffleService
from services.result import Result
from shuffler import BalancedShuffler

logger = logging.getLogger("ns2_shuffle.services.shuffle")


class ShuffleService(IShuffleService):
    """
    Handles skill model refreshes, shuffles and player lookups.

    Every request rebuilds its own SkillSnapshot from the history and passes
    it explicitly to the shuffler. The only shared state is a reference to
    the latest snapshot, swapped under a lock and used for reporting.
    """

    def __init__(
        self,
        history_repo: IHistoryRepository,
        skill_model: SkillModelService,
        shuffler: BalancedShuffler,
        *,
        since_round_id: int = 0,
    ):
        """
        Initialize ShuffleService with its dependencies.

        Args:
            history_repo: Source of round history
            skill_model: Builds snapshots from rounds
            shuffler: Enumerates, scores and selects splits
            since_round_id: Only rounds after this id are read
        """
        self.history_repo = history_repo
        self.skill_model = skill_model
        self.shuffler = shuffler
        self.since_round_id = since_round_id
        self._snapshot_lock = threading.Lock()
        self._latest_snapshot = SkillSnapshot()

    @property
    def known_player_count(self) -> int:
        with self._snapshot_lock:
            return len(self._latest_snapshot)

    def refresh(self) -> SkillSnapshot:
        """
        Full recompute of the skill model.

        Raises:
            HistoryUnavailableError: If the history cannot be read
        """
        rounds = self.history_repo.get_rounds(self.since_round_id)
        snapshot = self.skill_model.build_snapshot(rounds)
        with self._snapshot_lock:
            self._latest_snapshot = snapshot
        logger.debug(f"Skill model refreshed: {len(rounds)} rounds, {len(snapshot)} players")
        return snapshot

    def validate_roster(self, player_ids: Sequence[int], skills: Sequence[int]) -> Result[None]:
        """Check that a roster can be shuffled before touching the history."""
        if len(player_ids) <= 1:
            return Result.fail("Too few players to shuffle", code=error_codes.TOO_FEW_PLAYERS)
        if len(skills) != len(player_ids):
            return Result.fail(
                f"Expected one skill rating per player, got {len(skills)} for {len(player_ids)} players",
                code=error_codes.RATING_COUNT_MISMATCH,
            )
        if len(set(player_ids)) != len(player_ids):
            return Result.fail("Roster contains duplicate players", code=error_codes.DUPLICATE_PLAYER)
        if len(player_ids) % 2:
            return Result.fail(
                f"Roster must have an even number of players, got {len(player_ids)}",
                code=error_codes.ODD_ROSTER,
            )
        if len(player_ids) > self.shuffler.max_roster_size:
            return Result.fail(
                f"Roster of {len(player_ids)} exceeds the maximum of "
                f"{self.shuffler.max_roster_size} players",
                code=error_codes.ROSTER_TOO_LARGE,
            )
        return Result.ok()

    def shuffle(self, player_ids: Sequence[int], skills: Sequence[int]) -> ShuffleResult:
        """
        Split the roster into balanced Marine (team1) and Alien (team2) teams.

        Invalid rosters produce a failed ShuffleResult without any computation.

        Raises:
            HistoryUnavailableError: If the history cannot be read
        """
        start = time.perf_counter()
        logger.info(f"Requested {len(player_ids) // 2}v{len(player_ids) // 2} shuffle")

        validation = self.validate_roster(player_ids, skills)
        if not validation:
            logger.info(f"Rejected shuffle: {validation.error}")
            return ShuffleResult.failure(validation.error, code=validation.error_code)

        snapshot = self.refresh().with_ratings(player_ids, skills)
        roster = [snapshot[player_id] for player_id in player_ids]
        new_players = sum(1 for p in roster if p.is_new)
        if new_players:
            logger.info(f"{new_players} of {len(roster)} players have no round history")
        selection = self.shuffler.shuffle(roster)
        winner = selection.winner
        elapsed = time.perf_counter() - start

        return ShuffleResult(
            team1=winner.marine_ids,
            team2=winner.alien_ids,
            diagnostics={
                "Time elapsed": f"{elapsed * 1000:.3f}ms",
                "Score": f"{winner.score:.2f}",
                "RScore": f"{winner.repeat_score:.2f}",
                "Candidates": str(selection.evaluated),
                "Version": SHUFFLE_VERSION,
            },
            success=True,
            message=f"Shuffled {len(player_ids) // 2}v{len(player_ids) // 2}",
        )

    def get_player_skill(self, player_id: int, skill: int) -> PlayerSkill:
        """
        Faction-adjusted skills for one player, using the caller's base skill.

        Unknown players get their base skill on both factions.

        Raises:
            HistoryUnavailableError: If the history cannot be read
        """
        player = self.refresh().resolve(player_id, skill)
        logger.info(
            f"Requested player data for {player.name} ({player_id}): "
            f"Marine: {player.marine_skill} - Alien: {player.alien_skill}"
        )
        return PlayerSkill(
            player_id=player_id,
            name=player.name,
            marine_skill=player.marine_skill,
            alien_skill=player.alien_skill,
        )
