"""
Service layer interfaces (ABCs).

These abstract base classes define the contracts the transports depend on.
Services should inherit from their corresponding interface to ensure
consistent APIs, and tests can substitute fakes.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from domain.models.shuffle_result import PlayerSkill, ShuffleResult
    from domain.models.skill_snapshot import SkillSnapshot


class IShuffleService(ABC):
    """Interface for balanced shuffles and player skill lookups."""

    @abstractmethod
    def refresh(self) -> "SkillSnapshot":
        """Rebuild the skill model from the full round history."""
        ...

    @abstractmethod
    def shuffle(self, player_ids: Sequence[int], skills: Sequence[int]) -> "ShuffleResult":
        """Split the roster into two balanced teams."""
        ...

    @abstractmethod
    def get_player_skill(self, player_id: int, skill: int) -> "PlayerSkill":
        """Faction-adjusted skills for one player with the given base skill."""
        ...

    @property
    @abstractmethod
    def known_player_count(self) -> int:
        """Players in the most recent snapshot."""
        ...
