"""
Abstract repository interfaces for data access.

These interfaces define the contracts implemented by concrete repositories.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from domain.models.round import Round


class IHistoryRepository(ABC):
    @abstractmethod
    def get_rounds(self, since_round_id: int = 0) -> list[Round]:
        """Rounds with id greater than since_round_id, oldest first."""

    @abstractmethod
    def upsert_player(self, player_id: int, name: str, skill: int) -> None: ...

    @abstractmethod
    def record_round(
        self,
        round_id: int,
        winning_team: int,
        participants: Sequence[tuple[int, str, int]],
        map_name: str | None = None,
    ) -> None:
        """Store a round; participants are (player id, player name, team)."""
