"""
Player domain model.
"""

import math
from dataclasses import dataclass, replace

from domain.models.faction import Faction

NEW_PLAYER_NAME = "<New player>"


@dataclass(frozen=True)
class FactionStats:
    """Recent-performance aggregate for one player on one faction."""

    rounds: int = 0  # Rounds inside the recency window
    win_rate: float = 0.0
    weight: float = 0.0  # Confidence weight in [0, 1]
    multiplier: float = 1.0
    repeat_score: float = 0.0


@dataclass(frozen=True)
class Player:
    """
    Represents a player as seen by the skill model.

    This is a pure domain model with no infrastructure dependencies.
    Instances are immutable; rating overrides produce a new Player.
    """

    player_id: int
    name: str
    skill: int  # Base hive skill
    marine: FactionStats = FactionStats()
    alien: FactionStats = FactionStats()

    @classmethod
    def new(cls, player_id: int, skill: int) -> "Player":
        """Synthesize a player with no history (multiplier 1.0, weight 0 on both factions)."""
        return cls(player_id=player_id, name=NEW_PLAYER_NAME, skill=skill)

    @property
    def is_new(self) -> bool:
        """True when no round on either faction is on record."""
        return self.marine.rounds == 0 and self.alien.rounds == 0

    def stats(self, faction: Faction) -> FactionStats:
        return self.marine if faction == Faction.MARINE else self.alien

    def adjusted_skill(self, faction: Faction) -> int:
        """Faction-adjusted skill: floor(base skill * faction multiplier)."""
        return math.floor(self.skill * self.stats(faction).multiplier)

    @property
    def marine_skill(self) -> int:
        return self.adjusted_skill(Faction.MARINE)

    @property
    def alien_skill(self) -> int:
        return self.adjusted_skill(Faction.ALIEN)

    def with_rating(self, skill: int) -> "Player":
        """Return a copy using a caller-supplied base skill."""
        return replace(self, skill=skill)

    def __str__(self) -> str:
        return f"{self.name} ({self.player_id}, skill: {self.skill})"
