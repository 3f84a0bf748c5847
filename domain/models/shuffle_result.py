"""
Outcome models returned to transports.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ShuffleResult:
    """
    Result of one shuffle request.

    team1 plays Marine and team2 plays Alien. Both lists keep the order in
    which the players appeared in the requested roster.
    """

    team1: list[int] = field(default_factory=list)
    team2: list[int] = field(default_factory=list)
    diagnostics: dict[str, str] = field(default_factory=dict)
    success: bool = True
    message: str = ""
    error_code: str | None = None

    @classmethod
    def failure(cls, message: str, code: str | None = None) -> "ShuffleResult":
        return cls(success=False, message=message, error_code=code)

    def to_dict(self) -> dict[str, Any]:
        return {
            "team1": list(self.team1),
            "team2": list(self.team2),
            "diagnostics": dict(self.diagnostics),
            "success": self.success,
            "message": self.message,
        }


@dataclass(frozen=True)
class PlayerSkill:
    """Faction-adjusted skills for a single player lookup."""

    player_id: int
    name: str
    marine_skill: int
    alien_skill: int

    def to_dict(self) -> dict[str, int]:
        return {
            "ns2id": self.player_id,
            "marine_skill": self.marine_skill,
            "alien_skill": self.alien_skill,
        }
