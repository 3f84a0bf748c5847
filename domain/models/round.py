"""
Round domain model.
"""

from dataclasses import dataclass

from domain.models.faction import Faction


@dataclass(frozen=True)
class Round:
    """
    One player's participation in one historical round.

    Rounds are read-only history; the skill model consumes them in
    oldest-to-newest order.
    """

    round_id: int
    player_id: int
    skill: int  # Hive skill recorded for the player
    player_name: str
    faction: Faction
    win: int  # 1 if the player's faction won, else 0

    @property
    def won(self) -> bool:
        return self.win == 1
