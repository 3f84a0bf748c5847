"""
Faction enum shared by rounds, players and team splits.
"""

from enum import IntEnum


class Faction(IntEnum):
    """The two playable sides. Values match the team numbers in round stats."""

    MARINE = 1
    ALIEN = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()
