"""
Immutable per-request view of every known player's adjusted skill.
"""

from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType

from domain.models.player import Player


class SkillSnapshot(Mapping):
    """
    Read-only mapping of player id -> Player built by one skill model refresh.

    A snapshot is never mutated after construction. Each request derives its
    own copy with the caller's ratings applied via with_ratings(), so
    concurrent requests never observe each other's overrides.
    """

    def __init__(self, players: Mapping[int, Player] | None = None):
        self._players = MappingProxyType(dict(players or {}))

    def __getitem__(self, player_id: int) -> Player:
        return self._players[player_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __repr__(self) -> str:
        return f"SkillSnapshot({len(self)} players)"

    def resolve(self, player_id: int, skill: int) -> Player:
        """
        Look up a player with the caller's rating applied.

        Known players keep their faction multipliers; unknown ids are
        synthesized with no history.
        """
        player = self._players.get(player_id)
        if player is None:
            return Player.new(player_id, skill)
        return player.with_rating(skill)

    def with_ratings(self, player_ids: Sequence[int], skills: Sequence[int]) -> "SkillSnapshot":
        """Return a new snapshot where every requested player is present with the given rating."""
        if len(player_ids) != len(skills):
            raise ValueError(
                f"Expected one rating per player, got {len(skills)} ratings for {len(player_ids)} players"
            )
        players = dict(self._players)
        for player_id, skill in zip(player_ids, skills):
            players[player_id] = self.resolve(player_id, skill)
        return SkillSnapshot(players)
