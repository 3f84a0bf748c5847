"""
Shared formatting helpers and faction constants.
"""

import re
from collections.abc import Iterable

from domain.models.faction import Faction

FACTION_EMOJIS = {
    Faction.MARINE: "🔫",
    Faction.ALIEN: "🦷",
}


def format_faction(faction: Faction) -> str:
    """Return faction name with emoji (e.g., '🔫 Marine')."""
    return f"{FACTION_EMOJIS[faction]} {faction.label}"


def format_team(player_ids: Iterable[int]) -> str:
    """Numbered list of player ids for an embed field."""
    lines = [f"{idx}. `{pid}`" for idx, pid in enumerate(player_ids, 1)]
    return "\n".join(lines) if lines else "No players"


def parse_int_csv(text: str) -> list[int]:
    """
    Parse integers separated by commas and/or whitespace, e.g. "1, 2 3".

    Raises:
        ValueError: If any token is not an integer
    """
    tokens = [t for t in re.split(r"[,\s]+", text.strip()) if t]
    try:
        return [int(t) for t in tokens]
    except ValueError as exc:
        raise ValueError(f"Expected a comma-separated list of numbers, got '{text}'") from exc
