"""
Centralized configuration for the NS2 balanced shuffle service.
"""

from __future__ import annotations

import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _parse_choice(env_var: str, default: str, choices: set[str]) -> str:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


DB_PATH = os.getenv("DB_PATH", "ns2_stats.db")
DISCORD_BOT_TOKEN = os.getenv("DISCORD_BOT_TOKEN")

HTTP_HOST = os.getenv("HTTP_HOST", "0.0.0.0")
HTTP_PORT = _parse_int("HTTP_PORT", 3000)

# Rounds up to and including this id predate the current stats format
HISTORY_START_ROUND = _parse_int("HISTORY_START_ROUND", 1933)

# Bumped whenever the shuffle response or scoring semantics change
SHUFFLE_VERSION = "2"

SHUFFLER_SETTINGS: dict[str, Any] = {
    "skill_window": max(1, _parse_int("SKILL_WINDOW", 30)),
    "repeat_score_policy": _parse_choice("REPEAT_SCORE_POLICY", "streak", {"streak", "window"}),
    "repeat_window": max(1, _parse_int("REPEAT_WINDOW", 2)),
    "score_cutoff": _parse_float("SCORE_CUTOFF", 100.0),
    # C(20, 10) = 184756 candidates; every extra pair roughly quadruples the work
    "max_roster_size": max(2, _parse_int("MAX_ROSTER_SIZE", 20)),
}
