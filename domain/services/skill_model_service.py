"""
Skill model domain service.

Turns the round history into per-faction skill multipliers.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from enum import Enum

from domain.models.faction import Faction
from domain.models.player import FactionStats, Player
from domain.models.round import Round
from domain.models.skill_snapshot import SkillSnapshot


class RepeatScorePolicy(Enum):
    """How a player's recent concentration on one faction is measured."""

    STREAK = "streak"  # Length of the trailing same-faction run
    WINDOW = "window"  # Fraction of the last N rounds spent on the faction


def confidence_weight(rounds: int, window: int) -> float:
    """
    Sample-size confidence in [0, 1].

    Convex in the sample count so a handful of rounds barely moves the
    multiplier while a full window counts completely.
    """
    if window <= 0:
        raise ValueError(f"window must be positive, got {window}")
    n = max(0, min(rounds, window))
    return (n / window) ** 4


def skill_multiplier(win_rate: float, weight: float) -> float:
    """
    Blend the win-rate multiplier (0-2) with the neutral multiplier 1.

    At weight 0 this is exactly 1; at weight 1 it is 2 * win_rate.
    """
    return win_rate * 2.0 * weight + (1.0 - weight)


def recent_win_rate(rounds: Sequence[Round], window: int) -> tuple[int, float]:
    """
    Win rate over the most recent `window` rounds.

    Returns (rounds used, win rate). The win rate is 0 when no rounds exist.
    """
    recent = rounds[-window:] if window > 0 else []
    if not recent:
        return 0, 0.0
    wins = sum(1 for r in recent if r.won)
    return len(recent), wins / len(recent)


def streak_repeat_scores(factions: Sequence[Faction]) -> dict[Faction, float]:
    """Length of the trailing run on the player's last faction; 0 for the other."""
    scores = dict.fromkeys(Faction, 0.0)
    if not factions:
        return scores
    last = factions[-1]
    streak = 0
    for faction in reversed(factions):
        if faction != last:
            break
        streak += 1
    scores[last] = float(streak)
    return scores


def window_repeat_scores(factions: Sequence[Faction], window: int) -> dict[Faction, float]:
    """Fraction of the last `window` rounds played on each faction; 0 with too little history."""
    scores = dict.fromkeys(Faction, 0.0)
    if window <= 0 or len(factions) < window:
        return scores
    for faction in factions[-window:]:
        scores[faction] += 1
    return {faction: count / window for faction, count in scores.items()}


class SkillModelService:
    """
    Pure domain service for the per-faction skill adjustment.

    Responsibilities:
    - Group history by player and faction
    - Compute recent win rate, confidence weight and multiplier
    - Compute the repeat score used as the shuffle tie-break
    """

    def __init__(
        self,
        window: int = 30,
        repeat_policy: RepeatScorePolicy | str = RepeatScorePolicy.STREAK,
        repeat_window: int = 2,
    ):
        """
        Initialize the skill model.

        Args:
            window: Number of most recent faction rounds considered (W)
            repeat_policy: Repeat score policy, "streak" or "window"
            repeat_window: Round count for the "window" repeat policy
        """
        if window <= 0:
            raise ValueError(f"window must be positive, got {window}")
        self.window = window
        self.repeat_policy = RepeatScorePolicy(repeat_policy)
        self.repeat_window = repeat_window

    def faction_stats(self, rounds: Sequence[Round], repeat_score: float = 0.0) -> FactionStats:
        """Compute stats for one player's rounds on a single faction."""
        n, win_rate = recent_win_rate(rounds, self.window)
        weight = confidence_weight(n, self.window)
        return FactionStats(
            rounds=n,
            win_rate=win_rate,
            weight=weight,
            multiplier=skill_multiplier(win_rate, weight),
            repeat_score=repeat_score,
        )

    def repeat_scores(self, factions: Sequence[Faction]) -> dict[Faction, float]:
        if self.repeat_policy is RepeatScorePolicy.WINDOW:
            return window_repeat_scores(factions, self.repeat_window)
        return streak_repeat_scores(factions)

    def build_player(self, rounds: Sequence[Round]) -> Player:
        """
        Build a player from their rounds, oldest first.

        Name and base skill come from the most recent round.
        """
        if not rounds:
            raise ValueError("Cannot build a player without rounds")
        latest = rounds[-1]
        by_faction: dict[Faction, list[Round]] = {faction: [] for faction in Faction}
        for r in rounds:
            by_faction[r.faction].append(r)
        repeat = self.repeat_scores([r.faction for r in rounds])
        return Player(
            player_id=latest.player_id,
            name=latest.player_name,
            skill=latest.skill,
            marine=self.faction_stats(by_faction[Faction.MARINE], repeat[Faction.MARINE]),
            alien=self.faction_stats(by_faction[Faction.ALIEN], repeat[Faction.ALIEN]),
        )

    def build_snapshot(self, rounds: Iterable[Round]) -> SkillSnapshot:
        """
        Full recompute of every player seen in the history.

        Args:
            rounds: Round history ordered oldest to newest

        Returns:
            A fresh immutable snapshot
        """
        history: dict[int, list[Round]] = defaultdict(list)
        for r in rounds:
            history[r.player_id].append(r)
        return SkillSnapshot(
            {player_id: self.build_player(player_rounds) for player_id, player_rounds in history.items()}
        )
