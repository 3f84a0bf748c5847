"""
Candidate split and selection domain models.
"""

from dataclasses import dataclass

from domain.models.player import Player


@dataclass(frozen=True)
class CandidateSplit:
    """
    One partition of the roster into a Marine team and an Alien team.

    Lower score means better skill parity; lower repeat_score means fewer
    players are kept on the faction they were just stuck on.
    """

    marines: tuple[Player, ...]
    aliens: tuple[Player, ...]
    diff_mean: float
    diff_std: float
    score: float
    repeat_score: float

    @property
    def marine_ids(self) -> list[int]:
        return [p.player_id for p in self.marines]

    @property
    def alien_ids(self) -> list[int]:
        return [p.player_id for p in self.aliens]


@dataclass(frozen=True)
class Selection:
    """Result of running the selector over every enumerated candidate."""

    winner: CandidateSplit
    evaluated: int  # Candidates seen
    below_cutoff: int  # Candidates whose score passed the cutoff
    used_repeat_tiebreak: bool
