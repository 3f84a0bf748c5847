"""
Domain models - pure data structures representing business entities.
"""

from domain.models.candidate_split import CandidateSplit, Selection
from domain.models.faction import Faction
from domain.models.player import FactionStats, Player
from domain.models.round import Round
from domain.models.shuffle_result import PlayerSkill, ShuffleResult
from domain.models.skill_snapshot import SkillSnapshot

__all__ = [
    "CandidateSplit",
    "Faction",
    "FactionStats",
    "Player",
    "PlayerSkill",
    "Round",
    "Selection",
    "ShuffleResult",
    "SkillSnapshot",
]
