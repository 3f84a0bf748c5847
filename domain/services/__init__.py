"""
Domain services containing pure business logic.
"""

from domain.services.skill_model_service import RepeatScorePolicy, SkillModelService
from domain.services.split_selector import SplitSelector
from domain.services.team_balancing_service import TeamBalancingService

__all__ = ["RepeatScorePolicy", "SkillModelService", "SplitSelector", "TeamBalancingService"]
