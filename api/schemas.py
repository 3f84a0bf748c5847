"""
Request parsing and response models for the HTTP transport.
"""

import json

from pydantic import BaseModel, Field

from domain.models.shuffle_result import PlayerSkill, ShuffleResult


class ShuffleResponse(BaseModel):
    """Balanced split: team1 plays Marine, team2 plays Alien."""

    team1: list[int] = Field(default_factory=list)
    team2: list[int] = Field(default_factory=list)
    diagnostics: dict[str, str] = Field(default_factory=dict)
    success: bool = True
    message: str = ""

    @classmethod
    def from_result(cls, result: ShuffleResult) -> "ShuffleResponse":
        return cls(**result.to_dict())


class PlayerSkillResponse(BaseModel):
    ns2id: int
    marine_skill: int
    alien_skill: int

    @classmethod
    def from_skill(cls, skill: PlayerSkill) -> "PlayerSkillResponse":
        return cls(**skill.to_dict())


class HealthResponse(BaseModel):
    status: str
    known_players: int


def parse_int_list(raw: str, field_name: str) -> list[int]:
    """
    Decode a form field holding a JSON array of integers, e.g. "[1, 2, 3]".

    Raises:
        ValueError: If the field is not a JSON array of integers
    """
    try:
        values = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError(f"{field_name} must be a JSON array of integers") from exc
    if not isinstance(values, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in values
    ):
        raise ValueError(f"{field_name} must be a JSON array of integers")
    return values
