"""
Shuffle API Endpoints

Responsibilities:
1. Balanced shuffle of a roster
2. Faction-adjusted skill lookup for the scoreboard
"""

import logging

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import JSONResponse

from api.dependencies import get_shuffle_service
from api.schemas import PlayerSkillResponse, ShuffleResponse, parse_int_list
from domain.models.shuffle_result import ShuffleResult
from repositories.exceptions import HistoryUnavailableError
from services import error_codes
from services.interfaces import IShuffleService

router = APIRouter(tags=["shuffle"])
logger = logging.getLogger("ns2_shuffle.api.shuffle")


@router.post("/shuffle", response_model=ShuffleResponse)
def shuffle(
    ns2ids: str = Form(...),
    hiveskills: str = Form(...),
    service: IShuffleService = Depends(get_shuffle_service),
):
    """
    Split a roster into Marine (team1) and Alien (team2) teams.

    Form fields hold JSON arrays: ns2ids=[1,2,3,4], hiveskills=[1500,900,1200,1100].
    Invalid rosters return success=false with a message; malformed fields
    return 400 with the same body shape.
    """
    try:
        player_ids = parse_int_list(ns2ids, "ns2ids")
        skills = parse_int_list(hiveskills, "hiveskills")
    except ValueError as e:
        failure = ShuffleResult.failure(str(e), code=error_codes.VALIDATION_ERROR)
        return JSONResponse(status_code=400, content=ShuffleResponse.from_result(failure).model_dump())

    try:
        result = service.shuffle(player_ids, skills)
    except HistoryUnavailableError:
        raise HTTPException(status_code=503, detail="Round history unavailable")

    return ShuffleResponse.from_result(result)


@router.post("/player/scoreboard_data", response_model=PlayerSkillResponse)
def player_scoreboard_data(
    ns2id: int = Form(...),
    hiveskill: int = Form(...),
    service: IShuffleService = Depends(get_shuffle_service),
):
    """Marine and Alien adjusted skill for one player with the given hive skill."""
    try:
        skill = service.get_player_skill(ns2id, hiveskill)
    except HistoryUnavailableError:
        raise HTTPException(status_code=503, detail="Round history unavailable")

    return PlayerSkillResponse.from_skill(skill)
