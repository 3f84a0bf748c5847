"""
FastAPI application factory.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from api.schemas import HealthResponse
from api.shuffle import router as shuffle_router
from services.interfaces import IShuffleService

logger = logging.getLogger("ns2_shuffle.api")


def create_app(shuffle_service: IShuffleService) -> FastAPI:
    """
    Build the HTTP app around an initialized shuffle service.

    The skill model is refreshed once at startup so a broken history source
    fails the launch instead of the first request.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        snapshot = shuffle_service.refresh()
        logger.info(f"Startup refresh complete: {len(snapshot)} known players")
        yield

    app = FastAPI(
        title="NS2 Shuffle API",
        description="Balanced Marine/Alien team shuffles from round history",
        version="2.0.0",
        lifespan=lifespan,
    )
    app.state.shuffle_service = shuffle_service
    app.include_router(shuffle_router)

    @app.get("/health", response_model=HealthResponse)
    def health(request: Request):
        service: IShuffleService = request.app.state.shuffle_service
        return HealthResponse(status="healthy", known_players=service.known_player_count)

    return app
