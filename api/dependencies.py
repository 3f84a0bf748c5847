"""
FastAPI dependencies.
"""

from fastapi import HTTPException, Request

from services.interfaces import IShuffleService


def get_shuffle_service(request: Request) -> IShuffleService:
    """Shuffle service attached to the app by create_app()."""
    service = getattr(request.app.state, "shuffle_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Shuffle service not initialized")
    return service
