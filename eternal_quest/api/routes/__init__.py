"""Versioned API route modules."""

from fastapi import APIRouter

from eternal_quest.api.routes.config import router as config_router
from eternal_quest.api.routes.goals import router as goals_router
from eternal_quest.api.routes.persistence import router as persistence_router
from eternal_quest.api.routes.score import router as score_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(goals_router, tags=["Goals"])
api_router.include_router(score_router, tags=["Score"])
api_router.include_router(persistence_router, tags=["Persistence"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
