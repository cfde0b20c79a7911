"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eternal_quest import __version__
from eternal_quest.api.dependencies import set_ledger_manager
from eternal_quest.api.ledger_manager import LedgerManager
from eternal_quest.api.routes import api_router
from eternal_quest.config import QuestConfig
from eternal_quest.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: QuestConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = QuestConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = LedgerManager(_config)
        set_ledger_manager(manager)
        logger.info("API server started, save file %s", manager.save_path)
        yield
        set_ledger_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Eternal Quest",
        description=(
            "Goal tracking with points and levels.\n\n"
            "## API Groups\n\n"
            "- **Goals** — List goals, create goals, record progress\n"
            "- **Score** — Cumulative score, derived level, ledger event feed\n"
            "- **Persistence** — Save to / load from the flat save file\n"
            "- **Config** — Read-only configuration\n"
        ),
        version=__version__,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Goals", "description": "Ordered goal list. Indices are 0-based and stable; goals are never removed."},
            {"name": "Score", "description": "Score, level (score // points_per_level), and recent awards/level-ups."},
            {"name": "Persistence", "description": "Whole-ledger save and load. Loading replaces all goals and the score."},
            {"name": "Config", "description": "Effective configuration."},
        ],
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app
