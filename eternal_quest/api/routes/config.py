"""GET /api/v1/config — expose the effective configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from eternal_quest.api.dependencies import get_ledger_manager
from eternal_quest.api.ledger_manager import LedgerManager
from eternal_quest.api.schemas import QuestConfigResponse

router = APIRouter()


@router.get("/config", response_model=QuestConfigResponse)
def get_config(
    manager: LedgerManager = Depends(get_ledger_manager),
) -> QuestConfigResponse:
    cfg = manager.config
    return QuestConfigResponse(
        points_per_level=cfg.points_per_level,
        save_file=cfg.save_file,
        load_on_start=cfg.load_on_start,
        event_log_size=cfg.event_log_size,
        host=cfg.host,
        port=cfg.port,
        log_level=cfg.log_level,
    )
