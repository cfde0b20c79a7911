"""POST /api/v1/{save,load} — write or reload the configured save file."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from eternal_quest.api.dependencies import get_ledger_manager
from eternal_quest.api.ledger_manager import LedgerManager
from eternal_quest.api.schemas import PersistenceResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/save", response_model=PersistenceResponse)
def save(
    manager: LedgerManager = Depends(get_ledger_manager),
) -> PersistenceResponse:
    path = str(manager.save_path)
    try:
        count = manager.save()
    except OSError as exc:
        logger.error("Save to %s failed: %s", path, exc)
        raise HTTPException(status_code=500, detail=f"Could not write {path}.") from exc
    return PersistenceResponse(status="ok", message=f"Saved {count} goals.", path=path)


@router.post("/load", response_model=PersistenceResponse)
def load(
    manager: LedgerManager = Depends(get_ledger_manager),
) -> PersistenceResponse:
    path = str(manager.save_path)
    if manager.load():
        return PersistenceResponse(status="ok", message="Progress loaded.", path=path)
    # Missing or unreadable save leaves state unchanged; not an error.
    return PersistenceResponse(status="noop", message="No saved progress could be loaded.", path=path)
