"""GET /api/v1/score and /api/v1/events — score, level, and the event feed."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from eternal_quest.api.dependencies import get_ledger_manager
from eternal_quest.api.ledger_manager import LedgerManager
from eternal_quest.api.schemas import EventListResponse, EventSchema, ScoreResponse

router = APIRouter()


@router.get("/score", response_model=ScoreResponse)
def get_score(
    manager: LedgerManager = Depends(get_ledger_manager),
) -> ScoreResponse:
    goals, score, level, to_next = manager.snapshot()
    return ScoreResponse(score=score, level=level, points_to_next_level=to_next, goal_count=len(goals))


@router.get("/events", response_model=EventListResponse)
def get_events(
    since_seq: int = Query(0, ge=0, description="Only return events with seq >= this value"),
    manager: LedgerManager = Depends(get_ledger_manager),
) -> EventListResponse:
    events = [
        EventSchema(
            seq=ev.seq, category=ev.category, message=ev.message,
            goal_index=ev.goal_index, points=ev.points,
        )
        for ev in manager.event_log.since(since_seq)
    ]
    return EventListResponse(events=events)
