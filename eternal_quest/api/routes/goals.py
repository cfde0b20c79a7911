"""/api/v1/goals — list, create, and record progress on goals."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from eternal_quest.api.dependencies import get_ledger_manager
from eternal_quest.api.ledger_manager import LedgerManager
from eternal_quest.api.schemas import (
    CreateGoalRequest,
    CreateGoalResponse,
    GoalListResponse,
    GoalSchema,
    RecordEventResponse,
)
from eternal_quest.core.goals import Goal, make_goal

router = APIRouter()


def _serialize_goal(index: int, goal: Goal) -> GoalSchema:
    return GoalSchema(index=index, **goal.to_dict())


@router.get("/goals", response_model=GoalListResponse)
def list_goals(
    manager: LedgerManager = Depends(get_ledger_manager),
) -> GoalListResponse:
    goals, *_ = manager.snapshot()
    return GoalListResponse(goals=[_serialize_goal(i, g) for i, g in enumerate(goals)])


@router.post("/goals", response_model=CreateGoalResponse, status_code=201)
def create_goal(
    body: CreateGoalRequest,
    manager: LedgerManager = Depends(get_ledger_manager),
) -> CreateGoalResponse:
    goal = make_goal(body.kind, body.description, body.points, target=body.target, bonus=body.bonus)
    view = goal.to_dict()
    index = manager.add_goal(goal)
    return CreateGoalResponse(index=index, goal=GoalSchema(index=index, **view))


@router.post("/goals/{index}/record", response_model=RecordEventResponse)
def record_event(
    index: int,
    manager: LedgerManager = Depends(get_ledger_manager),
) -> RecordEventResponse:
    # Out-of-range indices award 0 points, same as the ledger.
    points, score, level, level_up = manager.record_event(index)
    return RecordEventResponse(index=index, points=points, score=score, level=level, level_up=level_up)
