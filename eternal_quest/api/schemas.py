"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from eternal_quest.core.enums import GoalKind


# --- Goals ---

class GoalSchema(BaseModel):
    index: int = Field(description="0-based position; use it with POST /goals/{index}/record")
    kind: GoalKind
    description: str
    points: int
    completed: bool
    mark: str = Field(description='"[X]" when completed, "[ ]" otherwise')
    progress: str = ""
    target: int | None = None
    bonus: int | None = None
    completed_count: int | None = None


class GoalListResponse(BaseModel):
    goals: list[GoalSchema]


class CreateGoalRequest(BaseModel):
    kind: GoalKind
    description: str
    points: int
    target: int = Field(1, description="Checklist only: completions needed")
    bonus: int = Field(0, description="Checklist only: paid once when the target is reached")

    @field_validator("kind", mode="before")
    @classmethod
    def normalize_kind(cls, value: object) -> object:
        if isinstance(value, str):
            return GoalKind.parse(value)
        return value


class CreateGoalResponse(BaseModel):
    index: int
    goal: GoalSchema


class RecordEventResponse(BaseModel):
    index: int
    points: int
    score: int
    level: int
    level_up: int | None = Field(None, description="New level if this event raised it")


# --- Score ---

class ScoreResponse(BaseModel):
    score: int
    level: int
    points_to_next_level: int
    goal_count: int


# --- Events ---

class EventSchema(BaseModel):
    seq: int
    category: str
    message: str
    goal_index: int | None = None
    points: int = 0


class EventListResponse(BaseModel):
    events: list[EventSchema]


# --- Persistence ---

class PersistenceResponse(BaseModel):
    status: str
    message: str
    path: str


# --- Config ---

class QuestConfigResponse(BaseModel):
    points_per_level: int
    save_file: str
    load_on_start: bool
    event_log_size: int
    host: str
    port: int
    log_level: str
