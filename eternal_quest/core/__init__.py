"""Core goal model, save-file codec, and quest ledger."""

from eternal_quest.core.enums import GoalKind
from eternal_quest.core.errors import (
    GoalFormatError,
    QuestError,
    UnknownGoalKindError,
)
from eternal_quest.core.goals import ChecklistGoal, EternalGoal, Goal, SimpleGoal, make_goal
from eternal_quest.core.codec import decode_goal, encode_goal
from eternal_quest.core.ledger import POINTS_PER_LEVEL, QuestLedger

__all__ = [
    "ChecklistGoal",
    "EternalGoal",
    "Goal",
    "GoalFormatError",
    "GoalKind",
    "POINTS_PER_LEVEL",
    "QuestError",
    "QuestLedger",
    "SimpleGoal",
    "UnknownGoalKindError",
    "decode_goal",
    "encode_goal",
    "make_goal",
]
