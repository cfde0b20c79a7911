"""Goal variants — simple, eternal, and checklist.

Every goal has a description and a point value. Recording an event returns
the points earned by that single call:

  - SIMPLE:    pays ``points`` once, then is completed.
  - ETERNAL:   pays ``points`` every time, never completes.
  - CHECKLIST: pays ``points`` per event until ``target`` events have been
               recorded; the event that reaches the target also pays ``bonus``.

Point values, targets and bonuses are stored as given (no range checks).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from eternal_quest.core.enums import GoalKind
from eternal_quest.core.errors import UnknownGoalKindError

DELIMITER = "|"


# ---------------------------------------------------------------------------
# Abstract goal
# ---------------------------------------------------------------------------

class Goal(ABC):
    """Base class for all goal variants.

    Subclasses implement:
      - kind:            the GoalKind tag
      - record_event():  register one occurrence, return points earned
      - is_completed():  whether further events can still pay out
      - _fields():       variant-specific values appended to the save line
    """

    __slots__ = ("_description", "_points")

    kind: GoalKind

    def __init__(self, description: str, points: int) -> None:
        self._description = description
        self._points = points

    @property
    def description(self) -> str:
        return self._description

    @property
    def points(self) -> int:
        return self._points

    @abstractmethod
    def record_event(self) -> int:
        """Register one occurrence of progress and return the points earned."""

    @abstractmethod
    def is_completed(self) -> bool:
        """True once the goal can no longer award points."""

    @abstractmethod
    def _fields(self) -> tuple[Any, ...]:
        """Variant state written after ``kind|description|points``."""

    @abstractmethod
    def copy(self) -> Goal:
        ...

    # -- presentation --

    def completion_mark(self) -> str:
        return "[X]" if self.is_completed() else "[ ]"

    def progress_text(self) -> str:
        return ""

    # -- persistence --

    def serialize(self) -> str:
        """Type-tagged, ``|``-delimited line. Fields are not escaped."""
        parts = [self.kind.value, self._description, str(self._points)]
        parts.extend(str(v) for v in self._fields())
        return DELIMITER.join(parts)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "description": self._description,
            "points": self._points,
            "completed": self.is_completed(),
            "mark": self.completion_mark(),
            "progress": self.progress_text(),
        }

    # -- value semantics --

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Goal):
            return NotImplemented
        return self.serialize() == other.serialize()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.serialize()!r})"


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

class SimpleGoal(Goal):
    """One-shot goal: the first event pays, every later event pays nothing."""

    __slots__ = ("_completed",)

    kind = GoalKind.SIMPLE

    def __init__(self, description: str, points: int, completed: bool = False) -> None:
        super().__init__(description, points)
        self._completed = completed

    def record_event(self) -> int:
        if self._completed:
            return 0
        self._completed = True
        return self._points

    def is_completed(self) -> bool:
        return self._completed

    def _fields(self) -> tuple[Any, ...]:
        return (self._completed,)

    def copy(self) -> SimpleGoal:
        return SimpleGoal(self._description, self._points, self._completed)


class EternalGoal(Goal):
    """Recurring goal with no terminal state."""

    __slots__ = ()

    kind = GoalKind.ETERNAL

    def record_event(self) -> int:
        return self._points

    def is_completed(self) -> bool:
        return False

    def _fields(self) -> tuple[Any, ...]:
        return ()

    def copy(self) -> EternalGoal:
        return EternalGoal(self._description, self._points)


class ChecklistGoal(Goal):
    """Count-based goal that pays a one-time bonus when the target is reached."""

    __slots__ = ("_target", "_bonus", "_completed_count")

    kind = GoalKind.CHECKLIST

    def __init__(
        self,
        description: str,
        points: int,
        target: int,
        bonus: int,
        completed_count: int = 0,
    ) -> None:
        super().__init__(description, points)
        self._target = target
        self._bonus = bonus
        self._completed_count = completed_count

    @property
    def target(self) -> int:
        return self._target

    @property
    def bonus(self) -> int:
        return self._bonus

    @property
    def completed_count(self) -> int:
        return self._completed_count

    def record_event(self) -> int:
        if self._completed_count >= self._target:
            return 0
        self._completed_count += 1
        earned = self._points
        if self._completed_count == self._target:
            earned += self._bonus
        return earned

    def is_completed(self) -> bool:
        return self._completed_count >= self._target

    def progress_text(self) -> str:
        return f"Completed {self._completed_count}/{self._target}"

    def _fields(self) -> tuple[Any, ...]:
        return (self._target, self._bonus, self._completed_count)

    def copy(self) -> ChecklistGoal:
        return ChecklistGoal(
            self._description, self._points,
            self._target, self._bonus, self._completed_count,
        )

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["target"] = self._target
        d["bonus"] = self._bonus
        d["completed_count"] = self._completed_count
        return d


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

def make_goal(
    kind: GoalKind | str,
    description: str,
    points: int,
    target: int = 1,
    bonus: int = 0,
) -> Goal:
    """Build a fresh (no progress) goal of the given kind.

    *kind* may be a ``GoalKind`` or its name in any case. ``target`` and
    ``bonus`` are only used for checklist goals.
    """
    if not isinstance(kind, GoalKind):
        try:
            kind = GoalKind.parse(kind)
        except ValueError:
            raise UnknownGoalKindError(kind) from None

    match kind:
        case GoalKind.SIMPLE:
            return SimpleGoal(description, points)
        case GoalKind.ETERNAL:
            return EternalGoal(description, points)
        case GoalKind.CHECKLIST:
            return ChecklistGoal(description, points, target, bonus)
