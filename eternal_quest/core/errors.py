"""Exception hierarchy for the quest core."""

from __future__ import annotations


class QuestError(Exception):
    """Base class for all errors raised by the quest core."""


class GoalFormatError(QuestError, ValueError):
    """A serialized goal line could not be parsed."""

    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


class UnknownGoalKindError(QuestError, ValueError):
    """A goal kind name or save-file tag is not one of the known variants."""

    def __init__(self, kind: str) -> None:
        super().__init__(f"unknown goal kind {kind!r}")
        self.kind = kind

