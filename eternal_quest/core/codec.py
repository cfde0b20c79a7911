"""Line codec for the flat save-file format.

A saved ledger looks like::

    <score>
    <goal count>
    Simple|<description>|<points>|<True|False>
    Eternal|<description>|<points>
    Checklist|<description>|<points>|<target>|<bonus>|<completed count>

Fields are separated by ``|`` and are not escaped.
"""

from __future__ import annotations

import logging
import re

from eternal_quest.core.enums import GoalKind
from eternal_quest.core.errors import GoalFormatError, UnknownGoalKindError
from eternal_quest.core.goals import (
    DELIMITER,
    ChecklistGoal,
    EternalGoal,
    Goal,
    SimpleGoal,
)

logger = logging.getLogger(__name__)

# Minimum number of fields per tag (kind, description, points, ...)
_MIN_FIELDS: dict[GoalKind, int] = {
    GoalKind.SIMPLE: 4,
    GoalKind.ETERNAL: 3,
    GoalKind.CHECKLIST: 6,
}


# ASCII digits only; int() alone would also take "1_000" and other scripts' digits
_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int | None:
    """Parse a signed decimal field, or return None if it is not one."""
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def _parse_int(value: str, line: str) -> int:
    number = parse_int(value)
    if number is None:
        raise GoalFormatError(line, f"expected an integer, got {value!r}")
    return number


def _parse_bool(value: str, line: str) -> bool:
    key = value.strip().lower()
    if key == "true":
        return True
    if key == "false":
        return False
    raise GoalFormatError(line, f"expected True or False, got {value!r}")


def encode_goal(goal: Goal) -> str:
    """Serialize *goal* to a single save-file line (no newline)."""
    line = goal.serialize()
    if DELIMITER in goal.description or "\n" in goal.description:
        logger.warning(
            "Description %r contains a delimiter or newline and will not reload cleanly",
            goal.description,
        )
    return line


def decode_goal(line: str) -> Goal:
    """Rebuild a goal, including its progress, from one save-file line.

    Raises ``UnknownGoalKindError`` for an unrecognised tag and
    ``GoalFormatError`` for anything else that does not parse.
    """
    line = line.rstrip("\r\n")
    parts = line.split(DELIMITER)
    if len(parts) < 3:
        raise GoalFormatError(line, "too few fields")

    try:
        kind = GoalKind(parts[0].strip())
    except ValueError:
        raise UnknownGoalKindError(parts[0]) from None

    if len(parts) < _MIN_FIELDS[kind]:
        raise GoalFormatError(line, f"too few fields for {kind.value}")

    description = parts[1]
    points = _parse_int(parts[2], line)

    match kind:
        case GoalKind.SIMPLE:
            return SimpleGoal(description, points, _parse_bool(parts[3], line))
        case GoalKind.ETERNAL:
            return EternalGoal(description, points)
        case GoalKind.CHECKLIST:
            return ChecklistGoal(
                description,
                points,
                target=_parse_int(parts[3], line),
                bonus=_parse_int(parts[4], line),
                completed_count=_parse_int(parts[5], line),
            )
