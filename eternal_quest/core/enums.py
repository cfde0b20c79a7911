"""Enumerations used throughout the quest core."""

from __future__ import annotations

from enum import Enum, unique


@unique
class GoalKind(str, Enum):
    """Closed set of goal variants. The value is the tag written to save files."""

    SIMPLE = "Simple"        # Completes on the first recorded event
    ETERNAL = "Eternal"      # Never completes, pays every time
    CHECKLIST = "Checklist"  # Completes after N events, pays a bonus once

    @classmethod
    def _missing_(cls, value: object) -> GoalKind | None:
        # Case-insensitive lookup: "simple", "CHECKLIST", " Eternal "
        if isinstance(value, str):
            key = value.strip().lower()
            for kind in cls:
                if kind.value.lower() == key:
                    return kind
        return None

    @classmethod
    def parse(cls, name: str) -> GoalKind:
        """Look up a kind by tag in any case; raises ``ValueError`` if unknown."""
        return cls(name)
