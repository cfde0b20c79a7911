"""QuestLedger — the owning collection of goals plus score and level.

The ledger is the only writer of its goals and score. Goals are never
removed; loading a save replaces the whole goal list and score.

Recovery rules:
  - ``record_event`` with an out-of-range index returns 0 and changes nothing.
  - A malformed or unknown goal line is skipped while loading.
  - A missing file, unreadable file, or bad header leaves the ledger as it was.
"""

from __future__ import annotations

import logging
from pathlib import Path

from eternal_quest.core.codec import decode_goal, encode_goal, parse_int
from eternal_quest.core.errors import QuestError
from eternal_quest.core.goals import Goal
from eternal_quest.utils.event_log import EventLog

logger = logging.getLogger(__name__)

POINTS_PER_LEVEL = 1000


class QuestLedger:
    """Ordered goals, cumulative score, and the level derived from it."""

    __slots__ = ("_goals", "_score", "_points_per_level", "_event_log", "_last_level_up")

    def __init__(
        self,
        points_per_level: int = POINTS_PER_LEVEL,
        event_log: EventLog | None = None,
    ) -> None:
        if points_per_level <= 0:
            raise ValueError("points_per_level must be positive")
        self._goals: list[Goal] = []
        self._score = 0
        self._points_per_level = points_per_level
        self._event_log = event_log if event_log is not None else EventLog()
        self._last_level_up: int | None = None

    # -- read accessors --

    @property
    def goals(self) -> tuple[Goal, ...]:
        return tuple(self._goals)

    @property
    def goal_count(self) -> int:
        return len(self._goals)

    @property
    def score(self) -> int:
        return self._score

    @property
    def level(self) -> int:
        return self._score // self._points_per_level

    @property
    def points_per_level(self) -> int:
        return self._points_per_level

    @property
    def points_to_next_level(self) -> int:
        return (self.level + 1) * self._points_per_level - self._score

    @property
    def last_level_up(self) -> int | None:
        """Level reached by the most recent ``record_event`` call, if it levelled up."""
        return self._last_level_up

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    def goal(self, index: int) -> Goal | None:
        if 0 <= index < len(self._goals):
            return self._goals[index]
        return None

    # -- mutation --

    def add_goal(self, goal: Goal) -> int:
        """Append *goal* and return its index."""
        self._goals.append(goal)
        index = len(self._goals) - 1
        self._event_log.append("goal_added", f"Added {goal.kind.value} goal: {goal.description}", index)
        logger.debug("Added goal %d: %r", index, goal)
        return index

    def record_event(self, index: int) -> int:
        """Record progress on the goal at *index* and return the points earned.

        Returns 0 for an out-of-range index or an exhausted goal.
        """
        self._last_level_up = None
        goal = self.goal(index)
        if goal is None:
            logger.debug("record_event: index %d out of range (%d goals)", index, len(self._goals))
            return 0

        points = goal.record_event()
        if points <= 0:
            # Score only moves on positive awards
            return points

        old_level = self.level
        self._score += points
        self._event_log.append("award", f"{goal.description}: +{points} points", index, points)
        logger.info("Goal %d (%s) awarded %d points, score now %d", index, goal.description, points, self._score)

        new_level = self.level
        if new_level > old_level:
            self._last_level_up = new_level
            self._event_log.append("level_up", f"Reached level {new_level}", index)
            logger.info("Level up: %d -> %d", old_level, new_level)
        return points

    # -- persistence --

    def serialize_all(self) -> str:
        lines = [str(self._score), str(len(self._goals))]
        lines.extend(encode_goal(g) for g in self._goals)
        return "\n".join(lines) + "\n"

    def deserialize_all(self, text: str) -> int | None:
        """Replace score and goals with the contents of *text*.

        Goal lines that fail to parse are skipped. Returns the number of
        goals loaded, or None (ledger untouched) if the score/count header
        is missing or malformed.
        """
        lines = text.replace("\r\n", "\n").split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        if len(lines) < 2:
            logger.warning("Save has no score/count header (%d lines); nothing loaded", len(lines))
            return None
        score = parse_int(lines[0])
        count = parse_int(lines[1])
        if score is None or count is None:
            logger.warning("Bad save header %r, %r; nothing loaded", lines[0], lines[1])
            return None

        body = lines[2:2 + max(count, 0)]
        if len(body) < count:
            logger.warning("Save declares %d goals but only %d lines follow", count, len(body))

        goals: list[Goal] = []
        for lineno, line in enumerate(body, start=3):
            try:
                goals.append(decode_goal(line))
            except QuestError as exc:
                logger.warning("Skipping goal on line %d: %s", lineno, exc)

        self._goals = goals
        self._score = score
        self._last_level_up = None
        return len(goals)

    def save(self, path: str | Path) -> None:
        """Write the whole ledger to *path* in one blocking write."""
        path = Path(path)
        path.write_text(self.serialize_all(), encoding="utf-8")
        logger.info("Saved %d goals (score %d) to %s", len(self._goals), self._score, path)

    def load(self, path: str | Path) -> bool:
        """Replace state with the save at *path*.

        Returns False, leaving the ledger unchanged, when the file is
        missing, unreadable, or has a bad header.
        """
        path = Path(path)
        if not path.exists():
            logger.info("No save file at %s; nothing loaded", path)
            return False
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read %s: %s", path, exc)
            return False
        loaded = self.deserialize_all(text)
        if loaded is None:
            logger.warning("Ignoring save file %s", path)
            return False

        self._event_log.append("load", f"Loaded {loaded} goals from {path.name}", points=self._score)
        logger.info("Loaded %d goals (score %d) from %s", loaded, self._score, path)
        return True
