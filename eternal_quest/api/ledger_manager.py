"""LedgerManager — owns the single QuestLedger behind the HTTP API.

FastAPI runs sync endpoints on a thread pool, so every ledger call goes
through one lock (Single-Writer preserved).
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING

from eternal_quest.core.goals import Goal
from eternal_quest.core.ledger import QuestLedger
from eternal_quest.utils.event_log import EventLog

if TYPE_CHECKING:
    from eternal_quest.config import QuestConfig

logger = logging.getLogger(__name__)


class LedgerManager:
    """Thread-safe facade over a QuestLedger and its save file."""

    def __init__(self, config: QuestConfig) -> None:
        self.config = config
        self._lock = threading.Lock()
        self._event_log = EventLog(config.event_log_size)
        self._ledger = QuestLedger(config.points_per_level, self._event_log)
        if config.load_on_start:
            self._ledger.load(self.save_path)

    @property
    def save_path(self) -> Path:
        return Path(self.config.save_file)

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    # -- reads --

    def snapshot(self) -> tuple[tuple[Goal, ...], int, int, int]:
        """Copies of the goals plus (score, level, points to next level)."""
        with self._lock:
            led = self._ledger
            goals = tuple(g.copy() for g in led.goals)
            return goals, led.score, led.level, led.points_to_next_level

    # -- writes --

    def add_goal(self, goal: Goal) -> int:
        with self._lock:
            return self._ledger.add_goal(goal)

    def record_event(self, index: int) -> tuple[int, int, int, int | None]:
        """Returns (points, score, level, level reached if it went up)."""
        with self._lock:
            led = self._ledger
            points = led.record_event(index)
            return points, led.score, led.level, led.last_level_up

    def save(self) -> int:
        with self._lock:
            self._ledger.save(self.save_path)
            return self._ledger.goal_count

    def load(self) -> bool:
        with self._lock:
            return self._ledger.load(self.save_path)
