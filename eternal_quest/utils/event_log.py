"""Thread-safe bounded buffer of ledger events exposed via the API."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LedgerEvent:
    """A single observable ledger event (award, level-up, load, ...)."""

    seq: int
    category: str
    message: str
    goal_index: int | None = None
    points: int = 0


class EventLog:
    """Bounded event log. Writers append; readers snapshot a slice.

    Oldest events are dropped once ``maxlen`` is reached. Sequence numbers
    keep increasing across drops and ``clear()``.
    """

    __slots__ = ("_buffer", "_lock", "_next_seq")

    def __init__(self, maxlen: int = 500) -> None:
        self._buffer: deque[LedgerEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()
        self._next_seq = 0

    def append(
        self,
        category: str,
        message: str,
        goal_index: int | None = None,
        points: int = 0,
    ) -> LedgerEvent:
        with self._lock:
            event = LedgerEvent(self._next_seq, category, message, goal_index, points)
            self._next_seq += 1
            self._buffer.append(event)
        return event

    def since(self, seq: int) -> list[LedgerEvent]:
        """Return all retained events with sequence number >= *seq*."""
        with self._lock:
            return [e for e in self._buffer if e.seq >= seq]

    def latest(self, count: int = 50) -> list[LedgerEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:] if count > 0 else []

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)
