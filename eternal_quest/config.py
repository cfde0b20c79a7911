"""Application configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuestConfig:
    """Immutable configuration shared by the console and HTTP drivers."""

    # Scoring
    points_per_level: int = 1000

    # Persistence
    save_file: str = "eternal_quest.txt"
    load_on_start: bool = False            # Load save_file before the first prompt/request

    # Event feed
    event_log_size: int = 500              # Ledger events retained for GET /events

    # HTTP server
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "WARNING"
