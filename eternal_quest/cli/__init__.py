"""Console driver."""

from eternal_quest.cli.console import ConsoleDriver, format_goal_lines

__all__ = ["ConsoleDriver", "format_goal_lines"]
