"""Interactive console menu for the quest ledger.

All prompting, input parsing and printing happen here; the ledger itself
never touches the console. ``input_fn``/``output_fn`` are injectable so the
menu can be driven from tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from eternal_quest.core.enums import GoalKind
from eternal_quest.core.goals import make_goal
from eternal_quest.core.ledger import QuestLedger

logger = logging.getLogger(__name__)

MENU = (
    "\nMenu Options:",
    "1. Create New Goal",
    "2. Record Event",
    "3. Display Goals",
    "4. Display Score",
    "5. Save Progress",
    "6. Load Progress",
    "7. Quit",
)


class InvalidNumber(ValueError):
    """User typed something that is not a whole number."""


class ConsoleDriver:
    """Menu loop that maps numbered choices onto ledger operations."""

    def __init__(
        self,
        ledger: QuestLedger,
        save_path: str | Path,
        input_fn: Callable[[str], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self._ledger = ledger
        self._save_path = Path(save_path)
        self._input = input_fn if input_fn is not None else input
        self._print = output_fn if output_fn is not None else print
        self._actions: dict[str, Callable[[], bool]] = {
            "1": self.create_goal,
            "2": self.record_event,
            "3": self.display_goals,
            "4": self.display_score,
            "5": self.save,
            "6": self.load,
            "7": self.quit,
        }

    @property
    def ledger(self) -> QuestLedger:
        return self._ledger

    # -- loop --

    def run(self) -> None:
        self._print("Welcome to Eternal Quest!")
        while True:
            for line in MENU:
                self._print(line)
            try:
                choice = self._input("Select option: ").strip()
            except EOFError:
                self.quit()
                return
            action = self._actions.get(choice)
            if action is None:
                self._print("Invalid option.")
                continue
            try:
                keep_going = action()
            except EOFError:
                self.quit()
                return
            except InvalidNumber as exc:
                self._print(str(exc))
                continue
            if not keep_going:
                return

    # -- prompts --

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str) -> int:
        raw = self._ask(prompt)
        try:
            return int(raw)
        except ValueError:
            raise InvalidNumber(f"'{raw}' is not a whole number.") from None

    # -- actions (return False to leave the loop) --

    def create_goal(self) -> bool:
        kind_name = self._ask("Goal type (simple/eternal/checklist): ")
        try:
            kind = GoalKind.parse(kind_name)
        except ValueError:
            self._print("Invalid type.")
            return True

        description = self._ask("Description: ")
        points = self._ask_int("Points per completion: ")
        target, bonus = 1, 0
        if kind is GoalKind.CHECKLIST:
            target = self._ask_int("Target completions: ")
            bonus = self._ask_int("Bonus points: ")

        self._ledger.add_goal(make_goal(kind, description, points, target=target, bonus=bonus))
        self._print("Goal created!")
        return True

    def record_event(self) -> bool:
        if self._ledger.goal_count == 0:
            self._print("No goals yet. Create some first!")
            return True
        self._print_goals()
        raw = self._ask("Which goal (number)? ")
        try:
            number = int(raw)
        except ValueError:
            number = 0
        if not 1 <= number <= self._ledger.goal_count:
            self._print("Invalid selection.")
            return True

        points = self._ledger.record_event(number - 1)
        if points > 0:
            self._print(f"You earned {points} points!")
        else:
            self._print("No points awarded (goal already complete or invalid).")
        if self._ledger.last_level_up is not None:
            self._print(f"\nCongratulations! You've reached level {self._ledger.last_level_up}!")
        return True

    def display_goals(self) -> bool:
        if self._ledger.goal_count == 0:
            self._print("No goals yet.")
        else:
            self._print_goals()
        return True

    def display_score(self) -> bool:
        self._print("\n--- Score ---")
        self._print(f"You have {self._ledger.score} points.")
        self._print(f"Level: {self._ledger.level}")
        self._print("---")
        return True

    def save(self) -> bool:
        try:
            self._ledger.save(self._save_path)
        except OSError as exc:
            logger.error("Save to %s failed: %s", self._save_path, exc)
            self._print(f"Could not save progress: {exc.strerror or exc}")
            return True
        self._print("Progress saved!")
        return True

    def load(self) -> bool:
        if self._ledger.load(self._save_path):
            self._print("Progress loaded!")
        else:
            self._print("No saved progress could be loaded.")
        return True

    def quit(self) -> bool:
        self._print("Thanks for playing Eternal Quest!")
        return False

    # -- rendering --

    def _print_goals(self) -> None:
        self._print("\n--- Goals ---")
        for line in format_goal_lines(self._ledger):
            self._print(line)
        self._print("---")


def format_goal_lines(ledger: QuestLedger) -> list[str]:
    """``"<n>. <mark> <progress> - <description>"`` for each goal, 1-based."""
    lines = []
    for number, goal in enumerate(ledger.goals, start=1):
        parts = [f"{number}.", goal.completion_mark()]
        progress = goal.progress_text()
        if progress:
            parts.append(progress)
        parts.append(f"- {goal.description}")
        lines.append(" ".join(parts))
    return lines
