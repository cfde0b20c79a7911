"""Tests for the goal variants — award rules, completion, display helpers."""

import pytest

from eternal_quest.core.enums import GoalKind
from eternal_quest.core.errors import UnknownGoalKindError
from eternal_quest.core.goals import (
    ChecklistGoal,
    EternalGoal,
    Goal,
    SimpleGoal,
    make_goal,
)


# ---------------------------------------------------------------------------
# Simple goal
# ---------------------------------------------------------------------------

class TestSimpleGoal:
    def test_first_event_pays_and_completes(self):
        g = SimpleGoal("Run a marathon", 1000)
        assert not g.is_completed()
        assert g.record_event() == 1000
        assert g.is_completed()

    def test_later_events_pay_nothing(self):
        g = SimpleGoal("Run a marathon", 1000)
        g.record_event()
        for _ in range(5):
            assert g.record_event() == 0
            assert g.is_completed()

    def test_can_start_completed(self):
        g = SimpleGoal("Done already", 50, completed=True)
        assert g.is_completed()
        assert g.record_event() == 0

    def test_completion_mark(self):
        g = SimpleGoal("Read a book", 100)
        assert g.completion_mark() == "[ ]"
        g.record_event()
        assert g.completion_mark() == "[X]"
        assert g.progress_text() == ""


# ---------------------------------------------------------------------------
# Eternal goal
# ---------------------------------------------------------------------------

class TestEternalGoal:
    def test_every_event_pays(self):
        g = EternalGoal("Read scriptures", 100)
        for _ in range(50):
            assert g.record_event() == 100
            assert not g.is_completed()

    def test_never_marked_complete(self):
        g = EternalGoal("Read scriptures", 100)
        g.record_event()
        assert g.completion_mark() == "[ ]"


# ---------------------------------------------------------------------------
# Checklist goal
# ---------------------------------------------------------------------------

class TestChecklistGoal:
    def test_example_sequence(self):
        g = ChecklistGoal("Attend the temple", 10, target=3, bonus=50)
        assert [g.record_event() for _ in range(3)] == [10, 10, 60]
        assert g.record_event() == 0
        assert g.completed_count == 3

    def test_completes_exactly_at_target(self):
        g = ChecklistGoal("Go to the gym", 25, target=5, bonus=200)
        for n in range(1, 5):
            assert g.record_event() == 25
            assert not g.is_completed(), f"completed early at call {n}"
        assert g.record_event() == 225
        assert g.is_completed()

    def test_bonus_paid_only_once(self):
        g = ChecklistGoal("Stretch", 5, target=1, bonus=100)
        assert g.record_event() == 105
        assert g.record_event() == 0
        assert g.record_event() == 0

    def test_restored_progress(self):
        g = ChecklistGoal("Stretch", 5, target=4, bonus=20, completed_count=3)
        assert g.progress_text() == "Completed 3/4"
        assert g.record_event() == 25
        assert g.progress_text() == "Completed 4/4"

    def test_count_past_target_is_completed(self):
        g = ChecklistGoal("Over", 5, target=2, bonus=20, completed_count=7)
        assert g.is_completed()
        assert g.record_event() == 0

    def test_zero_target_is_already_complete(self):
        g = ChecklistGoal("Nothing to do", 5, target=0, bonus=20)
        assert g.is_completed()
        assert g.record_event() == 0

    def test_to_dict_includes_progress(self):
        g = ChecklistGoal("Stretch", 5, target=4, bonus=20, completed_count=1)
        d = g.to_dict()
        assert d["kind"] == "Checklist"
        assert d["target"] == 4
        assert d["bonus"] == 20
        assert d["completed_count"] == 1
        assert d["progress"] == "Completed 1/4"
        assert d["mark"] == "[ ]"


# ---------------------------------------------------------------------------
# Shared behaviour
# ---------------------------------------------------------------------------

class TestGoalBase:
    def test_goal_is_abstract(self):
        with pytest.raises(TypeError):
            Goal("x", 1)  # type: ignore[abstract]

    def test_description_is_read_only(self):
        g = EternalGoal("Pray", 10)
        with pytest.raises(AttributeError):
            g.description = "Changed"  # type: ignore[misc]

    def test_copy_is_independent(self):
        g = ChecklistGoal("Stretch", 5, target=3, bonus=20, completed_count=1)
        c = g.copy()
        assert c == g
        c.record_event()
        assert c.completed_count == 2
        assert g.completed_count == 1
        assert c != g

    def test_equality_compares_variant_and_state(self):
        assert SimpleGoal("a", 1) == SimpleGoal("a", 1)
        assert SimpleGoal("a", 1) != SimpleGoal("a", 1, completed=True)
        assert SimpleGoal("a", 1) != EternalGoal("a", 1)

    def test_negative_points_accepted_as_given(self):
        g = EternalGoal("Penalty", -10)
        assert g.points == -10
        assert g.record_event() == -10


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------

class TestMakeGoal:
    @pytest.mark.parametrize("name,cls", [
        ("simple", SimpleGoal),
        ("Eternal", EternalGoal),
        ("CHECKLIST", ChecklistGoal),
        (GoalKind.SIMPLE, SimpleGoal),
    ])
    def test_builds_each_kind(self, name, cls):
        g = make_goal(name, "desc", 10, target=3, bonus=5)
        assert isinstance(g, cls)
        assert g.description == "desc"
        assert g.points == 10
        assert not g.is_completed()

    def test_checklist_gets_target_and_bonus(self):
        g = make_goal("checklist", "desc", 10, target=3, bonus=5)
        assert isinstance(g, ChecklistGoal)
        assert (g.target, g.bonus, g.completed_count) == (3, 5, 0)

    def test_unknown_kind(self):
        with pytest.raises(UnknownGoalKindError) as exc_info:
            make_goal("weekly", "desc", 10)
        assert exc_info.value.kind == "weekly"
        assert isinstance(exc_info.value, ValueError)

    def test_goal_kind_parse_is_case_insensitive(self):
        assert GoalKind.parse(" simple ") is GoalKind.SIMPLE
        assert GoalKind("checklist") is GoalKind.CHECKLIST
        with pytest.raises(ValueError):
            GoalKind.parse("bogus")
