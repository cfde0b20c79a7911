"""Tests for ledger save/load — format, round-trip, and partial recovery."""

import logging

import pytest

from eternal_quest.core.goals import ChecklistGoal, EternalGoal, SimpleGoal
from eternal_quest.core.ledger import QuestLedger


def _played_ledger() -> QuestLedger:
    ledger = QuestLedger()
    ledger.add_goal(SimpleGoal("Run a marathon", 1000))
    ledger.add_goal(EternalGoal("Read scriptures", 100))
    ledger.add_goal(ChecklistGoal("Attend the temple", 50, target=10, bonus=500))
    ledger.add_goal(SimpleGoal("Learn to juggle", 300))
    ledger.record_event(0)
    ledger.record_event(1)
    ledger.record_event(1)
    ledger.record_event(2)
    return ledger


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

class TestSerializeAll:
    def test_format(self):
        text = _played_ledger().serialize_all()
        assert text == (
            "1250\n"
            "4\n"
            "Simple|Run a marathon|1000|True\n"
            "Eternal|Read scriptures|100\n"
            "Checklist|Attend the temple|50|10|500|1\n"
            "Simple|Learn to juggle|300|False\n"
        )

    def test_empty_ledger(self):
        assert QuestLedger().serialize_all() == "0\n0\n"

    def test_round_trip_reproduces_ledger(self):
        original = _played_ledger()
        restored = QuestLedger()
        assert restored.deserialize_all(original.serialize_all()) == 4
        assert restored.score == original.score
        assert restored.level == original.level
        assert restored.goals == original.goals

    def test_restored_goals_keep_behaving(self):
        restored = QuestLedger()
        restored.deserialize_all(_played_ledger().serialize_all())
        assert restored.record_event(0) == 0      # simple already done
        assert restored.record_event(1) == 100    # eternal keeps paying
        assert restored.goal(2).completed_count == 1
        assert restored.record_event(3) == 300


# ---------------------------------------------------------------------------
# Deserialization recovery
# ---------------------------------------------------------------------------

class TestDeserializeAll:
    def test_replaces_rather_than_merges(self):
        ledger = _played_ledger()
        ledger.deserialize_all("5\n1\nEternal|Only one|5\n")
        assert ledger.score == 5
        assert ledger.goals == (EternalGoal("Only one", 5),)

    def test_malformed_lines_are_skipped(self, caplog):
        text = (
            "300\n"
            "4\n"
            "Simple|Good|100|False\n"
            "Simple|Bad points|lots|False\n"
            "Weekly|Unknown tag|10\n"
            "Eternal|Also good|20\n"
        )
        ledger = QuestLedger()
        with caplog.at_level(logging.WARNING, logger="eternal_quest.core.ledger"):
            assert ledger.deserialize_all(text) == 2
        assert [g.description for g in ledger.goals] == ["Good", "Also good"]
        assert ledger.score == 300
        assert "line 4" in caplog.text
        assert "line 5" in caplog.text

    def test_fewer_lines_than_declared(self):
        ledger = QuestLedger()
        assert ledger.deserialize_all("0\n3\nEternal|a|1\n") == 1

    def test_extra_lines_beyond_count_ignored(self):
        ledger = QuestLedger()
        assert ledger.deserialize_all("0\n1\nEternal|a|1\nEternal|b|2\n") == 1
        assert ledger.goals[0].description == "a"

    def test_windows_line_endings(self):
        ledger = QuestLedger()
        ledger.deserialize_all("10\r\n1\r\nSimple|a|10|True\r\n")
        assert ledger.score == 10
        assert ledger.goals[0].is_completed()

    def test_level_follows_loaded_score(self):
        ledger = QuestLedger()
        ledger.add_goal(SimpleGoal("big", 5000))
        ledger.record_event(0)
        assert ledger.level == 5
        ledger.deserialize_all("1500\n0\n")
        assert ledger.level == 1

    @pytest.mark.parametrize(
        "text", ["", "\n", "42\n", "abc\n1\n", "10\nmany\n", "1_000\n0\n", "10\n\u0661\n"],
    )
    def test_bad_header_leaves_state_unchanged(self, text, caplog):
        ledger = _played_ledger()
        before = ledger.serialize_all()
        with caplog.at_level(logging.WARNING, logger="eternal_quest.core.ledger"):
            assert ledger.deserialize_all(text) is None
        assert ledger.serialize_all() == before
        assert any("nothing loaded" in r.getMessage() for r in caplog.records)

    def test_empty_header_line_is_a_noop(self):
        ledger = _played_ledger()
        before = ledger.serialize_all()
        assert ledger.deserialize_all("\n\n") is None
        assert ledger.serialize_all() == before


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------

class TestSaveLoad:
    def test_save_then_load(self, tmp_path):
        path = tmp_path / "quest.txt"
        original = _played_ledger()
        original.save(path)

        restored = QuestLedger()
        assert restored.load(path) is True
        assert restored.serialize_all() == original.serialize_all()

    def test_load_records_event(self, tmp_path):
        path = tmp_path / "quest.txt"
        _played_ledger().save(path)
        restored = QuestLedger()
        restored.load(str(path))
        assert restored.event_log.latest(1)[0].category == "load"

    def test_missing_file_is_a_noop(self, tmp_path):
        ledger = _played_ledger()
        before = ledger.serialize_all()
        assert ledger.load(tmp_path / "nope.txt") is False
        assert ledger.serialize_all() == before

    def test_unreadable_file_is_a_noop(self, tmp_path):
        ledger = _played_ledger()
        before = ledger.serialize_all()
        # A directory exists but cannot be read as text
        assert ledger.load(tmp_path) is False
        assert ledger.serialize_all() == before

    def test_non_utf8_file_is_a_noop(self, tmp_path):
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfe\x00garbage")
        ledger = _played_ledger()
        assert ledger.load(path) is False
        assert ledger.score == 1250

    def test_corrupt_header_is_a_noop(self, tmp_path):
        path = tmp_path / "quest.txt"
        path.write_text("not a score\n", encoding="utf-8")
        ledger = _played_ledger()
        assert ledger.load(path) is False
        assert ledger.goal_count == 4
