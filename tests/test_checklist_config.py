"""
Unit tests for the default checklist template.
"""
from collections import Counter
from datetime import datetime, timezone

from wedding_planner.config.checklist_config import PHASES, DEFAULT_TASKS, build_default_task_rows


class TestDefaultChecklist:

    def test_phases_are_in_calendar_order(self):
        assert PHASES == [
            "12+ Months Before",
            "8-12 Months Before",
            "4-8 Months Before",
            "2-4 Months Before",
            "1-2 Months Before",
            "1 Week Before",
        ]

    def test_template_has_ten_tasks_per_phase(self):
        assert list(DEFAULT_TASKS) == PHASES
        for phase in PHASES:
            assert len(DEFAULT_TASKS[phase]) == 10

    def test_rows_for_new_profile(self):
        rows = build_default_task_rows("user-1")

        assert len(rows) == 60
        assert Counter(r["phase"] for r in rows) == {phase: 10 for phase in PHASES}
        assert all(r["user_id"] == "user-1" for r in rows)
        assert all(r["completed"] is False for r in rows)

    def test_rows_follow_template_order(self):
        rows = build_default_task_rows("user-1")

        assert rows[0]["task_name"] == "Set your wedding date"
        assert rows[0]["phase"] == "12+ Months Before"
        assert rows[10]["task_name"] == "Send save the dates"
        assert rows[-1]["task_name"] == "Final venue walkthrough"
        assert rows[-1]["phase"] == "1 Week Before"

    def test_created_at_strictly_increases(self):
        now = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)
        stamps = [datetime.fromisoformat(r["created_at"]) for r in build_default_task_rows("user-1", now=now)]

        assert stamps[0] == now
        assert all(a < b for a, b in zip(stamps, stamps[1:]))
