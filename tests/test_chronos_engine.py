"""Tests for ChronosEngine - daily path progress, streaks and records."""

from __future__ import annotations

from datetime import UTC, datetime

from custom_components.cultivator import const
from custom_components.cultivator.engines.chronos_engine import ChronosEngine
from tests.helpers import make_identity, make_quest


class TestDailyPathProgress:
    """Test progress rows."""

    def test_percentage_and_status(self) -> None:
        """Two of five tasks is 40% and pending."""
        row = ChronosEngine.build_daily_path_progress(
            "owner-1", "identity-1", "2026-03-10", 5, ["a", "b"]
        )
        assert row[const.DATA_PROGRESS_TASKS_COMPLETED] == 2
        assert row[const.DATA_PROGRESS_PERCENTAGE] == 40
        assert row[const.DATA_PROGRESS_STATUS] == const.PROGRESS_STATUS_PENDING

    def test_full_day_completed(self) -> None:
        """All tasks done marks the row completed."""
        row = ChronosEngine.build_daily_path_progress(
            "owner-1", "identity-1", "2026-03-10", 2, ["a", "b"]
        )
        assert row[const.DATA_PROGRESS_PERCENTAGE] == 100
        assert row[const.DATA_PROGRESS_STATUS] == const.PROGRESS_STATUS_COMPLETED
        assert ChronosEngine.is_day_completed(row)

    def test_duplicates_ignored(self) -> None:
        """Repeated ids count once."""
        row = ChronosEngine.build_daily_path_progress(
            "owner-1", "identity-1", "2026-03-10", 3, ["a", "a", "b"], ["s", "s"]
        )
        assert row[const.DATA_PROGRESS_TASKS_COMPLETED] == 2
        assert row[const.DATA_PROGRESS_COMPLETED_SUBTASK_IDS] == ["s"]

    def test_toggle_task_id(self) -> None:
        """Toggling adds once and removes cleanly."""
        assert ChronosEngine.toggle_task_id(["a"], "b", True) == ["a", "b"]
        assert ChronosEngine.toggle_task_id(["a", "b"], "a", False) == ["b"]
        assert ChronosEngine.toggle_task_id(["a"], "a", True) == ["a"]


class TestStreaks:
    """Test streak evaluation and increments."""

    def test_streak_survives_completed_yesterday(self) -> None:
        """A completed yesterday keeps the streak."""
        row = ChronosEngine.build_daily_path_progress(
            "owner-1", "identity-1", "2026-03-10", 1, ["a"]
        )
        assert ChronosEngine.evaluate_streak(4, row) == 4

    def test_streak_breaks_without_full_day(self) -> None:
        """A missing or partial yesterday resets the streak."""
        partial = ChronosEngine.build_daily_path_progress(
            "owner-1", "identity-1", "2026-03-10", 2, ["a"]
        )
        assert ChronosEngine.evaluate_streak(4, partial) == 0
        assert ChronosEngine.evaluate_streak(4, None) == 0

    def test_increment_once_per_day(self) -> None:
        """The first 100% of a day grows the streak; later ones do not."""
        identity = make_identity(current_streak=2, longest_streak=2)
        changes = ChronosEngine.plan_streak_increment(
            identity, "2026-03-10", False, True
        )
        assert changes == {
            const.DATA_IDENTITY_CURRENT_STREAK: 3,
            const.DATA_IDENTITY_LONGEST_STREAK: 3,
            const.DATA_IDENTITY_LAST_STREAK_DATE: "2026-03-10",
        }
        identity.update(changes)
        assert (
            ChronosEngine.plan_streak_increment(identity, "2026-03-10", False, True)
            == {}
        )

    def test_clear_completed_today_only_for_earlier_day(self) -> None:
        """The completion flag is cleared only when it was set before today."""
        stale = make_identity(
            completed_today=True, last_updated="2026-03-09T20:00:00+00:00"
        )
        fresh = make_identity(
            completed_today=True, last_updated="2026-03-10T07:00:00+00:00"
        )
        assert ChronosEngine.should_clear_completed_today(stale, "2026-03-10")
        assert not ChronosEngine.should_clear_completed_today(fresh, "2026-03-10")
        assert not ChronosEngine.should_clear_completed_today(
            make_identity(), "2026-03-11"
        )

    def test_no_increment_without_completion(self) -> None:
        """Partial days and already-complete days change nothing."""
        identity = make_identity()
        assert ChronosEngine.plan_streak_increment(identity, "d", False, False) == {}
        assert ChronosEngine.plan_streak_increment(identity, "d", True, True) == {}


class TestDailyRecord:
    """Test daily record helpers."""

    def test_count_quests_completed_on_local_day(self) -> None:
        """Only quests completed on the given day count."""
        quests = [
            make_quest(completed_at="2026-03-10T08:00:00+00:00"),
            make_quest(completed_at="2026-03-11T08:00:00+00:00"),
            make_quest(completed_at=None),
        ]
        assert ChronosEngine.count_quests_completed_on(quests, "2026-03-10") == 1

    def test_build_daily_record(self) -> None:
        """A record carries the path stats and totals."""
        identity = make_identity(current_streak=3)
        stat = ChronosEngine.build_path_stat(identity, None, 0)
        record = ChronosEngine.build_daily_record(
            "rec-1",
            "owner-1",
            "2026-03-10",
            [stat],
            2,
            40,
            datetime(2026, 3, 11, 0, 0, tzinfo=UTC),
        )
        assert stat["streak_before"] == 3
        assert stat["streak_after"] == 0
        assert stat["total_count"] == 0
        assert record[const.DATA_RECORD_QUESTS_COMPLETED] == 2
        assert record[const.DATA_RECORD_TOTAL_COINS_EARNED] == 40
        assert record[const.DATA_RECORD_PATH_STATS] == [stat]
