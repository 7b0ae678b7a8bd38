"""Chronos Engine - Pure logic for daily path progress, streaks and day snapshots.

This engine provides stateless functions for:
- Building the daily path progress row after a task toggle
- Deciding whether a streak survives the day boundary
- Building the snapshot record of a closed day

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
The ChronosManager reads state, calls these builders and commits the result.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.dt_utils import dt_parse, dt_to_iso_date
from ..utils.math_utils import calculate_percentage

if TYPE_CHECKING:
    from ..type_defs import (
        DailyPathProgressData,
        DailyRecordData,
        IdentityData,
        PathStatData,
        QuestData,
    )


class ChronosEngine:
    """Pure logic engine for day-boundary bookkeeping.

    All methods are static - no instance state.
    """

    @staticmethod
    def build_daily_path_progress(
        owner_id: str,
        path_id: str,
        day: str,
        tasks_total: int,
        completed_task_ids: list[str],
        completed_subtask_ids: list[str] | None = None,
    ) -> DailyPathProgressData:
        """Build the progress row of one path for one day."""
        task_ids = list(dict.fromkeys(completed_task_ids))
        tasks_completed = len(task_ids)
        if tasks_total:
            tasks_completed = min(tasks_completed, tasks_total)
        percentage = calculate_percentage(tasks_completed, tasks_total)
        return {
            const.DATA_OWNER_ID: owner_id,
            const.DATA_PROGRESS_PATH_ID: path_id,
            const.DATA_PROGRESS_DATE: day,
            const.DATA_PROGRESS_TASKS_TOTAL: tasks_total,
            const.DATA_PROGRESS_TASKS_COMPLETED: tasks_completed,
            const.DATA_PROGRESS_PERCENTAGE: percentage,
            const.DATA_PROGRESS_STATUS: (
                const.PROGRESS_STATUS_COMPLETED
                if percentage >= 100
                else const.PROGRESS_STATUS_PENDING
            ),
            const.DATA_PROGRESS_COMPLETED_TASK_IDS: task_ids,
            const.DATA_PROGRESS_COMPLETED_SUBTASK_IDS: list(
                dict.fromkeys(completed_subtask_ids or [])
            ),
        }  # type: ignore[return-value]

    @staticmethod
    def toggle_task_id(
        completed_task_ids: list[str], task_id: str, completed: bool
    ) -> list[str]:
        """Return the completed id list with task_id added or removed."""
        task_ids = [item for item in completed_task_ids if item != task_id]
        if completed:
            task_ids.append(task_id)
        return task_ids

    @staticmethod
    def is_day_completed(progress: DailyPathProgressData | None) -> bool:
        """Return True when a progress row reached 100%."""
        if not progress:
            return False
        return progress.get(const.DATA_PROGRESS_PERCENTAGE, 0) >= 100

    @staticmethod
    def should_clear_completed_today(identity: IdentityData, today: str) -> bool:
        """Return True when the completed_today flag belongs to an earlier day.

        A completion made on today's date itself keeps its flag, so a reset
        that runs late (startup catch-up, a reset hour after midnight) never
        re-opens it.
        """
        if not identity.get(const.DATA_IDENTITY_COMPLETED_TODAY):
            return False
        last_updated = dt_parse(identity.get(const.DATA_IDENTITY_LAST_UPDATED))
        if last_updated is None:
            return True
        return dt_to_iso_date(last_updated) < today

    @staticmethod
    def evaluate_streak(
        current_streak: int, yesterday_progress: DailyPathProgressData | None
    ) -> int:
        """Return the streak carried past the day boundary.

        A missing row or an incomplete yesterday breaks the streak.
        """
        if not ChronosEngine.is_day_completed(yesterday_progress):
            return 0
        return current_streak

    @staticmethod
    def plan_streak_increment(
        identity: IdentityData, day: str, was_completed: bool, is_completed: bool
    ) -> dict[str, Any]:
        """Return identity changes when a day first reaches 100%.

        The streak grows at most once per day, tracked by last_streak_date.
        """
        if was_completed or not is_completed:
            return {}
        if identity.get(const.DATA_IDENTITY_LAST_STREAK_DATE) == day:
            return {}
        streak = int(identity.get(const.DATA_IDENTITY_CURRENT_STREAK, 0)) + 1
        longest = max(int(identity.get(const.DATA_IDENTITY_LONGEST_STREAK, 0)), streak)
        return {
            const.DATA_IDENTITY_CURRENT_STREAK: streak,
            const.DATA_IDENTITY_LONGEST_STREAK: longest,
            const.DATA_IDENTITY_LAST_STREAK_DATE: day,
        }

    @staticmethod
    def build_path_stat(
        identity: IdentityData,
        progress: DailyPathProgressData | None,
        streak_after: int,
    ) -> PathStatData:
        """Build one path line of a daily record."""
        return {
            "path_id": identity[const.DATA_INTERNAL_ID],
            "path_name": identity.get(const.DATA_IDENTITY_TITLE)
            or identity[const.DATA_IDENTITY_PATH_TYPE],
            "completed_count": (
                progress.get(const.DATA_PROGRESS_TASKS_COMPLETED, 0) if progress else 0
            ),
            "total_count": (
                progress.get(const.DATA_PROGRESS_TASKS_TOTAL, 0) if progress else 0
            ),
            "streak_before": int(identity.get(const.DATA_IDENTITY_CURRENT_STREAK, 0)),
            "streak_after": streak_after,
        }

    @staticmethod
    def count_quests_completed_on(quests: list[QuestData], day: str) -> int:
        """Return how many quests were completed on the given local day."""
        count = 0
        for quest in quests:
            completed_at = quest.get(const.DATA_QUEST_COMPLETED_AT)
            completed_dt = dt_parse(completed_at)
            if completed_dt and dt_to_iso_date(completed_dt) == day:
                count += 1
        return count

    @staticmethod
    def build_daily_record(
        record_id: str,
        owner_id: str,
        day: str,
        path_stats: list[PathStatData],
        quests_completed: int,
        total_coins_earned: int,
        created_at: datetime,
    ) -> DailyRecordData:
        """Build the snapshot record of a closed day."""
        return {
            const.DATA_INTERNAL_ID: record_id,
            const.DATA_OWNER_ID: owner_id,
            const.DATA_RECORD_DATE: day,
            const.DATA_RECORD_PATH_STATS: path_stats,
            const.DATA_RECORD_QUESTS_COMPLETED: quests_completed,
            const.DATA_RECORD_TOTAL_COINS_EARNED: total_coins_earned,
            const.DATA_RECORD_CREATED_AT: created_at.isoformat(),
        }  # type: ignore[return-value]
