"""Chronos Manager - Day boundary processing and daily path tasks.

Responsibilities:
1. Timer Owner - registers the daily reset `async_track_time_change` and
   emits SIGNAL_SUFFIX_MIDNIGHT_ROLLOVER on each tick
2. Daily Reset - per owner, once per local day:
   snapshot yesterday, evaluate streaks, clear stale completed_today, roll quests
   into today, reset daily coin counters, stamp last_reset_date
3. Startup catch-up - runs the reset for owners whose last_reset_date is
   stale (Home Assistant was down over the boundary)
4. Path tasks - toggle_path_task() maintains the daily path progress row,
   grows the streak when a day first reaches 100% and pays task rewards

Each owner's reset is a single atomic commit.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any
import uuid

from homeassistant.core import callback
from homeassistant.helpers.event import async_track_time_change

from .. import const
from ..engines.chronos_engine import ChronosEngine
from ..engines.quest_engine import QuestEngine
from ..store import (
    apply_coin_delta,
    apply_identity_changes,
    apply_quest_changes,
    apply_stat_delta,
    ensure_profile,
    upsert_daily_path_progress,
)
from ..utils import dt_utils
from .base_manager import BaseManager, operation_result

if TYPE_CHECKING:
    from ..type_defs import OperationResult


class ChronosManager(BaseManager):
    """Manager for day-boundary processing."""

    async def async_setup(self) -> None:
        """Register the daily timer and the rollover listener."""
        self.coordinator.config_entry.async_on_unload(
            async_track_time_change(
                self.hass,
                self._on_midnight_tick,
                hour=self.coordinator.daily_reset_hour,
                minute=0,
                second=0,
            )
        )
        self.listen(
            const.SIGNAL_SUFFIX_MIDNIGHT_ROLLOVER, self._handle_midnight_rollover
        )
        const.LOGGER.debug(
            "ChronosManager initialized: daily reset at %02d:00 for entry %s",
            self.coordinator.daily_reset_hour,
            self.entry_id,
        )

    # =========================================================================
    # Triggers
    # =========================================================================

    @callback
    def _on_midnight_tick(self, now: datetime) -> None:
        """Handle the daily timer tick."""
        const.LOGGER.debug("ChronosManager: Midnight rollover triggered")
        self.emit(
            const.SIGNAL_SUFFIX_MIDNIGHT_ROLLOVER,
            today=dt_utils.dt_to_iso_date(now),
        )

    async def _handle_midnight_rollover(self, payload: dict[str, Any]) -> None:
        """Run the daily reset for every owner."""
        today = payload.get("today") or dt_utils.dt_today_local().isoformat()
        await self.async_run_daily_reset_for_all(today)

    async def async_run_startup_catchup(self, today: str | date) -> list[str]:
        """Run the daily reset for owners whose last reset is before today.

        Returns:
            Owner ids that were reset.
        """
        today_iso = dt_utils.dt_to_iso_date(today)
        stale: list[str] = []
        for owner_id in self.store.get_owner_ids():
            last_reset = self.store.get_profile(owner_id).get(
                const.DATA_PROFILE_LAST_RESET_DATE
            )
            if last_reset is None or last_reset < today_iso:
                stale.append(owner_id)

        if not stale:
            const.LOGGER.debug("ChronosManager: Startup catch-up not needed")
            return []

        const.LOGGER.info(
            "INFO: Startup daily reset catch-up for %s owner(s) on %s",
            len(stale),
            today_iso,
        )
        for owner_id in stale:
            await self.execute_daily_reset(owner_id, today_iso)
        await self._async_stamp_midnight_processed()
        return stale

    async def async_run_daily_reset_for_all(
        self, today: str | date
    ) -> list[OperationResult]:
        """Run the daily reset for every known owner."""
        results = [
            await self.execute_daily_reset(owner_id, today)
            for owner_id in self.store.get_owner_ids()
        ]
        await self._async_stamp_midnight_processed()
        return results

    async def _async_stamp_midnight_processed(self) -> None:
        """Record when the last rollover ran."""
        processed_at = dt_utils.dt_now_utc().isoformat()

        def _mutate(data: dict[str, Any]) -> None:
            meta = data.setdefault(const.DATA_META, {})
            meta[const.DATA_META_LAST_MIDNIGHT_PROCESSED] = processed_at

        await self.store.async_apply(_mutate)

    # =========================================================================
    # Daily reset
    # =========================================================================

    async def execute_daily_reset(
        self, owner_id: str, today: str | date
    ) -> OperationResult:
        """Close the previous day and open today for one owner.

        Guarded by the profile's last_reset_date: a second call for the same
        day is skipped and changes nothing.
        """
        today_iso = dt_utils.dt_to_iso_date(today)
        profile = self.store.get_profile(owner_id)
        if profile.get(const.DATA_PROFILE_LAST_RESET_DATE) == today_iso:
            return operation_result(
                False,
                const.MSG_DAILY_RESET_SKIPPED.format(today_iso),
                {"skipped": True},
            )

        yesterday = dt_utils.dt_previous_day_iso(today_iso)
        identities = [
            identity
            for identity in self.store.get_identities_for_owner(owner_id)
            if identity.get(const.DATA_IDENTITY_IS_ACTIVE, True)
        ]
        quests = self.store.get_quests_for_owner(owner_id)

        path_stats = []
        identity_changes: dict[str, dict[str, Any]] = {}
        for identity in identities:
            identity_id = identity[const.DATA_INTERNAL_ID]
            progress = self.store.get_daily_path_progress(
                owner_id, identity_id, yesterday
            )
            streak_after = ChronosEngine.evaluate_streak(
                int(identity.get(const.DATA_IDENTITY_CURRENT_STREAK, 0)), progress
            )
            path_stats.append(
                ChronosEngine.build_path_stat(identity, progress, streak_after)
            )
            changes: dict[str, Any] = {
                const.DATA_IDENTITY_CURRENT_STREAK: streak_after,
            }
            if ChronosEngine.should_clear_completed_today(identity, today_iso):
                changes[const.DATA_IDENTITY_COMPLETED_TODAY] = False
            identity_changes[identity_id] = changes

        record = ChronosEngine.build_daily_record(
            str(uuid.uuid4()),
            owner_id,
            yesterday,
            path_stats,
            ChronosEngine.count_quests_completed_on(quests, yesterday),
            int(profile.get(const.DATA_PROFILE_COINS_EARNED_TODAY, 0)),
            dt_utils.dt_now_utc(),
        )
        quest_updates = QuestEngine.plan_rollover(quests, today_iso)

        def _mutate(data: dict[str, Any]) -> None:
            data[const.DATA_DAILY_RECORDS][record[const.DATA_INTERNAL_ID]] = record
            for identity_id, changes in identity_changes.items():
                apply_identity_changes(data, identity_id, changes)
            for update in quest_updates:
                apply_quest_changes(data, update.quest_id, update.changes)
            profile_data = ensure_profile(data, owner_id)
            profile_data[const.DATA_PROFILE_COINS_EARNED_TODAY] = 0
            profile_data[const.DATA_PROFILE_LAST_RESET_DATE] = today_iso

        await self._async_commit(_mutate)

        const.LOGGER.info(
            "INFO: Daily reset for owner '%s' on %s: %s paths, %s quests rolled over",
            owner_id,
            today_iso,
            len(identity_changes),
            len(quest_updates),
        )
        if quest_updates:
            self.emit(
                const.SIGNAL_SUFFIX_QUESTS_ROLLED_OVER,
                owner_id=owner_id,
                quest_ids=[update.quest_id for update in quest_updates],
            )
        self.emit(const.SIGNAL_SUFFIX_DAILY_RESET, owner_id=owner_id, date=today_iso)

        return operation_result(
            True,
            const.MSG_DAILY_RESET_DONE,
            {
                "skipped": False,
                "record": record,
                "quests_rolled_over": len(quest_updates),
            },
        )

    # =========================================================================
    # Daily path tasks
    # =========================================================================

    async def toggle_path_task(
        self,
        identity_id: str,
        task_id: str,
        completed: bool,
        now: datetime,
        subtask_ids: list[str] | None = None,
    ) -> OperationResult:
        """Check or uncheck one of today's path tasks (a gate id).

        Checking pays the level's task coins and stat points; unchecking takes
        them back (floored at zero). The streak grows the first time a day
        reaches 100%.
        """
        identity = self.store.get_entity(identity_id)
        if identity is None:
            return operation_result(
                False, const.MSG_IDENTITY_NOT_FOUND_FMT.format(identity_id)
            )

        owner_id = identity[const.DATA_OWNER_ID]
        path_type = identity[const.DATA_IDENTITY_PATH_TYPE]
        level = int(identity.get(const.DATA_IDENTITY_LEVEL, 1))
        level_config = self.registry.get_level_config(path_type, level)
        if level_config is None:
            return operation_result(
                False, f"No tasks configured for {path_type} level {level}"
            )
        gate_ids = [task.gate for task in level_config.tasks]
        if task_id not in gate_ids:
            return operation_result(False, f"Unknown task '{task_id}'")

        day = dt_utils.dt_to_iso_date(now)
        existing = self.store.get_daily_path_progress(owner_id, identity_id, day)
        completed_ids = (
            existing[const.DATA_PROGRESS_COMPLETED_TASK_IDS] if existing else []
        )
        if (task_id in completed_ids) == completed:
            return operation_result(True, "Task unchanged", {"progress": existing})

        subtask_done = (
            existing[const.DATA_PROGRESS_COMPLETED_SUBTASK_IDS] if existing else []
        )
        if completed:
            subtask_done = subtask_done + list(subtask_ids or [])
        else:
            subtask_done = [
                item for item in subtask_done if item not in (subtask_ids or [])
            ]

        row = ChronosEngine.build_daily_path_progress(
            owner_id,
            identity_id,
            day,
            len(gate_ids),
            ChronosEngine.toggle_task_id(completed_ids, task_id, completed),
            subtask_done,
        )
        streak_changes = ChronosEngine.plan_streak_increment(
            identity,
            day,
            ChronosEngine.is_day_completed(existing),
            ChronosEngine.is_day_completed(row),
        )
        rewards = self.registry.get_task_rewards(path_type, level)
        sign = 1 if completed else -1

        def _mutate(data: dict[str, Any]) -> int:
            upsert_daily_path_progress(data, row)
            if streak_changes:
                apply_identity_changes(data, identity_id, streak_changes)
            apply_stat_delta(
                data, owner_id, rewards.primary_stat, sign * rewards.stat_points
            )
            return apply_coin_delta(data, owner_id, sign * rewards.coins)

        balance = await self._async_commit(_mutate)

        if streak_changes:
            const.LOGGER.info(
                "INFO: Identity '%s' completed all tasks for %s (streak %s)",
                identity_id,
                day,
                streak_changes[const.DATA_IDENTITY_CURRENT_STREAK],
            )

        return operation_result(
            True,
            "Task checked" if completed else "Task unchecked",
            {
                "progress": row,
                "coins": balance,
                "streak": streak_changes.get(
                    const.DATA_IDENTITY_CURRENT_STREAK,
                    identity.get(const.DATA_IDENTITY_CURRENT_STREAK, 0),
                ),
            },
        )
