"""Quest Manager - Quest CRUD, completion rewards and day rollover.

Orchestrates QuestEngine plans and commits them through the store. Quest and
profile changes that belong together (completion + coins, a whole rollover
batch) are written in one atomic commit.

Signals Emitted:
- SIGNAL_SUFFIX_QUEST_COMPLETED: after a completion toggle
- SIGNAL_SUFFIX_QUESTS_ROLLED_OVER: after a rollover batch touched quests
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any
import uuid

from .. import const
from ..engines.quest_engine import QuestEngine
from ..store import apply_coin_delta, apply_quest_changes
from ..utils.dt_utils import dt_parse_date, dt_to_iso_date
from .base_manager import BaseManager, operation_result

if TYPE_CHECKING:
    from ..engines.quest_engine import QuestUpdate
    from ..type_defs import OperationResult, QuestData


class QuestManager(BaseManager):
    """Manager for quests."""

    async def async_setup(self) -> None:
        """Set up the quest manager."""
        const.LOGGER.debug("QuestManager initialized for entry %s", self.entry_id)

    # =========================================================================
    # CRUD
    # =========================================================================

    def get_quests_for_owner(self, owner_id: str) -> list[QuestData]:
        """Return every quest of an owner."""
        return self.store.get_quests_for_owner(owner_id)

    async def add_quest(
        self,
        owner_id: str,
        title: str,
        today: str | date,
        *,
        quest_date: str | date | None = None,
        project: str = "",
        hour: str | None = None,
        difficulty: str = const.DIFFICULTY_EASY,
        is_recurring: bool = False,
        subtasks: list[str] | None = None,
    ) -> OperationResult:
        """Add a quest dated quest_date (default today).

        Quests dated after today go to the backlog.
        """
        today_iso = dt_to_iso_date(today)
        date_iso = dt_to_iso_date(quest_date) if quest_date else today_iso
        status = (
            const.QUEST_STATUS_BACKLOG
            if dt_parse_date(date_iso) > dt_parse_date(today_iso)
            else const.QUEST_STATUS_TODAY
        )
        quest: QuestData = {
            const.DATA_INTERNAL_ID: str(uuid.uuid4()),
            const.DATA_OWNER_ID: owner_id,
            const.DATA_QUEST_TITLE: title,
            const.DATA_QUEST_PROJECT: project,
            const.DATA_QUEST_DATE: date_iso,
            const.DATA_QUEST_HOUR: hour,
            const.DATA_QUEST_STATUS: status,
            const.DATA_QUEST_DIFFICULTY: difficulty,
            const.DATA_QUEST_BASE_DIFFICULTY: difficulty,
            const.DATA_QUEST_DAYS_NOT_COMPLETED: 0,
            const.DATA_QUEST_IS_RECURRING: is_recurring,
            const.DATA_QUEST_SUBTASKS: [
                {
                    const.DATA_INTERNAL_ID: str(uuid.uuid4()),
                    const.DATA_SUBTASK_TITLE: subtask_title,
                    const.DATA_SUBTASK_COMPLETED: False,
                }
                for subtask_title in subtasks or []
            ],
            const.DATA_QUEST_COMPLETED_AT: None,
        }  # type: ignore[typeddict-unknown-key]

        await self.store.async_add_quest(quest)
        self.coordinator.async_set_updated_data(self.store.data)
        const.LOGGER.debug(
            "DEBUG: Added quest '%s' for owner '%s' on %s", title, owner_id, date_iso
        )
        return operation_result(True, "Quest added", {"quest": dict(quest)})

    async def delete_quest(self, quest_id: str) -> OperationResult:
        """Delete a quest."""
        if not await self.store.async_delete_quest(quest_id):
            return operation_result(
                False, const.MSG_QUEST_NOT_FOUND_FMT.format(quest_id)
            )
        self.coordinator.async_set_updated_data(self.store.data)
        return operation_result(True, "Quest deleted")

    async def add_subtask(self, quest_id: str, title: str) -> OperationResult:
        """Append an open subtask to a quest."""
        if self.store.get_quest(quest_id) is None:
            return operation_result(
                False, const.MSG_QUEST_NOT_FOUND_FMT.format(quest_id)
            )

        subtask = {
            const.DATA_INTERNAL_ID: str(uuid.uuid4()),
            const.DATA_SUBTASK_TITLE: title,
            const.DATA_SUBTASK_COMPLETED: False,
        }

        def _mutate(data: dict[str, Any]) -> None:
            quest = data[const.DATA_QUESTS][quest_id]
            quest.setdefault(const.DATA_QUEST_SUBTASKS, []).append(subtask)

        await self._async_commit(_mutate)
        return operation_result(True, "Subtask added", {"subtask": dict(subtask)})

    # =========================================================================
    # Completion
    # =========================================================================

    async def complete_quest(self, quest_id: str, now: datetime) -> OperationResult:
        """Toggle a quest's completion and credit/debit its coin reward.

        Quest and profile are committed together; the balance floors at zero.
        """
        quest = self.store.get_quest(quest_id)
        if quest is None:
            return operation_result(
                False, const.MSG_QUEST_NOT_FOUND_FMT.format(quest_id)
            )

        toggle = QuestEngine.plan_toggle_completion(quest, now)
        owner_id = quest[const.DATA_OWNER_ID]

        def _mutate(data: dict[str, Any]) -> int:
            apply_quest_changes(data, quest_id, toggle.changes)
            return apply_coin_delta(data, owner_id, toggle.coin_delta)

        balance = await self._async_commit(_mutate)

        const.LOGGER.info(
            "INFO: Quest '%s' %s (%+d coins, balance %s)",
            quest_id,
            "completed" if toggle.completed else "reopened",
            toggle.coin_delta,
            balance,
        )
        self.emit(
            const.SIGNAL_SUFFIX_QUEST_COMPLETED,
            quest_id=quest_id,
            owner_id=owner_id,
            completed=toggle.completed,
            coin_delta=toggle.coin_delta,
        )
        return operation_result(
            True,
            const.MSG_QUEST_COMPLETED if toggle.completed else const.MSG_QUEST_REOPENED,
            {
                "quest": {**quest, **toggle.changes},
                "coin_delta": toggle.coin_delta,
                "coins": balance,
            },
        )

    # =========================================================================
    # Rollover
    # =========================================================================

    def plan_rollover(self, owner_id: str, new_date: str | date) -> list[QuestUpdate]:
        """Return the rollover plan of an owner's quests for new_date."""
        return QuestEngine.plan_rollover(
            self.store.get_quests_for_owner(owner_id), new_date
        )

    async def batch_update_quests_for_new_day(
        self, owner_id: str, new_date: str | date
    ) -> list[QuestData]:
        """Roll an owner's quests into new_date in one atomic commit.

        Idempotent: a second call for the same new_date changes nothing.

        Returns:
            The quests that were updated, in their new state.
        """
        updates = self.plan_rollover(owner_id, new_date)
        if not updates:
            const.LOGGER.debug(
                "DEBUG: No quests to roll over for owner '%s' on %s",
                owner_id,
                new_date,
            )
            return []

        def _mutate(data: dict[str, Any]) -> None:
            for update in updates:
                apply_quest_changes(data, update.quest_id, update.changes)

        await self._async_commit(_mutate)

        updated = [self.store.get_quest(update.quest_id) for update in updates]
        const.LOGGER.info(
            "INFO: Rolled over %s quests for owner '%s' to %s",
            len(updates),
            owner_id,
            new_date,
        )
        self.emit(
            const.SIGNAL_SUFFIX_QUESTS_ROLLED_OVER,
            owner_id=owner_id,
            quest_ids=[update.quest_id for update in updates],
        )
        return [quest for quest in updated if quest is not None]
