"""Quest Engine - Pure logic for quest escalation, rewards and day rollover.

This engine provides stateless functions for:
- Escalating difficulty by consecutive days a quest was left incomplete
- Coin rewards by difficulty
- Planning the day-boundary rollover of a quest set (idempotent per date)
- Planning a completion toggle on a single quest

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data. Plans are
returned as QuestUpdate lists; the QuestManager commits them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.dt_utils import (
    days_between_dates,
    dt_parse,
    dt_parse_date,
    dt_to_iso_date,
)

if TYPE_CHECKING:
    from ..type_defs import QuestData


@dataclass
class QuestUpdate:
    """Planned partial update of one quest."""

    quest_id: str
    changes: dict[str, Any] = field(default_factory=dict)


@dataclass
class QuestToggle:
    """Planned completion toggle of one quest and its coin delta."""

    quest_id: str
    completed: bool
    coin_delta: int
    changes: dict[str, Any] = field(default_factory=dict)


class QuestEngine:
    """Pure logic engine for quests.

    All methods are static - no instance state.
    """

    # -------------------------------------------------------------------------
    # Escalation and rewards
    # -------------------------------------------------------------------------

    @staticmethod
    def difficulty_rank(difficulty: str | None) -> int:
        """Return the position of a difficulty (unknown ranks as Easy)."""
        if difficulty in const.DIFFICULTIES_ASCENDING:
            return const.DIFFICULTIES_ASCENDING.index(difficulty)
        return 0

    @staticmethod
    def escalate_difficulty(current: str | None, days_not_completed: int) -> str:
        """Return the difficulty for a quest left incomplete this many days.

        20+ days is Hell, 10+ is Hard, 3+ is Difficult. A banked difficulty is
        never lowered by escalation.
        """
        base = current
        if base not in const.DIFFICULTIES_ASCENDING:
            base = const.DIFFICULTY_EASY
        for threshold, difficulty in const.QUEST_ESCALATION_THRESHOLDS:
            if days_not_completed < threshold:
                continue
            base_rank = QuestEngine.difficulty_rank(base)
            if QuestEngine.difficulty_rank(difficulty) > base_rank:
                return difficulty
            return base
        return base

    @staticmethod
    def get_coin_reward(difficulty: str | None) -> int:
        """Return coins granted for completing a quest of this difficulty."""
        return const.QUEST_COIN_REWARDS.get(
            difficulty, const.QUEST_COIN_REWARDS[const.DIFFICULTY_EASY]
        )

    # -------------------------------------------------------------------------
    # Rollover
    # -------------------------------------------------------------------------

    @staticmethod
    def is_completed(quest: QuestData) -> bool:
        """Return True for a quest in completed status."""
        return quest.get(const.DATA_QUEST_STATUS) == const.QUEST_STATUS_COMPLETED

    @staticmethod
    def needs_rollover(quest: QuestData, today: str | date) -> bool:
        """Return True when the quest must be carried into today."""
        quest_date = dt_parse_date(quest.get(const.DATA_QUEST_DATE))
        today_date = dt_parse_date(today)
        if quest_date is None or today_date is None or quest_date >= today_date:
            return False
        if quest.get(const.DATA_QUEST_IS_RECURRING):
            return True
        return not QuestEngine.is_completed(quest)

    @staticmethod
    def plan_quest_rollover(quest: QuestData, today: str | date) -> QuestUpdate | None:
        """Plan the rollover of a single quest, or None when untouched.

        Incomplete quests gain one missed day per calendar day skipped and
        have their difficulty escalated. A recurring quest starts a fresh
        cycle: a completed cycle resets the counter and restores the base
        difficulty, an incomplete one escalates as above.
        """
        if not QuestEngine.needs_rollover(quest, today):
            return None

        today_iso = dt_to_iso_date(today)
        # Every calendar day since the quest date counts as missed, not one per run
        gap = max(1, days_between_dates(quest[const.DATA_QUEST_DATE], today_iso))
        missed = int(quest.get(const.DATA_QUEST_DAYS_NOT_COMPLETED, 0))
        current = quest.get(const.DATA_QUEST_DIFFICULTY, const.DIFFICULTY_EASY)
        base = quest.get(const.DATA_QUEST_BASE_DIFFICULTY, current)

        changes: dict[str, Any] = {
            const.DATA_QUEST_DATE: today_iso,
            const.DATA_QUEST_STATUS: const.QUEST_STATUS_TODAY,
        }

        recurring = bool(quest.get(const.DATA_QUEST_IS_RECURRING))
        if recurring and QuestEngine.is_completed(quest):
            changes[const.DATA_QUEST_DAYS_NOT_COMPLETED] = 0
            changes[const.DATA_QUEST_DIFFICULTY] = base
        else:
            missed += gap
            changes[const.DATA_QUEST_DAYS_NOT_COMPLETED] = missed
            changes[const.DATA_QUEST_DIFFICULTY] = QuestEngine.escalate_difficulty(
                current, missed
            )

        if recurring:
            changes[const.DATA_QUEST_COMPLETED_AT] = None
            changes[const.DATA_QUEST_SUBTASKS] = [
                {**subtask, const.DATA_SUBTASK_COMPLETED: False}
                for subtask in quest.get(const.DATA_QUEST_SUBTASKS, [])
            ]

        return QuestUpdate(quest_id=quest[const.DATA_INTERNAL_ID], changes=changes)

    @staticmethod
    def plan_rollover(quests: list[QuestData], today: str | date) -> list[QuestUpdate]:
        """Plan the rollover of a quest set for a new day.

        Running the plan twice for the same today yields an empty second plan
        because every touched quest is re-dated to today.
        """
        updates: list[QuestUpdate] = []
        for quest in quests:
            update = QuestEngine.plan_quest_rollover(quest, today)
            if update is not None:
                updates.append(update)
        return updates

    # -------------------------------------------------------------------------
    # Completion toggle
    # -------------------------------------------------------------------------

    @staticmethod
    def plan_toggle_completion(quest: QuestData, now: str | datetime) -> QuestToggle:
        """Plan completing an open quest or reopening a completed one.

        Completing credits the difficulty reward; reopening debits it. A
        reopened quest dated after now's day goes back to the backlog.
        """
        reward = QuestEngine.get_coin_reward(quest.get(const.DATA_QUEST_DIFFICULTY))
        quest_id = quest[const.DATA_INTERNAL_ID]

        if QuestEngine.is_completed(quest):
            quest_date = dt_parse_date(quest.get(const.DATA_QUEST_DATE))
            reopen_day = dt_parse_date(dt_to_iso_date(now))
            status = (
                const.QUEST_STATUS_BACKLOG
                if quest_date is not None and quest_date > reopen_day
                else const.QUEST_STATUS_TODAY
            )
            return QuestToggle(
                quest_id=quest_id,
                completed=False,
                coin_delta=-reward,
                changes={
                    const.DATA_QUEST_STATUS: status,
                    const.DATA_QUEST_COMPLETED_AT: None,
                },
            )

        now_dt = dt_parse(now)
        return QuestToggle(
            quest_id=quest_id,
            completed=True,
            coin_delta=reward,
            changes={
                const.DATA_QUEST_STATUS: const.QUEST_STATUS_COMPLETED,
                const.DATA_QUEST_COMPLETED_AT: now_dt.isoformat() if now_dt else now,
            },
        )
