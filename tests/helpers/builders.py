"""Builders for stored records and path configs used across tests."""

from __future__ import annotations

from typing import Any

from custom_components.cultivator import const
from custom_components.cultivator.engines.path_registry import (
    LevelConfig,
    PathConfig,
    PathMetadata,
    PathTask,
)

UNIFORM_PATH_ID = "uniform-test-path"
TEMPERING_PATH_ID = "tempering-warrior-trainee"
PRESENCE_PATH_ID = "presence-mystic-training"


def build_uniform_path(
    path_id: str = UNIFORM_PATH_ID,
    days_per_level: int = 3,
    levels: int = 10,
    gates: int = 2,
) -> PathConfig:
    """Build a path whose every level needs the same number of days."""
    return PathConfig(
        metadata=PathMetadata(path_id=path_id, name="Uniform"),
        levels=tuple(
            LevelConfig(
                level=level,
                days_required=days_per_level,
                reward_coins=5,
                reward_stat_points=1,
                tasks=tuple(
                    PathTask(gate=f"gate_{index}", name=f"Gate {index}")
                    for index in range(1, gates + 1)
                ),
            )
            for level in range(1, levels + 1)
        ),
    )


def make_identity(**overrides: Any) -> dict[str, Any]:
    """Build a stored identity dict; keyword overrides replace defaults."""
    identity = {
        const.DATA_INTERNAL_ID: "identity-1",
        const.DATA_OWNER_ID: "owner-1",
        const.DATA_IDENTITY_PATH_TYPE: UNIFORM_PATH_ID,
        const.DATA_IDENTITY_TITLE: "Uniform",
        const.DATA_IDENTITY_TIER: const.TIER_D,
        const.DATA_IDENTITY_LEVEL: 1,
        const.DATA_IDENTITY_PROGRESS: 0,
        const.DATA_IDENTITY_PROGRESS_REQUIRED: 3,
        const.DATA_IDENTITY_COMPLETED_TODAY: False,
        const.DATA_IDENTITY_LAST_UPDATED: "2026-03-10T12:00:00+00:00",
        const.DATA_IDENTITY_IS_ACTIVE: True,
        const.DATA_IDENTITY_CREATED_AT: "2026-03-10T12:00:00+00:00",
        const.DATA_IDENTITY_CURRENT_STREAK: 0,
        const.DATA_IDENTITY_LONGEST_STREAK: 0,
        const.DATA_IDENTITY_LAST_STREAK_DATE: None,
    }
    identity.update(overrides)
    return identity


def make_quest(**overrides: Any) -> dict[str, Any]:
    """Build a stored quest dict; keyword overrides replace defaults."""
    quest = {
        const.DATA_INTERNAL_ID: "quest-1",
        const.DATA_OWNER_ID: "owner-1",
        const.DATA_QUEST_TITLE: "Write report",
        const.DATA_QUEST_PROJECT: "",
        const.DATA_QUEST_DATE: "2026-03-10",
        const.DATA_QUEST_HOUR: None,
        const.DATA_QUEST_STATUS: const.QUEST_STATUS_TODAY,
        const.DATA_QUEST_DIFFICULTY: const.DIFFICULTY_EASY,
        const.DATA_QUEST_BASE_DIFFICULTY: const.DIFFICULTY_EASY,
        const.DATA_QUEST_DAYS_NOT_COMPLETED: 0,
        const.DATA_QUEST_IS_RECURRING: False,
        const.DATA_QUEST_SUBTASKS: [],
        const.DATA_QUEST_COMPLETED_AT: None,
    }
    quest.update(overrides)
    return quest
