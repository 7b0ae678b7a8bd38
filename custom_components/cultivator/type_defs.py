"""Type definitions for Cultivator data structures.

Stored records (identities, quests, daily progress, profiles, daily records)
are plain JSON dicts; TypedDicts here describe their fixed keys for static
analysis only. Runtime defaults and null checks stay in the engines and
managers. Path content (levels, trials) is immutable configuration and is
modeled with frozen dataclasses in engines/path_registry.py instead.

IMPORTANT: This file must NOT import from managers or store to avoid circular
dependencies. Only typing machinery is imported here.
"""

from typing import Any, NotRequired, TypedDict

# =============================================================================
# Type Aliases (for readability)
# =============================================================================

IdentityId = str  # UUID string
QuestId = str  # UUID string
OwnerId = str  # Opaque owner/user identifier
PathId = str  # e.g. "tempering-warrior-trainee"
ISODatetime = str  # ISO 8601 datetime string "2026-01-18T12:30:00+00:00"
ISODate = str  # ISO 8601 date string (no time) "2026-01-18"


# =============================================================================
# Progression
# =============================================================================


class IdentityData(TypedDict):
    """A tracked identity advancing along one path.

    accumulated_progress stays below progress_required_for_level between
    operations.
    """

    internal_id: IdentityId
    owner_id: OwnerId
    path_type: PathId
    title: str
    tier: str
    level: int
    accumulated_progress: int
    progress_required_for_level: int
    completed_today: bool
    last_updated: ISODatetime
    is_active: bool
    created_at: ISODatetime
    current_streak: int
    longest_streak: int
    last_streak_date: ISODate | None


class DailyPathProgressData(TypedDict):
    """Per-day task completion for one identity's path.

    Unique per (owner_id, path_id, date).
    """

    owner_id: OwnerId
    path_id: IdentityId
    date: ISODate
    tasks_total: int
    tasks_completed: int
    percentage: int
    status: str  # PENDING | COMPLETED
    completed_task_ids: list[str]
    completed_subtask_ids: list[str]


# =============================================================================
# Quests
# =============================================================================


class SubtaskData(TypedDict):
    """Checklist item inside a quest."""

    internal_id: str
    title: str
    completed: bool


class QuestData(TypedDict):
    """A one-off or recurring quest."""

    internal_id: QuestId
    owner_id: OwnerId
    title: str
    project: str
    date: ISODate
    hour: NotRequired[str | None]
    status: str  # today | backlog | completed
    difficulty: str
    base_difficulty: str
    days_not_completed: int
    is_recurring: bool
    subtasks: list[SubtaskData]
    completed_at: ISODatetime | None


# =============================================================================
# Owner-level records
# =============================================================================


class ProfileData(TypedDict):
    """Owner wallet and daily-reset bookkeeping."""

    owner_id: OwnerId
    coins: int
    stat_points: dict[str, int]
    last_reset_date: ISODate | None
    coins_earned_today: int


class PathStatData(TypedDict):
    """One path's line in a daily record."""

    path_id: IdentityId
    path_name: str
    completed_count: int
    total_count: int
    streak_before: int
    streak_after: int


class DailyRecordData(TypedDict):
    """Snapshot of a closed day, written by the daily reset."""

    internal_id: str
    owner_id: OwnerId
    date: ISODate
    path_stats: list[PathStatData]
    quests_completed: int
    total_coins_earned: int
    created_at: ISODatetime


# =============================================================================
# Operation results (returned by managers and services)
# =============================================================================


class OperationResult(TypedDict):
    """Outcome of a manager operation."""

    success: bool
    message: str
    data: NotRequired[dict[str, Any]]


# Dynamic storage document: {bucket_name: {internal_id: record}}
StorageData = dict[str, Any]
