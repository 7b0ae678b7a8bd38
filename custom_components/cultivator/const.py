# File: const.py
"""Constants for the Cultivator integration.

This file centralizes configuration keys, defaults, storage keys, tier and
difficulty tables, service names and user-facing messages so the engines,
managers and services all agree on the same values.
"""

import logging

from homeassistant.const import Platform
import homeassistant.util.dt as dt_util

from .utils import dt_utils


def set_default_timezone(hass):
    """Set the default timezone based on the Home Assistant configuration."""
    global DEFAULT_TIME_ZONE
    DEFAULT_TIME_ZONE = dt_util.get_time_zone(hass.config.time_zone)
    if DEFAULT_TIME_ZONE is not None:
        dt_utils.set_default_timezone(DEFAULT_TIME_ZONE)


# ------------------------------------------------------------------------------------------------
# General / Integration Information
# ------------------------------------------------------------------------------------------------
# Integration Name
CULTIVATOR_TITLE = "Identity Cultivator"

# Integration Domain
DOMAIN = "cultivator"

# Logger
LOGGER = logging.getLogger(__package__)

# Supported Platforms
PLATFORMS = [
    Platform.SENSOR,
]

# Coordinator
COORDINATOR = "coordinator"
COORDINATOR_SUFFIX = "_coordinator"

# Storage and Versioning
STORE = "store"
STORAGE_KEY = "cultivator_data"
STORAGE_VERSION = 1

# Default timezone: initially None, to be set once hass is available.
DEFAULT_TIME_ZONE = None

# ------------------------------------------------------------------------------------------------
# Configuration Keys (options flow)
# ------------------------------------------------------------------------------------------------
CONF_DECAY_THRESHOLD_DAYS = "decay_threshold_days"
CONF_LEVEL_CAP = "level_cap"
CONF_DAILY_RESET_HOUR = "daily_reset_hour"
CONF_TITLE = "title"

DEFAULT_DECAY_THRESHOLD_DAYS = 3
DEFAULT_LEVEL_CAP = 10
DEFAULT_DAILY_RESET_HOUR = 0
DEFAULT_DAILY_RESET_TIME = {"hour": 0, "minute": 0, "second": 0}

MIN_DECAY_THRESHOLD_DAYS = 1
MAX_DECAY_THRESHOLD_DAYS = 30
MIN_LEVEL_CAP = 1
MAX_LEVEL_CAP = 50

# ------------------------------------------------------------------------------------------------
# Storage Buckets
# ------------------------------------------------------------------------------------------------
DATA_META = "meta"
DATA_META_SCHEMA_VERSION = "schema_version"
DATA_META_LAST_MIDNIGHT_PROCESSED = "last_midnight_processed"

DATA_IDENTITIES = "identities"
DATA_QUESTS = "quests"
DATA_DAILY_PATH_PROGRESS = "daily_path_progress"
DATA_PROFILES = "profiles"
DATA_DAILY_RECORDS = "daily_records"

SCHEMA_VERSION_CURRENT = 1

# ------------------------------------------------------------------------------------------------
# Identity (TrackedEntity) Fields
# ------------------------------------------------------------------------------------------------
DATA_INTERNAL_ID = "internal_id"
DATA_OWNER_ID = "owner_id"
DATA_IDENTITY_PATH_TYPE = "path_type"
DATA_IDENTITY_TITLE = "title"
DATA_IDENTITY_TIER = "tier"
DATA_IDENTITY_LEVEL = "level"
DATA_IDENTITY_PROGRESS = "accumulated_progress"
DATA_IDENTITY_PROGRESS_REQUIRED = "progress_required_for_level"
DATA_IDENTITY_COMPLETED_TODAY = "completed_today"
DATA_IDENTITY_LAST_UPDATED = "last_updated"
DATA_IDENTITY_IS_ACTIVE = "is_active"
DATA_IDENTITY_CREATED_AT = "created_at"
DATA_IDENTITY_CURRENT_STREAK = "current_streak"
DATA_IDENTITY_LONGEST_STREAK = "longest_streak"
DATA_IDENTITY_LAST_STREAK_DATE = "last_streak_date"

# ------------------------------------------------------------------------------------------------
# Quest Fields
# ------------------------------------------------------------------------------------------------
DATA_QUEST_TITLE = "title"
DATA_QUEST_PROJECT = "project"
DATA_QUEST_DATE = "date"
DATA_QUEST_HOUR = "hour"
DATA_QUEST_STATUS = "status"
DATA_QUEST_DIFFICULTY = "difficulty"
DATA_QUEST_BASE_DIFFICULTY = "base_difficulty"
DATA_QUEST_DAYS_NOT_COMPLETED = "days_not_completed"
DATA_QUEST_IS_RECURRING = "is_recurring"
DATA_QUEST_SUBTASKS = "subtasks"
DATA_QUEST_COMPLETED_AT = "completed_at"
DATA_SUBTASK_TITLE = "title"
DATA_SUBTASK_COMPLETED = "completed"

QUEST_STATUS_TODAY = "today"
QUEST_STATUS_BACKLOG = "backlog"
QUEST_STATUS_COMPLETED = "completed"
QUEST_STATUSES = [QUEST_STATUS_TODAY, QUEST_STATUS_BACKLOG, QUEST_STATUS_COMPLETED]

# ------------------------------------------------------------------------------------------------
# Daily Path Progress Fields
# ------------------------------------------------------------------------------------------------
DATA_PROGRESS_PATH_ID = "path_id"
DATA_PROGRESS_DATE = "date"
DATA_PROGRESS_TASKS_TOTAL = "tasks_total"
DATA_PROGRESS_TASKS_COMPLETED = "tasks_completed"
DATA_PROGRESS_PERCENTAGE = "percentage"
DATA_PROGRESS_STATUS = "status"
DATA_PROGRESS_COMPLETED_TASK_IDS = "completed_task_ids"
DATA_PROGRESS_COMPLETED_SUBTASK_IDS = "completed_subtask_ids"

PROGRESS_STATUS_PENDING = "PENDING"
PROGRESS_STATUS_COMPLETED = "COMPLETED"

# ------------------------------------------------------------------------------------------------
# Profile / Daily Record Fields
# ------------------------------------------------------------------------------------------------
DATA_PROFILE_COINS = "coins"
DATA_PROFILE_STAT_POINTS = "stat_points"
DATA_PROFILE_LAST_RESET_DATE = "last_reset_date"
DATA_PROFILE_COINS_EARNED_TODAY = "coins_earned_today"

DATA_RECORD_DATE = "date"
DATA_RECORD_PATH_STATS = "path_stats"
DATA_RECORD_QUESTS_COMPLETED = "quests_completed"
DATA_RECORD_TOTAL_COINS_EARNED = "total_coins_earned"
DATA_RECORD_CREATED_AT = "created_at"

# ------------------------------------------------------------------------------------------------
# Tiers
# ------------------------------------------------------------------------------------------------
TIER_D = "D"
TIER_D_PLUS = "D+"
TIER_C = "C"
TIER_C_PLUS = "C+"
TIER_B = "B"
TIER_B_PLUS = "B+"
TIER_A = "A"
TIER_A_PLUS = "A+"
TIER_S = "S"
TIER_S_PLUS = "S+"
TIER_SS = "SS"
TIER_SS_PLUS = "SS+"
TIER_SSS = "SSS"

TIERS_ASCENDING = [
    TIER_D,
    TIER_D_PLUS,
    TIER_C,
    TIER_C_PLUS,
    TIER_B,
    TIER_B_PLUS,
    TIER_A,
    TIER_A_PLUS,
    TIER_S,
    TIER_S_PLUS,
    TIER_SS,
    TIER_SS_PLUS,
    TIER_SSS,
]

# Major tiers an identity evolves through when it passes the level cap
TIERS_EVOLUTION = [TIER_D, TIER_C, TIER_B, TIER_A, TIER_S, TIER_SS, TIER_SSS]

# Days per level when a path has no level config for the tier
TIER_DEFAULT_DAYS_PER_LEVEL = {
    TIER_D: 5,
    TIER_C: 10,
    TIER_B: 15,
    TIER_A: 20,
    TIER_S: 13,
    TIER_SS: 16,
    TIER_SSS: 19,
}
DEFAULT_DAYS_PER_LEVEL = 10

# ------------------------------------------------------------------------------------------------
# Stats
# ------------------------------------------------------------------------------------------------
STAT_BODY = "BODY"
STAT_MIND = "MIND"
STAT_SOUL = "SOUL"
STATS = [STAT_BODY, STAT_MIND, STAT_SOUL]

# ------------------------------------------------------------------------------------------------
# Quest Difficulty
# ------------------------------------------------------------------------------------------------
DIFFICULTY_EASY = "Easy"
DIFFICULTY_MODERATE = "Moderate"
DIFFICULTY_DIFFICULT = "Difficult"
DIFFICULTY_HARD = "Hard"
DIFFICULTY_HELL = "Hell"

DIFFICULTIES_ASCENDING = [
    DIFFICULTY_EASY,
    DIFFICULTY_MODERATE,
    DIFFICULTY_DIFFICULT,
    DIFFICULTY_HARD,
    DIFFICULTY_HELL,
]

QUEST_COIN_REWARDS = {
    DIFFICULTY_EASY: 10,
    DIFFICULTY_MODERATE: 20,
    DIFFICULTY_DIFFICULT: 30,
    DIFFICULTY_HARD: 40,
    DIFFICULTY_HELL: 50,
}

# (days_not_completed threshold, difficulty) checked from the top down
QUEST_ESCALATION_THRESHOLDS = [
    (20, DIFFICULTY_HELL),
    (10, DIFFICULTY_HARD),
    (3, DIFFICULTY_DIFFICULT),
]

# ------------------------------------------------------------------------------------------------
# Completion Actions
# ------------------------------------------------------------------------------------------------
COMPLETION_ACTION_COMPLETE = "COMPLETE"
COMPLETION_ACTION_REVERSE = "REVERSE"
COMPLETION_ACTIONS = [COMPLETION_ACTION_COMPLETE, COMPLETION_ACTION_REVERSE]

# ------------------------------------------------------------------------------------------------
# Messages
# ------------------------------------------------------------------------------------------------
MSG_TASK_COMPLETED = "Task completed!"
MSG_ALREADY_COMPLETED_TODAY = "Already completed today"
MSG_TASK_REVERSED = "Task completion reversed"
MSG_CANNOT_REVERSE_PREVIOUS_DAYS = "Cannot reverse task from previous days"
MSG_UNKNOWN_ACTION = "Unknown action"
MSG_DECAY_FMT = "Lost {} days due to inactivity."
MSG_LEVEL_UP_FMT = "Level up to {}!"
MSG_EVOLVED_FMT = "Evolved to {} tier!"
MSG_IDENTITY_NOT_FOUND_FMT = "Identity '{}' not found"
MSG_QUEST_NOT_FOUND_FMT = "Quest '{}' not found"
MSG_PATH_NOT_REGISTERED_FMT = "Path '{}' is not registered"
MSG_DUPLICATE_IDENTITY_FMT = (
    "Owner already has a {} identity. Only one of each path is allowed."
)
MSG_IDENTITY_CREATED = "Identity created"
MSG_IDENTITY_DELETED = "Identity deleted"
MSG_QUEST_COMPLETED = "Quest completed"
MSG_QUEST_REOPENED = "Quest reopened"
MSG_DAILY_RESET_DONE = "Daily reset complete"
MSG_DAILY_RESET_SKIPPED = "Daily reset already ran for {}"
MSG_NO_ENTRY_FOUND = "No Cultivator entry found"

# ------------------------------------------------------------------------------------------------
# Services
# ------------------------------------------------------------------------------------------------
SERVICE_CREATE_IDENTITY = "create_identity"
SERVICE_DELETE_IDENTITY = "delete_identity"
SERVICE_UPDATE_PROGRESS = "update_progress"
SERVICE_TOGGLE_PATH_TASK = "toggle_path_task"
SERVICE_ADD_QUEST = "add_quest"
SERVICE_COMPLETE_QUEST = "complete_quest"
SERVICE_DELETE_QUEST = "delete_quest"
SERVICE_ADVANCE_DAY = "advance_day"

FIELD_OWNER_ID = "owner_id"
FIELD_PATH_TYPE = "path_type"
FIELD_TITLE = "title"
FIELD_IDENTITY_ID = "identity_id"
FIELD_ACTION = "action"
FIELD_TASK_ID = "task_id"
FIELD_COMPLETED = "completed"
FIELD_SUBTASK_IDS = "subtask_ids"
FIELD_QUEST_ID = "quest_id"
FIELD_PROJECT = "project"
FIELD_DATE = "date"
FIELD_HOUR = "hour"
FIELD_DIFFICULTY = "difficulty"
FIELD_IS_RECURRING = "is_recurring"
FIELD_SUBTASKS = "subtasks"

# ------------------------------------------------------------------------------------------------
# Signals (instance-scoped via get_event_signal)
# ------------------------------------------------------------------------------------------------
SIGNAL_SUFFIX_IDENTITY_CREATED = "identity_created"
SIGNAL_SUFFIX_IDENTITY_DELETED = "identity_deleted"
SIGNAL_SUFFIX_PROGRESS_UPDATED = "progress_updated"
SIGNAL_SUFFIX_LEVEL_UP = "level_up"
SIGNAL_SUFFIX_QUEST_COMPLETED = "quest_completed"
SIGNAL_SUFFIX_QUESTS_ROLLED_OVER = "quests_rolled_over"
SIGNAL_SUFFIX_MIDNIGHT_ROLLOVER = "midnight_rollover"
SIGNAL_SUFFIX_DAILY_RESET = "daily_reset"

# ------------------------------------------------------------------------------------------------
# Config Flow
# ------------------------------------------------------------------------------------------------
CONFIG_FLOW_STEP_USER = "user"
OPTIONS_FLOW_STEP_INIT = "init"
TRANS_KEY_ERROR_SINGLE_INSTANCE = "single_instance_allowed"

# ------------------------------------------------------------------------------------------------
# Sensors
# ------------------------------------------------------------------------------------------------
SENSOR_ICON_IDENTITY = "mdi:sprout"
SENSOR_ICON_COINS = "mdi:hand-coin"
SENSOR_UNIT_COINS = "coins"

ATTR_IDENTITY_ID = "identity_id"
ATTR_OWNER_ID = "owner_id"
ATTR_PATH_TYPE = "path_type"
ATTR_TIER = "tier"
ATTR_PROGRESS = "progress"
ATTR_PROGRESS_REQUIRED = "progress_required"
ATTR_COMPLETED_TODAY = "completed_today"
ATTR_CURRENT_STREAK = "current_streak"
ATTR_LONGEST_STREAK = "longest_streak"
ATTR_STAT_POINTS = "stat_points"
ATTR_COINS_EARNED_TODAY = "coins_earned_today"

TRANS_KEY_SENSOR_IDENTITY = "identity"
TRANS_KEY_SENSOR_COINS = "coins"
TRANS_KEY_SENSOR_ATTR_TITLE = "title"
TRANS_KEY_SENSOR_ATTR_OWNER = "owner"
