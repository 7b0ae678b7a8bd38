"""Engine modules for Cultivator integration.

Contains pure computation engines (no Home Assistant imports):
- tier_engine: Tier ordering, succession and evolution ladder
- path_registry: Path/level configuration lookup and reward helpers
- progression_engine: Level-up loop and inactivity decay
- completion_engine: Daily COMPLETE / REVERSE state machine
- quest_engine: Difficulty escalation, rewards and day rollover planning
- chronos_engine: Daily path progress, streaks and day snapshots
"""

from .chronos_engine import ChronosEngine
from .completion_engine import CompletionEngine, CompletionOutcome
from .path_registry import (
    DuplicateLevelError,
    LevelConfig,
    PathConfig,
    PathMetadata,
    PathRegistry,
    PathSubtask,
    PathTask,
    TaskRewards,
    TrialConfig,
    TrialRewards,
)
from .progression_engine import DecayResult, LevelUpResult, ProgressionEngine
from .quest_engine import QuestEngine, QuestToggle, QuestUpdate
from .tier_engine import TierEngine

__all__ = [
    "ChronosEngine",
    "CompletionEngine",
    "CompletionOutcome",
    "DecayResult",
    "DuplicateLevelError",
    "LevelConfig",
    "LevelUpResult",
    "PathConfig",
    "PathMetadata",
    "PathRegistry",
    "PathSubtask",
    "PathTask",
    "ProgressionEngine",
    "QuestEngine",
    "QuestToggle",
    "QuestUpdate",
    "TaskRewards",
    "TierEngine",
    "TrialConfig",
    "TrialRewards",
]
