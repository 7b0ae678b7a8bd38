"""Completion Engine - Pure logic for the daily COMPLETE / REVERSE cycle.

An identity can be completed at most once per local calendar day. COMPLETE
applies inactivity decay, adds one unit of progress and runs the level-up
loop. REVERSE takes the unit back on the same day only.

Known asymmetry: REVERSE does not undo a level-up or evolution caused by the
COMPLETE it reverses. The identity keeps its new level and only loses one
unit of progress (floored at zero).

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
plan_update() never mutates its input; it returns the field changes for the
manager to commit in one storage write.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from .. import const
from ..utils.dt_utils import dt_parse, is_same_local_day
from .progression_engine import ProgressionEngine

if TYPE_CHECKING:
    from ..type_defs import IdentityData
    from .path_registry import PathRegistry


# =============================================================================
# COMPLETION OUTCOME DATA STRUCTURE
# =============================================================================


@dataclass
class CompletionOutcome:
    """Planned effect of a completion action on one identity.

    Attributes:
        success: Whether the action is allowed
        message: Human-readable summary (failure reason or progress notes)
        changes: Identity fields to write (empty on failure)
        leveled_up: At least one level was gained
        evolved: The tier evolved at least once
        decayed: Progress units lost to inactivity before this completion
    """

    success: bool
    message: str
    changes: dict[str, Any] = field(default_factory=dict)
    leveled_up: bool = False
    evolved: bool = False
    decayed: int = 0


# =============================================================================
# COMPLETION ENGINE
# =============================================================================


class CompletionEngine:
    """Pure logic engine for the per-day completion state machine.

    All methods are static - no instance state.
    """

    @staticmethod
    def is_completed_today(identity: IdentityData, now: str | datetime) -> bool:
        """Return True when the identity was completed on now's calendar day."""
        return bool(
            identity.get(const.DATA_IDENTITY_COMPLETED_TODAY)
        ) and is_same_local_day(identity.get(const.DATA_IDENTITY_LAST_UPDATED), now)

    @staticmethod
    def can_complete(identity: IdentityData, now: str | datetime) -> bool:
        """Return True when COMPLETE is allowed."""
        return not CompletionEngine.is_completed_today(identity, now)

    @staticmethod
    def can_reverse(identity: IdentityData, now: str | datetime) -> bool:
        """Return True when REVERSE is allowed."""
        return CompletionEngine.is_completed_today(identity, now)

    @staticmethod
    def plan_update(
        registry: PathRegistry,
        identity: IdentityData,
        action: str,
        now: str | datetime,
        decay_threshold_days: int = const.DEFAULT_DECAY_THRESHOLD_DAYS,
        level_cap: int = const.DEFAULT_LEVEL_CAP,
    ) -> CompletionOutcome:
        """Plan the result of applying action to identity at now."""
        if action == const.COMPLETION_ACTION_COMPLETE:
            return CompletionEngine._plan_complete(
                registry, identity, now, decay_threshold_days, level_cap
            )
        if action == const.COMPLETION_ACTION_REVERSE:
            return CompletionEngine._plan_reverse(identity, now)
        return CompletionOutcome(success=False, message=const.MSG_UNKNOWN_ACTION)

    @staticmethod
    def _plan_complete(
        registry: PathRegistry,
        identity: IdentityData,
        now: str | datetime,
        decay_threshold_days: int,
        level_cap: int,
    ) -> CompletionOutcome:
        if not CompletionEngine.can_complete(identity, now):
            return CompletionOutcome(
                success=False, message=const.MSG_ALREADY_COMPLETED_TODAY
            )

        path_id = identity[const.DATA_IDENTITY_PATH_TYPE]
        tier = identity.get(const.DATA_IDENTITY_TIER, const.TIER_D)
        level = int(identity.get(const.DATA_IDENTITY_LEVEL, 1))
        progress = int(identity.get(const.DATA_IDENTITY_PROGRESS, 0))
        required = int(identity.get(const.DATA_IDENTITY_PROGRESS_REQUIRED, 0))

        messages: list[str] = []

        decay = ProgressionEngine.apply_decay(
            progress,
            identity.get(const.DATA_IDENTITY_LAST_UPDATED),
            now,
            decay_threshold_days,
        )
        if decay.decayed:
            messages.append(const.MSG_DECAY_FMT.format(decay.decayed))

        result = ProgressionEngine.calculate_level_up(
            registry,
            path_id,
            level=level,
            tier=tier,
            progress_required=required,
            current_progress=decay.progress,
            earned_progress=1,
            level_cap=level_cap,
        )

        messages.append(const.MSG_TASK_COMPLETED)
        for evolved_tier in result.evolutions:
            messages.append(const.MSG_EVOLVED_FMT.format(evolved_tier))
        if result.leveled_up:
            messages.append(const.MSG_LEVEL_UP_FMT.format(result.level))

        now_dt = dt_parse(now)
        changes: dict[str, Any] = {
            const.DATA_IDENTITY_TIER: result.tier,
            const.DATA_IDENTITY_LEVEL: result.level,
            const.DATA_IDENTITY_PROGRESS: result.remaining_progress,
            const.DATA_IDENTITY_PROGRESS_REQUIRED: result.progress_required,
            const.DATA_IDENTITY_COMPLETED_TODAY: True,
            const.DATA_IDENTITY_LAST_UPDATED: now_dt.isoformat() if now_dt else now,
        }

        return CompletionOutcome(
            success=True,
            message=" ".join(messages),
            changes=changes,
            leveled_up=result.leveled_up,
            evolved=result.evolved,
            decayed=decay.decayed,
        )

    @staticmethod
    def _plan_reverse(identity: IdentityData, now: str | datetime) -> CompletionOutcome:
        if not CompletionEngine.can_reverse(identity, now):
            return CompletionOutcome(
                success=False, message=const.MSG_CANNOT_REVERSE_PREVIOUS_DAYS
            )

        progress = int(identity.get(const.DATA_IDENTITY_PROGRESS, 0))
        # Level and tier are left as they are, see module docstring.
        return CompletionOutcome(
            success=True,
            message=const.MSG_TASK_REVERSED,
            changes={
                const.DATA_IDENTITY_PROGRESS: max(progress - 1, 0),
                const.DATA_IDENTITY_COMPLETED_TODAY: False,
            },
        )
