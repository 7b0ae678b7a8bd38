"""Progression Engine - Pure logic for level-up loops and inactivity decay.

This engine provides stateless functions for:
- Resolving the progress required for a (path, tier, level)
- Applying earned progress with multi-level-up and tier evolution
- Decaying accumulated progress after a period of inactivity

ARCHITECTURE: This is a pure logic engine with NO Home Assistant dependencies.
All functions are static methods that operate on passed-in data. Time is
always passed in by the caller; nothing here reads the wall clock.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import days_elapsed_ceil
from .tier_engine import TierEngine

if TYPE_CHECKING:
    from .path_registry import PathRegistry


@dataclass
class LevelUpResult:
    """Outcome of applying earned progress.

    Attributes:
        level: Level after all level-ups
        tier: Tier after any evolutions
        progress_required: Requirement of the resulting level
        remaining_progress: Progress carried into the resulting level
        leveled_up: At least one level was gained
        evolved: The level cap was passed at least once
        levels_gained: Number of loop iterations that consumed progress
        evolutions: Tiers entered by evolution, in order
    """

    level: int
    tier: str
    progress_required: int
    remaining_progress: int
    leveled_up: bool = False
    evolved: bool = False
    levels_gained: int = 0
    evolutions: tuple[str, ...] = ()


@dataclass
class DecayResult:
    """Outcome of the inactivity decay check."""

    progress: int
    decayed: int = 0
    days_elapsed: int = 0


class ProgressionEngine:
    """Pure logic engine for progression calculations.

    All methods are static - no instance state.
    """

    @staticmethod
    def resolve_progress_required(
        registry: PathRegistry, path_id: str, tier: str, level: int
    ) -> int:
        """Return the progress needed to clear a level.

        Uses the registered level config, then the tier default, then the
        global default. A non-positive configured value falls back as well.
        """
        level_config = registry.get_level_config(path_id, level)
        if level_config is not None and level_config.days_required > 0:
            return level_config.days_required
        return TierEngine.default_days_per_level(tier)

    @staticmethod
    def calculate_level_up(
        registry: PathRegistry,
        path_id: str,
        level: int,
        tier: str,
        progress_required: int,
        current_progress: int,
        earned_progress: int,
        level_cap: int = const.DEFAULT_LEVEL_CAP,
    ) -> LevelUpResult:
        """Apply earned progress and loop through every level it clears.

        Each iteration subtracts the current requirement and advances one
        level. Passing level_cap resets the level to 1 and evolves the tier
        (SSS saturates but still reports evolved). The requirement is then
        re-resolved for the new (tier, level).
        """
        remaining = current_progress + earned_progress
        required = progress_required
        if required <= 0:
            required = ProgressionEngine.resolve_progress_required(
                registry, path_id, tier, level
            )

        levels_gained = 0
        evolutions: list[str] = []

        while remaining >= required:
            remaining -= required
            level += 1
            levels_gained += 1

            if level > level_cap:
                level = 1
                tier = TierEngine.next_evolution_tier(tier)
                evolutions.append(tier)

            required = ProgressionEngine.resolve_progress_required(
                registry, path_id, tier, level
            )

        return LevelUpResult(
            level=level,
            tier=tier,
            progress_required=required,
            remaining_progress=remaining,
            leveled_up=levels_gained > 0,
            evolved=bool(evolutions),
            levels_gained=levels_gained,
            evolutions=tuple(evolutions),
        )

    @staticmethod
    def days_elapsed(last_updated: str | datetime | None, now: str | datetime) -> int:
        """Return days between last update and now, any partial day rounded up."""
        return days_elapsed_ceil(last_updated, now)

    @staticmethod
    def apply_decay(
        progress: int,
        last_updated: str | datetime | None,
        now: str | datetime,
        threshold_days: int = const.DEFAULT_DECAY_THRESHOLD_DAYS,
    ) -> DecayResult:
        """Decay progress by one unit per elapsed day once the threshold is hit.

        Below threshold_days nothing changes. At or above it, progress loses
        min(days_elapsed, progress) and never goes negative.
        """
        elapsed = ProgressionEngine.days_elapsed(last_updated, now)
        if elapsed < threshold_days:
            return DecayResult(progress=progress, decayed=0, days_elapsed=elapsed)

        decayed = min(elapsed, max(progress, 0))
        return DecayResult(
            progress=max(progress - decayed, 0),
            decayed=decayed,
            days_elapsed=elapsed,
        )
