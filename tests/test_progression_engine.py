"""Tests for ProgressionEngine - level-up loop and inactivity decay."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from custom_components.cultivator import const
from custom_components.cultivator.engines.path_registry import PathRegistry
from custom_components.cultivator.engines.progression_engine import ProgressionEngine
from tests.helpers import UNIFORM_PATH_ID, build_uniform_path

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=UTC)

# =============================================================================
# TEST: PROGRESS REQUIRED
# =============================================================================


class TestResolveProgressRequired:
    """Test the registry -> tier default fallback."""

    def test_uses_registered_level(self, uniform_registry: PathRegistry) -> None:
        """A registered level supplies its own requirement."""
        assert (
            ProgressionEngine.resolve_progress_required(
                uniform_registry, UNIFORM_PATH_ID, const.TIER_D, 4
            )
            == 3
        )

    def test_falls_back_to_tier_default(self, uniform_registry: PathRegistry) -> None:
        """Levels beyond the registry use the tier default."""
        assert (
            ProgressionEngine.resolve_progress_required(
                uniform_registry, UNIFORM_PATH_ID, const.TIER_B, 42
            )
            == 15
        )

    def test_unregistered_path_uses_tier_default(self) -> None:
        """An empty registry falls back to the tier table."""
        assert (
            ProgressionEngine.resolve_progress_required(
                PathRegistry(), "missing", const.TIER_C, 1
            )
            == 10
        )


# =============================================================================
# TEST: LEVEL-UP LOOP
# =============================================================================


class TestCalculateLevelUp:
    """Test multi-level gains and evolution."""

    def test_no_level_up_below_requirement(
        self, uniform_registry: PathRegistry
    ) -> None:
        """Progress below the requirement only accumulates."""
        result = ProgressionEngine.calculate_level_up(
            uniform_registry, UNIFORM_PATH_ID, 1, const.TIER_D, 3, 1, 1
        )
        assert result.level == 1
        assert result.remaining_progress == 2
        assert not result.leveled_up

    def test_seven_units_at_three_per_level(
        self, uniform_registry: PathRegistry
    ) -> None:
        """7 progress at 3/level from level 1 reaches level 3 with 1 left."""
        result = ProgressionEngine.calculate_level_up(
            uniform_registry, UNIFORM_PATH_ID, 1, const.TIER_D, 3, 0, 7
        )
        assert result.level == 3
        assert result.remaining_progress == 1
        assert result.levels_gained == 2
        assert result.leveled_up
        assert not result.evolved

    def test_exact_requirement_levels_up_with_zero_left(
        self, uniform_registry: PathRegistry
    ) -> None:
        """Reaching the requirement exactly advances with nothing carried."""
        result = ProgressionEngine.calculate_level_up(
            uniform_registry, UNIFORM_PATH_ID, 2, const.TIER_D, 3, 2, 1
        )
        assert result.level == 3
        assert result.remaining_progress == 0

    def test_passing_level_cap_evolves(self, uniform_registry: PathRegistry) -> None:
        """Level 10 tier D clearing its level becomes level 1 tier C."""
        result = ProgressionEngine.calculate_level_up(
            uniform_registry, UNIFORM_PATH_ID, 10, const.TIER_D, 3, 2, 1
        )
        assert result.level == 1
        assert result.tier == const.TIER_C
        assert result.evolved
        assert result.evolutions == (const.TIER_C,)
        assert result.progress_required == 3

    def test_sss_saturates_but_reports_evolved(
        self, uniform_registry: PathRegistry
    ) -> None:
        """SSS at the cap wraps to level 1 and stays SSS."""
        result = ProgressionEngine.calculate_level_up(
            uniform_registry, UNIFORM_PATH_ID, 10, const.TIER_SSS, 3, 2, 1
        )
        assert result.level == 1
        assert result.tier == const.TIER_SSS
        assert result.evolved

    def test_custom_level_cap(self, uniform_registry: PathRegistry) -> None:
        """A lower level cap evolves earlier."""
        result = ProgressionEngine.calculate_level_up(
            uniform_registry, UNIFORM_PATH_ID, 3, const.TIER_D, 3, 2, 1, level_cap=3
        )
        assert (result.level, result.tier) == (1, const.TIER_C)

    def test_non_positive_requirement_is_resolved(
        self, uniform_registry: PathRegistry
    ) -> None:
        """A stored requirement of 0 is replaced before looping."""
        result = ProgressionEngine.calculate_level_up(
            uniform_registry, UNIFORM_PATH_ID, 1, const.TIER_D, 0, 0, 1
        )
        assert result.level == 1
        assert result.progress_required == 3
        assert result.remaining_progress == 1

    def test_requirement_changes_between_levels(self) -> None:
        """Each new level uses its own requirement."""
        registry = PathRegistry()
        registry.register(build_uniform_path(levels=1, days_per_level=2))
        # Level 2 is not registered: tier D default (5) applies
        result = ProgressionEngine.calculate_level_up(
            registry, UNIFORM_PATH_ID, 1, const.TIER_D, 2, 0, 6
        )
        assert result.level == 2
        assert result.remaining_progress == 4
        assert result.progress_required == 5

    def test_remaining_stays_below_requirement(
        self, uniform_registry: PathRegistry
    ) -> None:
        """After the loop, remaining progress is below the requirement."""
        for earned in range(0, 40):
            result = ProgressionEngine.calculate_level_up(
                uniform_registry, UNIFORM_PATH_ID, 1, const.TIER_D, 3, 0, earned
            )
            assert 0 <= result.remaining_progress < result.progress_required


# =============================================================================
# TEST: DECAY
# =============================================================================


class TestDecay:
    """Test the inactivity decay rule."""

    def test_partial_day_rounds_up(self) -> None:
        """25 hours counts as 2 days."""
        assert ProgressionEngine.days_elapsed(NOW, NOW + timedelta(hours=25)) == 2

    def test_below_threshold_no_decay(self) -> None:
        """Two days of inactivity keep all progress."""
        result = ProgressionEngine.apply_decay(5, NOW, NOW + timedelta(days=2))
        assert result.progress == 5
        assert result.decayed == 0

    def test_at_threshold_decays_by_days(self) -> None:
        """Three full days lose three units."""
        result = ProgressionEngine.apply_decay(5, NOW, NOW + timedelta(days=3))
        assert result.progress == 2
        assert result.decayed == 3

    def test_decay_floors_at_zero(self) -> None:
        """Decay never makes progress negative."""
        result = ProgressionEngine.apply_decay(2, NOW, NOW + timedelta(days=30))
        assert result.progress == 0
        assert result.decayed == 2

    def test_missing_last_update_means_no_decay(self) -> None:
        """Without a last update there is nothing to measure."""
        result = ProgressionEngine.apply_decay(4, None, NOW)
        assert result.progress == 4

    def test_custom_threshold(self) -> None:
        """A higher threshold tolerates longer gaps."""
        result = ProgressionEngine.apply_decay(
            6, NOW, NOW + timedelta(days=4), threshold_days=5
        )
        assert result.decayed == 0

    @pytest.mark.parametrize("progress", [0, 1, 3, 9])
    def test_decay_is_monotonic_in_elapsed_days(self, progress: int) -> None:
        """More inactivity never leaves more progress."""
        previous = progress
        for days in range(0, 15):
            result = ProgressionEngine.apply_decay(
                progress, NOW, NOW + timedelta(days=days)
            )
            assert 0 <= result.progress <= previous
            previous = result.progress
