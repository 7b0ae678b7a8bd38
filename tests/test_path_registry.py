"""Tests for PathRegistry and the built-in path content."""

from __future__ import annotations

from dataclasses import replace

import pytest

from custom_components.cultivator import const
from custom_components.cultivator.engines.path_registry import (
    DuplicateLevelError,
    LevelConfig,
    PathRegistry,
    TaskRewards,
)
from tests.helpers import (
    PRESENCE_PATH_ID,
    TEMPERING_PATH_ID,
    UNIFORM_PATH_ID,
    build_uniform_path,
)

# =============================================================================
# TEST: REGISTRATION
# =============================================================================


class TestRegistration:
    """Test register() merge and overwrite rules."""

    def test_register_new_path(self) -> None:
        """A new path becomes available for lookup."""
        registry = PathRegistry()
        registry.register(build_uniform_path(levels=3))

        assert UNIFORM_PATH_ID in registry
        assert len(registry) == 1
        assert registry.is_registered(UNIFORM_PATH_ID)
        assert registry.get_level_config(UNIFORM_PATH_ID, 2).level == 2

    def test_merge_adds_new_levels_in_order(self) -> None:
        """Registering more levels of the same path merges them sorted."""
        registry = PathRegistry()
        base = build_uniform_path(levels=2)
        registry.register(base)
        registry.register(
            replace(base, levels=(LevelConfig(level=5, days_required=9),))
        )

        levels = registry.get_path_config(UNIFORM_PATH_ID).levels
        assert [level.level for level in levels] == [1, 2, 5]
        assert registry.get_level_config(UNIFORM_PATH_ID, 5).days_required == 9

    def test_merge_rejects_duplicate_level(self) -> None:
        """Merging a level number that already exists raises."""
        registry = PathRegistry()
        registry.register(build_uniform_path(levels=2))

        with pytest.raises(DuplicateLevelError) as err:
            registry.register(build_uniform_path(levels=1))
        assert err.value.level == 1
        assert len(registry.get_path_config(UNIFORM_PATH_ID).levels) == 2

    def test_duplicate_inside_one_config_raises(self) -> None:
        """A config listing the same level twice is rejected."""
        config = build_uniform_path(levels=1)
        config = replace(config, levels=config.levels * 2)
        with pytest.raises(DuplicateLevelError):
            PathRegistry().register(config)

    def test_overwrite_replaces_path(self) -> None:
        """overwrite=True replaces the existing levels."""
        registry = PathRegistry()
        registry.register(build_uniform_path(levels=5))
        registry.register(
            build_uniform_path(levels=2, days_per_level=7), overwrite=True
        )

        assert len(registry.get_path_config(UNIFORM_PATH_ID).levels) == 2
        assert registry.get_level_config(UNIFORM_PATH_ID, 1).days_required == 7

    def test_unknown_lookups_return_none(self) -> None:
        """Missing paths and levels are None, not errors."""
        registry = PathRegistry()
        registry.register(build_uniform_path(levels=2))
        assert registry.get_path_config("missing") is None
        assert registry.get_level_config("missing", 1) is None
        assert registry.get_level_config(UNIFORM_PATH_ID, 99) is None

    def test_registries_are_independent(self) -> None:
        """Two registries never share registrations."""
        first = PathRegistry()
        second = PathRegistry()
        first.register(build_uniform_path())
        assert UNIFORM_PATH_ID not in second


# =============================================================================
# TEST: REWARD HELPERS
# =============================================================================


class TestRewardHelpers:
    """Test task rewards, trials and XP helpers."""

    def test_task_rewards_from_level(self, uniform_registry: PathRegistry) -> None:
        """Task rewards mirror the level's coins and stat points."""
        rewards = uniform_registry.get_task_rewards(UNIFORM_PATH_ID, 1)
        assert rewards == TaskRewards(coins=5, stat_points=1, primary_stat="BODY")

    def test_task_rewards_unknown_level_is_zero(
        self, uniform_registry: PathRegistry
    ) -> None:
        """A missing level yields zero rewards."""
        assert uniform_registry.get_task_rewards(UNIFORM_PATH_ID, 42) == TaskRewards()

    def test_xp_per_task(self, default_registry: PathRegistry) -> None:
        """Tempering level 1: 120 XP over 3 days of 5 tasks is 8 per task."""
        assert default_registry.calculate_xp_per_task(TEMPERING_PATH_ID, 1) == 8

    def test_xp_per_task_without_tasks(self) -> None:
        """A level without tasks grants no per-task XP."""
        registry = PathRegistry()
        registry.register(build_uniform_path(gates=0))
        assert registry.calculate_xp_per_task(UNIFORM_PATH_ID, 1) == 0

    def test_trial_streak_requirement(self) -> None:
        """Trial streak requirement is 2 * level + 1."""
        assert PathRegistry.trial_streak_requirement(1) == 3
        assert PathRegistry.trial_streak_requirement(10) == 21


# =============================================================================
# TEST: BUILT-IN PATHS
# =============================================================================


class TestDefaultPaths:
    """Test the content registered by create_default_registry()."""

    def test_both_paths_registered(self, default_registry: PathRegistry) -> None:
        """Tempering and Presence are registered in a fixed order."""
        assert default_registry.path_ids() == [TEMPERING_PATH_ID, PRESENCE_PATH_ID]

    @pytest.mark.parametrize("path_id", [TEMPERING_PATH_ID, PRESENCE_PATH_ID])
    def test_ten_levels_with_five_gates(
        self, default_registry: PathRegistry, path_id: str
    ) -> None:
        """Each built-in path has levels 1-10 with five daily tasks."""
        levels = default_registry.get_path_config(path_id).levels
        assert [level.level for level in levels] == list(range(1, 11))
        assert all(len(level.tasks) == 5 for level in levels)
        assert all(level.trial is not None for level in levels)

    def test_days_required_grow_by_two(self, default_registry: PathRegistry) -> None:
        """Days required run 3, 5, ... 21."""
        days = [
            level.days_required
            for level in default_registry.get_path_config(TEMPERING_PATH_ID).levels
        ]
        assert days == list(range(3, 22, 2))

    def test_primary_stats(self, default_registry: PathRegistry) -> None:
        """Tempering trains BODY; Presence trains SOUL."""
        tempering = default_registry.get_path_config(TEMPERING_PATH_ID)
        presence = default_registry.get_path_config(PRESENCE_PATH_ID)
        assert tempering.metadata.primary_stat == const.STAT_BODY
        assert presence.metadata.primary_stat == const.STAT_SOUL
        assert default_registry.get_task_rewards(PRESENCE_PATH_ID, 1).primary_stat == (
            const.STAT_SOUL
        )

    def test_final_trial_rewards(self, default_registry: PathRegistry) -> None:
        """The level 10 trial grants 50 stat points."""
        rewards = default_registry.get_trial_rewards(TEMPERING_PATH_ID, 10)
        assert rewards is not None
        assert rewards.stat_points == 50
