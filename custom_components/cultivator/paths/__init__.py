"""Built-in path content for Cultivator.

Each content module exposes METADATA, GATES and LEVELS tables. Tables are
converted to immutable PathConfig objects here and registered into an
explicit PathRegistry in a fixed order, so every process builds the same
registry.
"""

from __future__ import annotations

from typing import Any

from .. import const
from ..engines.path_registry import (
    LevelConfig,
    PathConfig,
    PathMetadata,
    PathRegistry,
    PathSubtask,
    PathTask,
    TrialConfig,
    TrialRewards,
)
from . import presence, tempering

DEFAULT_PATH_MODULES = (tempering, presence)


def build_level_config(
    level_table: dict[str, Any], gates: tuple[tuple[str, str], ...], primary_stat: str
) -> LevelConfig:
    """Convert one level table entry into a LevelConfig.

    level_table["tasks"] holds one list of subtask names per gate, in gate
    order.
    """
    tasks = tuple(
        PathTask(
            gate=gate_id,
            name=gate_name,
            subtasks=tuple(PathSubtask(name=name) for name in subtask_names),
        )
        for (gate_id, gate_name), subtask_names in zip(
            gates, level_table["tasks"], strict=True
        )
    )
    trial = level_table["trial"]
    return LevelConfig(
        level=level_table["level"],
        subtitle=level_table["subtitle"],
        days_required=level_table["days"],
        xp_to_level_up=level_table["xp"],
        reward_coins=level_table["coins"],
        reward_stat_points=level_table["stat_points"],
        primary_stat=primary_stat,
        tasks=tasks,
        trial=TrialConfig(
            name=trial["name"],
            tasks=(trial["tasks"],),
            rewards=TrialRewards(
                coins=trial["coins"],
                stars=trial["stars"],
                stat_points=trial["stat_points"],
                item=trial["item"],
            ),
        ),
    )


def build_path_config(module: Any) -> PathConfig:
    """Build the PathConfig of a content module."""
    metadata: PathMetadata = module.METADATA
    return PathConfig(
        metadata=metadata,
        levels=tuple(
            build_level_config(level_table, module.GATES, metadata.primary_stat)
            for level_table in module.LEVELS
        ),
    )


def register_default_paths(registry: PathRegistry) -> PathRegistry:
    """Register every built-in path into registry and return it."""
    for module in DEFAULT_PATH_MODULES:
        registry.register(build_path_config(module))
    const.LOGGER.debug(
        "DEBUG: Registered default paths: %s", ", ".join(registry.path_ids())
    )
    return registry


def create_default_registry() -> PathRegistry:
    """Return a new registry holding the built-in paths."""
    return register_default_paths(PathRegistry())
