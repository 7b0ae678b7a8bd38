"""Path Registry - Lookup of per-path level configuration.

A PathRegistry maps a path id to its metadata and ordered level configs.
It is an explicit object owned by whoever composes the integration (the
coordinator at runtime, a fixture in tests) and populated by deterministic
register() calls at startup. Read access is side-effect free.

Registration rules:
- A new path id is stored as given.
- An existing id with overwrite=True is replaced wholesale.
- An existing id without overwrite is merged: levels with new numbers are
  added, a level number already present raises DuplicateLevelError.

ARCHITECTURE: Pure Python, NO Home Assistant dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .. import const


class DuplicateLevelError(ValueError):
    """Raised when a merge would register the same level number twice."""

    def __init__(self, path_id: str, level: int) -> None:
        """Initialize DuplicateLevelError."""
        self.path_id = path_id
        self.level = level
        super().__init__(f"Path '{path_id}' already defines level {level}")


# =============================================================================
# CONFIG DATA STRUCTURES
# =============================================================================


@dataclass(frozen=True)
class PathSubtask:
    """A named subtask inside a daily path task."""

    name: str
    focus: str = ""


@dataclass(frozen=True)
class PathTask:
    """A daily task within a level, grouped under a gate."""

    gate: str
    name: str
    focus: str = ""
    subtasks: tuple[PathSubtask, ...] = ()


@dataclass(frozen=True)
class TrialRewards:
    """Rewards granted for passing a level trial."""

    coins: int = 0
    stars: int = 0
    stat_points: int = 0
    item: str | None = None


@dataclass(frozen=True)
class TrialConfig:
    """Trial that gates a level."""

    name: str
    tasks: tuple[str, ...] = ()
    focus: str = ""
    rewards: TrialRewards = field(default_factory=TrialRewards)


@dataclass(frozen=True)
class LevelConfig:
    """Configuration for one level of a path.

    days_required is the progress (completed days) needed to advance past
    this level.
    """

    level: int
    days_required: int
    subtitle: str = ""
    xp_to_level_up: int = 0
    reward_coins: int = 0
    reward_stat_points: int = 0
    primary_stat: str = const.STAT_BODY
    tasks: tuple[PathTask, ...] = ()
    trial: TrialConfig | None = None


@dataclass(frozen=True)
class PathMetadata:
    """Descriptive metadata of a path."""

    path_id: str
    name: str
    description: str = ""
    primary_stat: str = const.STAT_BODY
    starting_tier: str = const.TIER_D
    max_level: int = const.DEFAULT_LEVEL_CAP


@dataclass(frozen=True)
class PathConfig:
    """A complete path: metadata plus levels ordered by level number."""

    metadata: PathMetadata
    levels: tuple[LevelConfig, ...] = ()

    @property
    def path_id(self) -> str:
        """Return the path id."""
        return self.metadata.path_id


@dataclass(frozen=True)
class TaskRewards:
    """Per-task rewards derived from a level config."""

    coins: int = 0
    stat_points: int = 0
    primary_stat: str = const.STAT_BODY


# =============================================================================
# REGISTRY
# =============================================================================


class PathRegistry:
    """In-memory registry of path configurations."""

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._paths: dict[str, PathConfig] = {}

    def __len__(self) -> int:
        """Return the number of registered paths."""
        return len(self._paths)

    def __contains__(self, path_id: object) -> bool:
        """Return True when path_id is registered."""
        return path_id in self._paths

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, path_config: PathConfig, *, overwrite: bool = False) -> None:
        """Register a path configuration.

        Raises:
            DuplicateLevelError: When merging into an existing path would
                duplicate a level number (including duplicates within the
                incoming config itself).
        """
        path_id = path_config.path_id
        incoming = self._sorted_unique_levels(path_id, path_config.levels)

        existing = self._paths.get(path_id)
        if existing is None or overwrite:
            if existing is not None:
                const.LOGGER.info(
                    "INFO: Overwriting registered path '%s' (%s -> %s levels)",
                    path_id,
                    len(existing.levels),
                    len(incoming),
                )
            self._paths[path_id] = replace(path_config, levels=incoming)
            const.LOGGER.debug(
                "DEBUG: Registered path '%s' with %s levels", path_id, len(incoming)
            )
            return

        known = {level.level for level in existing.levels}
        for level in incoming:
            if level.level in known:
                raise DuplicateLevelError(path_id, level.level)

        merged = tuple(
            sorted(existing.levels + incoming, key=lambda item: item.level)
        )
        self._paths[path_id] = replace(existing, levels=merged)
        const.LOGGER.debug(
            "DEBUG: Merged %s levels into path '%s' (now %s)",
            len(incoming),
            path_id,
            len(merged),
        )

    @staticmethod
    def _sorted_unique_levels(
        path_id: str, levels: tuple[LevelConfig, ...]
    ) -> tuple[LevelConfig, ...]:
        seen: set[int] = set()
        for level in levels:
            if level.level in seen:
                raise DuplicateLevelError(path_id, level.level)
            seen.add(level.level)
        return tuple(sorted(levels, key=lambda item: item.level))

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def is_registered(self, path_id: str) -> bool:
        """Return True when path_id is registered."""
        return path_id in self._paths

    def get_path_config(self, path_id: str) -> PathConfig | None:
        """Return the full config of a path, or None."""
        return self._paths.get(path_id)

    def get_level_config(self, path_id: str, level: int) -> LevelConfig | None:
        """Return the config of one level, or None when absent."""
        path_config = self._paths.get(path_id)
        if path_config is None:
            return None
        for level_config in path_config.levels:
            if level_config.level == level:
                return level_config
        return None

    def path_ids(self) -> list[str]:
        """Return registered path ids in registration order."""
        return list(self._paths)

    def paths_metadata(self) -> list[PathMetadata]:
        """Return metadata of every registered path."""
        return [path_config.metadata for path_config in self._paths.values()]

    # -------------------------------------------------------------------------
    # Reward helpers
    # -------------------------------------------------------------------------

    def get_task_rewards(self, path_id: str, level: int) -> TaskRewards:
        """Return per-task rewards for a level; zero rewards when unknown."""
        level_config = self.get_level_config(path_id, level)
        if level_config is None:
            const.LOGGER.warning(
                "WARNING: No level config for path '%s' level %s; task rewards are zero",
                path_id,
                level,
            )
            return TaskRewards()
        return TaskRewards(
            coins=level_config.reward_coins,
            stat_points=level_config.reward_stat_points,
            primary_stat=level_config.primary_stat,
        )

    def get_trial_info(self, path_id: str, level: int) -> TrialConfig | None:
        """Return the trial of a level, or None."""
        level_config = self.get_level_config(path_id, level)
        return level_config.trial if level_config else None

    def get_trial_rewards(self, path_id: str, level: int) -> TrialRewards | None:
        """Return the trial rewards of a level, or None."""
        trial = self.get_trial_info(path_id, level)
        return trial.rewards if trial else None

    def calculate_xp_per_task(self, path_id: str, level: int) -> int:
        """Return XP granted per task so a level's XP spreads over its days."""
        level_config = self.get_level_config(path_id, level)
        if level_config is None or not level_config.tasks:
            return 0
        if level_config.days_required <= 0:
            return 0
        return round(
            level_config.xp_to_level_up
            / (level_config.days_required * len(level_config.tasks))
        )

    @staticmethod
    def trial_streak_requirement(level: int) -> int:
        """Return the streak needed to attempt a level's trial."""
        return 2 * level + 1
