# File: coordinator.py
"""Coordinator for the Cultivator integration.

Owns the store, the path registry and the managers of one config entry.
There is no polling: managers push the new document with
async_set_updated_data() after every commit, and the daily timer lives in
the ChronosManager.
"""

from __future__ import annotations

from typing import Any

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator

from . import const
from .engines.path_registry import PathRegistry
from .managers import ChronosManager, IdentityManager, QuestManager
from .store import CultivatorStore


class CultivatorCoordinator(DataUpdateCoordinator[dict[str, Any]]):
    """Coordinator for the Cultivator integration."""

    config_entry: ConfigEntry

    def __init__(
        self,
        hass: HomeAssistant,
        config_entry: ConfigEntry,
        store: CultivatorStore,
        registry: PathRegistry,
    ) -> None:
        """Initialize the coordinator and its managers."""
        super().__init__(
            hass,
            const.LOGGER,
            config_entry=config_entry,
            name=f"{const.DOMAIN}{const.COORDINATOR_SUFFIX}",
            update_interval=None,
        )
        self.store = store
        self.registry = registry

        self.identity_manager = IdentityManager(hass, self)
        self.quest_manager = QuestManager(hass, self)
        self.chronos_manager = ChronosManager(hass, self)

    # -------------------------------------------------------------------------------------
    # Options
    # -------------------------------------------------------------------------------------

    @property
    def decay_threshold_days(self) -> int:
        """Days of inactivity tolerated before decay applies."""
        return int(
            self.config_entry.options.get(
                const.CONF_DECAY_THRESHOLD_DAYS, const.DEFAULT_DECAY_THRESHOLD_DAYS
            )
        )

    @property
    def level_cap(self) -> int:
        """Level at which an identity evolves into the next tier."""
        return int(
            self.config_entry.options.get(const.CONF_LEVEL_CAP, const.DEFAULT_LEVEL_CAP)
        )

    @property
    def daily_reset_hour(self) -> int:
        """Local hour of the daily rollover."""
        return int(
            self.config_entry.options.get(
                const.CONF_DAILY_RESET_HOUR, const.DEFAULT_DAILY_RESET_HOUR
            )
        )

    # -------------------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------------------

    async def async_setup_managers(self) -> None:
        """Set up every manager (timers and event subscriptions)."""
        await self.identity_manager.async_setup()
        await self.quest_manager.async_setup()
        await self.chronos_manager.async_setup()

    async def _async_update_data(self) -> dict[str, Any]:
        """Return the current storage document."""
        return self.store.data
