# File: __init__.py
"""Initialization file for the Cultivator integration.

Handles setting up the integration, including loading configuration entries,
building the path registry, initializing data storage, and preparing the
coordinator and its managers.

Key Features:
- Config entry setup, unload and removal support.
- Startup catch-up of a missed daily reset.
- Storage management for persistent data handling.
"""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant

from . import const
from .coordinator import CultivatorCoordinator
from .paths import create_default_registry
from .services import async_setup_services, async_unload_services
from .store import CultivatorStore
from .utils import dt_utils


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up the integration from a config entry."""
    const.LOGGER.info("INFO: Starting setup for Cultivator entry: %s", entry.entry_id)

    # Must be done before any component that uses the date helpers
    const.set_default_timezone(hass)

    store = CultivatorStore(hass, const.STORAGE_KEY)
    await store.async_initialize()

    registry = create_default_registry()
    coordinator = CultivatorCoordinator(hass, entry, store, registry)
    await coordinator.async_config_entry_first_refresh()

    hass.data.setdefault(const.DOMAIN, {})[entry.entry_id] = {
        const.COORDINATOR: coordinator,
        const.STORE: store,
    }

    await coordinator.async_setup_managers()

    # Home Assistant may have been down over the daily boundary
    await coordinator.chronos_manager.async_run_startup_catchup(
        dt_utils.dt_today_local()
    )

    async_setup_services(hass)

    await hass.config_entries.async_forward_entry_setups(entry, const.PLATFORMS)

    entry.async_on_unload(entry.add_update_listener(_async_update_listener))

    const.LOGGER.info("INFO: Cultivator setup complete for entry: %s", entry.entry_id)
    return True


async def _async_update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Reload the entry when its options change."""
    const.LOGGER.debug("DEBUG: Options changed, reloading entry %s", entry.entry_id)
    await hass.config_entries.async_reload(entry.entry_id)


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    const.LOGGER.info("INFO: Unloading Cultivator entry: %s", entry.entry_id)

    unload_ok = await hass.config_entries.async_unload_platforms(entry, const.PLATFORMS)

    if unload_ok:
        hass.data[const.DOMAIN].pop(entry.entry_id)
        if not hass.data[const.DOMAIN]:
            await async_unload_services(hass)

    return unload_ok


async def async_remove_entry(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle removal of a config entry."""
    const.LOGGER.info("INFO: Removing Cultivator entry: %s", entry.entry_id)

    store = CultivatorStore(hass, const.STORAGE_KEY)
    await store.async_delete_storage()

    const.LOGGER.info("INFO: Cultivator entry data cleared: %s", entry.entry_id)
