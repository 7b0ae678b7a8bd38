# File: sensor.py
"""Sensors for the Cultivator integration.

Sensors Defined in This File (2):
01. IdentityLevelSensor - one per identity; state is the level, attributes
    carry tier, progress and streaks
02. OwnerCoinsSensor - one per owner profile; state is the coin balance,
    attributes carry stat points and today's earnings

Identity sensors are added when an identity is created and removed from the
entity registry when it is deleted, without reloading the entry.
"""

from __future__ import annotations

from typing import Any

from homeassistant.components.sensor import SensorEntity, SensorStateClass
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant, callback
from homeassistant.helpers import entity_registry as er
from homeassistant.helpers.dispatcher import async_dispatcher_connect

from . import const
from .coordinator import CultivatorCoordinator
from .entity import CultivatorCoordinatorEntity
from .helpers.entity_helpers import (
    get_event_signal,
    identity_unique_id,
    profile_unique_id,
)


async def async_setup_entry(
    hass: HomeAssistant, entry: ConfigEntry, async_add_entities
):
    """Set up sensors for the Cultivator integration."""
    coordinator: CultivatorCoordinator = hass.data[const.DOMAIN][entry.entry_id][
        const.COORDINATOR
    ]
    known_owners: set[str] = set()
    entities: list[SensorEntity] = []

    for identity_id in coordinator.store.data[const.DATA_IDENTITIES]:
        entities.append(IdentityLevelSensor(coordinator, entry, identity_id))
    for owner_id in coordinator.store.get_owner_ids():
        known_owners.add(owner_id)
        entities.append(OwnerCoinsSensor(coordinator, entry, owner_id))

    async_add_entities(entities)

    @callback
    def _on_identity_created(payload: dict[str, Any]) -> None:
        new_entities: list[SensorEntity] = [
            IdentityLevelSensor(coordinator, entry, payload["identity_id"])
        ]
        owner_id = payload["owner_id"]
        if owner_id not in known_owners:
            known_owners.add(owner_id)
            new_entities.append(OwnerCoinsSensor(coordinator, entry, owner_id))
        async_add_entities(new_entities)

    @callback
    def _on_identity_deleted(payload: dict[str, Any]) -> None:
        registry = er.async_get(hass)
        entity_id = registry.async_get_entity_id(
            "sensor",
            const.DOMAIN,
            identity_unique_id(entry.entry_id, payload["identity_id"]),
        )
        if entity_id:
            const.LOGGER.debug("DEBUG: Removing identity sensor %s", entity_id)
            registry.async_remove(entity_id)

    entry.async_on_unload(
        async_dispatcher_connect(
            hass,
            get_event_signal(entry.entry_id, const.SIGNAL_SUFFIX_IDENTITY_CREATED),
            _on_identity_created,
        )
    )
    entry.async_on_unload(
        async_dispatcher_connect(
            hass,
            get_event_signal(entry.entry_id, const.SIGNAL_SUFFIX_IDENTITY_DELETED),
            _on_identity_deleted,
        )
    )


class IdentityLevelSensor(CultivatorCoordinatorEntity, SensorEntity):
    """Sensor for an identity's level on its path."""

    _attr_has_entity_name = True
    _attr_translation_key = const.TRANS_KEY_SENSOR_IDENTITY
    _attr_icon = const.SENSOR_ICON_IDENTITY
    _attr_state_class = SensorStateClass.MEASUREMENT

    def __init__(
        self, coordinator: CultivatorCoordinator, entry: ConfigEntry, identity_id: str
    ):
        """Initialize the sensor."""
        super().__init__(coordinator)
        self._identity_id = identity_id
        identity = self._identity
        self._attr_unique_id = identity_unique_id(entry.entry_id, identity_id)
        self._attr_translation_placeholders = {
            const.TRANS_KEY_SENSOR_ATTR_TITLE: identity.get(
                const.DATA_IDENTITY_TITLE, identity_id
            ),
        }

    @property
    def _identity(self) -> dict[str, Any]:
        return self.coordinator.store.data[const.DATA_IDENTITIES].get(
            self._identity_id, {}
        )

    @property
    def available(self) -> bool:
        """Return False once the identity is gone."""
        return super().available and bool(self._identity)

    @property
    def native_value(self) -> Any:
        """Return the identity's level."""
        return self._identity.get(const.DATA_IDENTITY_LEVEL)

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return tier, progress and streak details."""
        identity = self._identity
        return {
            const.ATTR_IDENTITY_ID: self._identity_id,
            const.ATTR_OWNER_ID: identity.get(const.DATA_OWNER_ID),
            const.ATTR_PATH_TYPE: identity.get(const.DATA_IDENTITY_PATH_TYPE),
            const.ATTR_TIER: identity.get(const.DATA_IDENTITY_TIER),
            const.ATTR_PROGRESS: identity.get(const.DATA_IDENTITY_PROGRESS),
            const.ATTR_PROGRESS_REQUIRED: identity.get(
                const.DATA_IDENTITY_PROGRESS_REQUIRED
            ),
            const.ATTR_COMPLETED_TODAY: identity.get(
                const.DATA_IDENTITY_COMPLETED_TODAY, False
            ),
            const.ATTR_CURRENT_STREAK: identity.get(
                const.DATA_IDENTITY_CURRENT_STREAK, 0
            ),
            const.ATTR_LONGEST_STREAK: identity.get(
                const.DATA_IDENTITY_LONGEST_STREAK, 0
            ),
        }


class OwnerCoinsSensor(CultivatorCoordinatorEntity, SensorEntity):
    """Sensor for an owner's coin balance."""

    _attr_has_entity_name = True
    _attr_translation_key = const.TRANS_KEY_SENSOR_COINS
    _attr_icon = const.SENSOR_ICON_COINS
    _attr_state_class = SensorStateClass.MEASUREMENT
    _attr_native_unit_of_measurement = const.SENSOR_UNIT_COINS

    def __init__(
        self, coordinator: CultivatorCoordinator, entry: ConfigEntry, owner_id: str
    ):
        """Initialize the sensor."""
        super().__init__(coordinator)
        self._owner_id = owner_id
        self._attr_unique_id = profile_unique_id(entry.entry_id, owner_id)
        self._attr_translation_placeholders = {
            const.TRANS_KEY_SENSOR_ATTR_OWNER: owner_id,
        }

    @property
    def native_value(self) -> Any:
        """Return the owner's coin balance."""
        return self.coordinator.store.get_profile(self._owner_id).get(
            const.DATA_PROFILE_COINS, 0
        )

    @property
    def extra_state_attributes(self) -> dict[str, Any]:
        """Return stat points and today's earnings."""
        profile = self.coordinator.store.get_profile(self._owner_id)
        return {
            const.ATTR_OWNER_ID: self._owner_id,
            const.ATTR_STAT_POINTS: profile.get(const.DATA_PROFILE_STAT_POINTS, {}),
            const.ATTR_COINS_EARNED_TODAY: profile.get(
                const.DATA_PROFILE_COINS_EARNED_TODAY, 0
            ),
        }
