# File: helpers/entity_helpers.py
"""Entity and instance helper functions for Cultivator.

All functions here either require a `hass` object or build identifiers that
are shared by managers, services and platforms.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from ..coordinator import CultivatorCoordinator


# ==============================================================================
# Event Signal Helpers (Manager Communication)
# ==============================================================================


def get_event_signal(entry_id: str, suffix: str) -> str:
    """Build instance-scoped event signal name for dispatcher.

    Format: 'cultivator_{entry_id}_{suffix}'

    Example:
        >>> get_event_signal("abc123", const.SIGNAL_SUFFIX_LEVEL_UP)
        'cultivator_abc123_level_up'
    """
    return f"{const.DOMAIN}_{entry_id}_{suffix}"


# ==============================================================================
# Instance Lookup
# ==============================================================================


def get_first_cultivator_entry(hass: HomeAssistant) -> str | None:
    """Retrieve the first loaded Cultivator config entry ID."""
    domain_entries = hass.data.get(const.DOMAIN)
    if not domain_entries:
        return None
    return next(iter(domain_entries.keys()), None)


def get_coordinator(hass: HomeAssistant, entry_id: str) -> CultivatorCoordinator:
    """Return the coordinator of a loaded entry."""
    return hass.data[const.DOMAIN][entry_id][const.COORDINATOR]


# ==============================================================================
# Unique IDs
# ==============================================================================


def identity_unique_id(entry_id: str, identity_id: str) -> str:
    """Return the unique_id of an identity progress sensor."""
    return f"{entry_id}_{identity_id}_identity"


def profile_unique_id(entry_id: str, owner_id: str) -> str:
    """Return the unique_id of an owner coins sensor."""
    return f"{entry_id}_{owner_id}_coins"
