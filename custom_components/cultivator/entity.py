"""Base entity classes for the Cultivator integration."""

from __future__ import annotations

from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .coordinator import CultivatorCoordinator


class CultivatorCoordinatorEntity(CoordinatorEntity[CultivatorCoordinator]):
    """Base entity class for Cultivator sensors with typed coordinator access."""

    @property
    def coordinator(self) -> CultivatorCoordinator:
        """Return typed coordinator."""
        return object.__getattribute__(self, "_coordinator")

    @coordinator.setter
    def coordinator(self, value: CultivatorCoordinator) -> None:
        """Set coordinator with proper typing."""
        object.__setattr__(self, "_coordinator", value)
