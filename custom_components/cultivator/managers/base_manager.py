"""Base manager class for Cultivator managers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, TypeVar

from homeassistant.helpers.dispatcher import (
    async_dispatcher_connect,
    async_dispatcher_send,
)

from .. import const
from ..helpers.entity_helpers import get_event_signal

if TYPE_CHECKING:
    from collections.abc import Callable

    from homeassistant.core import HomeAssistant

    from ..coordinator import CultivatorCoordinator
    from ..engines.path_registry import PathRegistry
    from ..store import CultivatorStore
    from ..type_defs import OperationResult

_T = TypeVar("_T")


class BaseManager(ABC):
    """Base class for all Cultivator managers with scoped event support.

    Provides:
    - Instance-scoped event emitting (emit)
    - Instance-scoped event listening (listen)
    - Atomic state commits through the store (_async_commit)
    - Automatic cleanup via coordinator's config_entry.async_on_unload

    Data Persistence:
    - Read through self.store getters (they return copies)
    - Write only through _async_commit(); a failed save raises PersistenceError
      and leaves the in-memory document untouched

    Subclasses must implement:
    - async_setup(): Subscribe to events, initialize state
    """

    def __init__(self, hass: HomeAssistant, coordinator: CultivatorCoordinator) -> None:
        """Initialize manager.

        Args:
            hass: Home Assistant instance
            coordinator: Parent coordinator managing this integration instance
        """
        self.hass = hass
        self.coordinator = coordinator
        self.entry_id = coordinator.config_entry.entry_id

    @property
    def store(self) -> CultivatorStore:
        """Return the storage port."""
        return self.coordinator.store

    @property
    def registry(self) -> PathRegistry:
        """Return the path registry."""
        return self.coordinator.registry

    async def _async_commit(self, mutator: Callable[[dict[str, Any]], _T]) -> _T:
        """Apply mutator atomically and push the new document to listeners."""
        result = await self.store.async_apply(mutator)
        self.coordinator.async_set_updated_data(self.store.data)
        return result

    def emit(self, suffix: str, **payload: Any) -> None:
        """Emit instance-scoped event to other managers and platforms.

        Example:
            self.emit(
                const.SIGNAL_SUFFIX_LEVEL_UP,
                identity_id=identity_id,
                level=3,
                tier="D",
            )
        """
        signal = get_event_signal(self.entry_id, suffix)
        const.LOGGER.debug(
            "Emitting event '%s' for instance %s with payload keys: %s",
            suffix,
            self.entry_id,
            list(payload.keys()),
        )
        # Pass payload as single dict argument (dispatcher only supports *args)
        async_dispatcher_send(self.hass, signal, payload)

    def listen(self, suffix: str, callback: Callable[..., Any]) -> None:
        """Subscribe to instance-scoped event with automatic cleanup.

        The subscription is removed when the config entry is unloaded.
        Callbacks may be sync or async.
        """
        signal = get_event_signal(self.entry_id, suffix)
        unsub = async_dispatcher_connect(self.hass, signal, callback)
        self.coordinator.config_entry.async_on_unload(unsub)
        const.LOGGER.debug(
            "Manager %s listening to event '%s' for instance %s",
            self.__class__.__name__,
            suffix,
            self.entry_id,
        )

    @abstractmethod
    async def async_setup(self) -> None:
        """Set up the manager (subscribe to events, initialize state)."""


def operation_result(
    success: bool, message: str, data: dict[str, Any] | None = None
) -> OperationResult:
    """Build the result dict returned by manager operations."""
    result: OperationResult = {"success": success, "message": message}
    if data is not None:
        result["data"] = data
    return result
