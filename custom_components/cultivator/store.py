# File: store.py
"""Handles persistent data storage for the Cultivator integration.

Uses Home Assistant's Storage helper to save and load identities, quests,
daily path progress, owner profiles and daily records, so state survives
restarts. Every write goes through async_apply(): the mutation runs on a
copy of the document, the copy is saved, and only a successful save replaces
the in-memory document. A failed save leaves memory untouched and raises
PersistenceError.
"""

from __future__ import annotations

from collections.abc import Callable
import copy
from typing import TYPE_CHECKING, Any, TypeVar

from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.storage import Store

from . import const
from .utils.math_utils import clamp_non_negative

if TYPE_CHECKING:
    from homeassistant.core import HomeAssistant

    from .type_defs import (
        DailyPathProgressData,
        DailyRecordData,
        IdentityData,
        ProfileData,
        QuestData,
    )

_T = TypeVar("_T")


class PersistenceError(HomeAssistantError):
    """Raised when the storage document could not be written."""


def daily_progress_key(owner_id: str, path_id: str, day: str) -> str:
    """Return the bucket key of a daily path progress row."""
    return f"{owner_id}|{path_id}|{day}"


class CultivatorStore:
    """Handles persistent storage operations for Cultivator data.

    Thin wrapper around Home Assistant's Store API. Records are keyed by
    internal_id inside per-type buckets; daily path progress is keyed by
    (owner_id, path_id, date).
    """

    def __init__(
        self, hass: HomeAssistant, storage_key: str = const.STORAGE_KEY
    ) -> None:
        """Initialize the store.

        Args:
            hass: Home Assistant core object.
            storage_key: Key to identify storage location (default: const.STORAGE_KEY).

        """
        self.hass = hass
        self._storage_key = storage_key
        self._store: Store = Store(hass, const.STORAGE_VERSION, storage_key)
        self._data: dict[str, Any] = {}

    @staticmethod
    def get_default_structure() -> dict[str, Any]:
        """Return canonical empty data structure for fresh installations."""
        return {
            const.DATA_META: {
                const.DATA_META_SCHEMA_VERSION: const.SCHEMA_VERSION_CURRENT,
                const.DATA_META_LAST_MIDNIGHT_PROCESSED: None,
            },
            const.DATA_IDENTITIES: {},
            const.DATA_QUESTS: {},
            const.DATA_DAILY_PATH_PROGRESS: {},
            const.DATA_PROFILES: {},
            const.DATA_DAILY_RECORDS: {},
        }

    async def async_initialize(self) -> None:
        """Load data from storage during startup.

        If no data exists, initializes with an empty structure. Missing
        buckets in an existing document are added.
        """
        const.LOGGER.debug("DEBUG: CultivatorStore: Loading data from storage")
        existing_data = await self._store.async_load()

        if existing_data is None:
            const.LOGGER.info("INFO: No existing storage found. Initializing new data")
            self._data = CultivatorStore.get_default_structure()
            return

        self._data = existing_data
        for key, value in CultivatorStore.get_default_structure().items():
            self._data.setdefault(key, value)
        const.LOGGER.debug(
            "DEBUG: Loaded existing data from storage: %s",
            {
                "identities": len(self._data[const.DATA_IDENTITIES]),
                "quests": len(self._data[const.DATA_QUESTS]),
                "daily_path_progress": len(self._data[const.DATA_DAILY_PATH_PROGRESS]),
                "profiles": len(self._data[const.DATA_PROFILES]),
                "daily_records": len(self._data[const.DATA_DAILY_RECORDS]),
            },
        )

    @property
    def data(self) -> dict[str, Any]:
        """Retrieve the in-memory data document (read only by convention)."""
        return self._data

    def get_storage_path(self) -> str:
        """Get the storage file path."""
        return self._store.path

    # -------------------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------------------

    async def _async_write(self, data: dict[str, Any]) -> None:
        """Write a full document, translating failures into PersistenceError."""
        try:
            await self._store.async_save(data)
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to file system error: %s. "
                "Check disk space and file permissions for %s",
                err,
                self._store.path,
            )
            raise PersistenceError(f"Failed to save storage: {err}") from err
        except (TypeError, ValueError) as err:
            const.LOGGER.error(
                "ERROR: Failed to save storage due to non-serializable data: %s",
                err,
            )
            raise PersistenceError(f"Failed to serialize storage: {err}") from err
        const.LOGGER.debug("DEBUG: Data saved successfully to storage")

    async def async_apply(self, mutator: Callable[[dict[str, Any]], _T]) -> _T:
        """Apply mutator to a copy of the document and commit it atomically.

        Returns:
            Whatever mutator returns.

        Raises:
            PersistenceError: The save failed; the in-memory document is
                unchanged.
        """
        working = copy.deepcopy(self._data)
        result = mutator(working)
        await self._async_write(working)
        self._data = working
        return result

    async def async_save(self) -> None:
        """Save the current document as is."""
        await self._async_write(self._data)

    async def async_clear_data(self) -> None:
        """Clear all stored data and reset to default structure."""
        const.LOGGER.warning("WARNING: Clearing all Cultivator data and resetting storage")
        await self.async_apply(_reset_document)

    async def async_delete_storage(self) -> None:
        """Delete the storage file completely from disk."""
        self._data = CultivatorStore.get_default_structure()
        try:
            await self._store.async_remove()
            const.LOGGER.info(
                "INFO: Storage file removed successfully: %s",
                self._store.path,
            )
        except OSError as err:
            const.LOGGER.error(
                "ERROR: Failed to remove storage file %s: %s. Check file permissions",
                self._store.path,
                err,
            )

    # -------------------------------------------------------------------------------------
    # Identities
    # -------------------------------------------------------------------------------------

    def get_entity(self, identity_id: str) -> IdentityData | None:
        """Return a copy of one identity, or None."""
        identity = self._data[const.DATA_IDENTITIES].get(identity_id)
        return copy.deepcopy(identity) if identity is not None else None

    def get_identities_for_owner(self, owner_id: str) -> list[IdentityData]:
        """Return copies of every identity of an owner."""
        return [
            copy.deepcopy(identity)
            for identity in self._data[const.DATA_IDENTITIES].values()
            if identity.get(const.DATA_OWNER_ID) == owner_id
        ]

    def get_owner_ids(self) -> list[str]:
        """Return every owner that has an identity, quest or profile."""
        owners: dict[str, None] = {}
        for bucket in (const.DATA_PROFILES, const.DATA_IDENTITIES, const.DATA_QUESTS):
            for record in self._data[bucket].values():
                owner_id = record.get(const.DATA_OWNER_ID)
                if owner_id:
                    owners[owner_id] = None
        return list(owners)

    async def async_update_entity(self, identity: IdentityData) -> IdentityData:
        """Insert or replace an identity and return a copy of the stored record."""

        def _mutate(data: dict[str, Any]) -> IdentityData:
            stored = dict(identity)
            data[const.DATA_IDENTITIES][identity[const.DATA_INTERNAL_ID]] = stored
            return copy.deepcopy(stored)  # type: ignore[return-value]

        return await self.async_apply(_mutate)

    async def async_delete_entity(self, identity_id: str) -> bool:
        """Delete an identity and its daily path progress rows.

        Returns:
            False when the identity did not exist.
        """

        def _mutate(data: dict[str, Any]) -> bool:
            if data[const.DATA_IDENTITIES].pop(identity_id, None) is None:
                return False
            progress = data[const.DATA_DAILY_PATH_PROGRESS]
            for key in [
                key
                for key, row in progress.items()
                if row.get(const.DATA_PROGRESS_PATH_ID) == identity_id
            ]:
                del progress[key]
            return True

        return await self.async_apply(_mutate)

    # -------------------------------------------------------------------------------------
    # Quests
    # -------------------------------------------------------------------------------------

    def get_quest(self, quest_id: str) -> QuestData | None:
        """Return a copy of one quest, or None."""
        quest = self._data[const.DATA_QUESTS].get(quest_id)
        return copy.deepcopy(quest) if quest is not None else None

    def get_quests_for_owner(self, owner_id: str) -> list[QuestData]:
        """Return copies of every quest of an owner."""
        return [
            copy.deepcopy(quest)
            for quest in self._data[const.DATA_QUESTS].values()
            if quest.get(const.DATA_OWNER_ID) == owner_id
        ]

    async def async_add_quest(self, quest: QuestData) -> None:
        """Insert a new quest."""

        def _mutate(data: dict[str, Any]) -> None:
            data[const.DATA_QUESTS][quest[const.DATA_INTERNAL_ID]] = dict(quest)

        await self.async_apply(_mutate)

    async def async_update_quest(
        self, quest_id: str, changes: dict[str, Any]
    ) -> QuestData | None:
        """Merge changes into a quest.

        Returns:
            A copy of the updated quest, or None when it does not exist.
        """

        def _mutate(data: dict[str, Any]) -> QuestData | None:
            if not apply_quest_changes(data, quest_id, changes):
                return None
            return copy.deepcopy(data[const.DATA_QUESTS][quest_id])

        return await self.async_apply(_mutate)

    async def async_delete_quest(self, quest_id: str) -> bool:
        """Delete a quest. Returns False when it does not exist."""

        def _mutate(data: dict[str, Any]) -> bool:
            return data[const.DATA_QUESTS].pop(quest_id, None) is not None

        return await self.async_apply(_mutate)

    # -------------------------------------------------------------------------------------
    # Daily path progress
    # -------------------------------------------------------------------------------------

    def get_daily_path_progress(
        self, owner_id: str, path_id: str, day: str
    ) -> DailyPathProgressData | None:
        """Return a copy of one progress row, or None."""
        row = self._data[const.DATA_DAILY_PATH_PROGRESS].get(
            daily_progress_key(owner_id, path_id, day)
        )
        return copy.deepcopy(row) if row is not None else None

    async def async_upsert_daily_path_progress(
        self, record: DailyPathProgressData
    ) -> None:
        """Insert or replace the row for (owner_id, path_id, date)."""

        def _mutate(data: dict[str, Any]) -> None:
            upsert_daily_path_progress(data, record)

        await self.async_apply(_mutate)

    # -------------------------------------------------------------------------------------
    # Profiles and daily records
    # -------------------------------------------------------------------------------------

    def get_profile(self, owner_id: str) -> ProfileData:
        """Return a copy of an owner's profile, or a fresh default."""
        profile = self._data[const.DATA_PROFILES].get(owner_id)
        if profile is None:
            return default_profile(owner_id)
        return copy.deepcopy(profile)

    def get_daily_records(self, owner_id: str) -> list[DailyRecordData]:
        """Return an owner's daily records ordered by date."""
        records = [
            copy.deepcopy(record)
            for record in self._data[const.DATA_DAILY_RECORDS].values()
            if record.get(const.DATA_OWNER_ID) == owner_id
        ]
        return sorted(records, key=lambda record: record[const.DATA_RECORD_DATE])

    async def async_save_daily_record(self, record: DailyRecordData) -> None:
        """Insert a daily record."""

        def _mutate(data: dict[str, Any]) -> None:
            data[const.DATA_DAILY_RECORDS][record[const.DATA_INTERNAL_ID]] = dict(
                record
            )

        await self.async_apply(_mutate)


# -------------------------------------------------------------------------------------
# Document mutators (used inside async_apply)
# -------------------------------------------------------------------------------------


def _reset_document(data: dict[str, Any]) -> None:
    data.clear()
    data.update(CultivatorStore.get_default_structure())


def default_profile(owner_id: str) -> ProfileData:
    """Return a new, empty owner profile."""
    return {
        const.DATA_OWNER_ID: owner_id,
        const.DATA_PROFILE_COINS: 0,
        const.DATA_PROFILE_STAT_POINTS: {stat: 0 for stat in const.STATS},
        const.DATA_PROFILE_LAST_RESET_DATE: None,
        const.DATA_PROFILE_COINS_EARNED_TODAY: 0,
    }  # type: ignore[return-value]


def ensure_profile(data: dict[str, Any], owner_id: str) -> dict[str, Any]:
    """Return the mutable profile of an owner inside data, creating it if needed."""
    return data[const.DATA_PROFILES].setdefault(owner_id, default_profile(owner_id))


def apply_coin_delta(data: dict[str, Any], owner_id: str, delta: int) -> int:
    """Add delta coins to a profile inside data, flooring at zero.

    coins_earned_today tracks the same delta, also floored at zero.

    Returns:
        The new balance.
    """
    profile = ensure_profile(data, owner_id)
    balance = clamp_non_negative(int(profile.get(const.DATA_PROFILE_COINS, 0)) + delta)
    profile[const.DATA_PROFILE_COINS] = balance
    earned = int(profile.get(const.DATA_PROFILE_COINS_EARNED_TODAY, 0)) + delta
    profile[const.DATA_PROFILE_COINS_EARNED_TODAY] = clamp_non_negative(earned)
    return balance


def apply_stat_delta(
    data: dict[str, Any], owner_id: str, stat: str, delta: int
) -> int:
    """Add delta stat points of one stat inside data, flooring at zero."""
    profile = ensure_profile(data, owner_id)
    stats = profile.setdefault(const.DATA_PROFILE_STAT_POINTS, {})
    stats[stat] = clamp_non_negative(int(stats.get(stat, 0)) + delta)
    return stats[stat]


def apply_quest_changes(
    data: dict[str, Any], quest_id: str, changes: dict[str, Any]
) -> bool:
    """Merge changes into a quest inside data. Returns False when missing."""
    quest = data[const.DATA_QUESTS].get(quest_id)
    if quest is None:
        return False
    quest.update(copy.deepcopy(changes))
    return True


def apply_identity_changes(
    data: dict[str, Any], identity_id: str, changes: dict[str, Any]
) -> bool:
    """Merge changes into an identity inside data. Returns False when missing."""
    identity = data[const.DATA_IDENTITIES].get(identity_id)
    if identity is None:
        return False
    identity.update(copy.deepcopy(changes))
    return True


def upsert_daily_path_progress(
    data: dict[str, Any], record: DailyPathProgressData
) -> None:
    """Insert or replace a daily path progress row inside data."""
    key = daily_progress_key(
        record[const.DATA_OWNER_ID],
        record[const.DATA_PROGRESS_PATH_ID],
        record[const.DATA_PROGRESS_DATE],
    )
    data[const.DATA_DAILY_PATH_PROGRESS][key] = copy.deepcopy(dict(record))
