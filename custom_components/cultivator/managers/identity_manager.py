"""Identity Manager - Lifecycle and daily progress of tracked identities.

Orchestrates:
- create_identity: one identity per (owner, path)
- delete_identity: removes the identity and its daily progress rows
- update_progress: COMPLETE / REVERSE through the CompletionEngine

Every mutation is a single atomic store commit. The caller passes `now`;
nothing here reads the wall clock.

Signals Emitted:
- SIGNAL_SUFFIX_IDENTITY_CREATED / SIGNAL_SUFFIX_IDENTITY_DELETED
- SIGNAL_SUFFIX_PROGRESS_UPDATED: after every successful COMPLETE / REVERSE
- SIGNAL_SUFFIX_LEVEL_UP: when a COMPLETE gained a level or evolved
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any
import uuid

from .. import const
from ..engines.completion_engine import CompletionEngine
from ..engines.progression_engine import ProgressionEngine
from ..store import apply_identity_changes
from ..utils.dt_utils import dt_parse
from .base_manager import BaseManager, operation_result

if TYPE_CHECKING:
    from ..type_defs import IdentityData, OperationResult


class IdentityManager(BaseManager):
    """Manager for identity lifecycle and the daily completion cycle."""

    async def async_setup(self) -> None:
        """Set up the identity manager."""
        const.LOGGER.debug(
            "IdentityManager initialized for entry %s (%s paths registered)",
            self.entry_id,
            len(self.registry),
        )

    # =========================================================================
    # Queries
    # =========================================================================

    def get_identity(self, identity_id: str) -> IdentityData | None:
        """Return an identity by id, or None."""
        return self.store.get_entity(identity_id)

    def get_identities_for_owner(self, owner_id: str) -> list[IdentityData]:
        """Return every identity of an owner."""
        return self.store.get_identities_for_owner(owner_id)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def build_identity(
        self,
        owner_id: str,
        path_type: str,
        now: datetime,
        title: str | None = None,
    ) -> IdentityData:
        """Build a fresh level-1 identity on a registered path."""
        path_config = self.registry.get_path_config(path_type)
        tier = path_config.metadata.starting_tier if path_config else const.TIER_D
        now_iso = now.isoformat()
        return {
            const.DATA_INTERNAL_ID: str(uuid.uuid4()),
            const.DATA_OWNER_ID: owner_id,
            const.DATA_IDENTITY_PATH_TYPE: path_type,
            const.DATA_IDENTITY_TITLE: title
            or (path_config.metadata.name if path_config else path_type),
            const.DATA_IDENTITY_TIER: tier,
            const.DATA_IDENTITY_LEVEL: 1,
            const.DATA_IDENTITY_PROGRESS: 0,
            const.DATA_IDENTITY_PROGRESS_REQUIRED: (
                ProgressionEngine.resolve_progress_required(
                    self.registry, path_type, tier, 1
                )
            ),
            const.DATA_IDENTITY_COMPLETED_TODAY: False,
            const.DATA_IDENTITY_LAST_UPDATED: now_iso,
            const.DATA_IDENTITY_IS_ACTIVE: True,
            const.DATA_IDENTITY_CREATED_AT: now_iso,
            const.DATA_IDENTITY_CURRENT_STREAK: 0,
            const.DATA_IDENTITY_LONGEST_STREAK: 0,
            const.DATA_IDENTITY_LAST_STREAK_DATE: None,
        }  # type: ignore[return-value]

    async def create_identity(
        self,
        owner_id: str,
        path_type: str,
        now: datetime,
        title: str | None = None,
    ) -> OperationResult:
        """Create an identity for owner on path_type.

        Fails for an unregistered path and for a second identity of the same
        path for the same owner.
        """
        if not self.registry.is_registered(path_type):
            return operation_result(
                False, const.MSG_PATH_NOT_REGISTERED_FMT.format(path_type)
            )

        for existing in self.store.get_identities_for_owner(owner_id):
            if existing.get(const.DATA_IDENTITY_PATH_TYPE) == path_type:
                const.LOGGER.warning(
                    "WARNING: Owner '%s' already has a '%s' identity",
                    owner_id,
                    path_type,
                )
                return operation_result(
                    False, const.MSG_DUPLICATE_IDENTITY_FMT.format(path_type)
                )

        identity = self.build_identity(owner_id, path_type, now, title)
        identity_id = identity[const.DATA_INTERNAL_ID]

        def _mutate(data: dict[str, Any]) -> None:
            data[const.DATA_IDENTITIES][identity_id] = dict(identity)

        await self._async_commit(_mutate)

        const.LOGGER.info(
            "INFO: Created identity '%s' (%s) for owner '%s'",
            identity[const.DATA_IDENTITY_TITLE],
            path_type,
            owner_id,
        )
        self.emit(
            const.SIGNAL_SUFFIX_IDENTITY_CREATED,
            identity_id=identity_id,
            owner_id=owner_id,
            path_type=path_type,
        )
        return operation_result(
            True, const.MSG_IDENTITY_CREATED, {"identity": dict(identity)}
        )

    async def delete_identity(self, identity_id: str) -> OperationResult:
        """Delete an identity and its daily path progress history."""
        identity = self.store.get_entity(identity_id)
        if identity is None:
            return operation_result(
                False, const.MSG_IDENTITY_NOT_FOUND_FMT.format(identity_id)
            )

        await self.store.async_delete_entity(identity_id)
        self.coordinator.async_set_updated_data(self.store.data)

        const.LOGGER.info("INFO: Deleted identity '%s'", identity_id)
        self.emit(
            const.SIGNAL_SUFFIX_IDENTITY_DELETED,
            identity_id=identity_id,
            owner_id=identity[const.DATA_OWNER_ID],
        )
        return operation_result(True, const.MSG_IDENTITY_DELETED)

    # =========================================================================
    # Daily completion
    # =========================================================================

    async def update_progress(
        self, identity_id: str, action: str, now: datetime | str
    ) -> OperationResult:
        """Apply COMPLETE or REVERSE to an identity at now.

        Returns:
            Result with the updated identity plus leveled_up / evolved /
            decayed flags in data on success; the engine's failure message
            otherwise (nothing is written on failure).
        """
        identity = self.store.get_entity(identity_id)
        if identity is None:
            return operation_result(
                False, const.MSG_IDENTITY_NOT_FOUND_FMT.format(identity_id)
            )

        now_dt = dt_parse(now)
        if now_dt is None:
            return operation_result(False, f"Invalid timestamp: {now}")

        outcome = CompletionEngine.plan_update(
            self.registry,
            identity,
            action,
            now_dt,
            decay_threshold_days=self.coordinator.decay_threshold_days,
            level_cap=self.coordinator.level_cap,
        )
        if not outcome.success:
            const.LOGGER.debug(
                "DEBUG: %s rejected for identity '%s': %s",
                action,
                identity_id,
                outcome.message,
            )
            return operation_result(False, outcome.message)

        await self._async_commit(
            lambda data: apply_identity_changes(data, identity_id, outcome.changes)
        )
        updated = {**identity, **outcome.changes}

        if outcome.decayed:
            const.LOGGER.info(
                "INFO: Identity '%s' lost %s progress to inactivity",
                identity_id,
                outcome.decayed,
            )
        if outcome.leveled_up or outcome.evolved:
            const.LOGGER.info(
                "INFO: Identity '%s' advanced to level %s tier %s",
                identity_id,
                updated[const.DATA_IDENTITY_LEVEL],
                updated[const.DATA_IDENTITY_TIER],
            )
            self.emit(
                const.SIGNAL_SUFFIX_LEVEL_UP,
                identity_id=identity_id,
                owner_id=identity[const.DATA_OWNER_ID],
                level=updated[const.DATA_IDENTITY_LEVEL],
                tier=updated[const.DATA_IDENTITY_TIER],
                evolved=outcome.evolved,
            )
        self.emit(
            const.SIGNAL_SUFFIX_PROGRESS_UPDATED,
            identity_id=identity_id,
            action=action,
        )

        return operation_result(
            True,
            outcome.message,
            {
                "identity": updated,
                "leveled_up": outcome.leveled_up,
                "evolved": outcome.evolved,
                "decayed": outcome.decayed,
            },
        )
