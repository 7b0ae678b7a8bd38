# File: services.py
"""Defines custom services for the Cultivator integration.

These services expose identity, path task, quest and day-rollover operations
to scripts and automations. Every handler reads the clock once and passes
`now` down; a failed operation raises HomeAssistantError with the manager's
message, and successful calls can return the operation data as a response.
"""

from __future__ import annotations

from typing import Any

import voluptuous as vol
from homeassistant.core import (
    HomeAssistant,
    ServiceCall,
    ServiceResponse,
    SupportsResponse,
)
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers import config_validation as cv

from . import const
from .helpers.entity_helpers import get_coordinator, get_first_cultivator_entry
from .utils import dt_utils

# --- Service Schemas ---
CREATE_IDENTITY_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_OWNER_ID): cv.string,
        vol.Required(const.FIELD_PATH_TYPE): cv.string,
        vol.Optional(const.FIELD_TITLE): cv.string,
    }
)

DELETE_IDENTITY_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_IDENTITY_ID): cv.string,
    }
)

UPDATE_PROGRESS_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_IDENTITY_ID): cv.string,
        vol.Required(const.FIELD_ACTION): vol.All(
            vol.Upper, vol.In(const.COMPLETION_ACTIONS)
        ),
    }
)

TOGGLE_PATH_TASK_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_IDENTITY_ID): cv.string,
        vol.Required(const.FIELD_TASK_ID): cv.string,
        vol.Optional(const.FIELD_COMPLETED, default=True): cv.boolean,
        vol.Optional(const.FIELD_SUBTASK_IDS, default=list): vol.All(
            cv.ensure_list, [cv.string]
        ),
    }
)

ADD_QUEST_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_OWNER_ID): cv.string,
        vol.Required(const.FIELD_TITLE): cv.string,
        vol.Optional(const.FIELD_PROJECT, default=""): cv.string,
        vol.Optional(const.FIELD_DATE): cv.date,
        vol.Optional(const.FIELD_HOUR): vol.Any(cv.string, None),
        vol.Optional(const.FIELD_DIFFICULTY, default=const.DIFFICULTY_EASY): vol.In(
            const.DIFFICULTIES_ASCENDING
        ),
        vol.Optional(const.FIELD_IS_RECURRING, default=False): cv.boolean,
        vol.Optional(const.FIELD_SUBTASKS, default=list): vol.All(
            cv.ensure_list, [cv.string]
        ),
    }
)

COMPLETE_QUEST_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_QUEST_ID): cv.string,
    }
)

DELETE_QUEST_SCHEMA = vol.Schema(
    {
        vol.Required(const.FIELD_QUEST_ID): cv.string,
    }
)

ADVANCE_DAY_SCHEMA = vol.Schema(
    {
        vol.Optional(const.FIELD_OWNER_ID): cv.string,
        vol.Optional(const.FIELD_DATE): cv.date,
    }
)

SERVICES = [
    const.SERVICE_CREATE_IDENTITY,
    const.SERVICE_DELETE_IDENTITY,
    const.SERVICE_UPDATE_PROGRESS,
    const.SERVICE_TOGGLE_PATH_TASK,
    const.SERVICE_ADD_QUEST,
    const.SERVICE_COMPLETE_QUEST,
    const.SERVICE_DELETE_QUEST,
    const.SERVICE_ADVANCE_DAY,
]


def _raise_on_failure(service: str, result: dict[str, Any]) -> ServiceResponse:
    """Turn a failed operation result into a HomeAssistantError."""
    if not result["success"]:
        const.LOGGER.warning("WARNING: %s: %s", service, result["message"])
        raise HomeAssistantError(result["message"])
    return {"message": result["message"], **result.get("data", {})}


def async_setup_services(hass: HomeAssistant):
    """Register Cultivator services."""

    def _coordinator_for(service: str):
        entry_id = get_first_cultivator_entry(hass)
        if not entry_id:
            const.LOGGER.warning("WARNING: %s: %s", service, const.MSG_NO_ENTRY_FOUND)
            raise HomeAssistantError(const.MSG_NO_ENTRY_FOUND)
        return get_coordinator(hass, entry_id)

    async def handle_create_identity(call: ServiceCall) -> ServiceResponse:
        """Handle creating an identity."""
        coordinator = _coordinator_for("Create Identity")
        result = await coordinator.identity_manager.create_identity(
            call.data[const.FIELD_OWNER_ID],
            call.data[const.FIELD_PATH_TYPE],
            dt_utils.dt_now_utc(),
            title=call.data.get(const.FIELD_TITLE),
        )
        return _raise_on_failure("Create Identity", result)

    async def handle_delete_identity(call: ServiceCall) -> ServiceResponse:
        """Handle deleting an identity."""
        coordinator = _coordinator_for("Delete Identity")
        result = await coordinator.identity_manager.delete_identity(
            call.data[const.FIELD_IDENTITY_ID]
        )
        return _raise_on_failure("Delete Identity", result)

    async def handle_update_progress(call: ServiceCall) -> ServiceResponse:
        """Handle COMPLETE / REVERSE of an identity's daily completion."""
        coordinator = _coordinator_for("Update Progress")
        result = await coordinator.identity_manager.update_progress(
            call.data[const.FIELD_IDENTITY_ID],
            call.data[const.FIELD_ACTION],
            dt_utils.dt_now_utc(),
        )
        return _raise_on_failure("Update Progress", result)

    async def handle_toggle_path_task(call: ServiceCall) -> ServiceResponse:
        """Handle checking or unchecking a daily path task."""
        coordinator = _coordinator_for("Toggle Path Task")
        result = await coordinator.chronos_manager.toggle_path_task(
            call.data[const.FIELD_IDENTITY_ID],
            call.data[const.FIELD_TASK_ID],
            call.data[const.FIELD_COMPLETED],
            dt_utils.dt_now_utc(),
            subtask_ids=call.data[const.FIELD_SUBTASK_IDS],
        )
        return _raise_on_failure("Toggle Path Task", result)

    async def handle_add_quest(call: ServiceCall) -> ServiceResponse:
        """Handle adding a quest."""
        coordinator = _coordinator_for("Add Quest")
        result = await coordinator.quest_manager.add_quest(
            call.data[const.FIELD_OWNER_ID],
            call.data[const.FIELD_TITLE],
            dt_utils.dt_today_local(),
            quest_date=call.data.get(const.FIELD_DATE),
            project=call.data[const.FIELD_PROJECT],
            hour=call.data.get(const.FIELD_HOUR),
            difficulty=call.data[const.FIELD_DIFFICULTY],
            is_recurring=call.data[const.FIELD_IS_RECURRING],
            subtasks=call.data[const.FIELD_SUBTASKS],
        )
        return _raise_on_failure("Add Quest", result)

    async def handle_complete_quest(call: ServiceCall) -> ServiceResponse:
        """Handle toggling a quest's completion."""
        coordinator = _coordinator_for("Complete Quest")
        result = await coordinator.quest_manager.complete_quest(
            call.data[const.FIELD_QUEST_ID], dt_utils.dt_now_utc()
        )
        return _raise_on_failure("Complete Quest", result)

    async def handle_delete_quest(call: ServiceCall) -> ServiceResponse:
        """Handle deleting a quest."""
        coordinator = _coordinator_for("Delete Quest")
        result = await coordinator.quest_manager.delete_quest(
            call.data[const.FIELD_QUEST_ID]
        )
        return _raise_on_failure("Delete Quest", result)

    async def handle_advance_day(call: ServiceCall) -> ServiceResponse:
        """Run the daily reset now, for one owner or for all of them."""
        coordinator = _coordinator_for("Advance Day")
        today = call.data.get(const.FIELD_DATE) or dt_utils.dt_today_local()
        owner_id = call.data.get(const.FIELD_OWNER_ID)
        chronos = coordinator.chronos_manager

        if owner_id:
            results = [await chronos.execute_daily_reset(owner_id, today)]
        else:
            results = await chronos.async_run_daily_reset_for_all(today)

        const.LOGGER.info(
            "INFO: Advance Day: %s reset(s) processed for %s", len(results), today
        )
        return {
            "date": dt_utils.dt_to_iso_date(today),
            "results": [
                {"success": result["success"], "message": result["message"]}
                for result in results
            ],
        }

    handlers = {
        const.SERVICE_CREATE_IDENTITY: (
            handle_create_identity,
            CREATE_IDENTITY_SCHEMA,
        ),
        const.SERVICE_DELETE_IDENTITY: (
            handle_delete_identity,
            DELETE_IDENTITY_SCHEMA,
        ),
        const.SERVICE_UPDATE_PROGRESS: (
            handle_update_progress,
            UPDATE_PROGRESS_SCHEMA,
        ),
        const.SERVICE_TOGGLE_PATH_TASK: (
            handle_toggle_path_task,
            TOGGLE_PATH_TASK_SCHEMA,
        ),
        const.SERVICE_ADD_QUEST: (handle_add_quest, ADD_QUEST_SCHEMA),
        const.SERVICE_COMPLETE_QUEST: (handle_complete_quest, COMPLETE_QUEST_SCHEMA),
        const.SERVICE_DELETE_QUEST: (handle_delete_quest, DELETE_QUEST_SCHEMA),
        const.SERVICE_ADVANCE_DAY: (handle_advance_day, ADVANCE_DAY_SCHEMA),
    }

    for service, (handler, schema) in handlers.items():
        hass.services.async_register(
            const.DOMAIN,
            service,
            handler,
            schema=schema,
            supports_response=SupportsResponse.OPTIONAL,
        )

    const.LOGGER.info("INFO: Cultivator services have been registered")


async def async_unload_services(hass: HomeAssistant):
    """Unregister Cultivator services when unloading the integration."""
    for service in SERVICES:
        if hass.services.has_service(const.DOMAIN, service):
            hass.services.async_remove(const.DOMAIN, service)

    const.LOGGER.info("INFO: Cultivator services have been unregistered")
