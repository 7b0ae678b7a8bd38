"""Tests for Cultivator services."""

from __future__ import annotations

from typing import Any

from freezegun import freeze_time
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
import pytest
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.cultivator import const
from tests.helpers import TEMPERING_PATH_ID


async def _call(hass: HomeAssistant, service: str, data: dict[str, Any]) -> Any:
    return await hass.services.async_call(
        const.DOMAIN, service, data, blocking=True, return_response=True
    )


async def _create_identity(hass: HomeAssistant) -> str:
    response = await _call(
        hass,
        const.SERVICE_CREATE_IDENTITY,
        {const.FIELD_OWNER_ID: "owner-1", const.FIELD_PATH_TYPE: TEMPERING_PATH_ID},
    )
    return response["identity"][const.DATA_INTERNAL_ID]


# ============================================================================
# Registration
# ============================================================================


async def test_services_registered(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Every service is registered while the entry is loaded."""
    for service in (
        const.SERVICE_CREATE_IDENTITY,
        const.SERVICE_DELETE_IDENTITY,
        const.SERVICE_UPDATE_PROGRESS,
        const.SERVICE_TOGGLE_PATH_TASK,
        const.SERVICE_ADD_QUEST,
        const.SERVICE_COMPLETE_QUEST,
        const.SERVICE_DELETE_QUEST,
        const.SERVICE_ADVANCE_DAY,
    ):
        assert hass.services.has_service(const.DOMAIN, service)


async def test_services_removed_on_unload(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Unloading the last entry removes the services."""
    assert await hass.config_entries.async_unload(init_integration.entry_id)
    await hass.async_block_till_done()

    assert not hass.services.has_service(const.DOMAIN, const.SERVICE_ADVANCE_DAY)


# ============================================================================
# Identity services
# ============================================================================


@freeze_time("2026-03-10 12:00:00", tz_offset=0)
async def test_update_progress_service(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """COMPLETE succeeds once; the repeat raises with the refusal message."""
    identity_id = await _create_identity(hass)

    response = await _call(
        hass,
        const.SERVICE_UPDATE_PROGRESS,
        {const.FIELD_IDENTITY_ID: identity_id, const.FIELD_ACTION: "complete"},
    )
    assert response["message"] == const.MSG_TASK_COMPLETED
    assert response["identity"][const.DATA_IDENTITY_PROGRESS] == 1

    with pytest.raises(HomeAssistantError, match=const.MSG_ALREADY_COMPLETED_TODAY):
        await _call(
            hass,
            const.SERVICE_UPDATE_PROGRESS,
            {const.FIELD_IDENTITY_ID: identity_id, const.FIELD_ACTION: "COMPLETE"},
        )


async def test_create_identity_unknown_path_raises(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """An unknown path surfaces as a HomeAssistantError."""
    with pytest.raises(HomeAssistantError):
        await _call(
            hass,
            const.SERVICE_CREATE_IDENTITY,
            {const.FIELD_OWNER_ID: "owner-1", const.FIELD_PATH_TYPE: "nope"},
        )


@freeze_time("2026-03-10 12:00:00", tz_offset=0)
async def test_toggle_path_task_service(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Checking a gate returns the day's progress row."""
    identity_id = await _create_identity(hass)

    response = await _call(
        hass,
        const.SERVICE_TOGGLE_PATH_TASK,
        {const.FIELD_IDENTITY_ID: identity_id, const.FIELD_TASK_ID: "rooting"},
    )

    assert response["progress"][const.DATA_PROGRESS_DATE] == "2026-03-10"
    assert response["progress"][const.DATA_PROGRESS_TASKS_COMPLETED] == 1


async def test_delete_identity_service(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Deleting works once and raises afterwards."""
    identity_id = await _create_identity(hass)
    await _call(
        hass, const.SERVICE_DELETE_IDENTITY, {const.FIELD_IDENTITY_ID: identity_id}
    )
    with pytest.raises(HomeAssistantError):
        await _call(
            hass,
            const.SERVICE_DELETE_IDENTITY,
            {const.FIELD_IDENTITY_ID: identity_id},
        )


# ============================================================================
# Quest services
# ============================================================================


@freeze_time("2026-03-10 12:00:00", tz_offset=0)
async def test_quest_services(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Add, complete and delete a quest through services."""
    response = await _call(
        hass,
        const.SERVICE_ADD_QUEST,
        {
            const.FIELD_OWNER_ID: "owner-1",
            const.FIELD_TITLE: "Read a chapter",
            const.FIELD_DIFFICULTY: const.DIFFICULTY_MODERATE,
        },
    )
    quest_id = response["quest"][const.DATA_INTERNAL_ID]
    assert response["quest"][const.DATA_QUEST_DATE] == "2026-03-10"

    response = await _call(
        hass, const.SERVICE_COMPLETE_QUEST, {const.FIELD_QUEST_ID: quest_id}
    )
    assert response["coins"] == 20

    await _call(hass, const.SERVICE_DELETE_QUEST, {const.FIELD_QUEST_ID: quest_id})
    with pytest.raises(HomeAssistantError):
        await _call(
            hass, const.SERVICE_COMPLETE_QUEST, {const.FIELD_QUEST_ID: quest_id}
        )


# ============================================================================
# Advance day
# ============================================================================


@freeze_time("2026-03-10 12:00:00", tz_offset=0)
async def test_advance_day_service(
    hass: HomeAssistant, init_integration: MockConfigEntry
) -> None:
    """Advancing to a date resets every owner once."""
    await _call(
        hass,
        const.SERVICE_ADD_QUEST,
        {const.FIELD_OWNER_ID: "owner-1", const.FIELD_TITLE: "Stretch"},
    )

    response = await _call(
        hass, const.SERVICE_ADVANCE_DAY, {const.FIELD_DATE: "2026-03-11"}
    )
    assert response["date"] == "2026-03-11"
    assert response["results"] == [
        {"success": True, "message": const.MSG_DAILY_RESET_DONE}
    ]

    response = await _call(
        hass,
        const.SERVICE_ADVANCE_DAY,
        {const.FIELD_OWNER_ID: "owner-1", const.FIELD_DATE: "2026-03-11"},
    )
    assert not response["results"][0]["success"]
