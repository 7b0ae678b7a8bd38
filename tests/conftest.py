"""Shared fixtures for Cultivator tests."""

from typing import Any
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest
from homeassistant.core import HomeAssistant
from pytest_homeassistant_custom_component.common import MockConfigEntry

from custom_components.cultivator import const
from custom_components.cultivator.engines.path_registry import PathRegistry
from custom_components.cultivator.helpers.entity_helpers import get_coordinator
from custom_components.cultivator.paths import create_default_registry
from custom_components.cultivator.store import CultivatorStore
from custom_components.cultivator.utils import dt_utils
from tests.helpers import build_uniform_path

# pylint: disable=invalid-name
pytest_plugins = "pytest_homeassistant_custom_component"
# pylint: enable=invalid-name


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> Any:
    """Enable custom integrations in tests."""
    # pylint: disable=unused-argument
    yield


@pytest.fixture(autouse=True)
def utc_default_timezone() -> Any:
    """Use UTC as the local timezone of the date helpers."""
    dt_utils.set_default_timezone(ZoneInfo("UTC"))
    yield
    dt_utils.set_default_timezone(ZoneInfo("UTC"))


@pytest.fixture
def uniform_registry() -> PathRegistry:
    """Return a registry with one path needing 3 days per level."""
    registry = PathRegistry()
    registry.register(build_uniform_path())
    return registry


@pytest.fixture
def default_registry() -> PathRegistry:
    """Return a registry with the built-in paths."""
    return create_default_registry()


@pytest.fixture
def mock_config_entry() -> MockConfigEntry:
    """Return a mock config entry."""
    return MockConfigEntry(
        domain=const.DOMAIN,
        title=const.CULTIVATOR_TITLE,
        data={},
        options={
            const.CONF_DECAY_THRESHOLD_DAYS: const.DEFAULT_DECAY_THRESHOLD_DAYS,
            const.CONF_LEVEL_CAP: const.DEFAULT_LEVEL_CAP,
            const.CONF_DAILY_RESET_HOUR: const.DEFAULT_DAILY_RESET_HOUR,
        },
        entry_id="test_entry_id",
        unique_id="test_unique_id",
    )


@pytest.fixture
def mock_storage_data() -> dict[str, Any]:
    """Return an empty storage document."""
    return CultivatorStore.get_default_structure()


@pytest.fixture
async def init_integration(
    hass: HomeAssistant,
    mock_config_entry: MockConfigEntry,  # pylint: disable=redefined-outer-name
    mock_storage_data: dict[str, Any],  # pylint: disable=redefined-outer-name
) -> MockConfigEntry:
    """Set up the Cultivator integration for testing with mocked storage."""
    await hass.config.async_set_time_zone("UTC")
    mock_config_entry.add_to_hass(hass)

    with patch(
        "homeassistant.helpers.storage.Store.async_load",
        return_value=mock_storage_data,
    ):
        assert await hass.config_entries.async_setup(mock_config_entry.entry_id)
        await hass.async_block_till_done()

    return mock_config_entry


@pytest.fixture
def coordinator(
    hass: HomeAssistant,
    init_integration: MockConfigEntry,  # pylint: disable=redefined-outer-name
):
    """Return the coordinator of the loaded entry."""
    return get_coordinator(hass, init_integration.entry_id)
