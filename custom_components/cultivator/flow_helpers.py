# File: flow_helpers.py
"""Schema builders shared by the config flow and the options flow."""

from __future__ import annotations

from typing import Any

import voluptuous as vol
from homeassistant.helpers import config_validation as cv
from homeassistant.helpers import selector

from . import const


def _number_box(minimum: int, maximum: int) -> selector.NumberSelector:
    return selector.NumberSelector(
        selector.NumberSelectorConfig(
            mode=selector.NumberSelectorMode.BOX,
            min=minimum,
            max=maximum,
            step=1,
        )
    )


def build_title_schema(default: str = const.CULTIVATOR_TITLE) -> vol.Schema:
    """Build the schema of the initial setup step."""
    return vol.Schema({vol.Required(const.CONF_TITLE, default=default): cv.string})


def build_settings_schema(options: dict[str, Any] | None = None) -> vol.Schema:
    """Build the schema of the tunable settings, defaulting to current values."""
    options = options or {}
    return vol.Schema(
        {
            vol.Required(
                const.CONF_DECAY_THRESHOLD_DAYS,
                default=options.get(
                    const.CONF_DECAY_THRESHOLD_DAYS, const.DEFAULT_DECAY_THRESHOLD_DAYS
                ),
            ): _number_box(
                const.MIN_DECAY_THRESHOLD_DAYS, const.MAX_DECAY_THRESHOLD_DAYS
            ),
            vol.Required(
                const.CONF_LEVEL_CAP,
                default=options.get(const.CONF_LEVEL_CAP, const.DEFAULT_LEVEL_CAP),
            ): _number_box(const.MIN_LEVEL_CAP, const.MAX_LEVEL_CAP),
            vol.Required(
                const.CONF_DAILY_RESET_HOUR,
                default=options.get(
                    const.CONF_DAILY_RESET_HOUR, const.DEFAULT_DAILY_RESET_HOUR
                ),
            ): _number_box(0, 23),
        }
    )


def normalize_settings(user_input: dict[str, Any]) -> dict[str, int]:
    """Coerce number selector values (floats) to ints."""
    return {
        key: int(user_input[key])
        for key in (
            const.CONF_DECAY_THRESHOLD_DAYS,
            const.CONF_LEVEL_CAP,
            const.CONF_DAILY_RESET_HOUR,
        )
        if key in user_input
    }
