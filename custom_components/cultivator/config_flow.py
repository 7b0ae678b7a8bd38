# File: config_flow.py
"""Config flow for the Cultivator integration.

Single instance. The user picks a title; tunable settings start at their
defaults and are changed later through the options flow.
"""

from typing import Any, Optional

from homeassistant import config_entries
from homeassistant.core import callback

from . import const
from . import flow_helpers as fh
from .options_flow import CultivatorOptionsFlowHandler


class CultivatorConfigFlow(config_entries.ConfigFlow, domain=const.DOMAIN):
    """Config Flow for Cultivator."""

    VERSION = 1

    async def async_step_user(self, user_input: Optional[dict[str, Any]] = None):
        """Create the single Cultivator entry."""
        if any(self._async_current_entries()):
            return self.async_abort(reason=const.TRANS_KEY_ERROR_SINGLE_INSTANCE)

        if user_input is not None:
            title = user_input.get(const.CONF_TITLE) or const.CULTIVATOR_TITLE
            const.LOGGER.info("INFO: Creating Cultivator entry '%s'", title)
            return self.async_create_entry(
                title=title,
                data={},
                options={
                    const.CONF_DECAY_THRESHOLD_DAYS: const.DEFAULT_DECAY_THRESHOLD_DAYS,
                    const.CONF_LEVEL_CAP: const.DEFAULT_LEVEL_CAP,
                    const.CONF_DAILY_RESET_HOUR: const.DEFAULT_DAILY_RESET_HOUR,
                },
            )

        return self.async_show_form(
            step_id=const.CONFIG_FLOW_STEP_USER,
            data_schema=fh.build_title_schema(),
        )

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        """Return the Options Flow."""
        return CultivatorOptionsFlowHandler(config_entry)
