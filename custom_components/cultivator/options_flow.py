# File: options_flow.py
"""Options Flow for the Cultivator integration.

Edits the decay threshold, the evolution level cap and the daily reset hour.
Saving the options reloads the entry so the daily timer picks up a new hour.
"""

from typing import Any, Optional

from homeassistant import config_entries

from . import const
from . import flow_helpers as fh


class CultivatorOptionsFlowHandler(config_entries.OptionsFlow):
    """Options Flow for the tunable settings."""

    def __init__(self, _config_entry: config_entries.ConfigEntry):
        """Initialize the options flow."""

    async def async_step_init(self, user_input: Optional[dict[str, Any]] = None):
        """Show and save the settings form."""
        if user_input is not None:
            options = {**self.config_entry.options, **fh.normalize_settings(user_input)}
            const.LOGGER.debug("DEBUG: Saving Cultivator options: %s", options)
            return self.async_create_entry(title="", data=options)

        return self.async_show_form(
            step_id=const.OPTIONS_FLOW_STEP_INIT,
            data_schema=fh.build_settings_schema(dict(self.config_entry.options)),
        )
