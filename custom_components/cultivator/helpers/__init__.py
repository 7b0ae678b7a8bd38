"""Home Assistant-bound helper functions for Cultivator.

This module contains functions that REQUIRE Home Assistant dependencies.

NOTE: Functions that need `hass` object belong here, NOT in utils/.

Submodules:
    - entity_helpers: Event signal naming, entry lookup, unique_id building
"""

from . import entity_helpers

__all__ = ["entity_helpers"]
