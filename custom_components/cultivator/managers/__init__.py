"""Manager modules for the Cultivator integration.

Managers orchestrate workflows and coordinate between engines.
They are stateful, event-aware, and own every write to the store.
"""

from .base_manager import BaseManager
from .chronos_manager import ChronosManager
from .identity_manager import IdentityManager
from .quest_manager import QuestManager

__all__ = [
    "BaseManager",
    "ChronosManager",
    "IdentityManager",
    "QuestManager",
]
