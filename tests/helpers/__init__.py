"""Test helpers for Cultivator tests.

    from tests.helpers import make_identity, make_quest, build_uniform_path
"""

from tests.helpers.builders import (
    PRESENCE_PATH_ID,
    TEMPERING_PATH_ID,
    UNIFORM_PATH_ID,
    build_uniform_path,
    make_identity,
    make_quest,
)

__all__ = [
    "PRESENCE_PATH_ID",
    "TEMPERING_PATH_ID",
    "UNIFORM_PATH_ID",
    "build_uniform_path",
    "make_identity",
    "make_quest",
]
