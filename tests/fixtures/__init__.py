"""Test fixtures for todostore."""

from tests.fixtures.helpers import (
    ScriptedConsole,
    make_settings,
    reset_root_logging,
    sample_todos,
)

__all__ = [
    "ScriptedConsole",
    "make_settings",
    "reset_root_logging",
    "sample_todos",
]
