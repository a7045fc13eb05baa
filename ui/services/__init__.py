"""UI services: cached resources and session state."""

from ui.services.state import (
    get_assistant,
    get_engine,
    get_intake,
    get_recorder,
    get_session,
    get_settings,
)

__all__ = [
    "get_assistant",
    "get_engine",
    "get_intake",
    "get_recorder",
    "get_session",
    "get_settings",
]
