"""Session state utilities."""

from .ensure_state import ensure_state, get_creation_state, get_level_up_state, reset_state

__all__ = ["ensure_state", "get_creation_state", "get_level_up_state", "reset_state"]
