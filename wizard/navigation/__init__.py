"""Navigation helpers for wizard flows."""

from __future__ import annotations

from wizard.navigation.engine import (
    NOT_FOUND,
    find_active_step,
    find_next_step,
    find_previous_step,
    project_active_steps,
    resolve_cursor,
)
from wizard.navigation.progress import is_first_step, is_last_step, progress_percent
from wizard.navigation.router import NavigationSnapshot, WizardNavigator

__all__ = [
    "NOT_FOUND",
    "NavigationSnapshot",
    "WizardNavigator",
    "find_active_step",
    "find_next_step",
    "find_previous_step",
    "is_first_step",
    "is_last_step",
    "progress_percent",
    "project_active_steps",
    "resolve_cursor",
]
