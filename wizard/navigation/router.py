from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic

import config
from utils.logging_context import log_context
from wizard.navigation.engine import (
    find_active_step,
    find_next_step,
    find_previous_step,
    project_active_steps,
    resolve_cursor,
)
from wizard.navigation.progress import is_first_step, is_last_step, progress_percent
from wizard.navigation_types import NavigateFn, StepNameSource, StepUrlBuilder
from wizard.step_registry import (
    ContextT,
    StepDescriptor,
    StepRegistry,
    resolve_nearest_active_step_name,
)

logger = logging.getLogger(__name__)


def _log_no_target(message: str, *args: object) -> None:
    level = logging.INFO if config.DEBUG_NAVIGATION else logging.DEBUG
    logger.log(level, message, *args)


@dataclass(frozen=True)
class NavigationSnapshot(Generic[ContextT]):
    """Every derived navigation value computed from a single projection."""

    active_steps: tuple[StepDescriptor[ContextT], ...]
    current_step_name: str
    current_step_index: int
    current_step: StepDescriptor[ContextT] | None
    total_steps: int
    progress_percent: int
    is_first_step: bool
    is_last_step: bool
    next_step: StepDescriptor[ContextT] | None
    previous_step: StepDescriptor[ContextT] | None

    @property
    def active_step_names(self) -> tuple[str, ...]:
        return tuple(step.name for step in self.active_steps)


class WizardNavigator(Generic[ContextT]):
    """Navigate a wizard registry against live context state.

    The navigator keeps no position of its own. Every accessor re-projects
    the registry against ``context`` and re-resolves the cursor from
    ``current_step_name``, so visibility changes made between two calls are
    always picked up. Traversal methods compute a target name, hand its URL to
    ``navigate`` and return the name; ``None`` means nothing happened.
    """

    def __init__(
        self,
        *,
        registry: StepRegistry[ContextT],
        context: ContextT,
        current_step_name: StepNameSource,
        get_step_url: StepUrlBuilder,
        navigate: NavigateFn,
        wizard_id: str = "default",
    ) -> None:
        self._registry = registry
        self._context = context
        self._current_step_name = current_step_name
        self._get_step_url = get_step_url
        self._navigate = navigate
        self._wizard_id = wizard_id

    @property
    def wizard_id(self) -> str:
        return self._wizard_id

    @property
    def context(self) -> ContextT:
        return self._context

    @property
    def step_registry(self) -> StepRegistry[ContextT]:
        return self._registry

    @property
    def active_steps(self) -> tuple[StepDescriptor[ContextT], ...]:
        return project_active_steps(self._registry, self._context)

    @property
    def current_step_name(self) -> str:
        return self._current_step_name()

    @property
    def current_step_index(self) -> int:
        return resolve_cursor(self.active_steps, self.current_step_name)

    @property
    def current_step(self) -> StepDescriptor[ContextT] | None:
        active = self.active_steps
        index = resolve_cursor(active, self.current_step_name)
        return active[index] if index >= 0 else None

    @property
    def total_steps(self) -> int:
        return len(self.active_steps)

    @property
    def progress_percent(self) -> int:
        active = self.active_steps
        return progress_percent(resolve_cursor(active, self.current_step_name), len(active))

    @property
    def is_first_step(self) -> bool:
        return is_first_step(self.current_step_index)

    @property
    def is_last_step(self) -> bool:
        active = self.active_steps
        return is_last_step(resolve_cursor(active, self.current_step_name), len(active))

    @property
    def next_step_info(self) -> StepDescriptor[ContextT] | None:
        active = self.active_steps
        return find_next_step(active, resolve_cursor(active, self.current_step_name), self._context)

    @property
    def previous_step_info(self) -> StepDescriptor[ContextT] | None:
        active = self.active_steps
        return find_previous_step(active, resolve_cursor(active, self.current_step_name), self._context)

    def get_step_url(self, step_name: str) -> str:
        return self._get_step_url(step_name)

    def snapshot(self) -> NavigationSnapshot[ContextT]:
        """Return all derived values computed from one projection of the registry."""

        active = self.active_steps
        current_name = self.current_step_name
        index = resolve_cursor(active, current_name)
        total = len(active)
        return NavigationSnapshot(
            active_steps=active,
            current_step_name=current_name,
            current_step_index=index,
            current_step=active[index] if index >= 0 else None,
            total_steps=total,
            progress_percent=progress_percent(index, total),
            is_first_step=is_first_step(index),
            is_last_step=is_last_step(index, total),
            next_step=find_next_step(active, index, self._context),
            previous_step=find_previous_step(active, index, self._context),
        )

    def next_step(self) -> str | None:
        """Navigate to the next step, skipping any steps that should be skipped."""

        target = self.next_step_info
        if target is None:
            _log_no_target("No next step after '%s'", self.current_step_name)
            return None
        return self._navigate_to(target.name)

    def previous_step(self) -> str | None:
        """Navigate to the previous step, skipping any steps that should be skipped."""

        target = self.previous_step_info
        if target is None:
            _log_no_target("No previous step before '%s'", self.current_step_name)
            return None
        return self._navigate_to(target.name)

    def go_to_step(self, step_name: str) -> str | None:
        """Navigate to ``step_name`` if it is currently active."""

        target = find_active_step(self.active_steps, step_name)
        if target is None:
            _log_no_target("Ignoring jump to inactive step '%s'", step_name)
            return None
        return self._navigate_to(target.name)

    def resolve_nearest_active_step(self, step_name: str | None = None) -> str | None:
        """Return ``step_name`` (default: the current step) or the closest active step."""

        target = self.current_step_name if step_name is None else step_name
        active_names = tuple(step.name for step in self.active_steps)
        return resolve_nearest_active_step_name(target, active_names, self._registry.step_names())

    def _navigate_to(self, step_name: str) -> str:
        url = self._get_step_url(step_name)
        with log_context(wizard_id=self._wizard_id, wizard_step=step_name):
            logger.info("Navigating from '%s' to '%s' (%s)", self.current_step_name, step_name, url)
            self._navigate(url)
        return step_name


__all__ = [
    "NavigationSnapshot",
    "WizardNavigator",
]
