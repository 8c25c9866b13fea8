"""Pure step-traversal functions shared by every wizard flow.

Nothing here holds state: each function receives the registry (or an
already projected tuple of active steps), the wizard context and the cursor,
and returns a value. "No target" is always expressed as ``None`` or ``-1``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from wizard.step_registry import ContextT, StepDescriptor

NOT_FOUND = -1


def project_active_steps(
    registry: Iterable[StepDescriptor[ContextT]],
    context: ContextT,
) -> tuple[StepDescriptor[ContextT], ...]:
    """Return the visible steps of ``registry`` in registry order."""

    return tuple(step for step in registry if step.is_visible(context))


def resolve_cursor(active_steps: Sequence[StepDescriptor[ContextT]], current_name: str | None) -> int:
    """Return the index of ``current_name`` within ``active_steps`` or ``-1``."""

    if not current_name:
        return NOT_FOUND
    for index, step in enumerate(active_steps):
        if step.name == current_name:
            return index
    return NOT_FOUND


def find_next_step(
    active_steps: Sequence[StepDescriptor[ContextT]],
    cursor: int,
    context: ContextT,
) -> StepDescriptor[ContextT] | None:
    """Return the first non-skipped step after ``cursor``."""

    if cursor == NOT_FOUND:
        return None
    for step in active_steps[cursor + 1 :]:
        if not step.is_skipped(context):
            return step
    return None


def find_previous_step(
    active_steps: Sequence[StepDescriptor[ContextT]],
    cursor: int,
    context: ContextT,
) -> StepDescriptor[ContextT] | None:
    """Return the first non-skipped step before ``cursor``, scanning backwards."""

    if cursor <= 0:
        return None
    for index in range(cursor - 1, -1, -1):
        step = active_steps[index]
        if not step.is_skipped(context):
            return step
    return None


def find_active_step(
    active_steps: Sequence[StepDescriptor[ContextT]],
    name: str,
) -> StepDescriptor[ContextT] | None:
    """Return the active step called ``name``; skip predicates are ignored."""

    index = resolve_cursor(active_steps, name)
    if index == NOT_FOUND:
        return None
    return active_steps[index]


__all__ = [
    "NOT_FOUND",
    "find_active_step",
    "find_next_step",
    "find_previous_step",
    "project_active_steps",
    "resolve_cursor",
]
