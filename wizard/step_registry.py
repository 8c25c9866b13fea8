"""Registry for wizard steps, metadata, and canonical order."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar, overload

from core.errors import DuplicateStepError, InvalidStepError

ContextT = TypeVar("ContextT")

StepPredicate = Callable[[ContextT], bool]


def _always_visible(_context: object) -> bool:
    return True


@dataclass(frozen=True)
class StepDescriptor(Generic[ContextT]):
    """Metadata + predicate contract for an individual wizard step.

    ``visible`` decides whether the step exists in the flow at all.
    ``should_skip`` keeps a visible step listed in the sidebar but lets
    sequential next/back traversal jump over it. Both predicates receive the
    wizard context explicitly.
    """

    name: str
    label: str
    icon: str = ""
    visible: StepPredicate[ContextT] = _always_visible
    should_skip: StepPredicate[ContextT] | None = None

    def is_visible(self, context: ContextT) -> bool:
        return bool(self.visible(context))

    def is_skipped(self, context: ContextT) -> bool:
        if self.should_skip is None:
            return False
        return bool(self.should_skip(context))


class StepRegistry(Sequence[StepDescriptor[ContextT]], Generic[ContextT]):
    """Ordered, immutable collection of step descriptors for one wizard session."""

    def __init__(self, steps: Iterable[StepDescriptor[ContextT]]) -> None:
        ordered = tuple(steps)
        seen: set[str] = set()
        for step in ordered:
            if not isinstance(step.name, str) or not step.name.strip():
                raise InvalidStepError(f"Wizard step names must be non-empty strings, got {step.name!r}")
            if step.name in seen:
                raise DuplicateStepError(step.name)
            seen.add(step.name)
        self._steps: tuple[StepDescriptor[ContextT], ...] = ordered

    @overload
    def __getitem__(self, index: int) -> StepDescriptor[ContextT]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[StepDescriptor[ContextT], ...]: ...

    def __getitem__(self, index: int | slice) -> StepDescriptor[ContextT] | tuple[StepDescriptor[ContextT], ...]:
        return self._steps[index]

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[StepDescriptor[ContextT]]:
        return iter(self._steps)

    def __repr__(self) -> str:
        return f"StepRegistry({list(self.step_names())!r})"

    def step_names(self) -> tuple[str, ...]:
        """Return step names in canonical order."""

        return tuple(step.name for step in self._steps)

    def get_step(self, name: str) -> StepDescriptor[ContextT] | None:
        """Lookup step metadata by name."""

        return next((step for step in self._steps if step.name == name), None)


def resolve_nearest_active_step_name(
    target_name: str,
    active_names: Sequence[str],
    registry_names: Sequence[str],
) -> str | None:
    """Return the nearest active step name for ``target_name``."""

    if target_name in active_names:
        return target_name
    if target_name in registry_names:
        start_index = list(registry_names).index(target_name)
        for name in registry_names[start_index + 1 :]:
            if name in active_names:
                return name
    return active_names[0] if active_names else None


__all__ = [
    "ContextT",
    "StepDescriptor",
    "StepPredicate",
    "StepRegistry",
    "resolve_nearest_active_step_name",
]
