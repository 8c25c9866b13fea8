from __future__ import annotations

import itertools
from typing import Any

import pytest

from wizard.navigation.engine import (
    NOT_FOUND,
    find_active_step,
    find_next_step,
    find_previous_step,
    project_active_steps,
    resolve_cursor,
)
from wizard.navigation.router import WizardNavigator
from wizard.step_registry import StepDescriptor, StepRegistry


def _scenario_registry() -> StepRegistry[dict[str, Any]]:
    return StepRegistry(
        [
            StepDescriptor(name="A", label="A"),
            StepDescriptor(name="B", label="B", should_skip=lambda _ctx: True),
            StepDescriptor(name="C", label="C", visible=lambda _ctx: False),
            StepDescriptor(name="D", label="D", should_skip=lambda _ctx: False),
            StepDescriptor(name="E", label="E"),
        ]
    )


def _navigator(current: str) -> tuple[WizardNavigator[dict[str, Any]], list[str]]:
    calls: list[str] = []
    navigator: WizardNavigator[dict[str, Any]] = WizardNavigator(
        registry=_scenario_registry(),
        context={},
        current_step_name=lambda: current,
        get_step_url=lambda name: f"/wizard/{name}",
        navigate=calls.append,
    )
    return navigator, calls


def test_scenario_active_steps_exclude_invisible() -> None:
    navigator, _ = _navigator("A")

    assert [step.name for step in navigator.active_steps] == ["A", "B", "D", "E"]
    assert navigator.total_steps == 4


@pytest.mark.parametrize(
    ("current", "expected"),
    [("A", "D"), ("D", "E"), ("B", "D")],
)
def test_scenario_next_skips_skippable_steps(current: str, expected: str) -> None:
    navigator, calls = _navigator(current)

    assert navigator.next_step() == expected
    assert calls == [f"/wizard/{expected}"]


def test_scenario_next_from_last_step_is_noop() -> None:
    navigator, calls = _navigator("E")

    assert navigator.next_step() is None
    assert calls == []
    assert navigator.is_last_step


def test_scenario_previous_skips_backwards() -> None:
    navigator, calls = _navigator("D")

    assert navigator.previous_step() == "A"
    assert calls == ["/wizard/A"]


def test_scenario_previous_from_first_step_is_noop() -> None:
    navigator, calls = _navigator("A")

    assert navigator.previous_step() is None
    assert calls == []
    assert navigator.is_first_step


@pytest.mark.parametrize(
    ("current", "percent"),
    [("A", 0), ("B", 33), ("D", 67), ("E", 100)],
)
def test_scenario_progress(current: str, percent: int) -> None:
    navigator, _ = _navigator(current)

    assert navigator.progress_percent == percent


def test_go_to_rejects_invisible_step() -> None:
    navigator, calls = _navigator("A")

    assert navigator.go_to_step("C") is None
    assert navigator.go_to_step("missing") is None
    assert calls == []


def test_go_to_ignores_skip_predicate() -> None:
    navigator, calls = _navigator("A")

    assert navigator.go_to_step("B") == "B"
    assert calls == ["/wizard/B"]


def test_unresolved_cursor_reports_no_neighbours() -> None:
    navigator, calls = _navigator("C")

    assert navigator.current_step_index == NOT_FOUND
    assert navigator.current_step is None
    assert navigator.next_step() is None
    assert navigator.previous_step() is None
    assert not navigator.is_first_step
    assert not navigator.is_last_step
    assert navigator.progress_percent == 0
    assert calls == []


def test_resolve_cursor_handles_empty_and_missing_names() -> None:
    active = project_active_steps(_scenario_registry(), {})

    assert resolve_cursor(active, "") == NOT_FOUND
    assert resolve_cursor(active, None) == NOT_FOUND
    assert resolve_cursor(active, "D") == 2
    assert find_active_step(active, "C") is None


def test_find_helpers_on_empty_registry() -> None:
    active = project_active_steps(StepRegistry([]), {})

    assert active == ()
    assert find_next_step(active, NOT_FOUND, {}) is None
    assert find_previous_step(active, NOT_FOUND, {}) is None


def test_all_skipped_neighbours_yield_no_target() -> None:
    registry = StepRegistry(
        [
            StepDescriptor(name="one", label="One", should_skip=lambda _ctx: True),
            StepDescriptor(name="two", label="Two"),
            StepDescriptor(name="three", label="Three", should_skip=lambda _ctx: True),
        ]
    )
    active = project_active_steps(registry, None)

    assert find_next_step(active, 1, None) is None
    assert find_previous_step(active, 1, None) is None


def test_active_steps_follow_context_changes_between_reads() -> None:
    context = {"show_subrace": False}
    registry = StepRegistry(
        [
            StepDescriptor(name="race", label="Race"),
            StepDescriptor(name="subrace", label="Subrace", visible=lambda ctx: ctx["show_subrace"]),
            StepDescriptor(name="class", label="Class"),
        ]
    )
    calls: list[str] = []
    navigator = WizardNavigator(
        registry=registry,
        context=context,
        current_step_name=lambda: "race",
        get_step_url=lambda name: name,
        navigate=calls.append,
    )

    assert navigator.next_step_info is not None
    assert navigator.next_step_info.name == "class"

    context["show_subrace"] = True

    assert navigator.next_step() == "subrace"
    assert calls == ["subrace"]


def test_active_steps_are_an_ordered_subsequence() -> None:
    names = ["a", "b", "c", "d"]
    for mask in itertools.product([True, False], repeat=len(names)):
        registry = StepRegistry(
            StepDescriptor(name=name, label=name, visible=lambda ctx, i=i: ctx[i]) for i, name in enumerate(names)
        )
        active = [step.name for step in project_active_steps(registry, mask)]
        assert active == [name for name, shown in zip(names, mask) if shown]


def test_snapshot_matches_individual_accessors() -> None:
    navigator, _ = _navigator("D")
    snapshot = navigator.snapshot()

    assert snapshot.active_step_names == ("A", "B", "D", "E")
    assert snapshot.current_step_index == navigator.current_step_index == 2
    assert snapshot.progress_percent == navigator.progress_percent == 67
    assert snapshot.next_step is not None and snapshot.next_step.name == "E"
    assert snapshot.previous_step is not None and snapshot.previous_step.name == "A"
    assert not snapshot.is_first_step
    assert not snapshot.is_last_step
