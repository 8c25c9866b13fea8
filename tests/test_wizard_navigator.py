from __future__ import annotations

import logging

import pytest

import config
from utils.logging_context import configure_logging, set_session_id
from wizard.navigation.router import WizardNavigator
from wizard.step_registry import StepDescriptor, StepRegistry


def _navigator(current: list[str], calls: list[str]) -> WizardNavigator[None]:
    return WizardNavigator(
        registry=StepRegistry(
            [
                StepDescriptor(name="race", label="Race"),
                StepDescriptor(name="class", label="Class"),
            ]
        ),
        context=None,
        current_step_name=lambda: current[0],
        get_step_url=lambda name: f"/characters/new/{name}",
        navigate=calls.append,
        wizard_id="creation",
    )


def test_navigator_reads_current_step_on_every_call() -> None:
    current = ["race"]
    navigator = _navigator(current, [])

    assert navigator.current_step_index == 0
    current[0] = "class"
    assert navigator.current_step_index == 1
    assert navigator.is_last_step


def test_navigation_logs_with_wizard_context(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging()
    set_session_id("session-123")
    calls: list[str] = []
    navigator = _navigator(["race"], calls)
    caplog.set_level(logging.INFO, logger="wizard.navigation.router")

    assert navigator.next_step() == "class"

    assert calls == ["/characters/new/class"]
    records = [record for record in caplog.records if "Navigating" in record.getMessage()]
    assert records
    assert records[0].session_id == "session-123"
    assert records[0].wizard_id == "creation"
    assert records[0].wizard_step == "class"


def test_no_target_is_logged_at_debug_by_default(caplog: pytest.LogCaptureFixture) -> None:
    navigator = _navigator(["class"], [])
    caplog.set_level(logging.DEBUG, logger="wizard.navigation.router")

    assert navigator.next_step() is None

    records = [record for record in caplog.records if "No next step" in record.getMessage()]
    assert [record.levelno for record in records] == [logging.DEBUG]


def test_debug_navigation_promotes_no_target_logs(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(config, "DEBUG_NAVIGATION", True)
    navigator = _navigator(["race"], [])
    caplog.set_level(logging.INFO, logger="wizard.navigation.router")

    assert navigator.go_to_step("spells") is None

    assert "Ignoring jump to inactive step 'spells'" in caplog.text


def test_navigate_errors_propagate() -> None:
    def _failing_navigate(url: str) -> None:
        raise RuntimeError(f"cannot open {url}")

    navigator = WizardNavigator(
        registry=StepRegistry([StepDescriptor(name="race", label="Race"), StepDescriptor(name="class", label="Class")]),
        context=None,
        current_step_name=lambda: "race",
        get_step_url=lambda name: name,
        navigate=_failing_navigate,
    )

    with pytest.raises(RuntimeError, match="cannot open class"):
        navigator.next_step()


def test_resolve_nearest_active_step_defaults_to_current() -> None:
    navigator = _navigator(["spells"], [])

    assert navigator.resolve_nearest_active_step() == "race"
    assert navigator.resolve_nearest_active_step("class") == "class"
