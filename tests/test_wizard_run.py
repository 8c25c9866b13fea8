from __future__ import annotations

from typing import Any

import pytest
import streamlit as st

from models.character_creation import CreationWizardState, RaceSelection
from models.level_up import LevelUpState
from utils.logging_context import get_log_context
from wizard import run
from wizard.navigation.streamlit_host import PATH_QUERY_PARAM


class _Rerun(Exception):
    pass


@pytest.fixture()
def rendered(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Record what ``_render`` hands to the Streamlit renderers."""

    seen: dict[str, Any] = {"reruns": 0}

    def _fake_rerun() -> None:
        seen["reruns"] += 1
        raise _Rerun()

    def _record_step_list(_navigator: Any, snapshot: Any, *, navigation_pending: bool = False) -> None:
        seen["snapshot"] = snapshot
        seen["step_list_pending"] = navigation_pending

    monkeypatch.setattr(st, "rerun", _fake_rerun)
    monkeypatch.setattr(run, "inject_navigation_style", lambda: None)
    monkeypatch.setattr(run, "maybe_scroll_to_top", lambda _keys: None)
    monkeypatch.setattr(run, "render_progress", lambda _snapshot: None)
    monkeypatch.setattr(run, "render_step_list", _record_step_list)
    monkeypatch.setattr(run, "render_navigation", lambda state: seen.__setitem__("navigation", state))
    return seen


def _creation_wizard(path: str, state: CreationWizardState | None = None) -> tuple[Any, Any, CreationWizardState]:
    wizard_state = state if state is not None else CreationWizardState()
    st.query_params[PATH_QUERY_PARAM] = path
    router, navigator = run._build_creation_wizard(wizard_state)
    return router, navigator, wizard_state


def test_render_disables_controls_right_after_navigation(rendered: dict[str, Any]) -> None:
    router, navigator, _ = _creation_wizard("/characters/new/class")
    st.session_state[router.session_keys.pending_navigation] = True
    panels: list[str] = []

    with pytest.raises(_Rerun):
        run._render(router, navigator, lambda step, _state: panels.append(step.name), lambda _step: True)

    assert rendered["step_list_pending"] is True
    navigation = rendered["navigation"]
    assert navigation.next is not None and not navigation.next.enabled
    assert navigation.previous is not None and not navigation.previous.enabled
    assert panels == ["class"]
    assert rendered["reruns"] == 1
    assert not router.is_navigation_pending()


def test_render_without_pending_navigation_enables_controls(rendered: dict[str, Any]) -> None:
    router, navigator, _ = _creation_wizard("/characters/new/class")

    run._render(router, navigator, lambda _step, _state: None, lambda _step: True)

    assert rendered["step_list_pending"] is False
    assert rendered["navigation"].next.enabled
    assert rendered["reruns"] == 0
    assert get_log_context()["wizard_step"] == "class"


def test_navigation_is_dropped_while_page_is_pending(rendered: dict[str, Any]) -> None:
    router, navigator, _ = _creation_wizard("/characters/new/class")
    st.session_state[router.session_keys.pending_navigation] = True

    assert navigator.next_step() == "background"
    assert router.current_path() == "/characters/new/class"
    assert rendered["reruns"] == 0


def test_vanished_current_step_moves_to_next_active_step(rendered: dict[str, Any]) -> None:
    state = CreationWizardState()
    state.selections.race = RaceSelection(slug="elf", subraces=["high-elf"], subrace_required=True)
    router, navigator, _ = _creation_wizard("/characters/new/subrace", state)
    assert navigator.current_step_name == "subrace"

    state.selections.race = RaceSelection(slug="human")
    run._render(router, navigator, lambda _step, _state: None, lambda _step: True)

    assert router.current_path() == "/characters/new/size"
    assert rendered["snapshot"].current_step_name == "size"
    assert rendered["reruns"] == 0


def test_recover_leaves_resolved_step_alone() -> None:
    router, navigator, _ = _creation_wizard("/characters/new/race")

    run._recover_unresolved_step(router, navigator)

    assert router.current_path() == "/characters/new/race"
    assert router.session_keys.current_path not in st.session_state


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/characters/brave-otter-7Q2x/level-up/hit-points", "hit-points"),
        ("/characters/brave-otter-7Q2x/level-up/summary/", "summary"),
        ("/characters/brave-otter-7Q2x/level-up", "class-selection"),
        ("/characters/new/race", "class-selection"),
    ],
)
def test_level_up_step_from_path(path: str, expected: str) -> None:
    assert run.level_up_step_from_path(path, "class-selection") == expected


def test_level_up_wizard_reads_step_from_router_path() -> None:
    state = LevelUpState()
    state.open_wizard(character_id=3, public_id="brave-otter-7Q2x", level=1)
    state.current_step_name = "hit-points"
    st.query_params[PATH_QUERY_PARAM] = "/characters/brave-otter-7Q2x/level-up/summary"

    _router, navigator = run._build_level_up_wizard(state)
    assert navigator.current_step_name == "summary"

    st.query_params[PATH_QUERY_PARAM] = "/characters/brave-otter-7Q2x/level-up"
    assert navigator.current_step_name == "hit-points"


def test_run_wizard_binds_wizard_id_for_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    rendered_ids: list[str] = []
    monkeypatch.setattr(run, "_render", lambda _router, navigator, *_args: rendered_ids.append(navigator.wizard_id))

    run.run_wizard("level-up")

    assert rendered_ids == ["level-up"]
    assert get_log_context()["wizard_id"] == "level-up"
