"""Streamlit rendering of the wizard chrome: step list, progress bar, Back/Next."""

from __future__ import annotations

import html
from typing import Any, MutableMapping

import streamlit as st

from utils.i18n import (
    NAV_BACK_LABEL,
    NAV_FINISH_HINT,
    NAV_INCOMPLETE_HINT,
    NAV_NEXT_LABEL,
    NAV_PROGRESS_CAPTION,
    NAV_STEPS_HEADER,
    NAV_UNRESOLVED_CAPTION,
    tr,
)
from wizard.layout import (
    ControlsLocation,
    NavigationButtonState,
    NavigationDirection,
    NavigationState,
    render_navigation_controls,
)
from wizard.navigation.keys import WizardSessionKeys
from wizard.navigation.router import NavigationSnapshot, WizardNavigator


_NAVIGATION_STYLE = """
<style>
.wizard-nav-marker + div[data-testid="stHorizontalBlock"] {
    max-width: 560px;
    margin: 1rem auto 0.5rem;
}
.wizard-nav-marker + div[data-testid="stHorizontalBlock"] button {
    border-radius: 10px;
}
.wizard-step-list span[data-state="current"] {
    font-weight: 600;
}
</style>
"""

_SCROLL_TO_TOP_SCRIPT = """
<script>
window.parent.document.querySelector('section.main')?.scrollTo({ top: 0, behavior: 'smooth' });
</script>
"""


def inject_navigation_style() -> None:
    st.markdown(_NAVIGATION_STYLE, unsafe_allow_html=True)


def build_navigation_state(
    navigator: WizardNavigator[Any],
    *,
    snapshot: NavigationSnapshot[Any] | None = None,
    can_proceed: bool = True,
    navigation_pending: bool = False,
) -> NavigationState:
    """Derive previous/next button configuration from one navigation snapshot."""

    snap = snapshot if snapshot is not None else navigator.snapshot()

    previous_button = None
    if snap.previous_step is not None:
        previous_button = NavigationButtonState(
            direction=NavigationDirection.PREVIOUS,
            label=NAV_BACK_LABEL,
            target_key=snap.previous_step.name,
            target_label=snap.previous_step.label,
            enabled=not navigation_pending,
            on_click=navigator.previous_step,
        )

    next_button = None
    hint = None
    if snap.next_step is not None:
        next_button = NavigationButtonState(
            direction=NavigationDirection.NEXT,
            label=NAV_NEXT_LABEL,
            target_key=snap.next_step.name,
            target_label=snap.next_step.label,
            enabled=can_proceed and not navigation_pending,
            primary=True,
            hint=None if can_proceed else NAV_INCOMPLETE_HINT,
            on_click=navigator.next_step,
        )
    elif snap.is_last_step:
        hint = NAV_FINISH_HINT

    return NavigationState(
        current_key=snap.current_step_name,
        previous=previous_button,
        next=next_button,
        hint=hint,
    )


def _step_state(index: int, current_index: int, skipped: bool) -> str:
    if index == current_index:
        return "current"
    if skipped:
        return "skipped"
    if current_index >= 0 and index < current_index:
        return "done"
    return "upcoming"


def build_step_list_rows(navigator: WizardNavigator[Any], snapshot: NavigationSnapshot[Any]) -> list[tuple[str, str, str]]:
    """Return ``(name, label, state)`` rows for every active step."""

    rows: list[tuple[str, str, str]] = []
    for index, step in enumerate(snapshot.active_steps):
        state = _step_state(index, snapshot.current_step_index, step.is_skipped(navigator.context))
        rows.append((step.name, step.label, state))
    return rows


def render_step_list(
    navigator: WizardNavigator[Any],
    snapshot: NavigationSnapshot[Any],
    *,
    navigation_pending: bool = False,
) -> None:
    """Render the clickable list of active steps in the sidebar."""

    status_icons = {
        "done": "✔︎",
        "current": "➤",
        "skipped": "↷",
        "upcoming": "•",
    }
    with st.sidebar:
        st.markdown(f"### {tr(*NAV_STEPS_HEADER)}")
        for number, (name, label, state) in enumerate(build_step_list_rows(navigator, snapshot), start=1):
            triggered = st.button(
                f"{status_icons[state]} {number}. {label}",
                key=f"wizard_step_{navigator.wizard_id}_{name}",
                disabled=navigation_pending or state == "current",
                use_container_width=True,
            )
            if triggered:
                navigator.go_to_step(name)


def render_progress(snapshot: NavigationSnapshot[Any]) -> None:
    """Render the progress bar and a short position caption."""

    st.progress(snapshot.progress_percent / 100)
    if snapshot.current_step_index < 0:
        st.caption(tr(*NAV_UNRESOLVED_CAPTION))
        return
    caption = tr(*NAV_PROGRESS_CAPTION).format(
        current=snapshot.current_step_index + 1,
        total=snapshot.total_steps,
    )
    st.markdown(
        f"<div class='wizard-step-list'><span data-state='current'>{html.escape(caption)}</span></div>",
        unsafe_allow_html=True,
    )


def render_navigation(state: NavigationState, *, location: ControlsLocation = "bottom") -> None:
    render_navigation_controls(state, location=location)


def maybe_scroll_to_top(
    session_keys: WizardSessionKeys,
    *,
    session_state: MutableMapping[str, object] | None = None,
) -> None:
    """Scroll the page up once after a navigation; the flag is consumed."""

    state = session_state if session_state is not None else st.session_state
    if state.pop(session_keys.scroll_to_top, False):
        st.markdown(_SCROLL_TO_TOP_SCRIPT, unsafe_allow_html=True)


__all__ = [
    "build_navigation_state",
    "build_step_list_rows",
    "inject_navigation_style",
    "maybe_scroll_to_top",
    "render_navigation",
    "render_progress",
    "render_step_list",
]
