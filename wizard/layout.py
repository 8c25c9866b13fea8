"""Back/Next controls shown below each wizard step."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Literal

import streamlit as st
from streamlit.delta_generator import DeltaGenerator

from utils.i18n import tr
from wizard.types import LocalizedText

ControlsLocation = Literal["top", "bottom"]


class NavigationDirection(str, Enum):
    """Which neighbour a navigation button moves to."""

    PREVIOUS = "previous"
    NEXT = "next"


@dataclass(frozen=True)
class NavigationButtonState:
    """Render configuration for one Back or Next button.

    ``target_key`` and ``target_label`` describe the step the button leads
    to; ``on_click`` performs the move and is not part of equality.
    """

    direction: NavigationDirection
    label: LocalizedText
    target_key: str | None = None
    target_label: str = ""
    enabled: bool = True
    primary: bool = False
    hint: LocalizedText | None = None
    on_click: Callable[[], object] | None = field(default=None, repr=False, compare=False)

    def caption(self) -> str:
        text = tr(*self.label)
        if not self.target_label:
            return text
        return f"{text} · {self.target_label}"


@dataclass(frozen=True)
class NavigationState:
    """Both buttons for the current step plus an optional footer hint."""

    current_key: str
    previous: NavigationButtonState | None = None
    next: NavigationButtonState | None = None
    hint: LocalizedText | None = None

    def buttons(self) -> tuple[NavigationButtonState | None, NavigationButtonState | None]:
        return self.previous, self.next


def _button_key(button: NavigationButtonState, current_key: str, location: ControlsLocation) -> str:
    # Keys must differ per step so Streamlit does not reuse a click across reruns.
    return f"wizard_{button.direction.value}_{current_key}_{location}"


def render_navigation_controls(state: NavigationState, *, location: ControlsLocation = "bottom") -> None:
    """Render Back/Next side by side, then the footer hint if any."""

    st.markdown(
        f"<div class='wizard-nav-marker wizard-nav-marker--{location}'></div>",
        unsafe_allow_html=True,
    )
    columns = st.columns((1, 1), gap="small")
    for column, button in zip(columns, state.buttons()):
        _render_navigation_button(column, button, state, location=location)
    if state.hint:
        st.caption(tr(*state.hint))


def _render_navigation_button(
    column: DeltaGenerator,
    button: NavigationButtonState | None,
    state: NavigationState,
    *,
    location: ControlsLocation,
) -> None:
    if button is None:
        column.write("")
        return

    clicked = column.button(
        button.caption(),
        key=_button_key(button, state.current_key, location),
        type="primary" if button.primary else "secondary",
        disabled=not button.enabled,
        use_container_width=True,
    )
    if clicked and button.on_click is not None:
        button.on_click()
    if button.hint:
        column.caption(tr(*button.hint))


__all__ = [
    "ControlsLocation",
    "NavigationButtonState",
    "NavigationDirection",
    "NavigationState",
    "render_navigation_controls",
]
