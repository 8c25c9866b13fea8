"""Render one wizard run: sidebar step list, progress, step panel, navigation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Literal

import streamlit as st

import config
from core.errors import WizardError
from models.character_creation import CreationWizardState
from models.level_up import LevelUpState
from state import get_creation_state, get_level_up_state
from utils.i18n import tr
from utils.logging_context import set_wizard_id, set_wizard_step
from wizard.flows import creation, level_up
from wizard.navigation.router import WizardNavigator
from wizard.navigation.streamlit_host import StreamlitRouter
from wizard.navigation.ui import (
    build_navigation_state,
    inject_navigation_style,
    maybe_scroll_to_top,
    render_navigation,
    render_progress,
    render_step_list,
)
from wizard.steps.panels import render_creation_panel, render_level_up_panel

logger = logging.getLogger(__name__)

WizardKind = Literal["creation", "level-up"]


def _build_creation_wizard(
    state: CreationWizardState,
) -> tuple[StreamlitRouter, WizardNavigator[CreationWizardState]]:
    router = StreamlitRouter(
        wizard_id=creation.WIZARD_ID,
        default_path=creation.get_step_url(state, creation.DEFAULT_STEP),
    )
    navigator = creation.create_character_wizard(
        state,
        current_path=router.current_path,
        navigate=router.navigate,
    )
    return router, navigator


def level_up_step_from_path(path: str, fallback: str) -> str:
    """Return ``<step>`` from ``.../level-up/<step>``; other paths yield ``fallback``."""

    head, _, tail = path.rstrip("/").rpartition("/")
    if tail and head.endswith("/level-up"):
        return tail
    return fallback


def _build_level_up_wizard(state: LevelUpState) -> tuple[StreamlitRouter, level_up.LevelUpNavigator]:
    if not state.public_id:
        state.open_wizard(character_id=1, public_id="brave-otter-7Q2x", level=1)
    router = StreamlitRouter(
        wizard_id=level_up.WIZARD_ID,
        default_path=level_up.get_step_url(state.public_id, level_up.DEFAULT_STEP),
    )
    navigator = level_up.create_level_up_wizard(
        state,
        navigate=router.navigate,
        public_id=lambda: state.public_id,
        current_step=lambda: level_up_step_from_path(router.current_path(), state.current_step_name),
    )
    return router, navigator


def _recover_unresolved_step(router: StreamlitRouter, navigator: WizardNavigator[Any]) -> None:
    """Point the router at the nearest active step when the current one vanished."""

    if navigator.current_step_index >= 0:
        return
    fallback = navigator.resolve_nearest_active_step()
    if fallback is None:
        return
    logger.info("Step '%s' is not active; showing '%s' instead", navigator.current_step_name, fallback)
    router.replace(navigator.get_step_url(fallback))


def _render(
    router: StreamlitRouter,
    navigator: WizardNavigator[Any],
    render_panel: Callable[[Any, Any], None],
    can_proceed: Callable[[str], bool],
) -> None:
    # A pending flag means this run shows the page a navigation just switched
    # to; its controls stay disabled so queued clicks cannot navigate again.
    pending = router.is_navigation_pending()
    _recover_unresolved_step(router, navigator)
    maybe_scroll_to_top(router.session_keys)
    inject_navigation_style()

    snapshot = navigator.snapshot()
    set_wizard_step(snapshot.current_step_name)
    render_step_list(navigator, snapshot, navigation_pending=pending)
    render_progress(snapshot)
    if snapshot.current_step is not None:
        render_panel(snapshot.current_step, navigator.context)
    # Panels may change visibility, so button targets come from a fresh snapshot.
    state = build_navigation_state(
        navigator,
        can_proceed=can_proceed(snapshot.current_step_name),
        navigation_pending=pending,
    )
    render_navigation(state)

    if pending:
        router.commit_navigation()
        st.rerun()


def run_wizard(kind: WizardKind = "creation") -> None:
    """Render the selected wizard for the current script run."""

    set_wizard_id(kind)
    try:
        if kind == "level-up":
            level_up_state = get_level_up_state()
            router, navigator = _build_level_up_wizard(level_up_state)
            _render(router, navigator, render_level_up_panel, lambda _step: True)
        else:
            creation_state = get_creation_state()
            router, navigator = _build_creation_wizard(creation_state)
            _render(
                router,
                navigator,
                render_creation_panel,
                lambda step: creation.can_proceed(creation_state, step),
            )
    except WizardError as error:
        logger.warning("Wizard configuration error", exc_info=error)
        st.error(
            tr(
                "Der Assistent ist falsch konfiguriert.",
                "The wizard is misconfigured.",
                lang=st.session_state.get("lang", config.DEFAULT_LANGUAGE),
            )
        )


__all__ = ["WizardKind", "level_up_step_from_path", "run_wizard"]
