# app.py: Streamlit entrypoint for the character wizards
from __future__ import annotations

from pathlib import Path
import sys
from typing import Final, cast

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

import config  # noqa: E402
from constants.keys import StateKeys, UIKeys  # noqa: E402
from state import ensure_state, reset_state  # noqa: E402
from utils.i18n import tr  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from wizard import WizardKind, run_wizard  # noqa: E402

APP_VERSION = "0.1.0"
WIZARD_KINDS: Final[tuple[WizardKind, ...]] = ("creation", "level-up")

configure_logging(level=config.LOG_LEVEL)

st.set_page_config(
    page_title="Character Wizards",
    page_icon="🧙",
    layout="wide",
    initial_sidebar_state="expanded",
)

ensure_state()
st.session_state.setdefault("app_version", APP_VERSION)


def _wizard_label(kind: str) -> str:
    if kind == "level-up":
        return tr("Stufenaufstieg", "Level up")
    return tr("Charaktererstellung", "Character creation")


with st.sidebar:
    st.selectbox(
        tr("Sprache", "Language"),
        ("en", "de"),
        key=StateKeys.LANG,
    )
    selected = st.selectbox(
        tr("Assistent", "Wizard"),
        WIZARD_KINDS,
        index=WIZARD_KINDS.index(st.session_state.get(StateKeys.WIZARD_KIND, "creation")),
        format_func=_wizard_label,
        key=UIKeys.WIZARD_SELECT,
    )
    st.session_state[StateKeys.WIZARD_KIND] = selected
    if st.button(tr("Zurücksetzen", "Reset")):
        reset_state()
        st.query_params.clear()
        st.rerun()

st.title(_wizard_label(selected))
run_wizard(cast(WizardKind, selected))
