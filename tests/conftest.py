from pathlib import Path
import sys
from dataclasses import dataclass

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import config  # noqa: E402


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


@pytest.fixture(autouse=True)
def _stub_streamlit_query_params(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace ``st.query_params`` so routers can run outside a script context."""

    monkeypatch.setattr(st, "query_params", {}, raising=False)
    yield


@pytest.fixture(autouse=True)
def _default_navigation_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pin configuration values that influence URLs and log levels."""

    monkeypatch.setattr(config, "CHARACTER_BASE_PATH", "/characters", raising=False)
    monkeypatch.setattr(config, "DEBUG_NAVIGATION", False, raising=False)
    yield
