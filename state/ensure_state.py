"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, TypeVar

import streamlit as st
from pydantic import BaseModel, ValidationError

import config
from constants.keys import StateKeys
from models.character_creation import CreationWizardState
from models.level_up import LevelUpState
from utils.logging_context import set_session_id


logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.LANG: lambda: config.DEFAULT_LANGUAGE,
        StateKeys.WIZARD_KIND: lambda: "creation",
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
    }
)


def _coerce_model(key: str, model_type: type[ModelT]) -> ModelT:
    """Return the model stored under ``key``, rebuilding it from a mapping if needed."""

    existing = st.session_state.get(key)
    if isinstance(existing, model_type):
        return existing
    if isinstance(existing, Mapping):
        try:
            restored = model_type.model_validate(dict(existing))
        except ValidationError as error:
            logger.warning("Discarding invalid %s state: %s", model_type.__name__, error)
        else:
            st.session_state[key] = restored
            return restored
    fresh = model_type()
    st.session_state[key] = fresh
    return fresh


def ensure_state() -> None:
    """Initialize ``st.session_state`` with required keys.

    Existing keys are preserved to respect user interactions or URL params.
    """

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()
    _coerce_model(StateKeys.CREATION_STATE, CreationWizardState)
    _coerce_model(StateKeys.LEVEL_UP_STATE, LevelUpState)
    set_session_id(str(st.session_state.get(StateKeys.SESSION_ID)))


def get_creation_state() -> CreationWizardState:
    return _coerce_model(StateKeys.CREATION_STATE, CreationWizardState)


def get_level_up_state() -> LevelUpState:
    return _coerce_model(StateKeys.LEVEL_UP_STATE, LevelUpState)


def reset_state() -> None:
    """Reset ``st.session_state`` while preserving basic user settings.

    Keeps language and session id, then reinitializes defaults via
    :func:`ensure_state`.
    """

    preserve = {StateKeys.LANG, StateKeys.SESSION_ID}
    for key in list(st.session_state.keys()):
        if key not in preserve:
            del st.session_state[key]
    ensure_state()
