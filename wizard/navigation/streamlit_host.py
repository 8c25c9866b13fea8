"""Streamlit-backed router used as the host for wizard navigators."""

from __future__ import annotations

import logging
from typing import MutableMapping, cast

import streamlit as st

from wizard.navigation.keys import WizardSessionKeys

logger = logging.getLogger(__name__)

PATH_QUERY_PARAM = "path"


class StreamlitRouter:
    """Keep the current wizard path in the query string and session state.

    ``navigate`` is the navigation primitive handed to a ``WizardNavigator``.
    A navigation marks the session as pending. The following script run
    renders the new page with its controls disabled, then calls
    :meth:`commit_navigation` and reruns; requests made while the flag is set
    are dropped so a queued second click cannot produce another target.
    """

    def __init__(
        self,
        *,
        wizard_id: str,
        default_path: str,
        query_params: MutableMapping[str, object] | None = None,
        session_state: MutableMapping[str, object] | None = None,
    ) -> None:
        self._wizard_id = wizard_id
        self._default_path = default_path
        self._query_params = cast(
            MutableMapping[str, object],
            query_params if query_params is not None else st.query_params,
        )
        self._session_state = cast(
            MutableMapping[str, object],
            session_state if session_state is not None else st.session_state,
        )
        self._session_keys = WizardSessionKeys(wizard_id=wizard_id)

    @property
    def session_keys(self) -> WizardSessionKeys:
        return self._session_keys

    def current_path(self) -> str:
        raw_param = self._query_params.get(PATH_QUERY_PARAM)
        if isinstance(raw_param, list):
            raw_param = raw_param[0] if raw_param else None
        if isinstance(raw_param, str) and raw_param.strip():
            return raw_param.strip()
        stored = self._session_state.get(self._session_keys.current_path)
        if isinstance(stored, str) and stored:
            return stored
        return self._default_path

    def is_navigation_pending(self) -> bool:
        return bool(self._session_state.get(self._session_keys.pending_navigation))

    def commit_navigation(self) -> None:
        """Clear the pending flag once a script run has rendered the new path."""

        self._session_state.pop(self._session_keys.pending_navigation, None)

    def replace(self, url: str) -> None:
        """Store ``url`` as the current path without triggering a rerun."""

        self._session_state[self._session_keys.current_path] = url
        self._query_params[PATH_QUERY_PARAM] = url

    def navigate(self, url: str) -> None:
        if self.is_navigation_pending():
            logger.debug("Dropping navigation to %s while another navigation is pending", url)
            return
        self.replace(url)
        self._session_state[self._session_keys.pending_navigation] = True
        self._session_state[self._session_keys.scroll_to_top] = True
        st.rerun()


__all__ = ["PATH_QUERY_PARAM", "StreamlitRouter"]
