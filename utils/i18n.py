"""Simple i18n helper utilities."""

from __future__ import annotations

from typing import Final

import streamlit as st

import config


NAV_BACK_LABEL: Final[tuple[str, str]] = ("◀ Zurück", "◀ Back")
NAV_NEXT_LABEL: Final[tuple[str, str]] = ("Weiter ▶", "Next ▶")
NAV_FINISH_HINT: Final[tuple[str, str]] = (
    "Letzter Schritt erreicht. Prüfe deine Angaben und schließe den Assistenten ab.",
    "You have reached the last step. Review your choices and finish the wizard.",
)
NAV_INCOMPLETE_HINT: Final[tuple[str, str]] = (
    "Bitte triff zuerst die Auswahl für diesen Schritt.",
    "Please complete this step before continuing.",
)
NAV_STEPS_HEADER: Final[tuple[str, str]] = ("Schritte", "Steps")
NAV_PROGRESS_CAPTION: Final[tuple[str, str]] = (
    "Schritt {current} von {total}",
    "Step {current} of {total}",
)
NAV_UNRESOLVED_CAPTION: Final[tuple[str, str]] = (
    "Dieser Schritt ist derzeit nicht verfügbar.",
    "This step is not available right now.",
)


def tr(de: str, en: str, lang: str | None = None) -> str:
    """Return the string matching the current language.

    Args:
        de: German text.
        en: English text.
        lang: Optional language override (``"de"`` or ``"en"``).

    Returns:
        The localized string for the requested language.
    """
    code = lang or st.session_state.get("lang", config.DEFAULT_LANGUAGE)
    return de if code == "de" else en
