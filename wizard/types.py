"""Shared type aliases for the wizard package."""

from __future__ import annotations


LangPair = tuple[str, str]

# Bilingual text pair used by the navigation chrome
LocalizedText = LangPair


__all__ = [
    "LangPair",
    "LocalizedText",
]
