"""Pydantic models for the character creation and level-up wizard state."""

from .character_creation import (
    CharacterSummary,
    ClassLevelProgression,
    ClassSelection,
    CreationWizardState,
    PendingChoiceCounts,
    RaceSelection,
    WizardSelections,
)
from .level_up import CharacterClassEntry, LevelUpResult, LevelUpState, PendingChoice

__all__ = [
    "CharacterClassEntry",
    "CharacterSummary",
    "ClassLevelProgression",
    "ClassSelection",
    "CreationWizardState",
    "LevelUpResult",
    "LevelUpState",
    "PendingChoice",
    "PendingChoiceCounts",
    "RaceSelection",
    "WizardSelections",
]
