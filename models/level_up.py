"""Pydantic models for the level-up wizard state."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

FEATURE_CHOICE_TYPES: frozenset[str] = frozenset({"fighting_style", "expertise", "optional_feature"})


class CharacterClassEntry(BaseModel):
    """One class the character already has levels in."""

    model_config = ConfigDict(extra="ignore")

    class_slug: Optional[str] = None
    name: str = ""
    level: int = Field(1, ge=0)
    subclass: Optional[str] = None
    is_primary: bool = False


class LevelUpResult(BaseModel):
    """Outcome of applying a level to a class."""

    model_config = ConfigDict(extra="ignore")

    previous_level: int = 0
    new_level: int = 0
    hp_increase: Optional[int] = None
    new_max_hp: Optional[int] = None
    features_gained: list[str] = Field(default_factory=list)
    spell_slots: dict[str, int] = Field(default_factory=dict)
    asi_pending: bool = False
    hp_choice_pending: bool = False


class PendingChoice(BaseModel):
    """A choice the character still has to make."""

    model_config = ConfigDict(extra="ignore")

    id: str
    type: str
    source: Optional[str] = None
    quantity: int = 1


class LevelUpState(BaseModel):
    """Mutable state shared by every step of the level-up wizard."""

    character_id: Optional[int] = None
    public_id: Optional[str] = None
    is_open: bool = False
    level_up_result: Optional[LevelUpResult] = None
    selected_class_slug: Optional[str] = None
    character_classes: list[CharacterClassEntry] = Field(default_factory=list)
    total_level: int = Field(0, ge=0)
    pending_choices: list[PendingChoice] = Field(default_factory=list)
    current_step_name: str = "class-selection"

    @property
    def is_multiclass(self) -> bool:
        return len(self.character_classes) > 1

    @property
    def is_first_multiclass_opportunity(self) -> bool:
        """Level 1 -> 2 is the first chance to pick a second class."""

        return self.total_level == 1

    @property
    def needs_class_selection(self) -> bool:
        return self.is_multiclass or self.is_first_multiclass_opportunity

    @property
    def is_complete(self) -> bool:
        result = self.level_up_result
        if result is None:
            return False
        return not result.hp_choice_pending and not result.asi_pending

    def _has_choice(self, *types: str) -> bool:
        return any(choice.type in types for choice in self.pending_choices)

    @property
    def has_subclass_choice(self) -> bool:
        return self._has_choice("subclass")

    @property
    def has_spell_choices(self) -> bool:
        return self._has_choice("spell")

    @property
    def has_feature_choices(self) -> bool:
        return self._has_choice(*FEATURE_CHOICE_TYPES)

    @property
    def has_language_choices(self) -> bool:
        return self._has_choice("language")

    @property
    def has_proficiency_choices(self) -> bool:
        return self._has_choice("proficiency")

    @property
    def is_level_up_in_progress(self) -> bool:
        return self.level_up_result is not None

    def open_wizard(
        self,
        character_id: int,
        public_id: str,
        classes: list[CharacterClassEntry] | None = None,
        level: int = 1,
    ) -> None:
        """Start a level-up session for a character."""

        self.character_id = character_id
        self.public_id = public_id
        self.character_classes = list(classes or [])
        self.total_level = level
        self.level_up_result = None
        self.selected_class_slug = None
        self.is_open = True

    def close_wizard(self) -> None:
        """Hide the wizard but keep its state for a later reopen."""

        self.is_open = False

    def apply_level_up_result(
        self,
        class_slug: str,
        result: LevelUpResult,
        pending_choices: list[PendingChoice] | None = None,
    ) -> None:
        """Record the outcome of leveling ``class_slug`` and its follow-up choices."""

        self.level_up_result = result
        self.selected_class_slug = class_slug
        if pending_choices is not None:
            self.pending_choices = list(pending_choices)

    def reset(self) -> None:
        """Clear all wizard state."""

        self.character_id = None
        self.public_id = None
        self.character_classes = []
        self.total_level = 0
        self.is_open = False
        self.level_up_result = None
        self.selected_class_slug = None
        self.pending_choices = []
        self.current_step_name = "class-selection"


__all__ = [
    "CharacterClassEntry",
    "FEATURE_CHOICE_TYPES",
    "LevelUpResult",
    "LevelUpState",
    "PendingChoice",
]
