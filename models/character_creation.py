"""Pydantic models for the character creation wizard state."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RaceSelection(BaseModel):
    """Race chosen on the race step, reduced to what the wizard needs."""

    model_config = ConfigDict(extra="ignore")

    slug: str
    name: str = ""
    subraces: list[str] = Field(default_factory=list)
    subrace_required: bool = False


class ClassLevelProgression(BaseModel):
    """Spellcasting progression row for a single class level."""

    model_config = ConfigDict(extra="ignore")

    level: int = Field(..., ge=1, le=20)
    cantrips_known: Optional[int] = None
    spells_known: Optional[int] = None


class ClassSelection(BaseModel):
    """Class chosen on the class step."""

    model_config = ConfigDict(extra="ignore")

    slug: str
    name: str = ""
    subclass_level: Optional[int] = None
    spellcasting_ability: Optional[str] = None
    level_progression: list[ClassLevelProgression] = Field(default_factory=list)


class WizardSelections(BaseModel):
    """Local selections made before they are saved."""

    race: Optional[RaceSelection] = None
    subrace: Optional[str] = None
    character_class: Optional[ClassSelection] = None
    subclass: Optional[str] = None
    background: Optional[str] = None
    name: str = ""


class PendingChoiceCounts(BaseModel):
    """Number of unresolved choices per category."""

    model_config = ConfigDict(extra="ignore")

    size: int = Field(0, ge=0)
    feats: int = Field(0, ge=0)
    asi: int = Field(0, ge=0)
    proficiencies: int = Field(0, ge=0)
    features: int = Field(0, ge=0)
    languages: int = Field(0, ge=0)
    spells: int = Field(0, ge=0)


class CharacterSummary(BaseModel):
    """Summary data for a saved character."""

    model_config = ConfigDict(extra="ignore")

    pending_choices: PendingChoiceCounts = Field(default_factory=PendingChoiceCounts)
    creation_complete: bool = False


class CreationWizardState(BaseModel):
    """Mutable state shared by every step of the character creation wizard.

    The step registry reads the derived flags below; they change as the user
    picks a race, a class, and so on, which is what makes steps appear,
    disappear, or become skippable mid-session.
    """

    character_id: Optional[int] = None
    public_id: Optional[str] = None
    selected_sources: list[str] = Field(default_factory=list)
    selections: WizardSelections = Field(default_factory=WizardSelections)
    summary: Optional[CharacterSummary] = None

    @property
    def needs_subrace_step(self) -> bool:
        race = self.selections.race
        if race is None:
            return False
        return len(race.subraces) > 0

    @property
    def is_subrace_required(self) -> bool:
        race = self.selections.race
        if race is None:
            return False
        return race.subrace_required

    @property
    def needs_subclass_step(self) -> bool:
        """True for classes that pick their subclass at level 1."""

        character_class = self.selections.character_class
        if character_class is None:
            return False
        return character_class.subclass_level == 1

    @property
    def is_spellcaster(self) -> bool:
        """True when the class learns cantrips or spells at level 1."""

        character_class = self.selections.character_class
        if character_class is None or not character_class.spellcasting_ability:
            return False
        level1 = next((row for row in character_class.level_progression if row.level == 1), None)
        if level1 is None:
            return False
        return (level1.cantrips_known or 0) > 0 or (level1.spells_known or 0) > 0

    def _pending(self, category: str) -> int:
        if self.summary is None:
            return 0
        return int(getattr(self.summary.pending_choices, category))

    @property
    def has_size_choices(self) -> bool:
        return self._pending("size") > 0

    @property
    def has_feat_choices(self) -> bool:
        return self._pending("feats") > 0

    @property
    def has_proficiency_choices(self) -> bool:
        return self._pending("proficiencies") > 0

    @property
    def has_feature_choices(self) -> bool:
        return self._pending("features") > 0

    @property
    def has_language_choices(self) -> bool:
        return self._pending("languages") > 0

    @property
    def is_complete(self) -> bool:
        return self.summary.creation_complete if self.summary is not None else False


__all__ = [
    "CharacterSummary",
    "ClassLevelProgression",
    "ClassSelection",
    "CreationWizardState",
    "PendingChoiceCounts",
    "RaceSelection",
    "WizardSelections",
]
