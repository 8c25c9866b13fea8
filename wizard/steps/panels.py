"""Minimal step panels for the demo host.

Each panel only edits the handful of state fields that drive step
visibility, so the navigation chrome can be exercised end to end.
"""

from __future__ import annotations

from typing import Callable, Final

import streamlit as st

from constants.keys import UIKeys
from models.character_creation import (
    CharacterSummary,
    ClassLevelProgression,
    ClassSelection,
    CreationWizardState,
    RaceSelection,
)
from models.level_up import LevelUpResult, LevelUpState, PendingChoice
from utils.i18n import tr
from wizard.step_registry import StepDescriptor

SAMPLE_RACES: Final[tuple[RaceSelection, ...]] = (
    RaceSelection(slug="human", name="Human"),
    RaceSelection(slug="elf", name="Elf", subraces=["high-elf", "wood-elf"], subrace_required=True),
    RaceSelection(slug="dwarf", name="Dwarf", subraces=["hill-dwarf", "mountain-dwarf"]),
)

SAMPLE_CLASSES: Final[tuple[ClassSelection, ...]] = (
    ClassSelection(slug="fighter", name="Fighter", subclass_level=3),
    ClassSelection(
        slug="cleric",
        name="Cleric",
        subclass_level=1,
        spellcasting_ability="WIS",
        level_progression=[ClassLevelProgression(level=1, cantrips_known=3)],
    ),
    ClassSelection(
        slug="wizard",
        name="Wizard",
        subclass_level=2,
        spellcasting_ability="INT",
        level_progression=[ClassLevelProgression(level=1, cantrips_known=3, spells_known=6)],
    ),
)

SAMPLE_BACKGROUNDS: Final[tuple[str, ...]] = ("acolyte", "criminal", "sage", "soldier")


def _render_race_panel(state: CreationWizardState) -> None:
    labels = [race.name for race in SAMPLE_RACES]
    current = state.selections.race
    index = next((i for i, race in enumerate(SAMPLE_RACES) if current and race.slug == current.slug), None)
    choice = st.radio(tr("Volk", "Race"), labels, index=index)
    if choice is not None:
        selected = SAMPLE_RACES[labels.index(choice)]
        if current is None or current.slug != selected.slug:
            state.selections.race = selected
            state.selections.subrace = None


def _render_subrace_panel(state: CreationWizardState) -> None:
    race = state.selections.race
    if race is None:
        return
    options = list(race.subraces)
    if not state.is_subrace_required:
        options.insert(0, "none")
    index = options.index(state.selections.subrace) if state.selections.subrace in options else None
    choice = st.radio(tr("Untervolk", "Subrace"), options, index=index)
    if choice is not None:
        state.selections.subrace = None if choice == "none" else choice


def _render_class_panel(state: CreationWizardState) -> None:
    labels = [cls.name for cls in SAMPLE_CLASSES]
    current = state.selections.character_class
    index = next((i for i, cls in enumerate(SAMPLE_CLASSES) if current and cls.slug == current.slug), None)
    choice = st.radio(tr("Klasse", "Class"), labels, index=index)
    if choice is not None:
        selected = SAMPLE_CLASSES[labels.index(choice)]
        if current is None or current.slug != selected.slug:
            state.selections.character_class = selected
            state.selections.subclass = None


def _render_subclass_panel(state: CreationWizardState) -> None:
    value = st.text_input(tr("Unterklasse", "Subclass"), value=state.selections.subclass or "")
    state.selections.subclass = value.strip() or None


def _render_background_panel(state: CreationWizardState) -> None:
    index = SAMPLE_BACKGROUNDS.index(state.selections.background) if state.selections.background in SAMPLE_BACKGROUNDS else None
    choice = st.radio(tr("Hintergrund", "Background"), SAMPLE_BACKGROUNDS, index=index)
    if choice is not None:
        state.selections.background = choice
        if state.summary is None:
            state.summary = CharacterSummary()


def _render_details_panel(state: CreationWizardState) -> None:
    state.selections.name = st.text_input(
        tr("Name", "Name"),
        value=state.selections.name,
        key=UIKeys.CHARACTER_NAME,
    )


_CREATION_PANELS: Final[dict[str, Callable[[CreationWizardState], None]]] = {
    "race": _render_race_panel,
    "subrace": _render_subrace_panel,
    "class": _render_class_panel,
    "subclass": _render_subclass_panel,
    "background": _render_background_panel,
    "details": _render_details_panel,
}


def render_creation_panel(step: StepDescriptor[CreationWizardState], state: CreationWizardState) -> None:
    st.subheader(step.label)
    panel = _CREATION_PANELS.get(step.name)
    if panel is None:
        st.caption(tr("Für diesen Schritt ist keine Auswahl nötig.", "Nothing to choose on this step."))
        return
    panel(state)


_DEMO_PENDING_CHOICES: Final[tuple[PendingChoice, ...]] = (
    PendingChoice(id="subclass-1", type="subclass", source="class"),
    PendingChoice(id="spell-1", type="spell", source="class", quantity=2),
)


def _render_class_selection_panel(state: LevelUpState) -> None:
    labels = [cls.name for cls in SAMPLE_CLASSES]
    choice = st.radio(tr("Klasse für die neue Stufe", "Class for the new level"), labels, index=None)
    if choice is None or not st.button(tr("Stufe anwenden", "Apply level")):
        return
    selected = SAMPLE_CLASSES[labels.index(choice)]
    result = LevelUpResult(
        previous_level=state.total_level,
        new_level=state.total_level + 1,
        hp_choice_pending=True,
        asi_pending=(state.total_level + 1) % 4 == 0,
    )
    choices = list(_DEMO_PENDING_CHOICES) if selected.spellcasting_ability else []
    state.apply_level_up_result(selected.slug, result, choices)


def _render_hit_points_panel(state: LevelUpState) -> None:
    result = state.level_up_result
    if result is None:
        st.caption(tr("Zuerst eine Klasse wählen.", "Choose a class first."))
        return
    if st.button(tr("Durchschnitt nehmen", "Take average")):
        result.hp_increase = 5
        result.hp_choice_pending = False


def _render_level_up_summary_panel(state: LevelUpState) -> None:
    result = state.level_up_result
    if result is None:
        st.caption(tr("Noch kein Stufenaufstieg angewendet.", "No level-up applied yet."))
        return
    st.metric(tr("Neue Stufe", "New level"), result.new_level, delta=result.new_level - result.previous_level)


_LEVEL_UP_PANELS: Final[dict[str, Callable[[LevelUpState], None]]] = {
    "class-selection": _render_class_selection_panel,
    "hit-points": _render_hit_points_panel,
    "summary": _render_level_up_summary_panel,
}


def render_level_up_panel(step: StepDescriptor[LevelUpState], state: LevelUpState) -> None:
    st.subheader(step.label)
    panel = _LEVEL_UP_PANELS.get(step.name)
    if panel is None:
        st.caption(tr("Triff hier deine Auswahl.", "Make your choices here."))
        return
    panel(state)
