"""Character creation wizard: step registry, URL routing and step gates.

The URL is the source of truth for the current step. New characters live
under ``/characters/new/<step>``; once saved they move to
``/characters/<public_id>/edit/<step>``.
"""

from __future__ import annotations

import re
from typing import Callable, Final

import config
from models.character_creation import CreationWizardState
from wizard.navigation.router import WizardNavigator
from wizard.navigation_types import NavigateFn
from wizard.step_registry import StepDescriptor, StepRegistry

WIZARD_ID: Final[str] = "creation"
DEFAULT_STEP: Final[str] = "sourcebooks"

_BASE = re.escape(config.CHARACTER_BASE_PATH)
_NEW_PATH_RE = re.compile(_BASE + r"/new/([^/?]+)")
# Public ids look like ``word-word-XXXX``.
_EDIT_PATH_RE = re.compile(_BASE + r"/[a-z]+-[a-z]+-[A-Za-z0-9]{4}/edit/([^/?]+)")
_LEGACY_EDIT_PATH_RE = re.compile(_BASE + r"/\d+/edit/([^/?]+)")


def create_step_registry() -> StepRegistry[CreationWizardState]:
    """Return the creation steps in wizard order."""

    return StepRegistry(
        [
            StepDescriptor(name="sourcebooks", label="Sources", icon="i-heroicons-book-open"),
            StepDescriptor(name="race", label="Race", icon="i-heroicons-globe-alt"),
            StepDescriptor(
                name="subrace",
                label="Subrace",
                icon="i-heroicons-sparkles",
                visible=lambda state: state.needs_subrace_step,
            ),
            StepDescriptor(
                name="size",
                label="Size",
                icon="i-heroicons-arrows-up-down",
                should_skip=lambda state: not state.has_size_choices,
            ),
            StepDescriptor(name="class", label="Class", icon="i-heroicons-shield-check"),
            StepDescriptor(
                name="subclass",
                label="Subclass",
                icon="i-heroicons-star",
                visible=lambda state: state.needs_subclass_step,
            ),
            StepDescriptor(name="background", label="Background", icon="i-heroicons-book-open"),
            StepDescriptor(
                name="feats",
                label="Feats",
                icon="i-heroicons-star",
                should_skip=lambda state: not state.has_feat_choices,
            ),
            StepDescriptor(name="abilities", label="Abilities", icon="i-heroicons-chart-bar"),
            StepDescriptor(
                name="proficiencies",
                label="Skills",
                icon="i-heroicons-academic-cap",
                should_skip=lambda state: not state.has_proficiency_choices,
            ),
            StepDescriptor(
                name="feature-choices",
                label="Features",
                icon="i-heroicons-puzzle-piece",
                visible=lambda state: state.has_feature_choices,
            ),
            StepDescriptor(
                name="languages",
                label="Languages",
                icon="i-heroicons-language",
                should_skip=lambda state: not state.has_language_choices,
            ),
            StepDescriptor(name="equipment", label="Equipment", icon="i-heroicons-briefcase"),
            StepDescriptor(
                name="spells",
                label="Spells",
                icon="i-heroicons-sparkles",
                visible=lambda state: state.is_spellcaster,
            ),
            StepDescriptor(name="details", label="Details", icon="i-heroicons-user"),
            StepDescriptor(name="physical-description", label="Physical", icon="i-heroicons-identification"),
            StepDescriptor(name="review", label="Review", icon="i-heroicons-check-circle"),
        ]
    )


def extract_step_from_path(path: str) -> str:
    """Return the step segment of a creation/edit URL, defaulting to the first step."""

    for pattern in (_NEW_PATH_RE, _EDIT_PATH_RE, _LEGACY_EDIT_PATH_RE):
        match = pattern.search(path or "")
        if match and match.group(1):
            return match.group(1)
    return DEFAULT_STEP


def get_step_url(state: CreationWizardState, step_name: str) -> str:
    base = config.CHARACTER_BASE_PATH
    if state.public_id:
        return f"{base}/{state.public_id}/edit/{step_name}"
    return f"{base}/new/{step_name}"


def can_proceed(state: CreationWizardState, step_name: str) -> bool:
    """Return whether the user may leave ``step_name`` going forward.

    This is a content gate for the Next button; the navigation engine itself
    never consults it.
    """

    selections = state.selections
    summary = state.summary
    pending = summary.pending_choices if summary is not None else None

    if step_name == "race":
        return selections.race is not None
    if step_name == "subrace":
        return selections.subrace is not None or not state.is_subrace_required
    if step_name == "size":
        if pending is None:
            return False
        return pending.size == 0
    if step_name == "class":
        return selections.character_class is not None
    if step_name == "subclass":
        return selections.subclass is not None
    if step_name == "background":
        return selections.background is not None
    if step_name == "details":
        return len(selections.name.strip()) > 0

    pending_category = {
        "feats": "feats",
        "abilities": "asi",
        "proficiencies": "proficiencies",
        "languages": "languages",
        "spells": "spells",
    }.get(step_name)
    if pending_category is not None:
        if pending is None:
            return True
        return getattr(pending, pending_category) == 0
    return True


def create_character_wizard(
    state: CreationWizardState,
    *,
    current_path: Callable[[], str],
    navigate: NavigateFn,
) -> WizardNavigator[CreationWizardState]:
    """Build a navigator for the creation wizard bound to ``state``."""

    return WizardNavigator(
        registry=create_step_registry(),
        context=state,
        current_step_name=lambda: extract_step_from_path(current_path()),
        get_step_url=lambda step_name: get_step_url(state, step_name),
        navigate=navigate,
        wizard_id=WIZARD_ID,
    )


__all__ = [
    "DEFAULT_STEP",
    "WIZARD_ID",
    "can_proceed",
    "create_character_wizard",
    "create_step_registry",
    "extract_step_from_path",
    "get_step_url",
]
