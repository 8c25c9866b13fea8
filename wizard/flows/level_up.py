"""Level-up wizard: step registry and URL routing.

Most level-up steps only exist when the level grants the matching choice, so
they are both hidden and skipped when the choice is absent. Hit points and
ASI/feat stay listed for orientation and are only skipped.
"""

from __future__ import annotations

from typing import Callable, Final

import config
from core.errors import MissingPublicIdError
from models.level_up import LevelUpState
from wizard.navigation.router import WizardNavigator
from wizard.navigation_types import NavigateFn
from wizard.step_registry import StepDescriptor, StepRegistry

WIZARD_ID: Final[str] = "level-up"
DEFAULT_STEP: Final[str] = "class-selection"


def _hp_choice_settled(state: LevelUpState) -> bool:
    # Before a level-up result exists the HP step is assumed to be pending.
    result = state.level_up_result
    if result is None:
        return False
    return not result.hp_choice_pending


def _asi_settled(state: LevelUpState) -> bool:
    result = state.level_up_result
    if result is None:
        return True
    return not result.asi_pending


def create_step_registry() -> StepRegistry[LevelUpState]:
    """Return the level-up steps in wizard order."""

    return StepRegistry(
        [
            StepDescriptor(
                name="class-selection",
                label="Class",
                icon="i-heroicons-shield-check",
                visible=lambda state: state.needs_class_selection,
                should_skip=lambda state: not state.needs_class_selection,
            ),
            StepDescriptor(
                name="subclass",
                label="Subclass",
                icon="i-heroicons-star",
                visible=lambda state: state.has_subclass_choice,
                should_skip=lambda state: not state.has_subclass_choice,
            ),
            StepDescriptor(
                name="hit-points",
                label="Hit Points",
                icon="i-heroicons-heart",
                should_skip=_hp_choice_settled,
            ),
            StepDescriptor(
                name="asi-feat",
                label="ASI / Feat",
                icon="i-heroicons-arrow-trending-up",
                should_skip=_asi_settled,
            ),
            StepDescriptor(
                name="feature-choices",
                label="Features",
                icon="i-heroicons-puzzle-piece",
                visible=lambda state: state.has_feature_choices,
                should_skip=lambda state: not state.has_feature_choices,
            ),
            StepDescriptor(
                name="spells",
                label="Spells",
                icon="i-heroicons-sparkles",
                visible=lambda state: state.has_spell_choices,
                should_skip=lambda state: not state.has_spell_choices,
            ),
            StepDescriptor(
                name="languages",
                label="Languages",
                icon="i-heroicons-language",
                visible=lambda state: state.has_language_choices,
                should_skip=lambda state: not state.has_language_choices,
            ),
            StepDescriptor(
                name="proficiencies",
                label="Proficiencies",
                icon="i-heroicons-academic-cap",
                visible=lambda state: state.has_proficiency_choices,
                should_skip=lambda state: not state.has_proficiency_choices,
            ),
            StepDescriptor(name="summary", label="Summary", icon="i-heroicons-trophy"),
        ]
    )


def get_step_url(public_id: str | None, step_name: str) -> str:
    if not public_id:
        raise MissingPublicIdError()
    return f"{config.CHARACTER_BASE_PATH}/{public_id}/level-up/{step_name}"


def get_preview_url(public_id: str | None) -> str:
    if not public_id:
        raise MissingPublicIdError()
    return f"{config.CHARACTER_BASE_PATH}/{public_id}/level-up"


class LevelUpNavigator(WizardNavigator[LevelUpState]):
    """Level-up navigator with the extra preview URL helper."""

    def __init__(self, *, public_id: Callable[[], str | None], **kwargs: object) -> None:
        super().__init__(**kwargs)  # type: ignore[arg-type]
        self._public_id = public_id

    def get_preview_url(self) -> str:
        return get_preview_url(self._public_id())


def create_level_up_wizard(
    state: LevelUpState,
    *,
    navigate: NavigateFn,
    public_id: str | Callable[[], str | None] | None = None,
    current_step: str | Callable[[], str] | None = None,
) -> LevelUpNavigator:
    """Build a navigator for the level-up wizard bound to ``state``.

    ``public_id`` and ``current_step`` accept plain values or callables so a
    host can pass values that change between reruns. The current step falls
    back to ``state.current_step_name`` when none is supplied.
    """

    def _resolve_public_id() -> str | None:
        if callable(public_id):
            return public_id()
        return public_id

    def _resolve_current_step() -> str:
        if current_step is None:
            return state.current_step_name
        if callable(current_step):
            return current_step()
        return current_step

    return LevelUpNavigator(
        public_id=_resolve_public_id,
        registry=create_step_registry(),
        context=state,
        current_step_name=_resolve_current_step,
        get_step_url=lambda step_name: get_step_url(_resolve_public_id(), step_name),
        navigate=navigate,
        wizard_id=WIZARD_ID,
    )


__all__ = [
    "DEFAULT_STEP",
    "LevelUpNavigator",
    "WIZARD_ID",
    "create_level_up_wizard",
    "create_step_registry",
    "get_preview_url",
    "get_step_url",
]
