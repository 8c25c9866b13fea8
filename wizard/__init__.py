"""Wizard package: step registry, navigation engine, flows and the Streamlit host."""

from __future__ import annotations

from .run import WizardKind, run_wizard
from .step_registry import StepDescriptor, StepRegistry, resolve_nearest_active_step_name

__all__ = [
    "StepDescriptor",
    "StepRegistry",
    "WizardKind",
    "resolve_nearest_active_step_name",
    "run_wizard",
]
