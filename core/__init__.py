"""Core package for character wizard errors."""

from .errors import DuplicateStepError, InvalidStepError, MissingPublicIdError, WizardError

__all__ = ["DuplicateStepError", "InvalidStepError", "MissingPublicIdError", "WizardError"]
