"""Custom exception types for wizard configuration problems."""

from __future__ import annotations


class WizardError(Exception):
    """Base exception for wizard set-up issues.

    Navigation itself never raises; these errors signal a wrongly built
    registry or a flow that lacks the data needed to build step URLs.
    """


class InvalidStepError(WizardError):
    """Raised when a step descriptor is missing its identity."""


class DuplicateStepError(WizardError):
    """Raised when a registry contains the same step name twice."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate wizard step name: {name!r}")
        self.name = name


MISSING_PUBLIC_ID_MESSAGE = "publicId required for URL-based navigation"


class MissingPublicIdError(WizardError):
    """Raised when a level-up URL is requested without a character public id."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or MISSING_PUBLIC_ID_MESSAGE)
