from __future__ import annotations

from typing import Callable

# Returns the name of the step the host currently shows (usually parsed from the URL).
StepNameSource = Callable[[], str]

# Maps a step name to a navigable location.
StepUrlBuilder = Callable[[str], str]

# Host navigation primitive; receives the URL built for the target step.
NavigateFn = Callable[[str], None]


__all__ = [
    "NavigateFn",
    "StepNameSource",
    "StepUrlBuilder",
]
