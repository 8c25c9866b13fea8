"""Progress helpers for the wizard progress bar."""

from __future__ import annotations

import math


def progress_percent(cursor_index: int, total_steps: int) -> int:
    """Return the position of ``cursor_index`` as an integer percentage.

    A wizard with zero or one active step always reports ``100``. Otherwise
    the first step is ``0``, the last is ``100`` and the steps in between are
    interpolated by position, rounding halves up. An unresolved cursor
    (``-1``) reports ``0``.
    """

    if total_steps <= 1:
        return 100
    if cursor_index < 0:
        return 0
    ratio = cursor_index / (total_steps - 1)
    return min(100, int(math.floor(ratio * 100 + 0.5)))


def is_first_step(cursor_index: int) -> bool:
    return cursor_index == 0


def is_last_step(cursor_index: int, total_steps: int) -> bool:
    return cursor_index >= 0 and cursor_index == total_steps - 1


__all__ = ["is_first_step", "is_last_step", "progress_percent"]
