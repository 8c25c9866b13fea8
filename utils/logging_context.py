"""Per-session logging context for the wizard.

Every record gets ``session_id``, ``wizard_id`` and ``wizard_step``
attributes so navigation logs can be grouped by browser session and wizard.
Unset fields render as ``-``.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Final, Iterator

_EMPTY: Final[str] = "-"
_CONTEXT_FIELDS: Final[tuple[str, ...]] = ("session_id", "wizard_id", "wizard_step")
_LOG_FORMAT: Final[str] = (
    "%(asctime)s %(levelname)s [session=%(session_id)s wizard=%(wizard_id)s "
    "step=%(wizard_step)s] %(name)s: %(message)s"
)

_context_vars: dict[str, contextvars.ContextVar[str]] = {
    field: contextvars.ContextVar(f"wizard_log_{field}", default=_EMPTY) for field in _CONTEXT_FIELDS
}
_base_record_factory = logging.getLogRecordFactory()
_factory_installed = False


def _stamp(record: logging.LogRecord) -> logging.LogRecord:
    for field, var in _context_vars.items():
        setattr(record, field, var.get())
    return record


class _ContextFilter(logging.Filter):
    """Stamp records that reach the root logger directly."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401 - logging protocol
        _stamp(record)
        return True


def _normalise(value: str | None) -> str:
    if value is None:
        return _EMPTY
    return value.strip() or _EMPTY


def _install_record_factory() -> None:
    global _factory_installed
    if _factory_installed:
        return

    def _factory(*args: object, **kwargs: object) -> logging.LogRecord:
        return _stamp(_base_record_factory(*args, **kwargs))

    logging.setLogRecordFactory(_factory)
    _factory_installed = True


def configure_logging(*, level: int = logging.INFO) -> None:
    """Set the root level and make every handler print the wizard context."""

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=_LOG_FORMAT)
    root.setLevel(level)
    for handler in root.handlers:
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    if not any(isinstance(flt, _ContextFilter) for flt in root.filters):
        root.addFilter(_ContextFilter())
    _install_record_factory()


def set_session_id(session_id: str | None) -> None:
    """Bind the Streamlit session identifier for subsequent records."""

    _context_vars["session_id"].set(_normalise(session_id))


def set_wizard_id(wizard_id: str | None) -> None:
    _context_vars["wizard_id"].set(_normalise(wizard_id))


def set_wizard_step(step: str | None) -> None:
    _context_vars["wizard_step"].set(_normalise(step))


def get_log_context() -> dict[str, str]:
    """Return the values currently bound for each context field."""

    return {field: var.get() for field, var in _context_vars.items()}


@contextmanager
def log_context(
    *,
    session_id: str | None = None,
    wizard_id: str | None = None,
    wizard_step: str | None = None,
) -> Iterator[None]:
    """Bind the given fields for the duration of the block; ``None`` leaves a field as is."""

    overrides = {"session_id": session_id, "wizard_id": wizard_id, "wizard_step": wizard_step}
    tokens = [
        (_context_vars[field], _context_vars[field].set(_normalise(value)))
        for field, value in overrides.items()
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = [
    "configure_logging",
    "get_log_context",
    "log_context",
    "set_session_id",
    "set_wizard_id",
    "set_wizard_step",
]
