from __future__ import annotations

import logging

import pytest

from utils.logging_context import (
    configure_logging,
    get_log_context,
    log_context,
    set_session_id,
    set_wizard_id,
    set_wizard_step,
)


def test_log_context_overrides_and_restores() -> None:
    set_session_id("session-1")
    set_wizard_id("creation")
    set_wizard_step("race")

    with log_context(wizard_id="level-up", wizard_step="summary"):
        assert get_log_context() == {
            "session_id": "session-1",
            "wizard_id": "level-up",
            "wizard_step": "summary",
        }

    assert get_log_context()["wizard_step"] == "race"
    assert get_log_context()["wizard_id"] == "creation"


def test_blank_values_are_normalised() -> None:
    set_wizard_step("   ")
    set_session_id(None)

    context = get_log_context()
    assert context["wizard_step"] == "-"
    assert context["session_id"] == "-"


def test_records_carry_context(caplog: pytest.LogCaptureFixture) -> None:
    configure_logging(level=logging.DEBUG)
    set_session_id("session-xyz")
    logger = logging.getLogger("test.logging.context")
    caplog.set_level(logging.INFO, logger=logger.name)

    with log_context(wizard_id="creation", wizard_step="class"):
        logger.info("rendering step")

    record = next(record for record in caplog.records if record.getMessage() == "rendering step")
    assert record.session_id == "session-xyz"
    assert record.wizard_id == "creation"
    assert record.wizard_step == "class"
    assert logging.getLogger().level == logging.DEBUG
