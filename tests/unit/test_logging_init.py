from __future__ import annotations

import logging
from io import StringIO

from csv_sms.logging.init import (
    APP_LOGGER_NAME,
    SUMMARY_LEVEL,
    LabeledFormatter,
    get_logger,
    log_summary,
    reset_logging,
    setup_logging,
)


def test_setup_logging_creates_logger_with_labeled_formatter():
    logger = setup_logging()

    assert logger.name == APP_LOGGER_NAME
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, LabeledFormatter)
    assert logger.propagate is False


def test_logging_labeled_prefixes():
    captured_output = StringIO()
    logger = logging.getLogger("test_csv_sms_labels")
    logger.setLevel(logging.INFO)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    handler = logging.StreamHandler(captured_output)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    logger.info("Test info message")
    logger.warning("Test warning message")
    logger.error("Test error message")
    logger.log(SUMMARY_LEVEL, "Test summary message")

    lines = captured_output.getvalue().strip().split("\n")
    assert lines == [
        "INFO Test info message",
        "WARN Test warning message",
        "ERROR Test error message",
        "SUMMARY Test summary message",
    ]


def test_module_loggers_reach_app_handler(capsys):
    setup_logging()
    logging.getLogger("csv_sms.services.dispatcher").info("SENT to +972 - messageID: SM1")
    assert "INFO SENT to +972 - messageID: SM1" in capsys.readouterr().out


def test_get_logger_returns_configured_logger():
    assert get_logger() is setup_logging()


def test_setup_logging_idempotent():
    logger1 = setup_logging()
    logger2 = setup_logging()
    assert logger1 is logger2
    assert len(logger1.handlers) == 1


def test_debug_lowers_level(capsys):
    logger = setup_logging(debug=True)
    logger.debug("details")
    assert logger.level == logging.DEBUG
    assert "DEBUG details" in capsys.readouterr().out


def test_log_summary_uses_summary_label(capsys):
    setup_logging()
    log_summary("rows=1 dropped=0 sent=1 failed=0 elapsed_sec=0")
    assert "SUMMARY rows=1 dropped=0 sent=1 failed=0 elapsed_sec=0" in capsys.readouterr().out


def test_reset_logging_restores_propagation():
    setup_logging()
    reset_logging()
    logger = logging.getLogger(APP_LOGGER_NAME)
    assert logger.handlers == []
    assert logger.propagate is True
