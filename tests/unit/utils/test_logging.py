import logging

from genai_bridge.utils.logging import get_logger, logger, update_logger_level


def test_default_logger():
    assert logger.name == "genai_bridge"
    assert get_logger("genai_bridge") is logger


def test_get_logger_configures_new_logger():
    new_logger = get_logger("genai_bridge_test_new_logger", level="debug")

    assert new_logger.level == logging.DEBUG
    assert len(new_logger.handlers) == 1
    assert not new_logger.propagate

    # A second lookup doesn't add handlers.
    assert get_logger("genai_bridge_test_new_logger") is new_logger
    assert len(new_logger.handlers) == 1


def test_update_logger_level():
    test_logger = get_logger("genai_bridge_test_update_level")

    update_logger_level("genai_bridge_test_update_level", "warning")

    assert test_logger.level == logging.WARNING
    for handler in test_logger.handlers:
        assert handler.level == logging.WARNING


def test_log_records_are_captured(caplog):
    with caplog.at_level(logging.INFO, logger="genai_bridge"):
        logger.info("hello from the library")

    assert "hello from the library" in caplog.text
