import logging

from stringdict.logger.logger import logger, setup_logger


def test_default_logger():
    assert logger.name == "stringdict"
    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_setup_logger_level():
    custom = setup_logger(name="stringdict.test_level", level="warning")
    assert custom.level == logging.WARNING


def test_setup_logger_configures_once():
    first = setup_logger(name="stringdict.test_once", level="DEBUG")
    second = setup_logger(name="stringdict.test_once", level="ERROR")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG


def test_setup_logger_uses_custom_format():
    custom = setup_logger(name="stringdict.test_format", format_string="%(message)s")
    assert custom.handlers[0].formatter._fmt == "%(message)s"
