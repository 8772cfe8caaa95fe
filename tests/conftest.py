"""
This file contains fixtures for the tests in the v_connection_string package.
Functions:
- pytest_addoption: Register the enable_logging ini option.
- pytest_configure: Turn on package logging when enable_logging is set.
- cleanup_logger: Fixture that restores the logger singleton to its defaults.
"""

import logging

import pytest

from v_connection_string import logger
from v_connection_string.logging import FILE


def pytest_addoption(parser):
    parser.addini(
        'enable_logging',
        'Enable v_connection_string DEBUG logging to stdout during tests',
        default='false',
    )


def pytest_configure(config):
    enable_log = config.getini('enable_logging')
    if enable_log and str(enable_log).lower() in ('true', '1', 'yes'):
        from v_connection_string import setup_logging
        setup_logging(output='stdout')
        print("[pytest] v_connection_string logging enabled")


def _reset_logger():
    for handler in (logger._file_handler, logger._stdout_handler):
        if handler is not None:
            handler.close()
            logger.removeHandler(handler)
    logger._logger.setLevel(logging.CRITICAL)
    logger._output_mode = FILE
    logger._custom_log_path = None
    logger._log_file = None
    logger._file_handler = None
    logger._stdout_handler = None
    logger._handlers_initialized = False


@pytest.fixture
def cleanup_logger():
    """Reset the logger singleton before and after each test"""
    _reset_logger()
    yield logger
    _reset_logger()
