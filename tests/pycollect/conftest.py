import logging

import pytest

from pycollect import logconfig


@pytest.fixture(params=[3, 4, 5])
def pickle_protocol(request) -> int:
    return request.param


@pytest.fixture
def pycollect_logger():
    """Yield the pycollect logger, restoring its level and removing any handler
    installed by `configure_root_logger` afterwards."""
    logger = logging.getLogger(logconfig.LOGGER_NAME)
    level = logger.level
    try:
        yield logger
    finally:
        if logconfig._installed_handler is not None:
            logger.removeHandler(logconfig._installed_handler)
            logconfig._installed_handler = None
        logger.setLevel(level)
