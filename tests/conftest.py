import logging

import pytest

from passgen.utils.log import ROOT_LOGGER


@pytest.fixture(autouse=True)
def reset_passgen_logger():
    """Undo configure_logging() so caplog sees records in every test."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
