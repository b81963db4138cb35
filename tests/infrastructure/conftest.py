import logging

import pytest


@pytest.fixture(autouse=True)
def _detach_cli_log_handlers():
    """The CLI binds a handler to CliRunner's stderr, which closes after invoke."""
    yield
    logger = logging.getLogger("ecom")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
