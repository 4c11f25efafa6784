import logging

import pytest


@pytest.fixture(autouse=True)
def reset_oficina_logger():
    """Undo configure_logging() after CLI tests.

    The CLI installs a handler on a stream CliRunner closes afterwards and
    stops propagation, which would hide records from caplog.
    """
    yield
    logger = logging.getLogger("oficina")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
