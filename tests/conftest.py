import logging
from random import Random

import pytest

from toyproof import U64Protocol


@pytest.fixture
def protocol():
    return U64Protocol()


@pytest.fixture
def rng():
    """Seeded generator so challenge draws are reproducible."""
    return Random(20240601)


@pytest.fixture(autouse=True)
def reset_toyproof_logger():
    """Undo handler/propagation changes made by the CLI between tests."""
    yield
    logger = logging.getLogger("toyproof")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
