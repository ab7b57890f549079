import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Point loguru back at the live sys.stderr after each test."""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="INFO")
