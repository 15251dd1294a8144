"""Fixtures for CLI integration tests"""

import pytest

from mdsite.util.log import configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """The build command points loguru at the runner's stderr; restore the real one afterwards."""
    yield
    configure_logging()
