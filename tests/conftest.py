"""Root test configuration: logger isolation between tests"""

import pytest

from richmd.logger import reset_logger


@pytest.fixture(autouse=True)
def clean_logger():
    """Undo any CLI logger setup so caplog sees richmd records in every test."""
    reset_logger()
    yield
    reset_logger()
