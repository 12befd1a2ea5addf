"""
Pytest configuration for tests with logging enabled.
"""
import logging
import sys
from datetime import date

import pytest

from meliads.core.mock_data import generate_mock_campaigns

# Can be overridden with pytest --log-cli-level flag
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)

TODAY = date(2025, 6, 1)


@pytest.fixture
def campaigns():
    """The eight sample campaigns anchored to a fixed day."""
    return generate_mock_campaigns(today=TODAY)
