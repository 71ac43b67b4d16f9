"""Fixtures for locale_negotiation.logging tests."""

import pytest
from unittest.mock import Mock

from locale_negotiation.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    settings.GIT_SHA = "abc123"
    return settings
