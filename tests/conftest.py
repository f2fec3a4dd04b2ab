"""
Pytest configuration and fixtures for the Glo Boards API client tests.

This file provides test isolation and shared fixtures.
"""
import os
import pytest

from tests.helpers import BASE_URL

# Ensure a token is available before any client is constructed
os.environ.setdefault("GLO_API_TOKEN", "test-token")


@pytest.fixture(autouse=True)
def reset_singleton_state():
    """
    Reset global state between tests.

    This prevents test pollution from the config singleton and logging context.
    """
    yield  # Run test

    import config as cfg
    cfg._config = None

    from utils.logging import clear_context
    clear_context()


@pytest.fixture
def glo_config():
    """Configuration independent of the process environment and .env files."""
    from config import GloConfig
    return GloConfig(_env_file=None, api_token="test-token", base_url=BASE_URL)
