"""
Tests for configuration management

Ensures configuration loading, defaults, and environment handling work correctly.
"""
import os
from unittest.mock import patch

import config as cfg
from config import GloConfig, get_config
from constants import GLO_API_BASE_URL


class TestGloConfig:
    """Test configuration loading."""

    def test_config_has_default_values(self):
        """Test that config provides sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            config = GloConfig(_env_file=None)
            assert config.api_token is None
            assert config.base_url == GLO_API_BASE_URL
            assert config.request_timeout is None
            assert config.log_level == "INFO"
            assert config.environment == "development"
            assert config.is_development is True

    def test_config_loads_from_env(self):
        """Test that prefixed environment variables are read."""
        with patch.dict(os.environ, {
            'GLO_API_TOKEN': 'pat-from-env',
            'GLO_BASE_URL': 'https://glo.example.com/v1/glo',
            'GLO_REQUEST_TIMEOUT': '2.5',
            'GLO_ENVIRONMENT': 'production',
        }, clear=True):
            config = GloConfig(_env_file=None)
            assert config.api_token == 'pat-from-env'
            assert config.base_url == 'https://glo.example.com/v1/glo'
            assert config.request_timeout == 2.5
            assert config.is_development is False

    def test_config_case_insensitive(self):
        with patch.dict(os.environ, {'glo_log_level': 'DEBUG'}, clear=True):
            config = GloConfig(_env_file=None)
            assert config.log_level == 'DEBUG'

    def test_config_ignores_extra_env_vars(self):
        with patch.dict(os.environ, {'GLO_UNKNOWN_SETTING': 'x', 'API_TOKEN': 'unprefixed'}, clear=True):
            config = GloConfig(_env_file=None)
            assert config.api_token is None
            assert not hasattr(config, 'unknown_setting')

    def test_get_config_is_lazy_singleton(self):
        cfg._config = None
        first = get_config()
        assert get_config() is first
