"""
Unit tests for configuration module.
"""
import pytest
import os
from unittest.mock import patch
from config import Config, get_config


class TestConfig:
    """Tests for Config class."""

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_defaults(self):
        """Test Config.from_env with nothing set."""
        config = Config.from_env()
        assert config.sqs_region == 'us-east-1'  # default
        assert config.sqs_endpoint is None
        assert config.aws_access_key_id is None
        assert config.debug is False
        assert config.http_timeout is None
        assert config.log_level == 'INFO'  # default

    @patch.dict(os.environ, {
        'SQS_REGION': 'eu-west-1',
        'SQS_ENDPOINT': 'http://localhost:4566',
        'AWS_ACCESS_KEY_ID': 'AKIDEXAMPLE',
        'AWS_SECRET_ACCESS_KEY': 'secret',
        'AWS_SESSION_TOKEN': 'token',
        'SQS_DEBUG': 'yes',
        'SQS_HTTP_TIMEOUT': '2.5',
        'LOG_LEVEL': 'debug',
    }, clear=True)
    def test_from_env_all_variables(self):
        """Test Config.from_env with all variables set."""
        config = Config.from_env()
        assert config.sqs_region == 'eu-west-1'
        assert config.sqs_endpoint == 'http://localhost:4566'
        assert config.aws_access_key_id == 'AKIDEXAMPLE'
        assert config.aws_secret_access_key == 'secret'
        assert config.aws_session_token == 'token'
        assert config.debug is True
        assert config.http_timeout == 2.5
        assert config.log_level == 'DEBUG'

    @patch.dict(os.environ, {'SQS_ENDPOINT': 'localhost:4566'}, clear=True)
    def test_from_env_invalid_endpoint(self):
        """Test Config.from_env rejects an endpoint without scheme."""
        with pytest.raises(ValueError, match="SQS_ENDPOINT"):
            Config.from_env()

    @patch.dict(os.environ, {'SQS_DEBUG': 'maybe'}, clear=True)
    def test_from_env_invalid_debug(self):
        """Test Config.from_env rejects a non-boolean debug flag."""
        with pytest.raises(ValueError, match="SQS_DEBUG"):
            Config.from_env()

    @pytest.mark.parametrize("timeout", ["soon", "0", "-1"])
    def test_from_env_invalid_timeout(self, timeout):
        """Test Config.from_env rejects bad timeouts."""
        with patch.dict(os.environ, {'SQS_HTTP_TIMEOUT': timeout}, clear=True):
            with pytest.raises(ValueError, match="SQS_HTTP_TIMEOUT"):
                Config.from_env()

    @patch.dict(os.environ, {'LOG_LEVEL': 'INVALID'}, clear=True)
    def test_from_env_invalid_log_level(self):
        """Test Config.from_env raises error for invalid log level."""
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Config.from_env()

    @patch.dict(os.environ, {}, clear=True)
    def test_get_config_singleton(self):
        """Test get_config returns singleton instance."""
        # Reset global config
        import config
        config._config = None

        config1 = get_config()
        config2 = get_config()

        assert config1 is config2
        config._config = None
