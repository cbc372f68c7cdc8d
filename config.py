"""
Configuration module for environment variable validation and type-safe config.

This module reads the SQS client settings from the environment and
provides a type-safe configuration object.
"""
import os
from dataclasses import dataclass
from typing import Optional


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class Config:
    """Type-safe configuration object with validated environment variables."""

    sqs_region: str = "us-east-1"
    sqs_endpoint: Optional[str] = None
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_session_token: Optional[str] = None
    debug: bool = False
    http_timeout: Optional[float] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create Config instance from environment variables.

        Raises:
            ValueError: If environment variables are invalid.
        """
        sqs_region = os.environ.get("SQS_REGION", "us-east-1")
        if not sqs_region:
            raise ValueError("SQS_REGION environment variable must not be empty")

        sqs_endpoint = os.environ.get("SQS_ENDPOINT") or None
        if sqs_endpoint and not sqs_endpoint.startswith(("http://", "https://")):
            raise ValueError(
                f"SQS_ENDPOINT must be an http(s) URL, got: {sqs_endpoint}"
            )

        aws_access_key_id = os.environ.get("AWS_ACCESS_KEY_ID") or None
        aws_secret_access_key = os.environ.get("AWS_SECRET_ACCESS_KEY") or None
        aws_session_token = os.environ.get("AWS_SESSION_TOKEN") or None

        debug_raw = os.environ.get("SQS_DEBUG", "false").strip().lower()
        if debug_raw in _TRUE_VALUES:
            debug = True
        elif debug_raw in _FALSE_VALUES:
            debug = False
        else:
            raise ValueError(f"SQS_DEBUG must be a boolean, got: {debug_raw}")

        http_timeout = None
        timeout_raw = os.environ.get("SQS_HTTP_TIMEOUT")
        if timeout_raw:
            try:
                http_timeout = float(timeout_raw)
            except ValueError:
                raise ValueError(
                    f"SQS_HTTP_TIMEOUT must be a number of seconds, got: {timeout_raw}"
                ) from None
            if http_timeout <= 0:
                raise ValueError(
                    f"SQS_HTTP_TIMEOUT must be positive, got: {timeout_raw}"
                )

        log_level = os.environ.get("LOG_LEVEL", "INFO").upper()

        # Validate log level
        valid_log_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if log_level not in valid_log_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_log_levels}, got: {log_level}"
            )

        return cls(
            sqs_region=sqs_region,
            sqs_endpoint=sqs_endpoint,
            aws_access_key_id=aws_access_key_id,
            aws_secret_access_key=aws_secret_access_key,
            aws_session_token=aws_session_token,
            debug=debug,
            http_timeout=http_timeout,
            log_level=log_level,
        )


# Global config instance - built lazily on first access
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config: The validated configuration object

    Raises:
        ValueError: If environment variables are invalid.
    """
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config
