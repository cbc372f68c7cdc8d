"""
Logging configuration for the SQS client.

This module provides the standardized logger setup shared by every
module of the client.
"""
import logging
import os
import sys


def resolve_log_level() -> int:
    """
    Resolve the client log level from the environment.

    SQS_LOG_LEVEL overrides LOG_LEVEL so the client can be made chattier
    or quieter than the host application. Unknown names fall back to INFO.

    Returns:
        Logging level number
    """
    log_level = (os.environ.get('SQS_LOG_LEVEL') or os.environ.get('LOG_LEVEL') or 'INFO').upper()
    return getattr(logging, log_level, logging.INFO)


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to this module's name if not provided)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(resolve_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)

    # Host applications configure the root logger themselves
    logger.propagate = False

    return logger
