"""
Decorators for logging SQS actions.
"""
import functools
import uuid
from typing import Callable, TypeVar

from logger_config import get_logger
from utils.exceptions import ServiceError, SQSError

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable)


def sqs_action(action: str) -> Callable[[F], F]:
    """
    Decorator for SQS facade methods.

    Provides:
    - Correlation IDs for logging
    - Invocation, completion and failure logging

    Errors are logged and re-raised unchanged.

    Args:
        action: SQS action name used in log records

    Returns:
        Decorator for the facade method
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            correlation_id = str(uuid.uuid4())

            logger.debug(
                f"SQS {action} invoked",
                extra={"correlation_id": correlation_id, "action": action}
            )

            try:
                result = func(*args, **kwargs)
            except ServiceError as e:
                logger.warning(
                    f"SQS {action} rejected: {str(e)}",
                    extra={
                        "correlation_id": correlation_id,
                        "status_code": e.status_code,
                        "request_id": e.request_id
                    }
                )
                raise
            except SQSError as e:
                logger.error(
                    f"SQS {action} failed: {str(e)}",
                    extra={"correlation_id": correlation_id}
                )
                raise

            metadata = getattr(result, "response_metadata", None)
            logger.debug(
                f"SQS {action} completed",
                extra={
                    "correlation_id": correlation_id,
                    "request_id": getattr(metadata, "request_id", None)
                }
            )
            return result

        return wrapper  # type: ignore[return-value]

    return decorator
