"""
Custom exception classes for SQS query operations.
"""
from typing import Optional


class SQSError(Exception):
    """Base class for all errors raised by the SQS client."""


class TransportError(SQSError):
    """Exception raised when the HTTP exchange itself fails (DNS, connection, timeout)."""

    def __init__(
        self,
        message: str,
        url: Optional[str] = None
    ):
        """
        Initialize transport error.

        Args:
            message: Error message
            url: Request URL if available
        """
        super().__init__(message)
        self.message = message
        self.url = url


class ServiceError(SQSError):
    """Exception raised when SQS answers with a non-200 status."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: str = "",
        request_id: str = ""
    ):
        """
        Initialize service error.

        Args:
            message: Error message (never empty, falls back to the status line)
            status_code: HTTP status code of the response
            code: Service-defined error code (e.g. AWS.SimpleQueueService.NonExistentQueue)
            request_id: Request identifier from the error envelope
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.request_id = request_id

    def __str__(self) -> str:
        if not self.code:
            return self.message
        return f"{self.message} ({self.code})"


class DecodeError(SQSError):
    """Exception raised when a successful response body is not valid XML."""

    def __init__(
        self,
        message: str,
        action: Optional[str] = None,
        body: Optional[bytes] = None
    ):
        """
        Initialize decode error.

        Args:
            message: Error message
            action: Name of the result type being decoded if available
            body: Raw response body if available
        """
        super().__init__(message)
        self.message = message
        self.action = action
        self.body = body
