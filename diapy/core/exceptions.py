"""
Custom exceptions for Democracy in Action API operations.

This module defines the exception classes raised by the request pipeline.
"""
from typing import Optional


class DIAException(Exception):
    """Base exception for all diapy errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class InvalidArgumentError(DIAException, TypeError):
    """Exception raised when an encoder receives input of the wrong shape."""
    pass


class RemoteError(DIAException):
    """Exception raised when the service response is missing or unsuccessful."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        reason: Optional[str] = None,
        body: Optional[str] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            status: HTTP status code of the failed response
            reason: HTTP reason phrase
            body: Response body returned by the service
        """
        self.status = status
        self.reason = reason
        self.body = body
        super().__init__(message, status)


class ResponseParseError(DIAException):
    """Exception raised when a response body cannot be parsed."""
    pass
