"""
Custom exception classes for error categorization in the planning pipeline.
"""

from enum import Enum
from typing import Optional


class TripDiaryError(Exception):
    """Base exception for all trip diary errors."""

    def __init__(self, message: str, context: dict = None):
        """
        Initialize exception with message and optional context.

        Args:
            message: Error message
            context: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class TransientError(TripDiaryError):
    """
    Exception for failures caused by the environment rather than the request.

    Examples:
        - Network failures talking to the generation backend
        - Rate limiting / exhausted quota
    """
    pass


class PermanentError(TripDiaryError):
    """
    Exception for failures that repeat for the same input.

    Examples:
        - Missing credentials
        - Unparsable model output
        - Schema validation failures
    """
    pass


class ValidationError(PermanentError):
    """Exception for data validation failures."""

    def __init__(self, message: str, validation_errors: list = None, context: dict = None):
        """
        Initialize validation error.

        Args:
            message: Error message
            validation_errors: List of field-level diagnostics
            context: Additional error context
        """
        super().__init__(message, context)
        self.validation_errors = validation_errors or []


class ConfigurationError(PermanentError):
    """Exception for configuration errors."""
    pass


class CredentialMissingError(ConfigurationError):
    """No API credential is configured for the generation backend."""
    pass


class BackendErrorKind(str, Enum):
    QUOTA = "quota"
    TRANSPORT = "transport"


class BackendError(TransientError):
    """
    Failure reported by the generation backend.

    Downstream code switches on ``kind`` instead of inspecting the message.
    """

    def __init__(
        self,
        message: str,
        kind: BackendErrorKind = BackendErrorKind.TRANSPORT,
        http_status: Optional[int] = None,
        context: dict = None,
    ):
        super().__init__(message, context)
        self.kind = kind
        self.http_status = http_status

    @property
    def is_quota(self) -> bool:
        return self.kind is BackendErrorKind.QUOTA


class MalformedResponseError(PermanentError):
    """Generation output could not be parsed as JSON."""

    def __init__(self, message: str, raw_text: str = "", context: dict = None):
        super().__init__(message, context)
        self.raw_text = raw_text


class SchemaViolationError(ValidationError):
    """Generation output parsed but does not match the expected shape."""
    pass
