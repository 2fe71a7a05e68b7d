"""
Exception classes for CloudKit SDK.
"""

from typing import Dict, Any, Optional


class CloudKitError(Exception):
    """Base exception for all CloudKit SDK errors."""

    pass


class ValidationError(CloudKitError):
    """
    Input validation error.

    Raised before any request is sent when a required argument is
    missing or malformed.
    """

    def __init__(self, message: str, errors: Optional[Dict[str, str]] = None):
        """
        Initialize validation error.

        Args:
            message: Error message
            errors: Field-level validation errors
        """
        super().__init__(message)
        self.errors = errors or {}


class ConfigurationError(CloudKitError):
    """SDK configuration error"""

    pass


class TemplateError(CloudKitError):
    """Request template could not be loaded or rendered"""

    pass


class TransportError(CloudKitError):
    """Base class for failures raised while executing a request."""

    pass


class ApiError(TransportError):
    """
    API error exception.

    Raised when the provider returns an error status.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        payload: Optional[Dict[str, Any]] = None,
        request_id: Optional[str] = None,
    ):
        """
        Initialize API error.

        Args:
            message: Error message
            status_code: HTTP status code
            payload: Response payload
            request_id: Provider request ID for debugging
        """
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload or {}
        self.request_id = request_id

    def __repr__(self) -> str:
        return (
            f"ApiError(message={self.args[0]!r}, "
            f"status_code={self.status_code}, "
            f"request_id={self.request_id!r})"
        )


class NetworkError(TransportError):
    """
    Network connectivity error.

    Raised when network requests fail.
    """

    pass


class TimeoutError(TransportError):
    """
    Request timeout error.

    Raised when requests timeout.
    """

    pass


class ResponseParseError(TransportError):
    """Response body could not be parsed"""

    pass


class AuthenticationError(TransportError):
    """Provider identity service rejected or could not issue credentials"""

    pass
