"""Structured exception classes for the Clipdeck API client."""

import json
from typing import Any, Dict, Optional


class ClipdeckError(Exception):
    """Base exception for all Clipdeck client errors.

    This exception serves as the parent class for every error raised by
    the client, providing a consistent interface for error handling.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Any = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict(), default=str)


class ApiError(ClipdeckError):
    """Normalized error raised for every failed API call.

    All HTTP, network and client-side failures are converted into this
    single shape before reaching the caller, regardless of the underlying
    failure mode. Callers should branch on :attr:`code`, which is stable
    across transport quirks, rather than on :attr:`message`.

    :param code: Machine-readable error code (e.g. ``"NOT_FOUND"``,
        ``"VALIDATION_ERROR"``, ``"NETWORK_ERROR"``)
    :param message: Human-readable description of the failure
    :param status: HTTP status code of the response, ``0`` when no
        response was received
    :param details: Optional opaque details such as field-level
        validation errors

    .. example::
       >>> try:
       ...     await client.campaigns.get_by_id("missing")
       ... except ApiError as e:
       ...     print(f"[{e.code}] {e.message} (HTTP {e.status})")
       [NOT_FOUND] Campaign not found (HTTP 404)
    """

    def __init__(
        self,
        code: str,
        message: str,
        status: int,
        details: Any = None,
    ):
        """Initialize the API error with code, message, status, and details."""
        super().__init__(message=message, code=code, details=details)
        self.status = status

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to dictionary format.

        :return: Dictionary containing code, message, status, and details
        """
        data = super().to_dict()
        data["status"] = self.status
        return data

    def __repr__(self) -> str:
        return (
            f"ApiError(code={self.code!r}, message={self.message!r}, "
            f"status={self.status!r}, details={self.details!r})"
        )


class ConfigurationError(ClipdeckError):
    """Raised for configuration-related errors.

    This exception is raised when the client is constructed with a
    missing or invalid setting. It is raised eagerly at construction
    time and is never converted into an :class:`ApiError`.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)
        self.setting = setting
