"""
Error normalization for the Clipdeck API client.

This module converts any failure raised while performing a request into
the single :class:`~clipdeck_api.exceptions.ApiError` shape exposed to
callers.

The module provides:
- Machine-readable error codes
- Pydantic models for the server's ``{"error": {...}}`` envelope
- A pure classification function from any caught value to ``ApiError``
"""

from enum import Enum
from typing import Any, Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from ..exceptions import ApiError


NETWORK_ERROR_MESSAGE = "Network error - unable to reach server"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"
FALLBACK_MESSAGE = "Unknown error"


class ErrorCode(str, Enum):
    """Error codes surfaced on :class:`ApiError`.

    Codes coming from the server's error envelope are passed through
    as-is, so an ``ApiError`` may carry a code outside this list.
    """

    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    NETWORK_ERROR = "NETWORK_ERROR"
    CLIENT_ERROR = "CLIENT_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ErrorBody(BaseModel):
    """Inner ``error`` object of a server error response.

    Every field is optional and loosely typed; servers are expected, but
    not required, to fill them in. A badly typed field must not discard
    the others, so values are coerced to text by :func:`handle_api_error`.
    """

    model_config = ConfigDict(extra="allow")

    code: Any = None
    message: Any = None
    details: Any = None


class ErrorEnvelope(BaseModel):
    """Conventional error response shape ``{"error": {code, message, details}}``."""

    model_config = ConfigDict(extra="allow")

    error: Optional[ErrorBody] = None


def parse_error_body(data: Any) -> ErrorBody:
    """Extract the error body from a decoded response payload.

    Payloads that do not follow the envelope shape yield an empty
    :class:`ErrorBody` so that every field falls back to its default.

    :param data: Decoded JSON response body, or None
    :type data: Any
    :return: Parsed error body
    :rtype: ErrorBody
    """
    if not isinstance(data, dict):
        return ErrorBody()
    try:
        envelope = ErrorEnvelope.model_validate(data)
    except ValidationError:
        return ErrorBody()
    return envelope.error or ErrorBody()


def _as_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _response_json(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (ValueError, httpx.ResponseNotRead):
        return None


def _sent_request(error: httpx.RequestError) -> Optional[httpx.Request]:
    # .request raises when the error was built without one
    try:
        return error.request
    except RuntimeError:
        return None


def handle_api_error(error: Any) -> ApiError:
    """Transform any caught value into a normalized :class:`ApiError`.

    Classification is total and ordered; the first matching branch wins:

    1. **Server errors** (``httpx.HTTPStatusError``, a response was
       received) -- code, message and details come from the response
       envelope, status from the response.
    2. **Network errors** (``httpx.RequestError`` bound to a sent request
       but without a response, e.g. DNS, connection or timeout failures)
       -- ``NETWORK_ERROR`` with status ``0``.
    3. **Client errors** (any other ``Exception``) -- ``CLIENT_ERROR``
       with status ``0`` and the exception's message.
    4. **Unknown values** (anything that is not an exception) --
       ``UNKNOWN_ERROR`` with status ``0``.

    :param error: The raw value caught while performing a request
    :type error: Any
    :return: Normalized API error
    :rtype: ApiError

    .. example::
       >>> try:
       ...     await http.get("/campaigns/missing")
       ... except Exception as exc:
       ...     api_error = handle_api_error(exc)
       ...     print(api_error.code, api_error.status)
       NOT_FOUND 404
    """
    if isinstance(error, httpx.HTTPStatusError):
        body = parse_error_body(_response_json(error.response))
        return ApiError(
            code=_as_text(body.code) or ErrorCode.UNKNOWN_ERROR.value,
            message=_as_text(body.message) or str(error) or FALLBACK_MESSAGE,
            status=error.response.status_code,
            details=body.details,
        )

    if isinstance(error, httpx.RequestError) and _sent_request(error) is not None:
        return ApiError(
            code=ErrorCode.NETWORK_ERROR.value,
            message=NETWORK_ERROR_MESSAGE,
            status=0,
        )

    if isinstance(error, Exception):
        return ApiError(
            code=ErrorCode.CLIENT_ERROR.value,
            message=str(error),
            status=0,
        )

    return ApiError(
        code=ErrorCode.UNKNOWN_ERROR.value,
        message=UNKNOWN_ERROR_MESSAGE,
        status=0,
    )
