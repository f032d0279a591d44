"""Log sanitization helpers for the Clipdeck API client.

The client logs every request at DEBUG level. This module makes sure
bearer tokens and other credentials never reach those logs:

- Pattern-based redaction of sensitive values in strings
- Header and URL sanitization for request logging
- A logging formatter that redacts messages automatically
- Opt-in logging setup for applications embedding the client
"""

import logging
import re
import sys
from typing import Any, Dict, Mapping, Optional

# Patterns for sensitive data detection
SENSITIVE_PATTERNS = {
    "jwt_token": re.compile(r"eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+"),
    "bearer_token": re.compile(r"Bearer\s+[A-Za-z0-9._~+/=-]+", re.IGNORECASE),
    "basic_auth": re.compile(r"Basic\s+[A-Za-z0-9+/=]+", re.IGNORECASE),
}

# Headers that should never be logged
SENSITIVE_HEADERS = {
    "authorization",
    "proxy-authorization",
    "x-api-key",
    "cookie",
    "set-cookie",
}

# Query parameters redacted from logged URLs
SENSITIVE_PARAMS = ("token", "access_token", "api_key", "key", "secret", "password")


def sanitize_string(value: str) -> str:
    """Redact sensitive substrings such as bearer tokens and JWTs.

    :param value: String to sanitize
    :type value: str
    :return: String with every sensitive match replaced by a marker
    :rtype: str
    """
    if not value:
        return value
    for pattern_name, pattern in SENSITIVE_PATTERNS.items():
        value = pattern.sub(f"<{pattern_name}:REDACTED>", value)
    return value


def sanitize_headers(headers: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Sanitize HTTP headers for logging.

    Sensitive headers are replaced by their length only; other string
    values are passed through :func:`sanitize_string`.

    :param headers: HTTP headers (plain mapping or ``httpx.Headers``)
    :type headers: Optional[Mapping[str, Any]]
    :return: Sanitized copy of the headers
    :rtype: Dict[str, Any]
    """
    if not headers:
        return {}
    sanitized: Dict[str, Any] = {}
    for key, value in headers.items():
        if key.lower() in SENSITIVE_HEADERS:
            if isinstance(value, str) and value:
                sanitized[key] = f"<REDACTED:length={len(value)}>"
            else:
                sanitized[key] = "<REDACTED>"
        elif isinstance(value, str):
            sanitized[key] = sanitize_string(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitize_url(url: str) -> str:
    """Redact credentials passed as query parameters.

    :param url: URL to sanitize
    :type url: str
    :return: URL with sensitive parameter values redacted
    :rtype: str
    """
    if not url:
        return url
    for param in SENSITIVE_PARAMS:
        url = re.sub(
            rf"([?&]{param}=)[^&#\s]+", r"\1<REDACTED>", url, flags=re.IGNORECASE
        )
    return url


class SanitizingFormatter(logging.Formatter):
    """Formatter that redacts sensitive data from every record.

    The message is rendered with its arguments first, then sanitized,
    so that tokens passed as ``%s`` arguments are caught as well.
    """

    def format(self, record: logging.LogRecord) -> str:
        try:
            record.msg = sanitize_string(record.getMessage())
            record.args = None
        except (TypeError, ValueError):
            record.msg = sanitize_string(str(record.msg))
        return super().format(record)


_LOGGING_CONFIGURED = False


def setup_secure_logging(level: str = "INFO") -> None:
    """Configure the ``clipdeck_api`` logger with a sanitizing handler.

    The client never configures logging on import; applications call
    this once at startup. Repeated calls only update the level.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    """
    global _LOGGING_CONFIGURED

    package_logger = logging.getLogger("clipdeck_api")
    package_logger.setLevel(getattr(logging, level.upper()))

    if _LOGGING_CONFIGURED:
        package_logger.debug("Logging already configured, updated level only")
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        SanitizingFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    package_logger.addHandler(handler)
    _LOGGING_CONFIGURED = True
