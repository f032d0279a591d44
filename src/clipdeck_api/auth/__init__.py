"""Authentication module for the Clipdeck API client.

Tokens come from a pluggable :class:`BaseTokenProvider`; the request
pipeline asks it for a fresh token before every request.

:var __all__: List of public exports from this module
:type __all__: List[str]
"""

from .base import BaseTokenProvider
from .hooks import AuthHeaderHook, ErrorResponseHook
from .providers import CallbackTokenProvider, StaticTokenProvider
from .resolve import as_token_provider

__all__ = [
    "BaseTokenProvider",
    "StaticTokenProvider",
    "CallbackTokenProvider",
    "AuthHeaderHook",
    "ErrorResponseHook",
    "as_token_provider",
]
