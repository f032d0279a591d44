"""Built-in token providers."""

from .callback import CallbackTokenProvider
from .static import StaticTokenProvider

__all__ = ["CallbackTokenProvider", "StaticTokenProvider"]
