"""Client configuration."""

from .settings import ClientConfig, Settings

__all__ = ["ClientConfig", "Settings"]
