"""Configuration for the Clipdeck API client.

Two layers are provided:

- :class:`ClientConfig`: the immutable, in-code configuration every
  client is built from.
- :class:`Settings`: environment-driven settings (``CLIPDECK_*`` variables
  and ``.env`` files) that produce a :class:`ClientConfig`.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..auth.base import BaseTokenProvider
from ..auth.resolve import as_token_provider
from ..exceptions import ConfigurationError

DEFAULT_TIMEOUT_MS = 10000


class ClientConfig(BaseModel):
    """Connection settings shared by every resource client.

    The configuration is frozen once built and passed by reference to each
    client constructed from it.

    :param base_url: Root URL of the Clipdeck API (required)
    :type base_url: str
    :param token_provider: Source of the bearer token. Accepts a
        :class:`BaseTokenProvider`, a zero-argument callable (sync or async)
        or a static token string
    :type token_provider: Optional[BaseTokenProvider]
    :param timeout_ms: Per-request timeout in milliseconds
    :type timeout_ms: int
    :raises ConfigurationError: If base_url is missing or blank, or the
        token provider has an unsupported type

    .. example::
       >>> config = ClientConfig(
       ...     base_url="https://api.clipdeck.io",
       ...     token_provider=lambda: session.access_token,
       ... )
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    base_url: Optional[str] = Field(
        None, validate_default=True, description="Clipdeck API base URL"
    )
    token_provider: Optional[BaseTokenProvider] = Field(
        None, description="Bearer token source, consulted before every request"
    )
    timeout_ms: int = Field(
        DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout in milliseconds"
    )

    @field_validator("base_url")
    @classmethod
    def require_base_url(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise ConfigurationError("base_url is required", setting="base_url")
        return v.strip()

    @field_validator("token_provider", mode="before")
    @classmethod
    def coerce_token_provider(cls, v: Any) -> Optional[BaseTokenProvider]:
        return as_token_provider(v)


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    :param base_url: API base URL (``CLIPDECK_BASE_URL``)
    :type base_url: Optional[str]
    :param api_token: Static bearer token (``CLIPDECK_API_TOKEN``)
    :type api_token: Optional[str]
    :param timeout_ms: Request timeout in milliseconds (``CLIPDECK_TIMEOUT_MS``)
    :type timeout_ms: int
    :param log_level: Logging level for :func:`setup_secure_logging`
        (``CLIPDECK_LOG_LEVEL``)
    :type log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    """

    model_config = SettingsConfigDict(
        env_prefix="CLIPDECK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unrelated entries in .env file
    )

    base_url: Optional[str] = Field(None, description="Clipdeck API base URL")
    api_token: Optional[str] = Field(None, description="Static API bearer token")
    timeout_ms: int = Field(
        DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout in milliseconds"
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def to_client_config(
        self, token_provider: Any = None
    ) -> ClientConfig:
        """Build a :class:`ClientConfig` from these settings.

        :param token_provider: Overrides the static ``api_token`` when given
        :type token_provider: Any
        :return: Validated client configuration
        :rtype: ClientConfig
        :raises ConfigurationError: If no base URL is configured
        """
        return ClientConfig(
            base_url=self.base_url,
            token_provider=token_provider or self.api_token,
            timeout_ms=self.timeout_ms,
        )
