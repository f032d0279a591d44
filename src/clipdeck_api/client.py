"""Aggregate client exposing every Clipdeck resource.

:class:`ClipdeckClient` builds one resource client per API area from a
single :class:`ClientConfig`. All of them share one
:class:`AuthenticatedClient`, and therefore one connection pool.

Examples:
    >>> config = ClientConfig(base_url="https://api.clipdeck.io", token_provider=get_token)
    >>> async with ClipdeckClient(config) as client:
    ...     me = await client.users.get_me()
    ...     campaigns = await client.campaigns.list({"status": "active"})
"""

import logging
from typing import Any, Optional

from .config.settings import ClientConfig, Settings
from .services import (
    BalanceClient,
    CampaignClient,
    ClipClient,
    DisputeClient,
    NotificationClient,
    StudioClient,
    UserClient,
)
from .utils.http_client import AuthenticatedClient, create_http_client

logger = logging.getLogger(__name__)


class ClipdeckClient:
    """Entry point bundling all resource clients.

    :param config: Client configuration
    :type config: ClientConfig
    :param http_client: Existing client to use instead of creating one;
        it is then left open by :meth:`aclose`
    :type http_client: Optional[AuthenticatedClient]
    :param client_kwargs: Extra ``httpx.AsyncClient`` arguments used when
        the HTTP client is created here
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: Optional[AuthenticatedClient] = None,
        **client_kwargs,
    ):
        self.config = config
        self._owns_client = http_client is None
        self._http = http_client or create_http_client(config, **client_kwargs)

        self.campaigns = CampaignClient(config, http_client=self._http)
        self.clips = ClipClient(config, http_client=self._http)
        self.users = UserClient(config, http_client=self._http)
        self.notifications = NotificationClient(config, http_client=self._http)
        self.balance = BalanceClient(config, http_client=self._http)
        self.studios = StudioClient(config, http_client=self._http)
        self.disputes = DisputeClient(config, http_client=self._http)

    @classmethod
    def from_env(
        cls, settings: Optional[Settings] = None, token_provider: Any = None, **client_kwargs
    ) -> "ClipdeckClient":
        """Create a client from ``CLIPDECK_*`` environment variables.

        :param settings: Preloaded settings; read from the environment when omitted
        :type settings: Optional[Settings]
        :param token_provider: Token source overriding ``CLIPDECK_API_TOKEN``
        :type token_provider: Any
        :return: Configured client
        :rtype: ClipdeckClient
        :raises ConfigurationError: If ``CLIPDECK_BASE_URL`` is not set
        """
        settings = settings or Settings()
        config = settings.to_client_config(token_provider=token_provider)
        logger.info(f"Creating Clipdeck client for {config.base_url}")
        return cls(config, **client_kwargs)

    @property
    def http_client(self) -> AuthenticatedClient:
        return self._http

    async def aclose(self) -> None:
        """Close the shared HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self) -> "ClipdeckClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
