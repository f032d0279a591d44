"""Base client shared by every Clipdeck resource client.

:class:`BaseClient` owns (or borrows) an
:class:`~clipdeck_api.utils.http_client.AuthenticatedClient` and exposes
one coroutine per HTTP verb. Each verb returns the decoded response body
and converts every failure into an :class:`~clipdeck_api.exceptions.ApiError`.
"""

import logging
from typing import Any, Optional

import httpx

from ..config.settings import ClientConfig
from ..utils.errors import handle_api_error
from ..utils.http_client import AuthenticatedClient, create_http_client
from ..utils.payload import Payload, compact_params, to_payload
from ..utils.security import sanitize_url

logger = logging.getLogger(__name__)


class BaseClient:
    """HTTP verb methods on top of an authenticated client.

    :param config: Client configuration
    :type config: ClientConfig
    :param http_client: Existing client to share; when omitted a new one
        is created from ``config`` and closed by :meth:`aclose`
    :type http_client: Optional[AuthenticatedClient]
    :param client_kwargs: Extra ``httpx.AsyncClient`` arguments used when
        a client is created here (e.g. ``transport``)
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

    @property
    def http_client(self) -> AuthenticatedClient:
        return self._http

    async def get(
        self, path: str, params: Optional[Payload] = None, **options
    ) -> Any:
        return await self._request("GET", path, params=params, **options)

    async def post(
        self,
        path: str,
        json: Any = None,
        params: Optional[Payload] = None,
        **options,
    ) -> Any:
        return await self._request("POST", path, json=json, params=params, **options)

    async def put(
        self,
        path: str,
        json: Any = None,
        params: Optional[Payload] = None,
        **options,
    ) -> Any:
        return await self._request("PUT", path, json=json, params=params, **options)

    async def patch(
        self,
        path: str,
        json: Any = None,
        params: Optional[Payload] = None,
        **options,
    ) -> Any:
        return await self._request("PATCH", path, json=json, params=params, **options)

    async def delete(
        self, path: str, params: Optional[Payload] = None, **options
    ) -> Any:
        return await self._request("DELETE", path, params=params, **options)

    async def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[Payload] = None,
        **options,
    ) -> Any:
        """Send one request and return its decoded body.

        :param method: HTTP method
        :type method: str
        :param path: Resolved path relative to the base URL
        :type path: str
        :param json: Request body: a model, a mapping or any other JSON value
        :type json: Any
        :param params: Query parameters; None values are dropped
        :type params: Optional[Payload]
        :param options: Extra arguments forwarded to ``httpx.AsyncClient.request``
        :return: Parsed JSON, raw text for non-JSON bodies, or None when empty
        :rtype: Any
        :raises ApiError: For every failure while building, sending or
            checking the request
        """
        try:
            body = to_payload(json)
            response = await self._http.request(
                method,
                path,
                json=body,
                params=compact_params(params),
                **options,
            )
        except Exception as exc:
            error = handle_api_error(exc)
            logger.debug(
                f"{method} {sanitize_url(path)} failed: "
                f"{error.code} (status={error.status})"
            )
            raise error from exc

        return self._decode_body(response)

    @staticmethod
    def _decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
