"""Authenticated HTTP client for the Clipdeck API.

This module provides the httpx client every resource client sends its
requests through. Subclassing ``httpx.AsyncClient`` and overriding
:meth:`send` gives a single interception point, so auth injection and
status checking apply regardless of how the request was built.

Examples:
    >>> client = create_http_client(ClientConfig(base_url="https://api.clipdeck.io"))
    >>> response = await client.get("/campaigns")
"""

import logging
from typing import Optional

import httpx

from ..auth.hooks import AuthHeaderHook, ErrorResponseHook
from ..config.settings import ClientConfig
from .security import sanitize_headers, sanitize_url

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class AuthenticatedClient(httpx.AsyncClient):
    """HTTP client that authenticates and status-checks every request.

    The client intercepts all HTTP requests and performs:

    1. Bearer token injection via :class:`AuthHeaderHook` (when configured)
    2. Sanitized debug logging of the outgoing request
    3. Status checking via :class:`ErrorResponseHook`

    :param auth_hook: Hook that adds the Authorization header
    :type auth_hook: Optional[AuthHeaderHook]
    :param response_hook: Hook that raises for error statuses
    :type response_hook: Optional[ErrorResponseHook]

    .. example::
       >>> hook = AuthHeaderHook(StaticTokenProvider("tok_123"))
       >>> client = AuthenticatedClient(base_url="https://api.clipdeck.io", auth_hook=hook)
       >>> response = await client.get("/users/me")
    """

    def __init__(
        self,
        *args,
        auth_hook: Optional[AuthHeaderHook] = None,
        response_hook: Optional[ErrorResponseHook] = None,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.auth_hook = auth_hook
        self.response_hook = response_hook or ErrorResponseHook()

    async def send(self, request: httpx.Request, **kwargs) -> httpx.Response:
        """Single interception point for all HTTP requests.

        :param request: The HTTP request to send
        :type request: httpx.Request
        :param kwargs: Additional arguments to pass to the parent send method
        :return: The HTTP response
        :rtype: httpx.Response
        :raises httpx.HTTPStatusError: When the response status is 400 or above
        :raises httpx.RequestError: When no response could be obtained
        """
        if self.auth_hook is not None:
            request = await self.auth_hook.before_request(request)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                f"=== SEND: {request.method} {sanitize_url(str(request.url))}"
            )
            logger.debug(f"    Headers: {sanitize_headers(request.headers)}")

        response = await super().send(request, **kwargs)

        logger.debug(
            f"=== RECV: {response.status_code} for {request.method} "
            f"{sanitize_url(str(request.url))}"
        )
        return await self.response_hook.after_response(response)


def create_http_client(config: ClientConfig, **kwargs) -> AuthenticatedClient:
    """Create an authenticated client from a client configuration.

    :param config: Validated client configuration
    :type config: ClientConfig
    :param kwargs: Extra arguments forwarded to ``httpx.AsyncClient``
        (e.g. ``transport`` for tests)
    :return: Configured client
    :rtype: AuthenticatedClient
    """
    auth_hook = (
        AuthHeaderHook(config.token_provider)
        if config.token_provider is not None
        else None
    )
    headers = dict(DEFAULT_HEADERS)
    headers.update(kwargs.pop("headers", None) or {})

    logger.debug(
        f"Creating HTTP client for {config.base_url} "
        f"(timeout={config.timeout_ms}ms, auth={'on' if auth_hook else 'off'})"
    )
    return AuthenticatedClient(
        base_url=config.base_url,
        headers=headers,
        timeout=httpx.Timeout(config.timeout_ms / 1000),
        follow_redirects=kwargs.pop("follow_redirects", True),
        auth_hook=auth_hook,
        **kwargs,
    )
