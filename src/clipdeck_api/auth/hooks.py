"""Request and response hooks for the Clipdeck HTTP pipeline.

The hooks are invoked by :class:`~clipdeck_api.utils.http_client.AuthenticatedClient`
around every request it sends:

- AuthHeaderHook: bearer token injection from a token provider
- ErrorResponseHook: status checking with auth-related diagnostics
"""

import logging

import httpx

from .base import BaseTokenProvider

logger = logging.getLogger(__name__)


class AuthHeaderHook:
    """Request hook that adds the bearer token to outgoing requests.

    The token provider is asked for a token on every call; nothing is
    cached between requests, so rotated tokens take effect immediately.

    Example:
        >>> hook = AuthHeaderHook(StaticTokenProvider("tok_123"))
        >>> request = await hook.before_request(request)
    """

    def __init__(self, token_provider: BaseTokenProvider):
        """Initialize the authentication header hook.

        :param token_provider: Provider consulted before each request
        :type token_provider: BaseTokenProvider
        """
        self.token_provider = token_provider

    async def before_request(self, request: httpx.Request) -> httpx.Request:
        """Attach ``Authorization: Bearer <token>`` when a token is available.

        A missing or empty token leaves the request untouched. Errors raised
        by the provider propagate to the caller.

        :param request: The HTTP request to modify
        :type request: httpx.Request
        :return: The request, with the auth header set if a token exists
        :rtype: httpx.Request
        """
        token = await self.token_provider.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        else:
            logger.debug(
                f"No token from {self.token_provider.provider_type} provider, "
                "sending request unauthenticated"
            )
        return request


class ErrorResponseHook:
    """Response hook that raises for error statuses.

    Failed responses are read in full before raising so the error body is
    available to the error classifier.
    """

    async def after_response(self, response: httpx.Response) -> httpx.Response:
        """Check the response status.

        :param response: The HTTP response received
        :type response: httpx.Response
        :return: The response when its status is below 400
        :rtype: httpx.Response
        :raises httpx.HTTPStatusError: If the status is 400 or above
        """
        if not response.is_error:
            return response

        await response.aread()

        if response.status_code == 401:
            has_auth = "authorization" in response.request.headers
            logger.warning(
                "Received 401 Unauthorized - token may be expired or invalid"
                + ("" if has_auth else " (no Authorization header was sent)")
            )
        elif response.status_code == 403:
            logger.warning("Received 403 Forbidden - check permissions")

        response.raise_for_status()
        return response
