"""Define the token provider interface.

The client never stores or refreshes credentials itself. Instead it asks
a caller-supplied provider for the current bearer token before every
request, so rotation and refresh are driven entirely by the caller.

Examples
--------
Implement :class:`BaseTokenProvider` to plug in any token source::

    class SessionTokenProvider(BaseTokenProvider):
        def __init__(self, store):
            self._store = store

        async def get_token(self) -> Optional[str]:
            session = await self._store.load()
            return session.access_token if session else None
"""

from abc import ABC, abstractmethod
from typing import Optional


class BaseTokenProvider(ABC):
    """Provide the bearer token used to authenticate requests."""

    @property
    def provider_type(self) -> str:
        """Return the provider type identifier.

        :return: Provider type (e.g., "static", "callback").
        """
        return type(self).__name__

    @abstractmethod
    async def get_token(self) -> Optional[str]:
        """Return the current token, or None to send the request unauthenticated.

        Called once for every outgoing request; implementations must not
        assume the result is cached by the client.

        :return: Bearer token value without the ``Bearer`` prefix, or None.
        """
        pass
