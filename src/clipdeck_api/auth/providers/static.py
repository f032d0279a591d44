"""Static token provider.

Serves a fixed token, typically an API token read from the environment.
"""

from typing import Optional

from ..base import BaseTokenProvider


class StaticTokenProvider(BaseTokenProvider):
    """Return the same token for every request.

    :param token: Token value, or None to send requests unauthenticated
    :type token: Optional[str]
    """

    def __init__(self, token: Optional[str]):
        self._token = token

    @property
    def provider_type(self) -> str:
        return "static"

    async def get_token(self) -> Optional[str]:
        return self._token

    def __repr__(self) -> str:
        state = "set" if self._token else "empty"
        return f"StaticTokenProvider(token=<{state}>)"
