"""Callback token provider.

Adapts a plain zero-argument function into a :class:`BaseTokenProvider`.
Both regular functions and coroutine functions are supported::

    async def load_token():
        session = await get_session()
        return session.access_token if session else None

    provider = CallbackTokenProvider(load_token)
"""

import inspect
from typing import Any, Callable, Optional

from ..base import BaseTokenProvider


class CallbackTokenProvider(BaseTokenProvider):
    """Call a user function to obtain the token for each request.

    The function's result is awaited when it is awaitable, so sync and
    async callbacks behave the same way.

    :param callback: Zero-argument callable returning Optional[str]
        (or an awaitable resolving to it)
    :type callback: Callable[[], Any]
    """

    def __init__(self, callback: Callable[[], Any]):
        if not callable(callback):
            raise TypeError("callback must be callable")
        self._callback = callback

    @property
    def provider_type(self) -> str:
        return "callback"

    async def get_token(self) -> Optional[str]:
        result = self._callback()
        if inspect.isawaitable(result):
            result = await result
        return result
