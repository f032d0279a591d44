"""Coerce user-supplied token sources into providers.

``ClientConfig`` accepts several shapes for its ``token_provider``
setting. This module turns each of them into a :class:`BaseTokenProvider`
so the request pipeline only ever deals with one interface.
"""

import logging
from typing import Any, Optional

from ..exceptions import ConfigurationError
from .base import BaseTokenProvider
from .providers import CallbackTokenProvider, StaticTokenProvider

logger = logging.getLogger(__name__)


def as_token_provider(value: Any) -> Optional[BaseTokenProvider]:
    """Convert a token source into a provider.

    :param value: None, a provider, a plain token string, or a
        zero-argument callable (sync or async) returning the token
    :type value: Any
    :return: Matching provider, or None when no source was given
    :rtype: Optional[BaseTokenProvider]
    :raises ConfigurationError: If the value cannot serve as a token source
    """
    if value is None or isinstance(value, BaseTokenProvider):
        return value
    if isinstance(value, str):
        logger.debug("Using static token provider")
        return StaticTokenProvider(value)
    if callable(value):
        logger.debug("Using callback token provider")
        return CallbackTokenProvider(value)
    raise ConfigurationError(
        f"Unsupported token provider type: {type(value).__name__}",
        setting="token_provider",
    )
