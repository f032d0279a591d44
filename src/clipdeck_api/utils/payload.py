"""Helpers for building request paths, query strings and bodies."""

from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel

Payload = Union[BaseModel, Mapping[str, Any]]


def to_payload(data: Any) -> Any:
    """Convert a request body into a JSON-ready value.

    Models are dumped with their camelCase wire aliases and only the
    fields the caller set, so an explicit None is sent as ``null`` while
    untouched fields are left out. Mappings lose their None values. Any
    other JSON value (lists, scalars) is returned unchanged.

    :param data: Request model, mapping, other JSON value, or None
    :type data: Any
    :return: Wire payload, or None when no data was given
    :rtype: Any
    """
    if data is None:
        return None
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(data, Mapping):
        return {key: value for key, value in data.items() if value is not None}
    return data


def compact_params(params: Optional[Payload]) -> Optional[Dict[str, Any]]:
    """Prepare query parameters, dropping None values.

    Booleans are rendered as ``true``/``false`` to match JSON conventions
    instead of Python's ``True``/``False``.

    :param params: Query model, mapping, or None
    :type params: Optional[Payload]
    :return: Query parameters, or None when nothing remains
    :rtype: Optional[Dict[str, Any]]
    """
    payload = to_payload(params) or {}
    query = {
        key: ("true" if value else "false") if isinstance(value, bool) else value
        for key, value in payload.items()
        if value is not None
    }
    return query or None


def path_param(value: Any) -> str:
    """Percent-encode a value for use as a single path segment.

    >>> path_param("camp 1/2")
    'camp%201%2F2'
    """
    return quote(str(value), safe="")
