"""Shared Pydantic models for the Clipdeck API client.

Request models use snake_case attributes in Python and camelCase aliases
on the wire. Response bodies are returned to callers untouched; the
models here offer an optional typed view over them.
"""

from typing import Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base model for request payloads.

    Provides consistent configuration for all request models: camelCase
    wire aliases, population by either name, and pass-through of extra
    fields so newer server options can be sent before the model knows
    about them.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,  # Allow field population by attribute name
        extra="allow",
    )


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated list envelope returned by list endpoints.

    Values are taken from the server as-is; ``totalPages`` is not
    recomputed.

    :param data: Items on the current page
    :type data: List[T]
    :param total: Total number of items across all pages
    :type total: int
    :param page: Current page number (1-indexed)
    :type page: int
    :param limit: Maximum number of items per page
    :type limit: int
    :param totalPages: Total number of pages
    :type totalPages: int

    .. example::
       >>> body = await client.campaigns.list({"status": "active"})
       >>> page = PaginatedResponse[dict].model_validate(body)
       >>> page.totalPages
    """

    model_config = ConfigDict(extra="allow")

    data: List[T] = Field(default_factory=list)
    total: int
    page: int
    limit: int
    totalPages: int
