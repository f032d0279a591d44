"""Shared fixtures for resource client tests.

Routes are mocked with respx; tests using ``respx_mock`` carry
``@pytest.mark.respx(base_url="https://api.test.com")``.
"""

import pytest
import pytest_asyncio

from clipdeck_api.client import ClipdeckClient


@pytest_asyncio.fixture
async def api(config):
    """ClipdeckClient wired to the test base URL and token."""
    client = ClipdeckClient(config)
    yield client
    await client.aclose()


@pytest.fixture
def ok_record():
    return {"id": "rec_1"}


@pytest.fixture
def ok_page(ok_record):
    return {"data": [ok_record], "total": 1, "page": 1, "limit": 20, "totalPages": 1}
