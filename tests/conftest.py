import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from clipdeck_api.auth.base import BaseTokenProvider  # noqa: E402
from clipdeck_api.config.settings import ClientConfig  # noqa: E402

BASE_URL = "https://api.test.com"


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "auth: mark test as testing authentication"
    )


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep developer CLIPDECK_* variables and .env files out of tests.

    Runs every test from an empty temporary directory so that
    ``Settings`` never picks up a stray ``.env`` file.
    """
    for name in (
        "CLIPDECK_BASE_URL",
        "CLIPDECK_API_TOKEN",
        "CLIPDECK_TIMEOUT_MS",
        "CLIPDECK_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


class RecordingTokenProvider(BaseTokenProvider):
    """Token provider that serves a sequence of tokens and counts calls."""

    def __init__(self, *tokens):
        self.tokens = list(tokens)
        self.calls = 0

    async def get_token(self):
        self.calls += 1
        if not self.tokens:
            return None
        if len(self.tokens) == 1:
            return self.tokens[0]
        return self.tokens.pop(0)


@pytest.fixture
def recording_provider():
    """Factory for :class:`RecordingTokenProvider` instances."""
    return RecordingTokenProvider


@pytest.fixture
def base_url():
    return BASE_URL


@pytest.fixture
def config():
    """Config with a static test token."""
    return ClientConfig(base_url=BASE_URL, token_provider="test-token")


@pytest.fixture
def anonymous_config():
    """Config without a token provider."""
    return ClientConfig(base_url=BASE_URL)


@pytest.fixture
def mock_token_provider():
    """Mock provider returning a fixed token."""
    provider = AsyncMock(spec=BaseTokenProvider)
    provider.get_token = AsyncMock(return_value="mock-token")
    provider.provider_type = "mock"
    return provider


@pytest.fixture
def paginated_body():
    """Sample paginated envelope."""
    return {
        "data": [{"id": "camp_1", "title": "Best Plays"}],
        "total": 1,
        "page": 1,
        "limit": 20,
        "totalPages": 1,
    }


# Rely on pytest-asyncio for async test handling; no custom hook needed.
