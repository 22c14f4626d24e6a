"""
Common fixtures for all test modules.
This file contains fixtures that are shared across different test types.
"""

from typing import Callable, List, Optional

import httpx
import pytest
from dotenv import load_dotenv

from dalle3_mcp.clients.mock_client import MockImageClient
from dalle3_mcp.config.settings import Settings, get_settings

# Load environment variables from .env file
load_dotenv()

TEST_API_BASE_URL = "https://api.openai.test/v1"
TEST_IMAGE_URL = "https://images.openai.test/generated/abc123.png"


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """
    Provides settings pointing at a fake API host.
    """
    return Settings(
        OPENAI_API_KEY="test-api-key",
        OPENAI_API_BASE_URL=TEST_API_BASE_URL,
    )


@pytest.fixture
def clear_settings_cache():
    """
    Clears the cached settings before and after the test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# HTTP Stub Fixtures
# =============================================================================


class StubOpenAI:
    """
    Serves canned responses for the generation endpoint and the image URL,
    recording every request it receives.
    """

    def __init__(
        self,
        generation_response: httpx.Response,
        download_response: Optional[httpx.Response] = None,
    ):
        self.generation_response = generation_response
        self.download_response = download_response or httpx.Response(
            200, content=b"\x89PNG\r\n\x1a\n", headers={"content-type": "image/png"}
        )
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST":
            return self.generation_response
        return self.download_response

    @property
    def generation_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "POST"]

    @property
    def download_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == "GET"]


def generation_ok(
    url: Optional[str] = TEST_IMAGE_URL, revised_prompt: Optional[str] = None
) -> httpx.Response:
    item = {}
    if url is not None:
        item["url"] = url
    if revised_prompt is not None:
        item["revised_prompt"] = revised_prompt
    return httpx.Response(200, json={"created": 1700000000, "data": [item]})


@pytest.fixture
def stub_openai() -> Callable[..., StubOpenAI]:
    """
    Factory for a StubOpenAI transport.
    """

    def _create(
        generation_response: Optional[httpx.Response] = None,
        download_response: Optional[httpx.Response] = None,
        revised_prompt: Optional[str] = None,
    ) -> StubOpenAI:
        if generation_response is None:
            generation_response = generation_ok(revised_prompt=revised_prompt)
        return StubOpenAI(generation_response, download_response)

    return _create


@pytest.fixture
def mock_image_client() -> MockImageClient:
    """
    Provides a MockImageClient returning a fixed 2 KB image.
    """
    return MockImageClient(revised_prompt="A revised prompt")
