import logging
from typing import Optional

import httpx

from dalle3_mcp.config.settings import Settings
from dalle3_mcp.errors import DownloadError, NoImageReturnedError, UpstreamGenerationError
from dalle3_mcp.schemas.image import (
    GeneratedImage,
    GenerationRequest,
    OpenAIImageResponse,
)

logger = logging.getLogger(__name__)


class OpenAIImageClient:
    """
    A client for the OpenAI image generation endpoint.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = settings.OPENAI_API_KEY
        self.model = settings.IMAGE_MODEL
        self.timeout = settings.REQUEST_TIMEOUT
        self.api_url = settings.OPENAI_API_BASE_URL.rstrip("/")
        self.generations_endpoint = f"{self.api_url}/images/generations"
        self._transport = transport

    def _client(self, **kwargs) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, **kwargs
        )

    async def generate(self, request: GenerationRequest) -> GeneratedImage:
        """
        Generates a single image and returns its URL.

        Raises:
            UpstreamGenerationError: If the endpoint responds with a non-success status.
            NoImageReturnedError: If the response contains no image URL.
            httpx.RequestError: If a network error occurs.
        """
        payload = {
            "model": self.model,
            "prompt": request.prompt,
            "n": 1,
            "size": request.size.value,
            "quality": request.quality.value,
            "style": request.style.value,
        }

        async with self._client() as client:
            response = await client.post(
                self.generations_endpoint,
                json=payload,
                headers={
                    "Authorization": f"Bearer {self.api_key}",
                    "Content-Type": "application/json",
                },
            )

        if not response.is_success:
            logger.error(
                f"OpenAI image generation failed. Status: {response.status_code}, "
                f"Response: {response.text}"
            )
            raise UpstreamGenerationError(
                response.status_code, response.reason_phrase, response.text
            )

        parsed = OpenAIImageResponse.model_validate(response.json())
        first = parsed.data[0] if parsed.data else None
        if first is None or not first.url:
            raise NoImageReturnedError()

        return GeneratedImage(url=first.url, revised_prompt=first.revised_prompt)

    async def download(self, url: str) -> bytes:
        """
        Downloads the generated image.

        Raises:
            DownloadError: If the image URL responds with a non-success status.
            httpx.RequestError: If a network error occurs.
        """
        async with self._client(follow_redirects=True) as client:
            response = await client.get(url)

        if not response.is_success:
            raise DownloadError(response.status_code, response.reason_phrase)

        return response.content
