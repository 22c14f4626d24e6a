from typing import List, Optional

from dalle3_mcp.errors import NoImageReturnedError
from dalle3_mcp.schemas.image import GeneratedImage, GenerationRequest

DEFAULT_IMAGE_URL = "https://images.example.test/generated.png"
# PNG signature followed by padding
DEFAULT_IMAGE_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 2040


class MockImageClient:
    """
    An in-memory client that returns a fixed image without touching the network.

    Every call is recorded so tests can assert on what would have been sent.
    """

    def __init__(
        self,
        image_url: Optional[str] = DEFAULT_IMAGE_URL,
        image_bytes: bytes = DEFAULT_IMAGE_BYTES,
        revised_prompt: Optional[str] = None,
    ):
        self.image_url = image_url
        self.image_bytes = image_bytes
        self.revised_prompt = revised_prompt
        self.generate_calls: List[GenerationRequest] = []
        self.download_calls: List[str] = []

    async def generate(self, request: GenerationRequest) -> GeneratedImage:
        self.generate_calls.append(request)
        if not self.image_url:
            raise NoImageReturnedError()
        return GeneratedImage(url=self.image_url, revised_prompt=self.revised_prompt)

    async def download(self, url: str) -> bytes:
        self.download_calls.append(url)
        return self.image_bytes
