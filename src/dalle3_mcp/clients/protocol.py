from typing import Protocol, runtime_checkable

from dalle3_mcp.schemas.image import GeneratedImage, GenerationRequest


@runtime_checkable
class ImageClientProtocol(Protocol):
    """
    Protocol for image generation backends.
    """

    async def generate(self, request: GenerationRequest) -> GeneratedImage:
        """
        Request a single image for the given parameters.

        Args:
            request: The validated generation parameters.

        Returns:
            The URL of the generated image and the revised prompt, if any.
        """
        ...

    async def download(self, url: str) -> bytes:
        """
        Fetch the image bytes behind a URL returned by `generate`.
        """
        ...
