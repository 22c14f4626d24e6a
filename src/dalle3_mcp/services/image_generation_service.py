import logging
from pathlib import Path
from typing import Optional, Union

import anyio.to_thread

from dalle3_mcp.clients.openai_client import OpenAIImageClient
from dalle3_mcp.clients.protocol import ImageClientProtocol
from dalle3_mcp.config.settings import Settings
from dalle3_mcp.errors import MissingParameterError, format_error
from dalle3_mcp.schemas.image import (
    GenerationRequest,
    GenerationResult,
    ImageQuality,
    ImageSize,
    ImageStyle,
)
from dalle3_mcp.utils.filename import resolve_output_path

logger = logging.getLogger(__name__)


def _save_image(output_path: str, prompt: str, image_bytes: bytes) -> str:
    final_path = resolve_output_path(output_path, prompt)
    path = Path(final_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # Existing files are overwritten
    path.write_bytes(image_bytes)
    return final_path


def format_success_report(request: GenerationRequest, result: GenerationResult) -> str:
    return (
        "✅ Image generated successfully!\n"
        "\n"
        f"**Original Prompt:** {request.prompt}\n"
        f"**Revised Prompt:** {result.revised_prompt or 'N/A'}\n"
        f"**Image URL:** {result.url}\n"
        f"**Saved to:** {result.output_path}\n"
        f"**Size:** {request.size.value}\n"
        f"**Quality:** {request.quality.value}\n"
        f"**Style:** {request.style.value}\n"
        f"**File Size:** {result.size_kb} KB\n"
        "\n"
        "The image has been saved to your specified location and is ready to use."
    )


class ImageGenerationService:
    """
    Runs a single prompt-to-file generation.

    The pipeline is strictly linear: validate the parameters, request the
    image, download it, resolve the output path and write the bytes. Calls
    are never retried.
    """

    def __init__(
        self, settings: Settings, client: Optional[ImageClientProtocol] = None
    ):
        self.settings = settings
        self.client = client if client is not None else OpenAIImageClient(settings)

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generates an image and saves it according to `request.output_path`.

        Raises:
            ImageGenerationError: For any failure with a dedicated error kind.
            httpx.RequestError: If either network call fails to complete.
            OSError: If the output file cannot be written.
        """
        if not request.prompt:
            raise MissingParameterError("prompt")
        if not request.output_path:
            raise MissingParameterError("output_path")

        generated = await self.client.generate(request)
        image_bytes = await self.client.download(generated.url)

        output_path = await anyio.to_thread.run_sync(
            _save_image, request.output_path, request.prompt, image_bytes
        )
        logger.info(f"Saved {len(image_bytes)} bytes to {output_path}")

        return GenerationResult(
            image_bytes=image_bytes,
            revised_prompt=generated.revised_prompt,
            url=generated.url,
            output_path=output_path,
        )

    async def generate_image(
        self,
        prompt: str,
        output_path: str,
        size: Union[ImageSize, str] = ImageSize.SQUARE,
        quality: Union[ImageQuality, str] = ImageQuality.HD,
        style: Union[ImageStyle, str] = ImageStyle.VIVID,
    ) -> str:
        """
        Entry point of the generate_image tool.

        Returns:
            str: A success report, or an `Error generating image: ...` message.
            This method does not raise.
        """
        try:
            request = GenerationRequest(
                prompt=prompt,
                output_path=output_path,
                size=size,
                quality=quality,
                style=style,
            )
            result = await self.generate(request)
        except Exception as e:
            logger.exception("Error generating image")
            return format_error(e)

        return format_success_report(request, result)
