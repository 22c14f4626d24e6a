import logging
import sys
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from dalle3_mcp.config.settings import load_settings_or_exit
from dalle3_mcp.schemas.image import ImageQuality, ImageSize, ImageStyle
from dalle3_mcp.services.image_generation_service import ImageGenerationService

SERVER_NAME = "DALL-E 3 Image Generator"

logger = logging.getLogger(__name__)


def create_server(service: ImageGenerationService) -> FastMCP:
    """
    Builds the MCP server and registers the generate_image tool on it.
    """
    server = FastMCP(SERVER_NAME)

    @server.tool(
        name="generate_image",
        description="Generate an image with DALL-E 3 and save it to the given path",
    )
    async def generate_image(
        prompt: Annotated[str, Field(description="Text prompt for image generation")],
        output_path: Annotated[
            str, Field(description="Full path where the image should be saved")
        ],
        size: Annotated[ImageSize, Field(description="Image size")] = ImageSize.SQUARE,
        quality: Annotated[
            ImageQuality, Field(description="Image quality")
        ] = ImageQuality.HD,
        style: Annotated[ImageStyle, Field(description="Image style")] = ImageStyle.VIVID,
    ) -> str:
        return await service.generate_image(
            prompt=prompt,
            output_path=output_path,
            size=size,
            quality=quality,
            style=style,
        )

    return server


def main() -> None:
    # stdout carries the protocol stream, so logs go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings_or_exit()
    logging.getLogger().setLevel(settings.LOG_LEVEL)

    server = create_server(ImageGenerationService(settings))
    logger.info("[DALL-E 3 MCP Server] Server running on stdio")
    try:
        server.run(transport="stdio")
    except KeyboardInterrupt:
        logger.info("[DALL-E 3 MCP Server] Shutting down...")
        sys.exit(0)


if __name__ == "__main__":
    main()
