from .image import (
    GeneratedImage,
    GenerationRequest,
    GenerationResult,
    ImageQuality,
    ImageSize,
    ImageStyle,
    OpenAIImageData,
    OpenAIImageResponse,
)

__all__ = [
    "GeneratedImage",
    "GenerationRequest",
    "GenerationResult",
    "ImageQuality",
    "ImageSize",
    "ImageStyle",
    "OpenAIImageData",
    "OpenAIImageResponse",
]
