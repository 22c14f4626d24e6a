import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class ImageSize(str, Enum):
    SQUARE = "1024x1024"
    PORTRAIT = "1024x1792"
    LANDSCAPE = "1792x1024"


class ImageQuality(str, Enum):
    STANDARD = "standard"
    HD = "hd"


class ImageStyle(str, Enum):
    VIVID = "vivid"
    NATURAL = "natural"


class GenerationRequest(BaseModel):
    """
    Parameters of a single generate_image call.

    Empty prompt or output_path values are accepted here and rejected by the
    service, so that the caller receives a readable error message instead of
    a schema validation failure.
    """

    model_config = ConfigDict(frozen=True)

    prompt: str
    output_path: str
    size: ImageSize = ImageSize.SQUARE
    quality: ImageQuality = ImageQuality.HD
    style: ImageStyle = ImageStyle.VIVID


class OpenAIImageData(BaseModel):
    url: Optional[str] = None
    revised_prompt: Optional[str] = None


class OpenAIImageResponse(BaseModel):
    data: List[OpenAIImageData] = []


class GeneratedImage(BaseModel):
    url: str
    revised_prompt: Optional[str] = None


class GenerationResult(BaseModel):
    image_bytes: bytes
    revised_prompt: Optional[str] = None
    url: str
    output_path: str

    @property
    def size_kb(self) -> int:
        # Half-up rounding
        return math.floor(len(self.image_bytes) / 1024 + 0.5)
