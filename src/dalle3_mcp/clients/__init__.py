from .mock_client import MockImageClient
from .openai_client import OpenAIImageClient
from .protocol import ImageClientProtocol

__all__ = [
    "ImageClientProtocol",
    "MockImageClient",
    "OpenAIImageClient",
]
