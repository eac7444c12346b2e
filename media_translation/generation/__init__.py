from media_translation.generation.base import BaseGenerativeClient
from media_translation.generation.factory import GenerativeClientFactory
from media_translation.generation.models import GenerationResponse, ImagePart, TextPart

__all__ = [
    "BaseGenerativeClient",
    "GenerationResponse",
    "GenerativeClientFactory",
    "ImagePart",
    "TextPart",
]
