from abc import ABC, abstractmethod
from collections.abc import Sequence

from media_translation.generation.models import GenerationResponse, Part


class BaseGenerativeClient(ABC):
    """Contract for generative model provider adapters."""

    @abstractmethod
    def generate(self, parts: Sequence[Part], *, model: str) -> GenerationResponse:
        """Generate content for an ordered list of prompt parts.

        Args:
            parts: Text and image parts, sent in order.
            model: Provider model name.

        Returns:
            GenerationResponse with the provider's candidates in order.

        Raises:
            GenerationError: on any failure.
        """
