"""Offline generative client.

Echoes the prompt text back as a single candidate. No network calls. Useful
for local runs and tests, and as a template for new provider adapters.
"""

from collections.abc import Sequence

from media_translation.generation.base import BaseGenerativeClient
from media_translation.generation.models import Candidate, GenerationResponse, ImagePart, Part, TextPart


class ExampleGenerativeClient(BaseGenerativeClient):
    def generate(self, parts: Sequence[Part], *, model: str) -> GenerationResponse:
        _ = model
        lines: list[str] = []
        for part in parts:
            if isinstance(part, TextPart):
                lines.append(part.text)
            elif isinstance(part, ImagePart):
                lines.append(f"[{part.mime_type}, {len(part.data)} bytes]")
        return GenerationResponse(candidates=[Candidate(text="\n".join(lines))])
