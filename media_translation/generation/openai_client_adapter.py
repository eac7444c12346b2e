import base64
from collections.abc import Sequence

import httpx
import openai

from media_translation.generation.base import BaseGenerativeClient
from media_translation.generation.exceptions import GenerationError, GenerationNetworkError
from media_translation.generation.models import (
    Candidate,
    GenerationResponse,
    ImagePart,
    Part,
    TextPart,
)


class OpenAIClientAdapter(BaseGenerativeClient):
    """Generative client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(self, parts: Sequence[Part], *, model: str) -> GenerationResponse:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "user", "content": [self._to_content(part) for part in parts]},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(
                f"Model provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise GenerationNetworkError(
                f"Model provider API error: {exc}"
            ) from exc

        candidates: list[Candidate] = []
        for choice in response.choices:
            content = choice.message.content
            if content is None:
                raise GenerationError("Model returned empty response")
            candidates.append(Candidate(text=content))
        return GenerationResponse(candidates=candidates)

    @staticmethod
    def _to_content(part: Part) -> dict[str, object]:
        if isinstance(part, TextPart):
            return {"type": "text", "text": part.text}
        if isinstance(part, ImagePart):
            encoded = base64.b64encode(part.data).decode("ascii")
            return {
                "type": "image_url",
                "image_url": {"url": f"data:{part.mime_type};base64,{encoded}"},
            }
        raise TypeError(f"Unsupported prompt part: {type(part).__name__}")
