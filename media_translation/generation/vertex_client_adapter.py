from collections.abc import Sequence

import httpx
from google import genai
from google.auth import exceptions as google_auth_exceptions
from google.genai import errors, types

from media_translation.generation.base import BaseGenerativeClient
from media_translation.generation.exceptions import GenerationError, GenerationNetworkError
from media_translation.generation.models import (
    Candidate,
    GenerationResponse,
    ImagePart,
    Part,
    TextPart,
)


class VertexClientAdapter(BaseGenerativeClient):
    """Generative client adapter for Gemini models deployed on Vertex AI."""

    def __init__(
        self,
        *,
        project_id: str,
        location: str,
        client: genai.Client | None = None,
    ) -> None:
        self._project_id = project_id
        self._location = location
        self._client = client

    def generate(self, parts: Sequence[Part], *, model: str) -> GenerationResponse:
        contents = [self._to_vertex_part(part) for part in parts]
        try:
            response = self._get_client().models.generate_content(
                model=model, contents=contents
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise GenerationNetworkError(f"Model provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise GenerationNetworkError(f"Model provider API error: {exc}") from exc
        except google_auth_exceptions.GoogleAuthError as exc:
            raise GenerationError(f"Model provider authentication error: {exc}") from exc

        return GenerationResponse(
            candidates=[
                Candidate(text=self._candidate_text(candidate))
                for candidate in response.candidates or []
            ]
        )

    def _get_client(self) -> genai.Client:
        # Credentials are resolved on first use, not at startup.
        if self._client is None:
            self._client = genai.Client(
                vertexai=True, project=self._project_id, location=self._location
            )
        return self._client

    @staticmethod
    def _to_vertex_part(part: Part) -> types.Part:
        if isinstance(part, TextPart):
            return types.Part.from_text(text=part.text)
        if isinstance(part, ImagePart):
            return types.Part.from_bytes(data=part.data, mime_type=part.mime_type)
        raise TypeError(f"Unsupported prompt part: {type(part).__name__}")

    @staticmethod
    def _candidate_text(candidate: types.Candidate) -> str:
        if candidate.content is None or not candidate.content.parts:
            finish_reason = getattr(candidate, "finish_reason", None)
            raise GenerationError(
                f"Model returned empty response (finish_reason={finish_reason})"
            )
        return "".join(part.text or "" for part in candidate.content.parts)
