from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as google_auth_exceptions
from google.cloud import speech

from media_translation.transcription.base import (
    DEFAULT_SAMPLE_RATE_HERTZ,
    LINEAR16,
    BaseTranscriptionClient,
)
from media_translation.transcription.exceptions import (
    TranscriptionError,
    TranscriptionNetworkError,
)
from media_translation.transcription.models import TranscriptSegment


class GoogleSpeechClientAdapter(BaseTranscriptionClient):
    """Transcription adapter built on Google Cloud Speech-to-Text (v1 recognize)."""

    def __init__(self, client: speech.SpeechClient | None = None) -> None:
        self._client = client

    def recognize(
        self,
        audio_bytes: bytes,
        *,
        language_code: str,
        encoding: str = LINEAR16,
        sample_rate_hertz: int = DEFAULT_SAMPLE_RATE_HERTZ,
    ) -> list[TranscriptSegment]:
        try:
            audio_encoding = speech.RecognitionConfig.AudioEncoding[encoding]
        except KeyError as exc:
            raise TranscriptionError(f"Unsupported audio encoding: {encoding}") from exc

        config = speech.RecognitionConfig(
            encoding=audio_encoding,
            sample_rate_hertz=sample_rate_hertz,
            language_code=language_code,
        )
        audio = speech.RecognitionAudio(content=audio_bytes)

        try:
            response = self._get_client().recognize(config=config, audio=audio)
        except (google_exceptions.RetryError, google_exceptions.DeadlineExceeded) as exc:
            raise TranscriptionNetworkError(
                f"Speech provider network error: {exc}"
            ) from exc
        except google_exceptions.GoogleAPICallError as exc:
            raise TranscriptionNetworkError(
                f"Speech provider API error: {exc}"
            ) from exc
        except google_auth_exceptions.GoogleAuthError as exc:
            raise TranscriptionError(
                f"Speech provider authentication error: {exc}"
            ) from exc

        segments: list[TranscriptSegment] = []
        for result in response.results:
            if not result.alternatives:
                continue
            best = result.alternatives[0]
            segments.append(
                TranscriptSegment(transcript=best.transcript, confidence=best.confidence)
            )
        return segments

    def _get_client(self) -> speech.SpeechClient:
        # Credentials are resolved on first use, not at startup.
        if self._client is None:
            self._client = speech.SpeechClient()
        return self._client
