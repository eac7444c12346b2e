"""Offline transcription client.

Returns a fixed transcript without network calls. Useful for local runs and
tests, and as a template for new speech provider adapters.
"""

from typing import ClassVar

from media_translation.transcription.base import (
    DEFAULT_SAMPLE_RATE_HERTZ,
    LINEAR16,
    BaseTranscriptionClient,
)
from media_translation.transcription.models import TranscriptSegment


class ExampleTranscriptionClient(BaseTranscriptionClient):
    DEFAULT_SEGMENTS: ClassVar[tuple[str, ...]] = (
        "Hello and welcome. ",
        "This is an example transcript.",
    )

    def recognize(
        self,
        audio_bytes: bytes,
        *,
        language_code: str,
        encoding: str = LINEAR16,
        sample_rate_hertz: int = DEFAULT_SAMPLE_RATE_HERTZ,
    ) -> list[TranscriptSegment]:
        _ = audio_bytes, language_code, encoding, sample_rate_hertz
        return [TranscriptSegment(transcript=text) for text in self.DEFAULT_SEGMENTS]
