from abc import ABC, abstractmethod

from media_translation.transcription.models import TranscriptSegment

LINEAR16 = "LINEAR16"
DEFAULT_SAMPLE_RATE_HERTZ = 16000


class BaseTranscriptionClient(ABC):
    """Contract for speech-to-text provider adapters."""

    @abstractmethod
    def recognize(
        self,
        audio_bytes: bytes,
        *,
        language_code: str,
        encoding: str = LINEAR16,
        sample_rate_hertz: int = DEFAULT_SAMPLE_RATE_HERTZ,
    ) -> list[TranscriptSegment]:
        """Transcribe raw audio bytes.

        Args:
            audio_bytes: Raw audio file content.
            language_code: BCP-47 language of the speech, e.g. "en-US".
            encoding: Audio encoding name understood by the provider.
            sample_rate_hertz: Sample rate of the audio.

        Returns:
            One segment per recognition result, in provider order.

        Raises:
            TranscriptionError: on any failure.
        """
