from media_translation.config.settings import Settings
from media_translation.transcription.base import BaseTranscriptionClient
from media_translation.transcription.example_client_adapter import ExampleTranscriptionClient
from media_translation.transcription.google_speech_adapter import GoogleSpeechClientAdapter


class TranscriptionClientFactory:
    """Creates the configured speech-to-text client."""

    ADAPTERS: dict[str, type[BaseTranscriptionClient]] = {
        "google": GoogleSpeechClientAdapter,
        "example": ExampleTranscriptionClient,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseTranscriptionClient:
        provider = settings.transcription_provider.lower()
        adapter_cls = cls.ADAPTERS.get(provider)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown transcription provider '{provider}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
