"""Speech-to-text followed by model translation / analysis."""

from pathlib import Path

from media_translation.files.exceptions import FileReadError
from media_translation.files.file_loader import FileLoader
from media_translation.generation.base import BaseGenerativeClient
from media_translation.generation.exceptions import GenerationError
from media_translation.generation.models import TextPart
from media_translation.logging.logger import Log
from media_translation.transcription.base import (
    DEFAULT_SAMPLE_RATE_HERTZ,
    LINEAR16,
    BaseTranscriptionClient,
)
from media_translation.transcription.exceptions import TranscriptionError
from media_translation.transcription.models import join_transcripts
from media_translation.translation.exceptions import ProcessingError
from media_translation.translation.prompt_loader import (
    AUDIO_BASIC,
    AUDIO_DETAILED,
    load_prompt_template,
)

_WRAPPED_ERRORS = (FileReadError, TranscriptionError, GenerationError)


class AudioTranslationService:
    """Transcribes audio files and asks a text model to translate or analyze them.

    Both entry points transcribe the file independently; no transcript is
    shared between calls.
    """

    def __init__(
        self,
        *,
        transcription_client: BaseTranscriptionClient,
        generative_client: BaseGenerativeClient,
        model: str,
        file_loader: FileLoader | None = None,
        sample_rate_hertz: int = DEFAULT_SAMPLE_RATE_HERTZ,
        prompt_dir: Path | None = None,
    ) -> None:
        self._transcription_client = transcription_client
        self._generative_client = generative_client
        self._model = model
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._sample_rate_hertz = sample_rate_hertz
        self._basic_template = load_prompt_template(AUDIO_BASIC, prompt_dir)
        self._detailed_template = load_prompt_template(AUDIO_DETAILED, prompt_dir)

    def translate_basic(
        self, audio_path: str, source_language: str, target_language: str
    ) -> str:
        """Transcribe ``audio_path`` and translate the transcript.

        Raises:
            ProcessingError: wrapping any read, transcription or generation failure.
        """
        try:
            transcript = self.transcribe(audio_path, source_language)
            prompt = self._basic_template.format(
                target_language=target_language,
                transcript=transcript,
            )
            translation = self._generate(prompt)
        except _WRAPPED_ERRORS as exc:
            raise ProcessingError("Failed to process audio") from exc
        Log.info(f"Successfully translated text to {target_language}")
        return translation

    def analyze_detailed(
        self, audio_path: str, source_language: str, target_language: str
    ) -> str:
        """Transcribe ``audio_path`` again and request a structured analysis.

        Raises:
            ProcessingError: wrapping any read, transcription or generation failure.
        """
        try:
            transcript = self.transcribe(audio_path, source_language)
            prompt = self._detailed_template.format(
                target_language=target_language,
                transcript=transcript,
            )
            return self._generate(prompt)
        except _WRAPPED_ERRORS as exc:
            raise ProcessingError("Failed to process audio for detailed analysis") from exc

    def transcribe(self, audio_path: str, language_code: str) -> str:
        """Return the concatenated transcript of an audio file.

        Raises:
            FileReadError: if the file cannot be read.
            TranscriptionError: if speech recognition fails.
        """
        audio_bytes = self._file_loader.load(audio_path)
        segments = self._transcription_client.recognize(
            audio_bytes,
            language_code=language_code,
            encoding=LINEAR16,
            sample_rate_hertz=self._sample_rate_hertz,
        )
        Log.info("Successfully transcribed audio")
        Log.debug(f"Transcript has {len(segments)} segments")
        return join_transcripts(segments)

    def _generate(self, prompt: str) -> str:
        Log.debug(f"Audio prompt:\n{prompt}")
        response = self._generative_client.generate([TextPart(prompt)], model=self._model)
        return response.first_text()
