from media_translation.config.settings import Settings
from media_translation.files import validator
from media_translation.files.exceptions import FileValidationError
from media_translation.files.file_loader import FileLoader
from media_translation.files.models import (
    MediaKind,
    MediaRequest,
    ValidationReason,
    ValidationResult,
)
from media_translation.generation.factory import GenerativeClientFactory
from media_translation.logging.logger import Log
from media_translation.transcription.factory import TranscriptionClientFactory
from media_translation.translation.audio_service import AudioTranslationService
from media_translation.translation.image_service import ImageTranslationService

_REASON_MESSAGES: dict[ValidationReason, str] = {
    ValidationReason.NOT_FOUND: "file does not exist",
    ValidationReason.UNREADABLE: "file is not readable",
    ValidationReason.UNSUPPORTED_FORMAT: "unsupported format",
    ValidationReason.FILE_TOO_LARGE: "file exceeds the configured size limit",
}


class Runner:
    """Validates a media file, then runs the basic and detailed analyses.

    Pipeline: validate -> basic -> detailed. Failures are logged; nothing
    propagates out of ``process_image`` or ``process_audio``.
    """

    def __init__(
        self,
        image_service: ImageTranslationService,
        audio_service: AudioTranslationService,
        max_file_size_mb: float | None = None,
    ) -> None:
        self._image_service = image_service
        self._audio_service = audio_service
        self._max_file_size_mb = max_file_size_mb

    def process_image(self, image_path: str, target_language: str) -> None:
        request = self._build_request(image_path, MediaKind.IMAGE, target_language)
        if request is None or not self._passes_gate(request):
            return

        Log.info(f"Processing image: {request.file_path}")
        try:
            basic = self._image_service.analyze_basic(
                request.file_path, request.target_language
            )
            Log.info(f"Basic image analysis:\n{basic}")

            detailed = self._image_service.analyze_detailed(
                request.file_path, request.target_language
            )
            Log.info(f"Detailed image analysis:\n{detailed}")
        except Exception as exc:
            Log.failure(f"Error processing image: {exc}", exc)

    def process_audio(
        self, audio_path: str, source_language: str, target_language: str
    ) -> None:
        request = self._build_request(
            audio_path, MediaKind.AUDIO, target_language, source_language
        )
        if request is None or not self._passes_gate(request):
            return

        Log.info(f"Processing audio: {request.file_path}")
        try:
            basic = self._audio_service.translate_basic(
                request.file_path, request.source_language, request.target_language
            )
            Log.info(f"Basic audio translation:\n{basic}")

            detailed = self._audio_service.analyze_detailed(
                request.file_path, request.source_language, request.target_language
            )
            Log.info(f"Detailed audio analysis:\n{detailed}")
        except Exception as exc:
            Log.failure(f"Error processing audio: {exc}", exc)

    @staticmethod
    def _build_request(
        file_path: str,
        media_kind: MediaKind,
        target_language: str,
        source_language: str | None = None,
    ) -> MediaRequest | None:
        try:
            return MediaRequest(
                file_path=file_path,
                media_kind=media_kind,
                target_language=target_language,
                source_language=source_language,
            )
        except FileValidationError as exc:
            Log.error(f"Invalid {media_kind.value} request: {exc}")
            return None

    def _passes_gate(self, request: MediaRequest) -> bool:
        result = validator.validate(request.file_path, request.media_kind)
        if result.ok and self._max_file_size_mb is not None:
            if not validator.is_file_size_valid(request.file_path, self._max_file_size_mb):
                result = ValidationResult.failure(ValidationReason.FILE_TOO_LARGE)
        if result.ok:
            return True
        if result.reason is None:
            Log.error(f"Rejected {request.media_kind.value} file {request.file_path}")
            return False
        Log.error(
            f"Rejected {request.media_kind.value} file {request.file_path}: "
            f"{_REASON_MESSAGES[result.reason]} ({result.reason.name})"
        )
        return False


def build_runner(settings: Settings) -> Runner:
    """Build a Runner with the configured client adapters.

    Each client is created once and shared by both services.
    """
    generative_client = GenerativeClientFactory.create(settings)
    transcription_client = TranscriptionClientFactory.create(settings)
    file_loader = FileLoader()
    image_service = ImageTranslationService(
        generative_client=generative_client,
        model=settings.vision_model_name,
        file_loader=file_loader,
    )
    audio_service = AudioTranslationService(
        transcription_client=transcription_client,
        generative_client=generative_client,
        model=settings.text_model_name,
        file_loader=file_loader,
        sample_rate_hertz=settings.speech_sample_rate_hertz,
    )
    return Runner(
        image_service=image_service,
        audio_service=audio_service,
        max_file_size_mb=settings.max_file_size_mb,
    )
