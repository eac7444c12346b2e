from pathlib import Path

from PIL import Image, UnidentifiedImageError

from media_translation.files.exceptions import FileReadError
from media_translation.files.file_loader import FileLoader
from media_translation.generation.base import BaseGenerativeClient
from media_translation.generation.exceptions import GenerationError
from media_translation.generation.models import ImagePart, TextPart
from media_translation.logging.logger import Log
from media_translation.translation.exceptions import ProcessingError
from media_translation.translation.prompt_loader import (
    IMAGE_BASIC,
    IMAGE_DETAILED,
    load_prompt_template,
)


class ImageTranslationService:
    """Describes images in a target language using a vision-capable model."""

    def __init__(
        self,
        *,
        generative_client: BaseGenerativeClient,
        model: str,
        file_loader: FileLoader | None = None,
        prompt_dir: Path | None = None,
    ) -> None:
        self._generative_client = generative_client
        self._model = model
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._basic_template = load_prompt_template(IMAGE_BASIC, prompt_dir)
        self._detailed_template = load_prompt_template(IMAGE_DETAILED, prompt_dir)

    def analyze_basic(self, image_path: str, target_language: str) -> str:
        """Describe the image content in ``target_language``.

        Raises:
            ProcessingError: wrapping any read or generation failure.
        """
        try:
            result = self._analyze(image_path, self._basic_template, target_language)
        except (FileReadError, GenerationError) as exc:
            raise ProcessingError("Failed to process image") from exc
        Log.info("Successfully analyzed and translated image content")
        return result

    def analyze_detailed(self, image_path: str, target_language: str) -> str:
        """Request a structured, multi-point description of the image.

        Raises:
            ProcessingError: wrapping any read or generation failure.
        """
        try:
            return self._analyze(image_path, self._detailed_template, target_language)
        except (FileReadError, GenerationError) as exc:
            raise ProcessingError("Failed to process image for detailed analysis") from exc

    def is_valid_image(self, image_path: str | Path) -> bool:
        """Return True if the file decodes as a raster image."""
        try:
            with Image.open(image_path) as image:
                image.load()
        except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as exc:
            Log.error(f"Error validating image: {exc}")
            return False
        return True

    def _analyze(self, image_path: str, template: str, target_language: str) -> str:
        image_bytes = self._file_loader.load(image_path)
        parts = [
            TextPart(template.format(target_language=target_language)),
            ImagePart(data=image_bytes, mime_type=self._file_loader.image_mime_type(image_path)),
        ]
        response = self._generative_client.generate(parts, model=self._model)
        return response.first_text()
