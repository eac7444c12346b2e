from pathlib import Path
from typing import ClassVar

from media_translation.files.exceptions import FileReadError
from media_translation.files.validator import get_extension


class FileLoader:
    """Reads media bytes from local disk."""

    IMAGE_MIME_TYPES: ClassVar[dict[str, str]] = {
        "jpg": "image/jpeg",
        "jpeg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "bmp": "image/bmp",
    }

    def load(self, file_path: str) -> bytes:
        """Read the whole file, unmodified.

        Raises:
            FileReadError: if the file is missing or cannot be read.
        """
        path = Path(file_path)
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileReadError(f"Failed to read file {path}: {exc}") from exc

    def image_mime_type(self, file_path: str) -> str:
        return self.IMAGE_MIME_TYPES.get(get_extension(file_path), "application/octet-stream")
