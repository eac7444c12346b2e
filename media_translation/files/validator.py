"""Extension and file-system checks applied before any remote call."""

import os
from pathlib import Path

from media_translation.files.models import MediaKind, ValidationReason, ValidationResult
from media_translation.logging.logger import Log

SUPPORTED_IMAGE_FORMATS = frozenset({"jpg", "jpeg", "png", "gif", "bmp"})
SUPPORTED_AUDIO_FORMATS = frozenset({"wav", "mp3", "flac", "m4a"})

_FORMATS_BY_KIND: dict[MediaKind, frozenset[str]] = {
    MediaKind.IMAGE: SUPPORTED_IMAGE_FORMATS,
    MediaKind.AUDIO: SUPPORTED_AUDIO_FORMATS,
}

_BYTES_PER_MEGABYTE = 1024 * 1024


def validate(file_path: str, media_kind: MediaKind) -> ValidationResult:
    """Check that a file exists, is readable and has an allowed extension.

    Returns:
        ValidationResult with ``ok=False`` and the first failing reason,
        checked in order: NOT_FOUND, UNREADABLE, UNSUPPORTED_FORMAT.
    """
    path = Path(file_path)
    if not path.is_file():
        return ValidationResult.failure(ValidationReason.NOT_FOUND)
    if not os.access(path, os.R_OK):
        return ValidationResult.failure(ValidationReason.UNREADABLE)
    if get_extension(file_path) not in _FORMATS_BY_KIND[media_kind]:
        return ValidationResult.failure(ValidationReason.UNSUPPORTED_FORMAT)
    return ValidationResult.success()


def get_extension(file_path: str) -> str:
    """Return the lowercased extension of the file name without the dot.

    A name with no dot, or whose only dot is the first character
    (``.bashrc``), has no extension.
    """
    name = Path(file_path).name
    last_dot = name.rfind(".")
    if last_dot <= 0:
        return ""
    return name[last_dot + 1:].lower()


def is_valid_file(file_path: str) -> bool:
    path = Path(file_path)
    return path.is_file() and os.access(path, os.R_OK)


def is_supported_image_format(file_path: str) -> bool:
    return get_extension(file_path) in SUPPORTED_IMAGE_FORMATS


def is_supported_audio_format(file_path: str) -> bool:
    return get_extension(file_path) in SUPPORTED_AUDIO_FORMATS


def file_size_in_megabytes(file_path: str) -> float:
    return Path(file_path).stat().st_size / _BYTES_PER_MEGABYTE


def is_file_size_valid(file_path: str, max_size_mb: float) -> bool:
    return file_size_in_megabytes(file_path) <= max_size_mb


def create_directory_if_not_exists(directory_path: str) -> None:
    """Create ``directory_path`` and any missing parents.

    Raises:
        OSError: if the directory cannot be created.
    """
    path = Path(directory_path)
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        Log.info(f"Created directory: {directory_path}")
