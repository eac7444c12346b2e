from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from media_translation.files.models import ValidationReason


class FileValidationError(Exception):
    """Raised when a media file cannot pass the validation gate."""

    def __init__(self, message: str, reason: ValidationReason | None = None) -> None:
        super().__init__(message)
        self.reason = reason


class FileReadError(Exception):
    """Raised when a file cannot be read from disk."""
