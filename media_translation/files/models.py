from dataclasses import dataclass
from enum import Enum

from media_translation.files.exceptions import FileValidationError


class MediaKind(str, Enum):
    """Kind of media a request carries."""

    IMAGE = "image"
    AUDIO = "audio"


class ValidationReason(str, Enum):
    """Why a file was rejected before any remote call."""

    NOT_FOUND = "not_found"
    UNREADABLE = "unreadable"
    UNSUPPORTED_FORMAT = "unsupported_format"
    FILE_TOO_LARGE = "file_too_large"


@dataclass(frozen=True)
class MediaRequest:
    """One invocation of the runner for a single file."""

    file_path: str
    media_kind: MediaKind
    target_language: str
    source_language: str | None = None

    def __post_init__(self) -> None:
        if not self.file_path:
            raise FileValidationError(
                "file_path must be a non-empty string",
                reason=ValidationReason.NOT_FOUND,
            )


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the file validation gate."""

    ok: bool
    reason: ValidationReason | None = None

    @classmethod
    def success(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: ValidationReason) -> "ValidationResult":
        return cls(ok=False, reason=reason)
