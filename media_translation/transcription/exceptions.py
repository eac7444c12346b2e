class TranscriptionError(Exception):
    """Raised when speech recognition fails."""


class TranscriptionNetworkError(TranscriptionError):
    """Raised when the speech provider call fails due to network/infrastructure issues."""
