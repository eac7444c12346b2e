class GenerationError(Exception):
    """Raised when content generation fails."""


class GenerationNetworkError(GenerationError):
    """Raised when the model provider call fails due to network/infrastructure issues."""


class EmptyResponseError(GenerationError):
    """Raised when the model provider returns no candidates."""
