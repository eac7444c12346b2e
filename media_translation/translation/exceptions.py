class ProcessingError(Exception):
    """Raised at the service boundary when a media file could not be processed.

    The original failure is always attached as ``__cause__``.
    """


class PromptTemplateError(ProcessingError):
    """Raised when a prompt template cannot be loaded."""
