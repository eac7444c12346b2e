import logging
import sys


class Log:
    """Centralized logging for the translation runner."""

    _logger: logging.Logger = logging.getLogger("media_translation")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def failure(cls, message: str, exc: BaseException) -> None:
        """Log an error together with the exception's underlying cause."""
        cause = exc.__cause__
        if cause is not None:
            message = f"{message} (cause: {type(cause).__name__}: {cause})"
        cls._logger.error(message, exc_info=exc)
