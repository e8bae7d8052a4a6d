import logging
import sys


class Log:
    """Centralized bridge logging: one stdout handler, key=value context suffix."""

    _logger: logging.Logger = logging.getLogger("scanner_bridge")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Attach the stdout handler once and apply the configured level."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @staticmethod
    def _with_context(message: str, context: dict[str, object]) -> str:
        """Append context as a ` | key=value` suffix; values use repr()."""
        if not context:
            return message
        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{message} | {pairs}"

    @classmethod
    def info(cls, message: str, **context: object) -> None:
        """Log a capture or save milestone."""
        cls._logger.info(cls._with_context(message, context))

    @classmethod
    def error(cls, message: str, **context: object) -> None:
        """Log a failed request step."""
        cls._logger.error(cls._with_context(message, context))

    @classmethod
    def warning(cls, message: str, **context: object) -> None:
        """Log a degraded but recoverable condition."""
        cls._logger.warning(cls._with_context(message, context))

    @classmethod
    def debug(cls, message: str, **context: object) -> None:
        """Log per-driver discovery detail."""
        cls._logger.debug(cls._with_context(message, context))
