import logging

from pydantic import ValidationError

from geoencode.settings.geoencode_settings import LoggingSettings

_DEFAULT_LEVEL = "WARNING"


def _resolve_level() -> tuple[str, str | None]:
    # Only the logging settings are read here: loggers are created at import
    # time and a bad key_length must not make the package unimportable
    try:
        return LoggingSettings().log_level, None
    except ValidationError as e:
        return _DEFAULT_LEVEL, str(e)


def get_logger(name: str) -> logging.Logger:
    """Configure and return a logger with consistent formatting.

    Args:
        name: The name for the logger, typically __name__ of the calling module.

    Returns:
        A configured Logger instance with ISO 8601 timestamp formatting and the
        level taken from ``GEOENCODE_LOG_LEVEL`` (WARNING if it is invalid).
    """
    logger = logging.getLogger(name)
    level, error = _resolve_level()
    logger.setLevel(level)

    # Modules may be reloaded; keep a single handler per logger
    if not logger.handlers:
        # Set logger string format
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)-8s] [%(name)s] - %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if error is not None:
        logger.warning(f"Invalid GEOENCODE_LOG_LEVEL, using {level}: {error}")

    return logger
