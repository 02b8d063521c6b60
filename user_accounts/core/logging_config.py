"""Logging setup for the API process."""

# Standard library imports
import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once per process.

    Args:
        level: Log level name (e.g. "DEBUG", "INFO")
    """
    global _configured

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if _configured:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    root_logger.addHandler(handler)
    _configured = True
