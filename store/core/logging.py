"""Logging setup for the store backend."""
# Standard library imports
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stream handler on the root logger.

    Safe to call more than once; only the level is updated on later calls.

    Args:
        level: Logging level name (e.g. "INFO", "DEBUG")
    """
    global _configured
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    _configured = True
