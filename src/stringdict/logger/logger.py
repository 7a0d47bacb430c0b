"""Package-wide logger for stringdict.

The ``Dict`` container writes DEBUG records here when it is seeded, merged or
cleared, and just before it raises one of its errors. The default level comes
from ``settings.LOG_LEVEL``.
"""

import logging
import sys

from stringdict.config import settings

__all__ = ["logger", "setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "stringdict",
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Return the named stringdict logger, attaching a stdout handler on first use.

    Args:
        name: Logger name, ``stringdict`` or one of its children
        level: Level name; falls back to ``settings.LOG_LEVEL``
        format_string: Record format; falls back to ``DEFAULT_FORMAT``

    Returns:
        The logger. Later calls with the same name return it unchanged.
    """
    container_logger = logging.getLogger(name)

    if container_logger.handlers:
        return container_logger

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(
        logging.Formatter(
            fmt=format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
    )
    container_logger.addHandler(stream)
    container_logger.setLevel((level or settings.LOG_LEVEL).upper())
    # records stay out of the host application's root handlers
    container_logger.propagate = False

    return container_logger


logger = setup_logger()
