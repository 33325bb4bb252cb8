"""
Logging setup shared by entry points.

Services only ever call logging.getLogger(__name__); the root handler
and format are installed once here.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install the root logging handler.

    Args:
        level: Level name, e.g. "DEBUG" or "INFO". Unknown names fall back to INFO.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    # Motor/pymongo are chatty at DEBUG
    logging.getLogger("pymongo").setLevel(max(numeric_level, logging.INFO))
