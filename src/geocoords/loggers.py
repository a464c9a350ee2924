"""Contains logging configuration data."""

import sys
from pathlib import Path

from loguru import logger

# Logger printing formats
DEFAULT_FORMAT = "<level>{level}</level>: {message}"
DEBUG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <7}</level> | "
    "<cyan>{name}:{line}</cyan> | "
    "{message}"
)


def setup_logging(
    filename: Path | str | None = None,
    level: str = "DEBUG",
) -> None:
    """Configures logging to file and console.

    Parameters
    ----------
    filename : Path | str | None
        log filename
    level : str, optional
        change default level of logging.
    """
    logger.remove()
    logger.enable("geocoords")
    fmt = DEBUG_FORMAT if level.upper() == "DEBUG" else DEFAULT_FORMAT
    logger.add(sys.stderr, level=level.upper(), format=fmt)
    if filename:
        logger.add(filename, level=level.upper(), format=DEBUG_FORMAT)
