"""Logging setup for the ctapgen CLI and form."""

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s:%(lineno)d  %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    name: str = "ctapgen",
) -> logging.Logger:
    """
    Route ctapgen log records to stderr and, optionally, a file.

    Console records are rendered by rich on stderr so they never mix with a
    script printed to stdout. Calling this again replaces the previous
    handlers.

    Args:
        level: Threshold for both handlers
        log_file: Optional file that receives plain-text records
        name: Logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()

    console = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        log_time_format=DATE_FORMAT,
    )
    console.setLevel(level)
    logger.addHandler(console)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "ctapgen") -> logging.Logger:
    return logging.getLogger(name)
