"""Bootstrap utilities for applications embedding Split Monitor."""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    level: str = "INFO", log_file: Optional[Path] = None, disable_console: bool = False
) -> None:
    """
    Configure logging for the host application.

    Parameters:
        level (str): Logging level as a string (e.g., "DEBUG", "INFO").
        log_file (Optional[Path]): Path to a file for logging output, if provided.
        disable_console (bool): If True, no console handler is installed.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = []
    if not disable_console:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    if not handlers:
        handlers.append(logging.NullHandler())

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )
    logging.getLogger("split_monitor").setLevel(log_level)
