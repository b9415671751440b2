"""Logging configuration for the design tools catalog."""

import logging
import sys
from typing import Optional

from design_tools_website.config import log_dir
from design_tools_website.config import log_level as configured_log_level

LOG_FILENAME = "design_tools.log"


def setup_logging(log_level: Optional[str] = None, console_level: int = logging.INFO) -> None:
    """Set up logging configuration."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, (log_level or configured_log_level()).upper()))

    # Handlers are only attached once per process
    if any(getattr(handler, "_design_tools", False) for handler in root_logger.handlers):
        return

    # Create logs directory if it doesn't exist
    directory = log_dir()
    directory.mkdir(parents=True, exist_ok=True)

    # File handler for all logs
    file_handler = logging.FileHandler(directory / LOG_FILENAME)
    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    file_handler._design_tools = True
    root_logger.addHandler(file_handler)

    # Stream handler for INFO and above unless the caller asks for less
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))
    stream_handler.setLevel(console_level)
    stream_handler._design_tools = True
    root_logger.addHandler(stream_handler)

    # Silence httpx logs
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
