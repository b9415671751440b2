"""Project configuration and paths."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Resolved against the working directory
DEFAULT_CONTENT_DIR = Path("content") / "tools"


def content_dir() -> Path:
    """Directory holding one <category>.json file per category."""
    override = os.getenv("TOOLS_CONTENT_DIR")
    if override:
        return Path(override)
    return DEFAULT_CONTENT_DIR


def log_dir() -> Path:
    return Path(os.getenv("LOG_DIR", "logs"))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO")


def web_port() -> int:
    return int(os.getenv("WEB_PORT", "8000"))


def base_path() -> str:
    return os.getenv("BASE_PATH", "").rstrip("/")
