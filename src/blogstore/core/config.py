"""Configuration management for blogstore."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def get_env(key: str, default: str | None = None) -> str | None:
    """Get environment variable with optional default."""
    return os.getenv(key, default)


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key, "").lower()
    if value in ("true", "1", "yes"):
        return True
    if value in ("false", "0", "no"):
        return False
    return default


def get_posts_dir() -> Path:
    """
    Get the directory holding post files.

    Read on every call so tests and the CLI can point the store elsewhere.
    The directory is never created here.
    """
    return Path(get_env("BLOGSTORE_POSTS_DIR", "./posts") or "./posts").expanduser()


# Logging
LOG_LEVEL = get_env("LOG_LEVEL", "INFO")

# API Server settings
BLOGSTORE_API_KEY = get_env("BLOGSTORE_API_KEY")
BLOGSTORE_HOST = get_env("BLOGSTORE_HOST", "127.0.0.1")
BLOGSTORE_PORT = get_env_int("BLOGSTORE_PORT", 8000)
BLOGSTORE_ALLOW_NO_AUTH = get_env_bool("BLOGSTORE_ALLOW_NO_AUTH", False)
BLOGSTORE_CORS_ORIGINS = [
    origin.strip()
    for origin in (get_env("BLOGSTORE_CORS_ORIGINS", "*") or "*").split(",")
    if origin.strip()
]


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure and return logger."""
    level_name = (level or LOG_LEVEL or "INFO").upper()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return logging.getLogger(__name__)
