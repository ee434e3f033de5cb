"""Application configuration read from a .env file and the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from ordercleaner import logger


@dataclass
class Config:
    """Settings of the running application."""

    app_name: str = "redemtion-api"
    app_env: str = ""
    base_url: str = "http://localhost"
    version: str = "1.0.0"
    app_port: str = "8080"


_ENV_KEYS = {
    "app_name": "APPLICATION_NAME",
    "app_env": "APP_ENV",
    "base_url": "BASE_URL",
    "version": "VERSION",
    "app_port": "APP_PORT",
}


def read(env_file: str | os.PathLike[str] = ".env") -> Config:
    """Load settings from env_file, with environment variables taking precedence.

    A missing or unreadable file is logged, not raised; defaults then apply.
    """
    path = Path(env_file)
    try:
        if not path.is_file():
            raise FileNotFoundError(f"open {path}: no such file or directory")
        load_dotenv(path, override=False)
    except (OSError, UnicodeDecodeError) as exc:
        fields = logger.set_formatter("", 0, ".env", None)
        logger.new_logger().error(str(exc), extra={"fields": fields})

    defaults = Config()
    return Config(
        **{attr: os.environ.get(key) or getattr(defaults, attr) for attr, key in _ENV_KEYS.items()}
    )


def timeout() -> timedelta:
    """The HTTP client timeout from HTTP_CLIENT_TIMEOUT seconds; zero if unset or invalid."""
    try:
        seconds = int(os.environ.get("HTTP_CLIENT_TIMEOUT", "").strip())
    except ValueError:
        seconds = 0
    return timedelta(seconds=seconds)