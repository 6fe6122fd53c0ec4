"""Configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .errors import ConfigError

LOGGER = logging.getLogger(__name__)

ENV_FILE_NAME = ".env"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3002
TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class Config:
    slack_signing_secret: str
    slack_bot_token: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    process_before_response: bool = False
    log_level: str = "INFO"


def load_config(env_file: Path | str | None = None) -> Config:
    """Load Message Relay configuration from the environment and an optional .env file."""
    _load_env_file(Path(env_file).expanduser() if env_file else Path.cwd() / ENV_FILE_NAME)

    return Config(
        slack_signing_secret=_require_env("SLACK_SIGNING_SECRET"),
        slack_bot_token=_require_env("SLACK_BOT_TOKEN"),
        host=os.getenv("HOST") or DEFAULT_HOST,
        port=_load_port(),
        process_before_response=_env_flag("SLACK_PROCESS_BEFORE_RESPONSE"),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.warning("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)


def _require_env(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise ConfigError(f"{name} is not set")
    return value


def _load_port() -> int:
    raw_value = os.getenv("PORT")
    if not raw_value:
        return DEFAULT_PORT
    try:
        port = int(raw_value)
    except ValueError as exc:
        raise ConfigError(f"PORT must be an integer, got {raw_value!r}") from exc
    if not 0 < port < 65536:
        raise ConfigError(f"PORT out of range: {port}")
    return port


def _env_flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in TRUE_VALUES
