import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .repository import DEFAULT_STATE_FILE

DEFAULT_LOG_FILE = "pomodoros.log"
NOTIFIERS = ("tray", "bell", "none")


@dataclass(frozen=True)
class Settings:
    state_file: str = DEFAULT_STATE_FILE
    log_file: str = DEFAULT_LOG_FILE
    notifier: str = "tray"
    log_level: str = "INFO"


def load_settings(dotenv_path: Optional[str] = ".env") -> Settings:
    """Read settings from the environment, after merging in a .env file if present."""
    if dotenv_path:
        load_dotenv(dotenv_path=dotenv_path)

    notifier = os.getenv("POMODORO_NOTIFIER", "tray").strip().lower()
    if notifier not in NOTIFIERS:
        raise ConfigError(f"POMODORO_NOTIFIER must be one of {', '.join(NOTIFIERS)}, got {notifier!r}")

    log_level = os.getenv("POMODORO_LOG_LEVEL", "INFO").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"unknown POMODORO_LOG_LEVEL {log_level!r}")

    return Settings(
        state_file=os.getenv("POMODORO_STATE_FILE", DEFAULT_STATE_FILE),
        log_file=os.getenv("POMODORO_LOG_FILE", DEFAULT_LOG_FILE),
        notifier=notifier,
        log_level=log_level,
    )
