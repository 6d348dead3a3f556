"""Configuration management for Yorunote."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.shredder import DEFAULT_SECONDS

logger = logging.getLogger(__name__)

YORUNOTE_HOME = Path(os.environ.get("YORUNOTE_HOME", Path.home() / "yorunote"))
CONFIG_FILE = YORUNOTE_HOME / "config" / "yorunote.conf"
DATA_DIR = YORUNOTE_HOME / "data"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Yorunote configuration."""

    database_path: str = ""
    shredder_seconds: int = DEFAULT_SECONDS
    log_level: str = "WARNING"


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from yorunote.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "database_path":
                config.database_path = value
            case "shredder_seconds":
                try:
                    seconds = int(value)
                except ValueError:
                    logger.warning(f"Ignoring invalid SHREDDER_SECONDS: {value!r}")
                    continue
                if seconds <= 0:
                    logger.warning(f"Ignoring non-positive SHREDDER_SECONDS: {seconds}")
                    continue
                config.shredder_seconds = seconds
            case "log_level":
                if value.upper() not in LOG_LEVELS:
                    logger.warning(f"Ignoring unknown LOG_LEVEL: {value!r}")
                    continue
                config.log_level = value.upper()
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config
