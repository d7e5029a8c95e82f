"""Configuration management for Taskpad."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.query import SORT_CREATED, SORT_CRITERIA

logger = logging.getLogger(__name__)

TASKPAD_HOME = Path(os.environ.get("TASKPAD_HOME", Path.home() / "taskpad"))
CONFIG_FILE = TASKPAD_HOME / "config" / "taskpad.conf"
DATA_DIR = TASKPAD_HOME / "data"


@dataclass
class Config:
    """Taskpad configuration."""

    data_dir: str = ""
    default_sort: str = SORT_CREATED
    default_tag: str = ""

    def storage_dir(self) -> Path:
        """Directory holding the stored tasks."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if " #" in value:
        value = value.split(" #")[0].strip()
    return value


def load_config(config_file: Path = CONFIG_FILE) -> Config:
    """Load configuration from taskpad.conf."""
    config = Config()

    if not config_file.exists():
        return config

    for line in config_file.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "default_sort":
                if value in SORT_CRITERIA:
                    config.default_sort = value
                else:
                    logger.warning(f"Unknown DEFAULT_SORT '{value}', using '{SORT_CREATED}'")
            case "default_tag":
                config.default_tag = value.lower()

    return config
