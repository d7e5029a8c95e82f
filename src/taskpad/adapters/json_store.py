"""File-based JSON storage adapter."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from taskpad.core.tasks import Task

logger = logging.getLogger(__name__)

TASKS_KEY = "todo-tasks"
DARK_MODE_KEY = "todo-dark-mode"


@dataclass
class StorageInfo:
    task_count: int
    data_size: int
    data_size_kb: str


class JsonTaskStore:
    """
    JSON key-value storage.

    Implements TaskStore protocol. Each fixed key is one JSON file in
    `data_dir`. Failures are logged, never raised.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()

    def _path_for_key(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str):
        """Decoded value for a key, or None if the file does not exist."""
        path = self._path_for_key(key)
        if not path.exists():
            return None
        return json.loads(path.read_text(encoding="utf-8"))

    def _write(self, key: str, value) -> None:
        path = self._path_for_key(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(value), encoding="utf-8")
        tmp.replace(path)

    def save_tasks(self, tasks: list[Task]) -> None:
        """Save the full collection under the tasks key."""
        try:
            self._write(TASKS_KEY, [t.to_dict() for t in tasks])
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Error saving tasks to {self.data_dir}: {e}")

    def load_tasks(self) -> list[Task]:
        """Load the collection. Returns [] if absent or malformed."""
        try:
            data = self._read(TASKS_KEY)
            if data is None:
                return []
            if not isinstance(data, list):
                logger.error(f"Ignoring stored tasks: expected a list, got {type(data).__name__}")
                return []
            return [Task.from_dict(item) for item in data]
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Error loading tasks from {self.data_dir}: {e}")
            return []

    def clear_tasks(self) -> None:
        """Remove the stored collection."""
        try:
            self._path_for_key(TASKS_KEY).unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Error clearing tasks in {self.data_dir}: {e}")

    def load_dark_mode(self) -> bool:
        """Load the dark-mode preference. Returns False if absent or malformed."""
        try:
            value = self._read(DARK_MODE_KEY)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            logger.error(f"Error loading dark mode preference: {e}")
            return False
        return value is True

    def save_dark_mode(self, enabled: bool) -> None:
        """Save the dark-mode preference."""
        try:
            self._write(DARK_MODE_KEY, bool(enabled))
        except OSError as e:
            logger.error(f"Error saving dark mode preference: {e}")

    def get_storage_info(self) -> StorageInfo:
        """Number of stored tasks and the size of their serialized form."""
        tasks = self.load_tasks()
        data_size = len(json.dumps([t.to_dict() for t in tasks]).encode("utf-8"))
        return StorageInfo(
            task_count=len(tasks),
            data_size=data_size,
            data_size_kb=f"{data_size / 1024:.2f}",
        )
