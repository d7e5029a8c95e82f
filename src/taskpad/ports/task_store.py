"""Task storage interface."""

from typing import Protocol

from taskpad.core.tasks import Task


class TaskStore(Protocol):
    """
    Durable home for the task collection and the theme preference.

    Implementations never raise: failures are logged and reads fall back
    to "no prior state".
    """

    def save_tasks(self, tasks: list[Task]) -> None:
        """Persist the whole collection."""
        ...

    def load_tasks(self) -> list[Task]:
        """Load the collection. Returns [] if absent or unreadable."""
        ...

    def clear_tasks(self) -> None:
        """Remove the stored collection."""
        ...

    def load_dark_mode(self) -> bool:
        """Load the dark-mode preference. Returns False if absent."""
        ...

    def save_dark_mode(self, enabled: bool) -> None:
        """Persist the dark-mode preference."""
        ...
