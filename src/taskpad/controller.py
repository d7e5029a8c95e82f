"""Application state controller.

TodoApp owns the in-memory task collection. Each public method applies one
user intent: mutate the collection, persist it, then re-render the board.
"""

import logging
from datetime import datetime
from typing import Callable

from .core.derive import calculate_priority
from .core.query import SORT_CREATED, TaskStats, get_task_stats
from .core.tasks import Task, TaskInput, create_task, parse_due_date, parse_tags, validate_task
from .core.view import BoardView, Notice, Severity, build_board
from .ports.presenter import Presenter
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)


def _plural(count: int) -> str:
    return "s" if count != 1 else ""


class TodoApp:
    """Task list state machine driven by user intents."""

    def __init__(
        self,
        store: TaskStore,
        presenter: Presenter,
        clock: Callable[[], datetime] = datetime.now,
        sort_by: str = SORT_CREATED,
        tag_filter: str = "",
    ):
        self.store = store
        self.presenter = presenter
        self.clock = clock
        self.sort_by = sort_by
        self.tag_filter = tag_filter
        self.tasks: list[Task] = store.load_tasks()
        self.dark_mode = store.load_dark_mode()
        logger.debug(f"Loaded {len(self.tasks)} tasks (dark mode: {self.dark_mode})")

    # ============== Lookup ==============

    def find(self, task_id: str) -> Task | None:
        return next((t for t in self.tasks if t.id == task_id), None)

    def match_ids(self, prefix: str) -> list[str]:
        """Ids starting with prefix; an exact match wins outright. An empty prefix matches nothing."""
        if not prefix:
            return []
        if self.find(prefix):
            return [prefix]
        return [t.id for t in self.tasks if t.id.startswith(prefix)]

    def edit_form(self, task_id: str) -> TaskInput | None:
        """Form pre-filled with a task's current values."""
        task = self.find(task_id)
        if not task:
            return None
        return TaskInput(
            text=task.text,
            due_date=task.due_date.isoformat() if task.due_date else "",
            tags=" ".join(task.tags),
        )

    # ============== Intents ==============

    def submit(self, form: TaskInput) -> Task | None:
        """Validate and add a new task at the front of the list."""
        validation = validate_task(form)
        if not validation.valid:
            self._notify(", ".join(validation.errors), Severity.ERROR)
            return None

        task = create_task(form.text, form.due_date, form.tags, now=self.clock())
        self.tasks.insert(0, task)
        logger.debug(f"Created task {task.id}")
        self._save_and_render()
        self._call_presenter("clear_form")
        self._notify("Task added successfully!")
        return task

    def toggle(self, task_id: str, completed: bool) -> bool:
        task = self.find(task_id)
        if not task:
            return False

        task.completed = completed
        task.priority = calculate_priority(task.due_date, self.clock())
        self._save_and_render()
        self._notify("Task completed!" if completed else "Task marked as pending")
        return True

    def edit(self, task_id: str, form: TaskInput) -> bool:
        """Overwrite text, due date and tags; id and creation time are kept."""
        task = self.find(task_id)
        if not task:
            return False

        validation = validate_task(form)
        if not validation.valid:
            self._notify(", ".join(validation.errors), Severity.ERROR)
            return False

        task.text = form.text.strip()
        task.due_date = parse_due_date(form.due_date)
        task.tags = parse_tags(form.tags)
        task.priority = calculate_priority(task.due_date, self.clock())
        self._save_and_render()
        self._notify("Task updated successfully!")
        return True

    def delete(self, task_id: str) -> bool:
        if not self.find(task_id):
            return False

        self.tasks = [t for t in self.tasks if t.id != task_id]
        self._save_and_render()
        self._notify("Task deleted successfully!")
        return True

    def clear_completed(self) -> int:
        """Remove all completed tasks. Returns how many were removed."""
        completed_count = sum(1 for t in self.tasks if t.completed)
        if completed_count == 0:
            self._notify("No completed tasks to clear", Severity.WARNING)
            return 0

        self.tasks = [t for t in self.tasks if not t.completed]
        self._save_and_render()
        self._notify(f"{completed_count} completed task{_plural(completed_count)} cleared!")
        return completed_count

    def change_view(self, tag_filter: str | None = None, sort_by: str | None = None) -> None:
        """Update filter and/or sort, then re-render. Nothing is persisted."""
        if tag_filter is not None:
            self.tag_filter = tag_filter
        if sort_by is not None:
            self.sort_by = sort_by
        self.render()

    def change_filter(self, tag_filter: str) -> None:
        self.change_view(tag_filter=tag_filter)

    def change_sort(self, sort_by: str) -> None:
        self.change_view(sort_by=sort_by)

    def toggle_theme(self) -> bool:
        """Flip and persist the dark-mode preference."""
        self.dark_mode = not self.dark_mode
        self.store.save_dark_mode(self.dark_mode)
        self._notify("Dark mode enabled" if self.dark_mode else "Light mode enabled")
        return self.dark_mode

    # ============== View ==============

    def board(self) -> BoardView:
        return build_board(
            self.tasks,
            now=self.clock(),
            tag_filter=self.tag_filter,
            sort_by=self.sort_by,
            dark_mode=self.dark_mode,
        )

    def stats(self) -> TaskStats:
        return get_task_stats(self.tasks, self.clock())

    def render(self) -> None:
        board = self.board()
        self._call_presenter("render", board)
        logger.debug(f"Task statistics: {board.stats}")

    # ============== Internals ==============

    def _save_and_render(self) -> None:
        self.store.save_tasks(self.tasks)
        self.render()

    def _notify(self, message: str, severity: Severity = Severity.SUCCESS) -> None:
        self._call_presenter("notify", Notice(message, severity))

    def _call_presenter(self, method: str, *args) -> None:
        """Presenter failures are logged; the state change already happened."""
        try:
            getattr(self.presenter, method)(*args)
        except Exception:
            logger.exception(f"Presenter failed during {method}")
