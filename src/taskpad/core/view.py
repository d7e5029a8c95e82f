"""Pure view assembly - what a presenter needs to draw the board."""

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from enum import Enum

from .derive import DueDateStatus, Priority, calculate_priority, format_date, get_due_date_status
from .query import (
    SORT_CREATED,
    TaskStats,
    filter_tasks_by_tag,
    get_all_tags,
    get_task_stats,
    sort_tasks,
)
from .tasks import Task


class Severity(Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Notice:
    """A transient message for the user."""

    message: str
    severity: Severity = Severity.SUCCESS


@dataclass
class TaskView:
    """A task plus its display-only attributes."""

    task: Task
    due_status: DueDateStatus
    formatted_date: str
    priority: Priority

    def to_dict(self) -> dict:
        data = self.task.to_dict()
        data["priority"] = self.priority.value
        data["dueDateStatus"] = {"class": self.due_status.css_class, "text": self.due_status.text}
        data["formattedDate"] = self.formatted_date
        return data


@dataclass
class BoardView:
    """Everything shown on screen for one render."""

    tasks: list[TaskView]
    total: int
    tags: list[str]
    stats: TaskStats
    tag_filter: str = ""
    sort_by: str = SORT_CREATED
    dark_mode: bool = False

    def to_dict(self) -> dict:
        return {
            "tasks": [v.to_dict() for v in self.tasks],
            "total": self.total,
            "tags": list(self.tags),
            "stats": asdict(self.stats),
            "tagFilter": self.tag_filter,
            "sortBy": self.sort_by,
            "darkMode": self.dark_mode,
        }


def build_task_view(task: Task, now: datetime | date) -> TaskView:
    return TaskView(
        task=task,
        due_status=get_due_date_status(task.due_date, now),
        formatted_date=format_date(task.due_date),
        priority=calculate_priority(task.due_date, now),
    )


def build_board(
    tasks: list[Task],
    now: datetime | date,
    tag_filter: str = "",
    sort_by: str = SORT_CREATED,
    dark_mode: bool = False,
) -> BoardView:
    """
    Filter, sort and decorate a collection for display.

    Pure function - the collection is not modified. Counts and the tag
    list always cover the whole collection, not just the visible part.
    """
    visible = sort_tasks(filter_tasks_by_tag(tasks, tag_filter), sort_by, now)
    return BoardView(
        tasks=[build_task_view(t, now) for t in visible],
        total=len(tasks),
        tags=get_all_tags(tasks),
        stats=get_task_stats(tasks, now),
        tag_filter=tag_filter,
        sort_by=sort_by,
        dark_mode=dark_mode,
    )
