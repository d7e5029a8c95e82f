"""Filtering, sorting and statistics over task collections - no I/O."""

import math
from dataclasses import dataclass
from datetime import date, datetime, time

from .derive import calculate_priority
from .tasks import Task

SORT_CREATED = "created"
SORT_DUE_DATE = "dueDate"
SORT_PRIORITY = "priority"
SORT_CRITERIA = (SORT_CREATED, SORT_DUE_DATE, SORT_PRIORITY)


@dataclass
class TaskStats:
    total: int
    completed: int
    pending: int
    overdue: int
    completion_rate: int


def sort_tasks(
    tasks: list[Task],
    criterion: str = SORT_CREATED,
    now: datetime | date | None = None,
) -> list[Task]:
    """
    Return a new list ordered by criterion; the input is left untouched.

    - created: newest first (unknown criteria fall back to this)
    - dueDate: earliest first, undated tasks last
    - priority: overdue, high, medium, low; ties keep input order

    With `now`, priority is derived live from the due date instead of
    the value cached on the task.
    """
    if criterion == SORT_DUE_DATE:
        return sorted(tasks, key=lambda t: (t.due_date is None, t.due_date or date.min))

    if criterion == SORT_PRIORITY:
        if now is None:
            return sorted(tasks, key=lambda t: t.priority.rank)
        return sorted(tasks, key=lambda t: calculate_priority(t.due_date, now).rank)

    return sorted(tasks, key=lambda t: t.created_at, reverse=True)


def filter_tasks_by_tag(tasks: list[Task], tag: str | None) -> list[Task]:
    """Tasks carrying `tag` (case-insensitive). No tag means no filtering."""
    if not tag:
        return tasks
    return [t for t in tasks if t.has_tag(tag)]


def get_all_tags(tasks: list[Task]) -> list[str]:
    """Every distinct tag in use, sorted."""
    return sorted({tag for t in tasks for tag in t.tags})


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_task_stats(tasks: list[Task], now: datetime | date) -> TaskStats:
    """
    Aggregate counts for a collection.

    A pending task is overdue once midnight of its due date has passed.
    """
    if not isinstance(now, datetime):
        now = datetime.combine(now, time.min)
    total = len(tasks)
    completed = sum(1 for t in tasks if t.completed)
    overdue = sum(
        1
        for t in tasks
        if t.due_date and not t.completed and datetime.combine(t.due_date, time.min) < now
    )

    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        overdue=overdue,
        completion_rate=_round_half_up(completed / total * 100) if total else 0,
    )
