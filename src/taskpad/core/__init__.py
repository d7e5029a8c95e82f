"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskInput, ValidationResult, create_task, parse_tags, validate_task
from .derive import Priority, DueDateStatus, calculate_priority, get_due_date_status, format_date
from .query import TaskStats, sort_tasks, filter_tasks_by_tag, get_all_tags, get_task_stats
from .view import BoardView, TaskView, Notice, Severity, build_board

__all__ = [
    # Tasks
    "Task",
    "TaskInput",
    "ValidationResult",
    "create_task",
    "parse_tags",
    "validate_task",
    # Derived attributes
    "Priority",
    "DueDateStatus",
    "calculate_priority",
    "get_due_date_status",
    "format_date",
    # Queries
    "TaskStats",
    "sort_tasks",
    "filter_tasks_by_tag",
    "get_all_tags",
    "get_task_stats",
    # View
    "BoardView",
    "TaskView",
    "Notice",
    "Severity",
    "build_board",
]
