"""Derived task attributes - pure functions of a due date and "now"."""

import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum


class Priority(Enum):
    """Urgency derived from a task's due date."""

    OVERDUE = "overdue"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort rank, most urgent first."""
        return PRIORITY_RANK[self]


PRIORITY_RANK = {
    Priority.OVERDUE: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


@dataclass(frozen=True)
class DueDateStatus:
    """Display classification of a due date."""

    css_class: str = ""
    text: str = ""


def _as_datetime(now: datetime | date) -> datetime:
    if isinstance(now, datetime):
        return now
    return datetime.combine(now, time.min)


def days_until_due(due_date: date | None, now: datetime | date) -> int | None:
    """
    Whole days from now until midnight of the due date, rounded up.

    Negative when overdue, None without a due date.
    """
    if due_date is None:
        return None
    due_midnight = datetime.combine(due_date, time.min)
    return math.ceil((due_midnight - _as_datetime(now)) / timedelta(days=1))


def calculate_priority(due_date: date | None, now: datetime | date) -> Priority:
    """
    Priority tier for a due date.

    Due today or tomorrow is HIGH, within 3 days MEDIUM, anything later
    (or no due date) LOW.
    """
    days = days_until_due(due_date, now)
    if days is None:
        return Priority.LOW
    if days < 0:
        return Priority.OVERDUE
    if days <= 1:
        return Priority.HIGH
    if days <= 3:
        return Priority.MEDIUM
    return Priority.LOW


def get_due_date_status(due_date: date | None, now: datetime | date) -> DueDateStatus:
    """Human-readable due status sharing the day arithmetic of calculate_priority."""
    days = days_until_due(due_date, now)
    if days is None:
        return DueDateStatus()

    if days < 0:
        overdue_by = abs(days)
        plural = "s" if overdue_by != 1 else ""
        return DueDateStatus("overdue", f"Overdue by {overdue_by} day{plural}")
    if days == 0:
        return DueDateStatus("due-soon", "Due today")
    if days == 1:
        return DueDateStatus("due-soon", "Due tomorrow")
    if days <= 3:
        return DueDateStatus("due-soon", f"Due in {days} days")
    return DueDateStatus("", f"Due {days} days")


def format_date(value: date | str | None) -> str:
    """Render a date as "Mon D, YYYY"; empty input gives an empty string."""
    if not value:
        return ""
    if isinstance(value, str):
        value = date.fromisoformat(value.split("T")[0])
    return f"{value.strftime('%b')} {value.day}, {value.year}"
