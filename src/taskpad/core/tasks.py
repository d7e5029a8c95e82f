"""Pure task domain logic - no I/O dependencies."""

import secrets
import time
from dataclasses import dataclass, field
from datetime import date, datetime

from .derive import Priority, calculate_priority

MAX_TEXT_LENGTH = 500
MAX_TAGS = 10

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


@dataclass
class Task:
    """A to-do item with an optional deadline and tags."""

    id: str
    text: str
    completed: bool = False
    due_date: date | None = None
    tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    priority: Priority = Priority.LOW

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def to_dict(self) -> dict:
        """Serialize using the persisted (camelCase) field names."""
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "dueDate": self.due_date.isoformat() if self.due_date else "",
            "tags": list(self.tags),
            "createdAt": self.created_at.isoformat(),
            "priority": self.priority.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """
        Create Task from its persisted form.

        Raises TypeError or ValueError for records that do not hold a
        well-formed task.
        """
        text = data["text"]
        if not isinstance(text, str):
            raise TypeError(f"Task text must be a string, got {type(text).__name__}")

        completed = data.get("completed", False)
        if not isinstance(completed, bool):
            raise TypeError(f"Task completed flag must be a boolean, got {type(completed).__name__}")

        tags = data.get("tags") or []
        if not isinstance(tags, list):
            raise TypeError(f"Task tags must be a list, got {type(tags).__name__}")
        if not all(isinstance(tag, str) and tag.startswith("#") and len(tag.split()) == 1 for tag in tags):
            raise ValueError(f"Task tags must be strings starting with '#': {tags!r}")

        created_at = datetime.fromisoformat(data["createdAt"].replace("Z", "+00:00"))
        if created_at.tzinfo is not None:
            # Older records carry UTC stamps; keep everything naive local time
            created_at = created_at.astimezone().replace(tzinfo=None)
        return cls(
            id=str(data["id"]),
            text=text,
            completed=completed,
            due_date=parse_due_date(data.get("dueDate")),
            tags=parse_tags(" ".join(tags)),
            created_at=created_at,
            priority=Priority(data.get("priority", Priority.LOW.value)),
        )


@dataclass
class TaskInput:
    """Raw form input for creating or editing a task."""

    text: str = ""
    due_date: str = ""
    tags: str = ""


@dataclass
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Millisecond timestamp prefix plus a random suffix, both base36."""
    return _to_base36(time.time_ns() // 1_000_000) + _to_base36(secrets.randbits(52))


def parse_due_date(value: date | str | None) -> date | None:
    """
    Parse a due date given as a date or an ISO string.

    Empty values mean no due date. Raises ValueError for unparseable text.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip().split("T")[0])


def parse_tags(tags_input: str | None) -> list[str]:
    """
    Extract tags from free text like "#work #Urgent #work".

    Keeps whitespace-separated tokens starting with "#", lower-cased,
    first occurrence wins.
    """
    if not tags_input or not isinstance(tags_input, str):
        return []

    tags: list[str] = []
    for token in tags_input.split():
        if not token.startswith("#"):
            continue
        tag = token.lower()
        if tag not in tags:
            tags.append(tag)
    return tags


def validate_task(candidate: TaskInput) -> ValidationResult:
    """Collect every validation error for a task form, in a fixed order."""
    errors = []
    text = (candidate.text or "").strip()

    if not text:
        errors.append("Task text is required")

    if len(text) > MAX_TEXT_LENGTH:
        errors.append(f"Task text must be less than {MAX_TEXT_LENGTH} characters")

    if candidate.due_date:
        try:
            parse_due_date(candidate.due_date)
        except (TypeError, ValueError):
            errors.append("Invalid due date format")

    if len(parse_tags(candidate.tags)) > MAX_TAGS:
        errors.append(f"Maximum {MAX_TAGS} tags allowed")

    return ValidationResult(valid=not errors, errors=errors)


def create_task(
    text: str,
    due_date: date | str | None = None,
    tags_input: str = "",
    now: datetime | None = None,
) -> Task:
    """
    Build a new task from already-validated input.

    Length and tag-count limits are the caller's job (see validate_task).
    """
    now = now or datetime.now()
    due = parse_due_date(due_date)
    return Task(
        id=generate_id(),
        text=text.strip(),
        completed=False,
        due_date=due,
        tags=parse_tags(tags_input),
        created_at=now,
        priority=calculate_priority(due, now),
    )
