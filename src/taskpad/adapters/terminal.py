"""Terminal presenter - draws the board with click."""

import click

from taskpad.core.view import BoardView, Notice, Severity, TaskView

ID_WIDTH = 8

_STATUS_COLORS = {
    "overdue": "red",
    "due-soon": "yellow",
}

_NOTICE_STYLES = {
    Severity.SUCCESS: ("✓", "green"),
    Severity.ERROR: ("✗", "red"),
    Severity.WARNING: ("!", "yellow"),
}


def format_task_line(view: TaskView) -> str:
    """One styled line per task: checkbox, short id, text, due info, tags."""
    task = view.task
    checkbox = "[x]" if task.completed else "[ ]"
    text = click.style(task.text, dim=task.completed, strikethrough=task.completed)
    parts = [f"{checkbox} {task.id[:ID_WIDTH]:<{ID_WIDTH}}  {text}"]

    if task.due_date:
        due = f"{view.formatted_date} - {view.due_status.text}"
        color = _STATUS_COLORS.get(view.due_status.css_class)
        parts.append(click.style(due, fg=color) if color else due)

    if task.tags:
        parts.append(click.style(" ".join(task.tags), fg="cyan"))

    return "  ".join(parts)


class TerminalPresenter:
    """
    Terminal presenter.

    Implements Presenter protocol. No business logic - just output.
    """

    def __init__(self, color: bool | None = None):
        self.color = color

    def render(self, board: BoardView) -> None:
        header = f"Tasks ({board.total})"
        if board.tag_filter:
            header += f" - tagged {board.tag_filter}"
        click.echo(click.style(header, bold=True), color=self.color)

        if not board.tasks:
            click.echo("No tasks yet", color=self.color)
            click.echo("Add your first task to get started!", color=self.color)
            return

        for view in board.tasks:
            click.echo(format_task_line(view), color=self.color)

    def notify(self, notice: Notice) -> None:
        symbol, color = _NOTICE_STYLES[notice.severity]
        click.echo(
            click.style(f"{symbol} {notice.message}", fg=color),
            err=notice.severity is Severity.ERROR,
            color=self.color,
        )

    def clear_form(self) -> None:
        # Each command is a fresh form; nothing to reset.
        pass
