"""Taskpad CLI - a personal task list."""

import json
import logging
import sys
from pathlib import Path

import click

from .adapters.json_store import JsonTaskStore
from .adapters.terminal import TerminalPresenter
from .config import load_config
from .controller import TodoApp
from .core.query import SORT_CRITERIA
from .core.tasks import TaskInput


def _resolve_id(app: TodoApp, prefix: str) -> str:
    """Full task id for a unique prefix, or exit with an error."""
    if not prefix.strip():
        click.echo("Error: task id must not be empty", err=True)
        sys.exit(1)
    matches = app.match_ids(prefix)
    if not matches:
        click.echo(f"Error: no task matches '{prefix}'", err=True)
        sys.exit(1)
    if len(matches) > 1:
        click.echo(f"Error: '{prefix}' is ambiguous ({len(matches)} tasks match)", err=True)
        sys.exit(1)
    return matches[0]


@click.group()
@click.version_option(package_name="taskpad")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for stored tasks (default: $TASKPAD_HOME/data)",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, data_dir: Path | None, debug: bool):
    """Taskpad - tasks with due dates and tags."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )

    config = load_config()
    store = JsonTaskStore(data_dir or config.storage_dir())
    ctx.obj = TodoApp(
        store,
        TerminalPresenter(),
        sort_by=config.default_sort,
        tag_filter=config.default_tag,
    )


@main.command()
@click.argument("text")
@click.option("--due", default="", help="Due date in YYYY-MM-DD")
@click.option("--today", is_flag=True, help="Set the due date to today")
@click.option("--tags", default="", help='Space-separated tags, e.g. "#work #urgent"')
@click.pass_obj
def add(app: TodoApp, text: str, due: str, today: bool, tags: str):
    """Add a new task."""
    if today and not due:
        due = app.clock().date().isoformat()
    if app.submit(TaskInput(text=text, due_date=due, tags=tags)) is None:
        sys.exit(1)


@main.command("list")
@click.option("--tag", default=None, help="Only tasks with this tag")
@click.option("--sort", "sort_by", type=click.Choice(SORT_CRITERIA), default=None, help="Sort order")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_tasks(app: TodoApp, tag: str | None, sort_by: str | None, as_json: bool):
    """List tasks."""
    if as_json:
        if tag is not None:
            app.tag_filter = tag
        if sort_by is not None:
            app.sort_by = sort_by
        click.echo(json.dumps(app.board().to_dict(), indent=2))
        return

    app.change_view(tag_filter=tag, sort_by=sort_by)


@main.command()
@click.argument("task_id")
@click.pass_obj
def done(app: TodoApp, task_id: str):
    """Mark a task as completed."""
    app.toggle(_resolve_id(app, task_id), True)


@main.command()
@click.argument("task_id")
@click.pass_obj
def undo(app: TodoApp, task_id: str):
    """Mark a task as pending again."""
    app.toggle(_resolve_id(app, task_id), False)


@main.command()
@click.argument("task_id")
@click.option("--text", default=None, help="New task text")
@click.option("--due", default=None, help='New due date in YYYY-MM-DD ("" clears it)')
@click.option("--tags", default=None, help='New tags ("" clears them)')
@click.pass_obj
def edit(app: TodoApp, task_id: str, text: str | None, due: str | None, tags: str | None):
    """Edit a task. Options left out keep their current value."""
    full_id = _resolve_id(app, task_id)
    form = app.edit_form(full_id)
    if text is not None:
        form.text = text
    if due is not None:
        form.due_date = due
    if tags is not None:
        form.tags = tags

    if not app.edit(full_id, form):
        sys.exit(1)


@main.command()
@click.argument("task_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def rm(app: TodoApp, task_id: str, yes: bool):
    """Delete a task."""
    full_id = _resolve_id(app, task_id)
    if not yes and not click.confirm("Are you sure you want to delete this task?"):
        return
    app.delete(full_id)


@main.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_obj
def clear(app: TodoApp, yes: bool):
    """Delete all completed tasks."""
    count = sum(1 for t in app.tasks if t.completed)
    if count and not yes:
        plural = "s" if count != 1 else ""
        if not click.confirm(f"Are you sure you want to delete {count} completed task{plural}?"):
            return
    app.clear_completed()


@main.command()
@click.pass_obj
def tags(app: TodoApp):
    """List all tags in use."""
    all_tags = app.board().tags
    if not all_tags:
        click.echo("No tags yet.")
        return
    for tag in all_tags:
        click.echo(tag)


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def stats(app: TodoApp, as_json: bool):
    """Show task statistics."""
    s = app.stats()
    if as_json:
        click.echo(json.dumps(
            {
                "total": s.total,
                "completed": s.completed,
                "pending": s.pending,
                "overdue": s.overdue,
                "completionRate": s.completion_rate,
            },
            indent=2,
        ))
        return

    click.echo(f"Total:     {s.total}")
    click.echo(f"Completed: {s.completed} ({s.completion_rate}%)")
    click.echo(f"Pending:   {s.pending}")
    click.echo(f"Overdue:   {s.overdue}")


@main.command()
@click.pass_obj
def theme(app: TodoApp):
    """Toggle dark mode."""
    app.toggle_theme()


@main.command()
@click.pass_obj
def info(app: TodoApp):
    """Show storage usage."""
    store = app.store
    if not isinstance(store, JsonTaskStore):
        click.echo("Storage info is not available for this store.", err=True)
        sys.exit(1)

    usage = store.get_storage_info()
    click.echo(f"Location: {store.data_dir}")
    click.echo(f"Tasks:    {usage.task_count}")
    click.echo(f"Size:     {usage.data_size_kb} KB ({usage.data_size} bytes)")
