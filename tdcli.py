#!/usr/bin/env python3
"""tdcli - command line access to Todoist through :mod:`todoist_api`.

The API token is read from ``TODOIST_API_KEY`` (``.todoist.env`` in the
current directory or in $HOME is loaded first).
"""
import functools
import json
import logging
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from todoist_api import Todoist, TodoistError
from todoist_api.utils.logger import configure_logging

app = typer.Typer(
    name="tdcli",
    help="Todoist CLI - Manage Todoist projects, sections and tasks.",
    no_args_is_help=True,
)


def get_client() -> Todoist:
    return Todoist.from_env()


def handle_errors(func):
    """Report client failures on the console and exit with code 1."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except TodoistError as e:
            Console(stderr=True).print(f"❌ {e.message}", style="red")
            raise typer.Exit(code=1)

    return wrapper


def _print_json(rows: List[Dict[str, Any]]) -> None:
    print(json.dumps(rows, indent=2))


def _print_table(title: str, columns: List[str], rows: List[List[Any]]) -> None:
    table = Table(title=title, show_header=True, header_style="bold")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*["-" if value is None else str(value) for value in row])
    Console().print(table)


def _due_label(task: Dict[str, Any]) -> Optional[str]:
    due = task.get("due") or {}
    return due.get("string") or due.get("date")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every API request.")):
    """Todoist CLI - Manage Todoist projects, sections and tasks."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@app.command("projects")
@handle_errors
def list_projects(
    archived: bool = typer.Option(False, "--archived", help="List archived projects instead."),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum number of projects."),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List projects."""
    client = get_client()
    request = {"limit": limit}
    if archived:
        projects = client.projects.get_archived_projects(request)
    else:
        projects = client.projects.get_projects(request)
    rows = [p.to_dict() for p in projects]
    if json_output:
        _print_json(rows)
        return
    _print_table(
        "Archived projects" if archived else "Projects",
        ["ID", "Name", "Color", "Favorite"],
        [[p.id, p.name, p.color, "★" if p.isFavorite else ""] for p in projects],
    )


@app.command("sections")
@handle_errors
def list_sections(
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project ID to list sections of."),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List sections."""
    sections = get_client().sections.get_sections({"projectId": project})
    if json_output:
        _print_json([s.to_dict() for s in sections])
        return
    _print_table(
        "Sections",
        ["ID", "Name", "Project", "Order"],
        [[s.id, s.name, s.projectId, s.order] for s in sections],
    )


@app.command("tasks")
@handle_errors
def list_tasks(
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project ID."),
    section: Optional[str] = typer.Option(None, "--section", "-s", help="Section ID."),
    parent: Optional[str] = typer.Option(None, "--parent", help="Parent task ID."),
    label: Optional[str] = typer.Option(None, "--label", help="Only tasks with this label."),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List active tasks of a project, section or parent task."""
    response = get_client().tasks.get_tasks(
        {"projectId": project, "sectionId": section, "parentId": parent, "label": label}
    )
    # get_tasks hands back the raw body, normally {"results": [...], "next_cursor": ...}
    if isinstance(response, dict):
        tasks = response.get("results") or []
    else:
        tasks = response or []
    if json_output:
        print(json.dumps(tasks, indent=2))
        return
    _print_table(
        "Tasks",
        ["ID", "Task", "Due", "Priority"],
        [[t.get("id"), t.get("content"), _due_label(t), t.get("priority")] for t in tasks],
    )


@app.command("filter")
@handle_errors
def filter_tasks(
    query: str = typer.Argument(..., help='Todoist filter query, e.g. "today | overdue".'),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum number of tasks."),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List tasks matching a Todoist filter query."""
    tasks = get_client().tasks.get_tasks_by_filter({"filter": query, "limit": limit})
    rows = [t.to_dict() for t in tasks]
    if json_output:
        _print_json(rows)
        return
    _print_table(
        f"Tasks matching {query!r}",
        ["ID", "Task", "Due", "Priority"],
        [[r["id"], r.get("content"), _due_label(r), r.get("priority")] for r in rows],
    )


@app.command("completed")
@handle_errors
def list_completed(
    by: str = typer.Option("completionDate", "--by", help="completionDate or dueDate."),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project ID."),
    since: Optional[str] = typer.Option(None, "--since", help="Start of the range (YYYY-MM-DDTHH:MM:SSZ)."),
    until: Optional[str] = typer.Option(None, "--until", help="End of the range (YYYY-MM-DDTHH:MM:SSZ)."),
    limit: Optional[int] = typer.Option(None, "--limit", "-l", help="Maximum number of tasks."),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format."),
):
    """List completed tasks."""
    tasks = get_client().tasks.get_completed_tasks(
        {"sortBy": by, "projectId": project, "since": since, "until": until, "limit": limit}
    )
    if json_output:
        _print_json([t.to_dict() for t in tasks])
        return
    _print_table(
        "Completed tasks",
        ["Task ID", "Task", "Completed"],
        [[t.taskId, t.content, t.completedAt] for t in tasks],
    )


@app.command("add")
@handle_errors
def add_task(
    content: str = typer.Argument(..., help="Task content."),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project ID."),
    section: Optional[str] = typer.Option(None, "--section", "-s", help="Section ID."),
    description: Optional[str] = typer.Option(None, "--description", "-d", help="Task description."),
    due: Optional[str] = typer.Option(None, "--due", help='Due date in natural language ("tomorrow 5pm").'),
    priority: Optional[int] = typer.Option(None, "--priority", min=1, max=4, help="1 (normal) to 4 (urgent)."),
    labels: Optional[List[str]] = typer.Option(None, "--label", help="Label to add; repeat for more."),
):
    """Create a task."""
    task = get_client().tasks.create_task(
        {
            "content": content,
            "projectId": project,
            "sectionId": section,
            "description": description,
            "dueString": due,
            "priority": priority,
            "labels": labels or None,
        }
    )
    Console().print(f"✅ Created task {task.id}: {task.content}", style="green")


@app.command("quick")
@handle_errors
def quick_add(
    text: str = typer.Argument(..., help='Natural language task, e.g. "Call mom tomorrow #Family".'),
    note: Optional[str] = typer.Option(None, "--note", "-n", help="Comment to attach."),
):
    """Quick add a task using Todoist's natural language parser."""
    task = get_client().tasks.quick_add_task({"text": text, "note": note})
    Console().print(f"✅ Created task {task.id}: {task.content}", style="green")


@app.command("close")
@handle_errors
def close(
    task_ids: List[str] = typer.Argument(..., help="One or more task IDs to complete."),
):
    """Mark tasks as complete."""
    tasks = get_client().tasks
    console = Console()
    for task_id in task_ids:
        tasks.close_task(task_id)
        console.print(f"✔ Closed {task_id}", style="green")


@app.command("reopen")
@handle_errors
def reopen(task_id: str = typer.Argument(..., help="Task ID to reopen.")):
    """Reopen a completed task."""
    task = get_client().tasks.reopen_task(task_id)
    Console().print(f"✔ Reopened {task.id}: {task.content}", style="green")


@app.command("delete")
@handle_errors
def delete(
    task_id: str = typer.Argument(..., help="Task ID to delete."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
):
    """Delete a task."""
    if not yes:
        typer.confirm(f"Delete task {task_id}?", abort=True)
    get_client().tasks.delete_task(task_id)
    Console().print(f"🗑 Deleted {task_id}", style="green")


if __name__ == "__main__":
    app()
