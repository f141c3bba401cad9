"""Command: add a new task."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tasker.commands._base import TaskerCommand

if TYPE_CHECKING:
    from tasker.commands._context import AppContext


@click.command(
    cls=TaskerCommand,
    examples="""\
  tasker add "Buy groceries"
  tasker add "Finish project" --description "Complete the final report"
  tasker --json add "Walk dog" -d "Before 8am" """,
)
@click.argument("title")
@click.option("-d", "--description", default="", help="Task description.")
@click.pass_obj
def add(app: AppContext, title: str, description: str) -> None:
    """Add a new task to your task list."""
    from tasker.services.tasks import TaskService

    app.emit(TaskService(app.store).add(title, description))
