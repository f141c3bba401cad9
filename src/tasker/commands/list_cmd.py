"""Command: list all tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tasker.commands._base import TaskerCommand

if TYPE_CHECKING:
    from tasker.commands._context import AppContext


@click.command(
    "list",
    cls=TaskerCommand,
    examples="""\
  tasker list
  tasker --json list
  tasker -q list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all tasks in creation order."""
    from tasker.services.tasks import TaskService

    app.emit(TaskService(app.store).list_tasks())
