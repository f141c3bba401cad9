"""Command: mark a task as done."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tasker.commands._base import TaskerCommand

if TYPE_CHECKING:
    from tasker.commands._context import AppContext


@click.command(
    cls=TaskerCommand,
    examples="""\
  tasker done 3
  tasker --json done 3""",
)
@click.argument("task_id", type=int)
@click.pass_obj
def done(app: AppContext, task_id: int) -> None:
    """Mark a task as done.

    A task that is already done is shown as-is and left untouched.
    """
    from tasker.services.tasks import TaskService

    app.emit(TaskService(app.store).complete(task_id))
