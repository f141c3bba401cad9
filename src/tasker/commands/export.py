"""Command: export tasks to CSV."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tasker.commands._base import TaskerCommand

if TYPE_CHECKING:
    from tasker.commands._context import AppContext


@click.command(
    cls=TaskerCommand,
    examples="""\
  tasker export
  tasker export --output ~/Desktop/tasks.csv
  tasker --json export -o backup.csv""",
)
@click.option(
    "-o",
    "--output",
    default=None,
    help="Output CSV file path (default from [export] output, else tasks.csv).",
)
@click.pass_obj
def export(app: AppContext, output: str | None) -> None:
    """Export all tasks to a CSV file, overwriting it if present."""
    from tasker.services.export import ExportService

    destination = Path(output or app.settings.export.output).expanduser()
    app.emit(ExportService(app.store).export_csv(destination))
