"""The ``tasker`` command: global options, then one subcommand per operation."""

from __future__ import annotations

import click

from tasker import __version__
from tasker.commands import register_commands
from tasker.commands._base import TaskerGroup
from tasker.commands._context import AppContext
from tasker.config.settings import TaskerSettings


@click.group(
    cls=TaskerGroup,
    invoke_without_command=True,
    examples="""\
  tasker add "Buy milk"
  tasker list
  tasker done 1
  tasker export -o tasks.csv
  tasker --db ~/tasks.db list""",
)
@click.version_option(version=__version__, prog_name="tasker")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only ids (or the export path).")
@click.option("-v", "--verbose", is_flag=True, help="Show debug logs and error details.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c", "--config", "config_path", default=None, help="Read settings from this tasker.toml."
)
@click.option("--db", "db_path", default=None, help="Use this database file.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    db_path: str | None,
) -> None:
    """tasker — a simple command-line task manager.

    Add tasks, list them, mark them done, and export them to CSV.
    Tasks are stored locally in a SQLite database.
    """
    settings = TaskerSettings.from_cli(
        config_path=config_path,
        db_path=db_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
