"""Subcommand modules for tasker.

Provides register_commands() which uses deferred imports to keep
``tasker --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from tasker.commands.add import add
    from tasker.commands.done import done
    from tasker.commands.export import export
    from tasker.commands.list_cmd import list_cmd

    cli.add_command(add)
    cli.add_command(list_cmd)
    cli.add_command(done)
    cli.add_command(export)
