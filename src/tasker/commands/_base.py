"""Click classes shared by the tasker group and its commands.

Both accept an ``examples`` string. When given, an eager ``--examples``
flag prints it and exits, so ``--help`` stays short.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Adds the ``--examples`` flag to a click Command or Group."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if value:
            click.echo(f"Examples for '{ctx.command_path}':\n\n{self.examples}")
            ctx.exit(0)


class TaskerCommand(_ExamplesMixin, click.Command):
    pass


class TaskerGroup(_ExamplesMixin, click.Group):
    """Group whose subcommands default to :class:`TaskerCommand`."""

    command_class = TaskerCommand
