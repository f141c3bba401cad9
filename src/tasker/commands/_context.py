"""Per-invocation state handed to every command as ``ctx.obj``.

Holds the resolved settings, opens the store on first use, and turns
service results into output and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from tasker.config.logging import configure_logging
from tasker.infrastructure.errors import StorageUnavailable
from tasker.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from tasker.config.settings import TaskerSettings
    from tasker.infrastructure.store import Store
    from tasker.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class AppContext:
    """Settings plus the lazily opened store for one CLI run.

    The store is opened on first use so ``--help`` and ``--version``
    never touch the database, and closed by :meth:`close`, which the
    root group registers with ``ctx.call_on_close``.
    """

    def __init__(self, settings: TaskerSettings) -> None:
        self.settings = settings
        self._store: Store | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def store(self) -> Store:
        """The open store (created lazily on first access)."""
        if self._store is None:
            from tasker.infrastructure.store import Store

            path = self.settings.database_path
            try:
                self._store = Store.open(path)
            except StorageUnavailable as exc:
                logger.debug("store.unavailable", path=str(path), error=str(exc))
                raise click.ClickException(str(exc)) from exc
        return self._store

    def close(self) -> None:
        """Release the store if it was opened."""
        if self._store is not None:
            self._store.close()
            self._store = None

    def emit(self, result: ServiceResult) -> None:
        """Print *result*: stdout on success, stderr and exit status 1 on failure."""
        modes = self.settings.model_dump(include={"json_output", "quiet", "verbose"})
        rendered = format_result(result, settings=OutputSettings(**modes))
        click.echo(rendered, err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
