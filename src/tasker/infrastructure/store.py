"""Store — the storage handle shared by every repository operation.

The Store is constructed once at CLI startup, owns the SQLAlchemy
engine for the process lifetime, and is released exactly once via
:meth:`Store.close` (or the context-manager protocol). Everything that
touches the database receives the Store explicitly; there is no
module-level connection.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime
from typing import TYPE_CHECKING

from tasker.infrastructure.database.engine import init_database
from tasker.infrastructure.errors import StorageError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path
    from types import TracebackType

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from tasker.infrastructure.repositories.tasks import TaskRepository

logger = logging.getLogger(__name__)


class Store:
    """Handle on an open tasker database file.

    Usage::

        with Store.open(path) as store:
            task_id = store.tasks.create("Buy milk", "")
    """

    def __init__(
        self,
        engine: Engine,
        path: Path,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._engine = engine
        self._path = path
        self._clock = clock
        self._closed = False
        self._tasks: TaskRepository | None = None

    @classmethod
    def open(cls, path: Path, *, clock: Callable[[], datetime] = datetime.now) -> Store:
        """Initialize the database at *path* and return a handle on it.

        Raises:
            StorageUnavailable: If the file cannot be opened or initialized.
        """
        return cls(init_database(path), path, clock=clock)

    @property
    def path(self) -> Path:
        """Location of the database file."""
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def tasks(self) -> TaskRepository:
        """The task repository bound to this handle."""
        if self._tasks is None:
            from tasker.infrastructure.repositories.tasks import TaskRepository

            self._tasks = TaskRepository(self, clock=self._clock)
        return self._tasks

    @contextmanager
    def connect(self) -> Iterator[Connection]:
        """Yield a read connection; raises StorageError once closed."""
        self._ensure_open()
        with self._engine.connect() as conn:
            yield conn

    @contextmanager
    def begin(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction (commit on success)."""
        self._ensure_open()
        with self._engine.begin() as conn:
            yield conn

    def close(self) -> None:
        """Release the engine. Subsequent calls are no-ops."""
        if self._closed:
            return
        self._closed = True
        self._engine.dispose()
        logger.debug("Closed store at %s", self._path)

    def __enter__(self) -> Store:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageError(f"Store at {self._path} is closed")
