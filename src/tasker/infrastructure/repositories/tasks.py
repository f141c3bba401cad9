"""Task repository — the only code that reads or writes the ``tasks`` table."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from tasker.domain.task import Task
from tasker.infrastructure.database.schema import tasks
from tasker.infrastructure.errors import StorageError, TaskNotFound

if TYPE_CHECKING:
    from collections.abc import Callable

    from sqlalchemy import Row

    from tasker.infrastructure.store import Store

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; larger ids cannot be bound.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1


def _row_to_task(row: Row) -> Task:
    return Task(
        id=row.id,
        title=row.title,
        description=row.description or "",
        done=bool(row.done),
        created_at=row.created_at,
        completed_at=row.completed_at,
    )


def _require_storable(task_id: int) -> None:
    if not SQLITE_INTEGER_MIN <= task_id <= SQLITE_INTEGER_MAX:
        raise TaskNotFound(task_id)


class TaskRepository:
    """Encapsulates SQL for task create/find/list/mark-done.

    Every operation is one self-contained round trip; no locking is added
    on top of what SQLite provides for single-statement writes.
    """

    def __init__(self, store: Store, *, clock: Callable[[], datetime] = datetime.now) -> None:
        self._store = store
        self._clock = clock

    def create(self, title: str, description: str = "") -> int:
        """Insert a new incomplete task and return its assigned id."""
        stmt = insert(tasks).values(
            title=title,
            description=description,
            done=False,
            created_at=self._clock(),
            completed_at=None,
        )
        try:
            with self._store.begin() as conn:
                task_id = int(conn.execute(stmt).inserted_primary_key[0])
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to create task: {exc}") from exc

        logger.debug("Created task %d", task_id)
        return task_id

    def find_by_id(self, task_id: int) -> Task:
        """Return the task with *task_id*.

        Raises:
            TaskNotFound: When no row matches.
            StorageError: When the query fails.
        """
        _require_storable(task_id)
        try:
            with self._store.connect() as conn:
                row = conn.execute(select(tasks).where(tasks.c.id == task_id)).first()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to read task {task_id}: {exc}") from exc

        if row is None:
            raise TaskNotFound(task_id)
        return _row_to_task(row)

    def list_all(self) -> list[Task]:
        """Return every task in insertion order (empty list when none)."""
        try:
            with self._store.connect() as conn:
                rows = conn.execute(select(tasks).order_by(tasks.c.id)).fetchall()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to list tasks: {exc}") from exc
        return [_row_to_task(row) for row in rows]

    def mark_done(self, task_id: int) -> Task:
        """Set ``done`` and stamp ``completed_at`` with the current instant.

        Not guarded on ``done = false``: re-marking a complete task
        refreshes its ``completed_at``.

        Raises:
            TaskNotFound: When no row matches.
            StorageError: When the update fails.
        """
        _require_storable(task_id)
        stmt = (
            update(tasks)
            .where(tasks.c.id == task_id)
            .values(done=True, completed_at=self._clock())
        )
        try:
            with self._store.begin() as conn:
                if conn.execute(stmt).rowcount == 0:
                    raise TaskNotFound(task_id)
                row = conn.execute(select(tasks).where(tasks.c.id == task_id)).one()
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to mark task {task_id} done: {exc}") from exc

        logger.debug("Marked task %d done", task_id)
        return _row_to_task(row)
