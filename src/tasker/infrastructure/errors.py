"""Error kinds raised by the storage and export layers.

Services translate these into :class:`~tasker.services.result.ServiceError`
codes; nothing here retries or swallows a failure.
"""

from __future__ import annotations

from pathlib import Path


class TaskerError(Exception):
    """Base class for all tasker infrastructure errors."""

    code = "TASKER_ERROR"


class StorageUnavailable(TaskerError):
    """The database file could not be opened or its schema applied."""

    code = "STORAGE_UNAVAILABLE"


class StorageError(TaskerError):
    """A read or write failed after the store was opened."""

    code = "STORAGE_ERROR"


class TaskNotFound(TaskerError):
    """No task exists with the requested id."""

    code = "NOT_FOUND"

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class ExportTargetUnavailable(TaskerError):
    """The export destination could not be created or written."""

    code = "EXPORT_TARGET_UNAVAILABLE"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot write export to {path}: {reason}")
        self.path = path
