"""CSV export of the task table.

The file is written to a temporary sibling first and moved over the
destination only once every row is on disk, so a failed export never
leaves a half-written destination behind.
"""

from __future__ import annotations

import csv
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from tasker.domain.task import format_timestamp
from tasker.infrastructure.errors import ExportTargetUnavailable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from tasker.domain.task import Task
    from tasker.infrastructure.repositories.tasks import TaskRepository

logger = logging.getLogger(__name__)

CSV_HEADER: tuple[str, ...] = (
    "ID",
    "Title",
    "Description",
    "Done",
    "Created At",
    "Completed At",
)


def task_to_row(task: Task) -> list[str]:
    """Serialize one task into its six CSV fields."""
    return [
        str(task.id),
        task.title,
        task.description,
        "true" if task.done else "false",
        format_timestamp(task.created_at),
        format_timestamp(task.completed_at),
    ]


def _target_mode(destination: Path) -> int:
    """Permission bits the exported file should end up with.

    An existing destination keeps its mode; a new file gets
    ``0o666`` masked by the process umask, like a plain ``open()``.
    """
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_tasks_csv(task_list: Iterable[Task], destination: Path) -> int:
    """Write *task_list* to *destination*, replacing any existing file.

    Returns the number of task rows written (header excluded).

    Raises:
        ExportTargetUnavailable: The destination directory is missing or
            unwritable, or the destination itself cannot be replaced.
    """
    destination = Path(destination)
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.",
            suffix=".tmp",
            dir=destination.parent,
        )
    except OSError as exc:
        raise ExportTargetUnavailable(destination, exc.strerror or str(exc)) from exc

    tmp_path = Path(tmp_name)
    count = 0
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            os.chmod(tmp_path, _target_mode(destination))
            writer = csv.writer(fh)
            writer.writerow(CSV_HEADER)
            for task in task_list:
                writer.writerow(task_to_row(task))
                count += 1
        os.replace(tmp_path, destination)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise ExportTargetUnavailable(destination, exc.strerror or str(exc)) from exc
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.debug("Exported %d tasks to %s", count, destination)
    return count


class CsvExporter:
    """Reads every task through the repository and writes it as CSV."""

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def export(self, destination: Path) -> int:
        """Export all tasks to *destination*; returns the record count.

        Tasks are fetched before the destination is touched, so a
        ``StorageError`` leaves an existing file as it was.
        """
        task_list = self._repository.list_all()
        return write_tasks_csv(task_list, Path(destination))
