"""ExportService — write every task to a CSV file."""

from __future__ import annotations

from pathlib import Path

import structlog

from tasker.infrastructure.csv_export import CsvExporter
from tasker.infrastructure.errors import TaskerError
from tasker.services.base import BaseService
from tasker.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class ExportService(BaseService):
    """Export the task table in portable formats."""

    def export_csv(self, destination: Path) -> ServiceResult:
        """Export all tasks to *destination*, overwriting any existing file."""
        op = "export"
        destination = Path(destination)
        try:
            count = CsvExporter(self._store.tasks).export(destination)
        except TaskerError as exc:
            return self._failure(op, exc)

        logger.info("tasks.exported", path=str(destination), count=count)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(destination.resolve()), "count": count},
        )
