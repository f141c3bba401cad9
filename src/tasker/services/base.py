"""BaseService — foundation for tasker services.

Every service receives the :class:`Store` handle at construction time.
Infrastructure errors are converted to failed :class:`ServiceResult`
values here, so adapters only ever branch on ``result.ok``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from tasker.infrastructure.errors import TaskerError, TaskNotFound
from tasker.services.result import ServiceResult

if TYPE_CHECKING:
    from tasker.infrastructure.store import Store

logger = structlog.get_logger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TaskService(BaseService):
            def add(self, title: str) -> ServiceResult:
                try:
                    task_id = self._store.tasks.create(title)
                except TaskerError as exc:
                    return self._failure("add", exc)
                ...
    """

    def __init__(self, store: Store) -> None:
        self._store = store

    def _failure(self, op: str, exc: TaskerError) -> ServiceResult:
        """Translate an infrastructure error into a failed result.

        NOT_FOUND is an expected outcome and is logged at debug level only.
        """
        detail: dict[str, object] = {}
        if isinstance(exc, TaskNotFound):
            detail["id"] = exc.task_id
            logger.debug("task.not_found", op=op, task_id=exc.task_id)
        else:
            logger.info("service.failed", op=op, code=exc.code, error=str(exc))
        return ServiceResult.failure(op, exc.code, str(exc), **detail)
