"""TaskService — add, get, list, and complete tasks."""

from __future__ import annotations

import structlog

from tasker.domain.lifecycle import TaskState
from tasker.infrastructure.errors import TaskerError
from tasker.services.base import BaseService
from tasker.services.result import ServiceResult

logger = structlog.get_logger(__name__)


class TaskService(BaseService):
    """Task lifecycle operations over the task repository."""

    def add(self, title: str, description: str = "") -> ServiceResult:
        """Create a task and return its stored representation."""
        op = "add"
        repo = self._store.tasks
        try:
            task_id = repo.create(title, description)
            task = repo.find_by_id(task_id)
        except TaskerError as exc:
            return self._failure(op, exc)

        logger.info("task.added", task_id=task_id)
        return ServiceResult(ok=True, op=op, data=task.to_payload())

    def get(self, task_id: int) -> ServiceResult:
        op = "get"
        try:
            task = self._store.tasks.find_by_id(task_id)
        except TaskerError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=task.to_payload())

    def list_tasks(self) -> ServiceResult:
        """All tasks in creation order."""
        op = "list"
        try:
            task_list = self._store.tasks.list_all()
        except TaskerError as exc:
            return self._failure(op, exc)

        items = [task.to_payload() for task in task_list]
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    def complete(self, task_id: int) -> ServiceResult:
        """Mark a task done unless it already is.

        Find first, then decide: a missing task is reported without any
        write, and an already-complete task is returned unchanged
        (``already_done``). Only an incomplete task reaches
        :meth:`TaskRepository.mark_done`. The find and the update are
        separate round trips, not one transaction.
        """
        op = "done"
        repo = self._store.tasks
        try:
            task = repo.find_by_id(task_id)
            if task.state is TaskState.COMPLETE:
                return ServiceResult(
                    ok=True,
                    op=op,
                    data={**task.to_payload(), "already_done": True},
                )
            task = repo.mark_done(task_id)
        except TaskerError as exc:
            return self._failure(op, exc)

        logger.info("task.completed", task_id=task_id)
        return ServiceResult(ok=True, op=op, data={**task.to_payload(), "already_done": False})

    def mark_done(self, task_id: int) -> ServiceResult:
        """Unconditionally mark a task done, refreshing ``completed_at``."""
        op = "mark_done"
        try:
            task = self._store.tasks.mark_done(task_id)
        except TaskerError as exc:
            return self._failure(op, exc)
        return ServiceResult(ok=True, op=op, data=task.to_payload())
