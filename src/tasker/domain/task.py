"""Task — the sole persisted entity.

``completed_at`` is an explicit optional: ``None`` means "never marked
done", never an epoch-zero placeholder.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from tasker.domain.lifecycle import TaskState, state_for

# 24-hour, zero-padded, no timezone offset.
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value: datetime | None) -> str:
    """Render *value* as ``YYYY-MM-DD HH:MM:SS``; empty string when absent."""
    if value is None:
        return ""
    return value.strftime(TIMESTAMP_FORMAT)


class Task(BaseModel):
    """A tracked unit of work as stored in the ``tasks`` table."""

    model_config = {"frozen": True}

    id: int
    title: str
    description: str = ""
    done: bool = False
    created_at: datetime
    completed_at: datetime | None = None

    @property
    def state(self) -> TaskState:
        return state_for(self.done)

    def to_payload(self) -> dict[str, Any]:
        """Flatten into a JSON-friendly dict with formatted timestamps."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "done": self.done,
            "created_at": format_timestamp(self.created_at),
            "completed_at": format_timestamp(self.completed_at) or None,
        }
