"""Task lifecycle — the two-state completion machine.

A task starts ``incomplete`` and moves to ``complete`` when marked done.
Marking a complete task again keeps it ``complete`` and refreshes its
completion timestamp. Nothing moves a task back to ``incomplete``; the
repository has no operation that clears ``done``.
"""

from __future__ import annotations

from enum import StrEnum


class TaskState(StrEnum):
    """Completion state of a task, derived from its ``done`` flag."""

    INCOMPLETE = "incomplete"
    COMPLETE = "complete"


def state_for(done: bool) -> TaskState:
    """Map the persisted ``done`` flag onto a :class:`TaskState`."""
    return TaskState.COMPLETE if done else TaskState.INCOMPLETE
