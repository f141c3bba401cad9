"""SQLAlchemy Core table definitions for the tasker database.

A single ``tasks`` table. Rows are append-only apart from the in-place
``done`` / ``completed_at`` update performed when a task is completed.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Column, DateTime, Integer, MetaData, Table, Text, func

metadata = MetaData()

tasks = Table(
    "tasks",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
    Column("description", Text, default="", server_default=""),
    Column("done", Boolean, nullable=False, default=False, server_default="0"),
    Column("created_at", DateTime, nullable=False, server_default=func.current_timestamp()),
    Column("completed_at", DateTime),
    # AUTOINCREMENT: ids are never reused, even after the highest row is gone.
    sqlite_autoincrement=True,
)
