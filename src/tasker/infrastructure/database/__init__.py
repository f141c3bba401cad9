"""SQLite database engine and schema via SQLAlchemy Core."""

from tasker.infrastructure.database.engine import create_db_engine, init_database
from tasker.infrastructure.database.schema import metadata, tasks

__all__ = [
    "create_db_engine",
    "init_database",
    "metadata",
    "tasks",
]
