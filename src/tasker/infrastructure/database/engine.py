"""Opening the SQLite file and making sure the ``tasks`` table exists.

Connections run in WAL journal mode. Schema setup is ``CREATE TABLE IF
NOT EXISTS``, so it is safe on every start.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from tasker.infrastructure.database.schema import metadata
from tasker.infrastructure.errors import StorageUnavailable

logger = logging.getLogger(__name__)


def create_db_engine(db_path: Path) -> Engine:
    """Engine for the SQLite file at *db_path*; each new connection switches to WAL."""
    engine = create_engine(f"sqlite:///{db_path}")

    @event.listens_for(engine, "connect")
    def _use_wal(dbapi_conn: Any, _record: Any) -> None:
        dbapi_conn.execute("PRAGMA journal_mode=WAL")

    return engine


def init_database(db_path: Path) -> Engine:
    """Open (creating if absent) the database at *db_path* and apply the schema.

    Missing parent directories are created. Idempotent — against an
    already-initialized file this only opens the engine.

    Raises:
        StorageUnavailable: The file cannot be created/opened or the
            schema statement fails.
    """
    try:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageUnavailable(f"Cannot create directory for {db_path}: {exc}") from exc

    engine = create_db_engine(db_path)
    try:
        metadata.create_all(engine)
    except SQLAlchemyError as exc:
        engine.dispose()
        raise StorageUnavailable(f"Cannot initialize database at {db_path}: {exc}") from exc

    logger.debug("Database ready at %s", db_path)
    return engine
