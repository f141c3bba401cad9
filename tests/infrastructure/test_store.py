"""Tests for Store — the storage handle lifecycle."""

from pathlib import Path

import pytest
from sqlalchemy import text

from tasker.infrastructure.errors import StorageError, StorageUnavailable
from tasker.infrastructure.repositories.tasks import TaskRepository
from tasker.infrastructure.store import Store


class TestStoreOpen:
    def test_open_creates_database(self, db_path: Path) -> None:
        with Store.open(db_path) as store:
            assert store.path == db_path
            assert db_path.exists()

    def test_reopen_existing(self, db_path: Path) -> None:
        with Store.open(db_path) as first:
            task_id = first.tasks.create("Persisted", "")
        with Store.open(db_path) as second:
            assert second.tasks.find_by_id(task_id).title == "Persisted"

    def test_unavailable_path(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(StorageUnavailable):
            Store.open(blocker / "tasker.db")


class TestStoreHandle:
    def test_tasks_repository_cached(self, store: Store) -> None:
        assert isinstance(store.tasks, TaskRepository)
        assert store.tasks is store.tasks

    def test_connect_and_begin(self, store: Store) -> None:
        with store.connect() as conn:
            assert conn.execute(text("SELECT 1")).scalar() == 1
        with store.begin() as conn:
            assert conn.execute(text("SELECT 2")).scalar() == 2


class TestStoreClose:
    def test_close_is_idempotent(self, db_path: Path) -> None:
        store = Store.open(db_path)
        store.close()
        store.close()
        assert store.closed

    def test_context_manager_closes(self, db_path: Path) -> None:
        with Store.open(db_path) as store:
            assert not store.closed
        assert store.closed

    def test_context_manager_closes_on_error(self, db_path: Path) -> None:
        with pytest.raises(RuntimeError), Store.open(db_path) as store:
            raise RuntimeError("boom")
        assert store.closed

    def test_use_after_close_raises_storage_error(self, db_path: Path) -> None:
        store = Store.open(db_path)
        store.close()
        with pytest.raises(StorageError):
            with store.connect():
                pass
        with pytest.raises(StorageError):
            store.tasks.create("Too late", "")
