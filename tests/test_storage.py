"""Tests for record stores."""

import threading
from datetime import datetime, timedelta

import pytest

from mutant_detector.errors import StorageError
from mutant_detector.storage import (
    ClassificationRecord,
    InMemoryRecordStore,
    SQLiteRecordStore,
)

NOW = datetime(2024, 1, 15, 12, 30, 0)


def make_record(key="a" * 64, is_mutant=True, grid_size=6, analyzed_at=NOW):
    return ClassificationRecord(
        fingerprint=key,
        is_mutant=is_mutant,
        grid_size=grid_size,
        analyzed_at=analyzed_at,
    )


@pytest.fixture(params=["memory", "sqlite"])
def any_store(request, tmp_path):
    if request.param == "memory":
        store = InMemoryRecordStore()
    else:
        store = SQLiteRecordStore(tmp_path / "records.db")
    yield store
    store.close()


class TestClassificationRecord:
    """Tests for ClassificationRecord."""

    def test_to_dict(self):
        d = make_record().to_dict()
        assert d["fingerprint"] == "a" * 64
        assert d["is_mutant"] is True
        assert d["grid_size"] == 6
        assert d["analyzed_at"] == "2024-01-15T12:30:00"

    def test_from_dict(self):
        record = make_record(is_mutant=False)
        assert ClassificationRecord.from_dict(record.to_dict()) == record

    def test_frozen(self):
        record = make_record()
        with pytest.raises(AttributeError):
            record.is_mutant = False


class TestRecordStoreContract:
    """Behavior shared by every store."""

    def test_find_missing(self, any_store):
        assert any_store.find("missing") is None

    def test_save_and_find(self, any_store):
        record = make_record()
        assert any_store.save(record) == record
        assert any_store.find(record.fingerprint) == record

    def test_duplicate_save_keeps_first(self, any_store):
        first = make_record()
        second = make_record(analyzed_at=NOW + timedelta(seconds=5))

        any_store.save(first)
        stored = any_store.save(second)

        assert stored == first
        assert any_store.find(first.fingerprint) == first
        assert len(any_store) == 1

    def test_count(self, any_store):
        any_store.save(make_record("a" * 64, is_mutant=True))
        any_store.save(make_record("b" * 64, is_mutant=True))
        any_store.save(make_record("c" * 64, is_mutant=False))

        assert any_store.count(True) == 2
        assert any_store.count(False) == 1
        assert len(any_store) == 3

    def test_concurrent_saves_same_key(self, any_store):
        """Racing writers leave exactly one record."""
        errors = []

        def writer(offset):
            try:
                any_store.save(make_record(analyzed_at=NOW + timedelta(seconds=offset)))
            except Exception as exc:  # collected for the assertion below
                errors.append(exc)

        threads = [threading.Thread(target=writer, args=(i,)) for i in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(any_store) == 1

    def test_context_manager(self, any_store):
        with any_store as s:
            assert s is any_store


class TestSQLiteRecordStore:
    """SQLite-specific behavior."""

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "records.db"
        SQLiteRecordStore(path).save(make_record(is_mutant=False))

        reopened = SQLiteRecordStore(path)
        record = reopened.find("a" * 64)

        assert record is not None
        assert record.is_mutant is False
        assert record.analyzed_at == NOW

    def test_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "records.db"
        SQLiteRecordStore(path)
        assert path.exists()

    def test_unopenable_database(self, tmp_path):
        """A directory in place of the database file is a storage failure."""
        with pytest.raises(StorageError):
            SQLiteRecordStore(tmp_path)

    def test_repr(self, tmp_path):
        assert "records.db" in repr(SQLiteRecordStore(tmp_path / "records.db"))

    def test_memory_path_rejected(self):
        """Per-operation connections cannot share an in-memory database."""
        with pytest.raises(ValueError):
            SQLiteRecordStore(":memory:")


class TestInMemoryRecordStore:
    """In-memory specific behavior."""

    def test_repr_reports_size(self):
        store = InMemoryRecordStore()
        store.save(make_record())
        assert repr(store) == "InMemoryRecordStore(records=1)"
