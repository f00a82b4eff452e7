"""
Tests for alias stores.

The `store` fixture is parametrized, so each contract test runs against both
the SQLite and the in-memory backend.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from alias_shortener.database.connection import (
    create_sqlite_engine,
    init_db,
    make_session_factory,
)
from alias_shortener.storage.errors import (
    StorageError,
    StorageUnavailableError,
    URLExistsError,
    URLNotFoundError,
)
from alias_shortener.storage.strategies import SQLAlchemyAliasStore


class TestAliasStoreContract:
    """Behaviour every backend must share"""

    def test_round_trip(self, store):
        store.save_url("https://example.com/a/very/long/path?q=1", "abc123")

        assert store.get_url("abc123") == "https://example.com/a/very/long/path?q=1"

    def test_url_stored_verbatim(self, store):
        """The store does not validate or normalize URLs"""
        store.save_url("not a url at all", "raw")

        assert store.get_url("raw") == "not a url at all"

    def test_ids_increase(self, store):
        first = store.save_url("https://example.com/1", "one")
        second = store.save_url("https://example.com/2", "two")

        assert second > first

    def test_same_url_under_two_aliases(self, store):
        store.save_url("https://example.com/", "first")
        store.save_url("https://example.com/", "second")

        assert store.get_url("first") == store.get_url("second")

    def test_duplicate_alias_rejected(self, store):
        store.save_url("u1", "x")

        with pytest.raises(URLExistsError) as exc_info:
            store.save_url("u2", "x")

        assert exc_info.value.alias == "x"
        # No partial overwrite
        assert store.get_url("x") == "u1"

    def test_get_missing(self, store):
        with pytest.raises(URLNotFoundError) as exc_info:
            store.get_url("missing")

        assert exc_info.value.alias == "missing"
        assert "GetURL" in str(exc_info.value)

    def test_lookup_is_exact(self, store):
        store.save_url("https://example.com/", "AbC")

        with pytest.raises(URLNotFoundError):
            store.get_url("abc")
        with pytest.raises(URLNotFoundError):
            store.get_url("Ab")

    def test_not_found_after_delete(self, store):
        store.save_url("https://example.com/", "gone")
        store.delete_url("gone")

        with pytest.raises(URLNotFoundError):
            store.get_url("gone")

    def test_double_delete_fails(self, store):
        store.save_url("https://example.com/", "twice")
        store.delete_url("twice")

        with pytest.raises(URLNotFoundError):
            store.delete_url("twice")

    def test_delete_missing_fails(self, store):
        with pytest.raises(URLNotFoundError):
            store.delete_url("never-saved")

    def test_alias_reusable_after_delete(self, store):
        store.save_url("u1", "reuse")
        store.delete_url("reuse")
        store.save_url("u2", "reuse")

        assert store.get_url("reuse") == "u2"

    def test_delete_leaves_other_aliases(self, store):
        store.save_url("u1", "keep")
        store.save_url("u2", "drop")
        store.delete_url("drop")

        assert store.get_url("keep") == "u1"

    @pytest.mark.parametrize("url, alias", [("", "alias"), ("https://example.com/", "")])
    def test_empty_input_rejected(self, store, url, alias):
        with pytest.raises(ValueError):
            store.save_url(url, alias)

    def test_errors_share_base_class(self, store):
        store.save_url("u1", "dup")

        with pytest.raises(StorageError):
            store.save_url("u2", "dup")
        with pytest.raises(StorageError):
            store.get_url("nope")


class TestAliasStoreConcurrency:
    """Concurrent access from many threads"""

    def test_concurrent_distinct_aliases(self, store):
        count = 40

        def save(i):
            return store.save_url(f"https://example.com/{i}", f"alias{i}")

        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(save, range(count)))

        assert len(set(ids)) == count
        for i in range(count):
            assert store.get_url(f"alias{i}") == f"https://example.com/{i}"

    def test_concurrent_same_alias_has_one_winner(self, store):
        contenders = 8
        barrier = threading.Barrier(contenders)

        def save(i):
            barrier.wait()
            try:
                store.save_url(f"https://example.com/{i}", "race")
                return "saved"
            except URLExistsError:
                return "exists"

        with ThreadPoolExecutor(max_workers=contenders) as pool:
            outcomes = list(pool.map(save, range(contenders)))

        assert outcomes.count("saved") == 1
        assert outcomes.count("exists") == contenders - 1

    def test_concurrent_delete_and_get(self, store):
        rounds = 20

        for i in range(rounds):
            store.save_url(f"https://example.com/{i}", f"del{i}")

        def delete(i):
            store.delete_url(f"del{i}")

        def get(i):
            try:
                return store.get_url(f"del{i}")
            except URLNotFoundError:
                return None

        with ThreadPoolExecutor(max_workers=8) as pool:
            deletes = [pool.submit(delete, i) for i in range(rounds)]
            gets = [pool.submit(get, i) for i in range(rounds)]
            for future in deletes:
                future.result()
            results = [future.result() for future in gets]

        # Each read saw either the whole record or nothing
        for i, result in enumerate(results):
            assert result in (None, f"https://example.com/{i}")


class TestSQLAlchemyAliasStore:
    """SQLite specifics: durability and backend failures"""

    def test_survives_restart(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'durable.db'}"

        engine = create_sqlite_engine(url)
        init_db(engine)
        SQLAlchemyAliasStore(make_session_factory(engine)).save_url("https://example.com/", "keep")
        engine.dispose()

        reopened = create_sqlite_engine(url)
        try:
            store = SQLAlchemyAliasStore(make_session_factory(reopened))
            assert store.get_url("keep") == "https://example.com/"
        finally:
            reopened.dispose()

    def test_init_db_creates_parent_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "storage.db"
        engine = create_sqlite_engine(f"sqlite:///{path}")
        try:
            init_db(engine)
            assert path.exists()
        finally:
            engine.dispose()

    def test_missing_schema_is_unavailable(self, tmp_path):
        """Backend failures are not reported as not-found"""
        engine = create_sqlite_engine(f"sqlite:///{tmp_path / 'empty.db'}")
        store = SQLAlchemyAliasStore(make_session_factory(engine))
        try:
            with pytest.raises(StorageUnavailableError) as exc_info:
                store.get_url("abc")
            assert exc_info.value.__cause__ is not None

            with pytest.raises(StorageUnavailableError):
                store.save_url("https://example.com/", "abc")

            with pytest.raises(StorageUnavailableError):
                store.delete_url("abc")
        finally:
            engine.dispose()

    def test_error_op_names_backend(self, sqlite_store):
        sqlite_store.save_url("u1", "dup")

        with pytest.raises(URLExistsError) as exc_info:
            sqlite_store.save_url("u2", "dup")

        assert exc_info.value.op == "storage.sqlite.SaveURL"
        assert str(exc_info.value) == "storage.sqlite.SaveURL: url exists"
