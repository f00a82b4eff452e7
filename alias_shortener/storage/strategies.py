"""
Alias store strategies using Strategy Pattern.

Allows switching between storage backends:
- SQLAlchemyAliasStore: SQLite file (durable, unique constraint on alias)
- InMemoryAliasStore: process-local dict behind a lock (tests, demos)

Each handler depends only on the capability it needs (URLSaver, URLGetter,
URLDeleter); AliasStore implements all three.
"""

import itertools
import threading
from abc import ABC, abstractmethod
from typing import Dict, Protocol, Tuple

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from alias_shortener.models.url import URL
from alias_shortener.storage.errors import (
    StorageUnavailableError,
    URLExistsError,
    URLNotFoundError,
)


class URLSaver(Protocol):
    def save_url(self, url: str, alias: str) -> int: ...


class URLGetter(Protocol):
    def get_url(self, alias: str) -> str: ...


class URLDeleter(Protocol):
    def delete_url(self, alias: str) -> None: ...


def _require(value: str, name: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"{name} must be a non-empty string")


class AliasStore(ABC):
    """
    Abstract base class for alias stores.

    Contract shared by every backend:
    - alias uniqueness is enforced by the store, never by the caller
    - every operation is atomic per alias and safe to call from many threads
    - failures are raised as typed StorageError subclasses; stores never
      log and never retry
    """

    @abstractmethod
    def save_url(self, url: str, alias: str) -> int:
        """
        Persist a new alias -> url record.

        Args:
            url: Target URL (stored as given)
            alias: Alias to register

        Returns:
            Identifier of the new record (monotonically increasing)

        Raises:
            URLExistsError: alias already taken; nothing was written
            StorageUnavailableError: backend failure
        """
        pass

    @abstractmethod
    def get_url(self, alias: str) -> str:
        """
        Look up the URL for an alias (exact, case-sensitive match).

        Raises:
            URLNotFoundError: no record for alias
            StorageUnavailableError: backend failure
        """
        pass

    @abstractmethod
    def delete_url(self, alias: str) -> None:
        """
        Remove the record for an alias.

        Raises:
            URLNotFoundError: no record for alias (deleting twice is an error)
            StorageUnavailableError: backend failure
        """
        pass


class SQLAlchemyAliasStore(AliasStore):
    """
    SQL implementation backed by the `url` table.

    - save is a plain INSERT; the UNIQUE constraint on alias decides the
      winner of concurrent saves and the loser gets URLExistsError
    - delete is a single DELETE whose rowcount tells whether the alias existed
    - each call opens its own session and commits before returning
    """

    def __init__(self, session_factory: sessionmaker, name: str = "sqlite"):
        """
        Args:
            session_factory: Session factory bound to an initialized engine
            name: Backend name used in error op labels
        """
        self.session_factory = session_factory
        self.name = name

    def _op(self, action: str) -> str:
        return f"storage.{self.name}.{action}"

    def save_url(self, url: str, alias: str) -> int:
        op = self._op("SaveURL")
        _require(url, "url")
        _require(alias, "alias")

        record = URL(alias=alias, url=url)
        try:
            with self.session_factory() as session:
                with session.begin():
                    session.add(record)
                    session.flush()  # assigns the id; commit happens on exit
                    record_id = record.id
        except IntegrityError as exc:
            raise URLExistsError(op, alias) from exc
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(op, str(exc), alias=alias) from exc

        return record_id

    def get_url(self, alias: str) -> str:
        op = self._op("GetURL")
        try:
            with self.session_factory() as session:
                url = session.execute(
                    select(URL.url).where(URL.alias == alias)
                ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(op, str(exc), alias=alias) from exc

        if url is None:
            raise URLNotFoundError(op, alias)
        return url

    def delete_url(self, alias: str) -> None:
        op = self._op("DeleteURL")
        try:
            with self.session_factory() as session:
                with session.begin():
                    result = session.execute(
                        delete(URL).where(URL.alias == alias)
                    )
                    deleted = result.rowcount
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(op, str(exc), alias=alias) from exc

        if deleted == 0:
            raise URLNotFoundError(op, alias)


class InMemoryAliasStore(AliasStore):
    """
    Dict-backed store.

    There is no database constraint to lean on, so every operation runs
    under one lock. Contents are lost when the process exits.
    """

    def __init__(self):
        self._records: Dict[str, Tuple[int, str]] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save_url(self, url: str, alias: str) -> int:
        op = "storage.memory.SaveURL"
        _require(url, "url")
        _require(alias, "alias")

        with self._lock:
            if alias in self._records:
                raise URLExistsError(op, alias)
            record_id = next(self._ids)
            self._records[alias] = (record_id, url)
        return record_id

    def get_url(self, alias: str) -> str:
        with self._lock:
            record = self._records.get(alias)
        if record is None:
            raise URLNotFoundError("storage.memory.GetURL", alias)
        return record[1]

    def delete_url(self, alias: str) -> None:
        with self._lock:
            if self._records.pop(alias, None) is None:
                raise URLNotFoundError("storage.memory.DeleteURL", alias)
