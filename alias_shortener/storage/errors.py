"""
Errors raised by alias stores.

Callers tell user-facing conditions (URLNotFoundError, URLExistsError) apart
from operational ones (StorageUnavailableError) by type.
"""

from typing import Optional


class StorageError(Exception):
    """Base class for store errors."""

    def __init__(self, op: str, message: str, alias: Optional[str] = None):
        self.op = op
        self.alias = alias
        super().__init__(f"{op}: {message}")


class URLNotFoundError(StorageError):
    """No record exists for the alias."""

    def __init__(self, op: str, alias: str):
        super().__init__(op, "url not found", alias=alias)


class URLExistsError(StorageError):
    """A record already exists for the alias."""

    def __init__(self, op: str, alias: str):
        super().__init__(op, "url exists", alias=alias)


class StorageUnavailableError(StorageError):
    """The backend could not complete the operation."""


class AliasGenerationError(StorageError):
    """Every generated alias collided with an existing one."""

    def __init__(self, op: str, attempts: int):
        self.attempts = attempts
        super().__init__(op, f"no free alias after {attempts} attempts")
