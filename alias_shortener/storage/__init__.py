"""
Alias storage module.

This module implements the Strategy Pattern for pluggable alias stores.
The store owns the alias -> url table and is the only component that
mutates it.
"""

from .errors import (
    StorageError,
    URLNotFoundError,
    URLExistsError,
    StorageUnavailableError,
    AliasGenerationError,
)
from .strategies import (
    URLSaver,
    URLGetter,
    URLDeleter,
    AliasStore,
    SQLAlchemyAliasStore,
    InMemoryAliasStore,
)
from .factory import AliasStoreFactory, AliasStoreBackend

__all__ = [
    "StorageError",
    "URLNotFoundError",
    "URLExistsError",
    "StorageUnavailableError",
    "AliasGenerationError",
    "URLSaver",
    "URLGetter",
    "URLDeleter",
    "AliasStore",
    "SQLAlchemyAliasStore",
    "InMemoryAliasStore",
    "AliasStoreFactory",
    "AliasStoreBackend",
]
