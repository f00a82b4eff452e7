"""
Factory for creating alias store instances.
Simple, clean factory with singleton caching.
"""

from enum import Enum
from .strategies import AliasStore, SQLAlchemyAliasStore, InMemoryAliasStore
from alias_shortener.config import settings
from alias_shortener.database.connection import (
    create_sqlite_engine,
    init_db,
    make_session_factory,
)


class AliasStoreBackend(Enum):
    """Available alias store backends"""
    SQLITE = "sqlite"
    MEMORY = "memory"


class AliasStoreFactory:
    """
    Simple factory for creating alias store instances.

    Gets configuration from settings (not passed as parameters).
    """

    _instance: AliasStore = None  # Single cached instance

    @classmethod
    def create(cls, backend: AliasStoreBackend) -> AliasStore:
        """
        Create or return cached alias store instance.

        Args:
            backend: Type of store backend (from enum)

        Returns:
            Singleton alias store instance
        """
        # Return cached instance if exists
        if cls._instance is not None:
            return cls._instance

        if backend == AliasStoreBackend.SQLITE:
            engine = create_sqlite_engine(
                settings.database_url, timeout=settings.storage_timeout
            )
            init_db(engine)
            cls._instance = SQLAlchemyAliasStore(make_session_factory(engine))

        elif backend == AliasStoreBackend.MEMORY:
            cls._instance = InMemoryAliasStore()

        else:
            raise ValueError(f"Unknown storage backend: {backend}")

        return cls._instance

    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
