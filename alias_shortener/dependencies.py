"""
FastAPI dependencies for dependency injection.

This module provides the singleton store, generator and service injected
into routes. Routes ask for the narrowest capability they use:
- save handler:     URLService (save with alias generation)
- redirect handler: URLGetter
- delete handler:   URLDeleter
"""

import logging
from functools import lru_cache

from fastapi import Depends

from alias_shortener.config import settings
from alias_shortener.logging_config import setup_logger
from alias_shortener.services.alias_generator import AliasGenerator, RandomAliasGenerator
from alias_shortener.services.url_service import URLService
from alias_shortener.storage.factory import AliasStoreFactory, AliasStoreBackend
from alias_shortener.storage.strategies import AliasStore, URLDeleter, URLGetter


@lru_cache()
def get_logger() -> logging.Logger:
    """Application logger configured for settings.environment (singleton)."""
    return setup_logger(settings.environment)


@lru_cache()
def get_alias_store() -> AliasStore:
    """
    Get alias store instance (singleton).

    Factory gets config from settings internally.
    @lru_cache ensures this is called only once.
    """
    backend = AliasStoreBackend(settings.storage_backend)
    return AliasStoreFactory.create(backend)


@lru_cache()
def get_alias_generator() -> AliasGenerator:
    return RandomAliasGenerator(length=settings.alias_length)


def get_url_service(
    store: AliasStore = Depends(get_alias_store),
    generator: AliasGenerator = Depends(get_alias_generator),
    logger: logging.Logger = Depends(get_logger),
) -> URLService:
    """Get URLService with all dependencies injected."""
    return URLService(
        store=store,
        generator=generator,
        logger=logger,
        max_retries=settings.max_retries,
    )


def get_url_getter(service: URLService = Depends(get_url_service)) -> URLGetter:
    return service


def get_url_deleter(service: URLService = Depends(get_url_service)) -> URLDeleter:
    return service
