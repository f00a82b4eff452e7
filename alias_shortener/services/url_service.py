import logging
from dataclasses import dataclass
from typing import Optional

from alias_shortener.services.alias_generator import AliasGenerator
from alias_shortener.storage.errors import (
    AliasGenerationError,
    StorageUnavailableError,
    URLExistsError,
    URLNotFoundError,
)
from alias_shortener.storage.strategies import AliasStore


@dataclass(frozen=True)
class SavedURL:
    id: int
    alias: str


class URLService:
    """
    URL Service with dependency injection for the store, generator and logger.

    The store enforces uniqueness and raises typed errors; this layer decides
    what to retry and writes the log lines. Nothing here touches the table
    directly.
    """

    def __init__(
        self,
        store: AliasStore,
        generator: AliasGenerator,
        logger: Optional[logging.Logger] = None,
        max_retries: int = 5,
    ):
        """
        Initialize URL service with dependencies.

        Args:
            store: Alias store (owns the table)
            generator: Produces aliases when the caller gives none
            logger: Logger instance (defaults to the module logger)
            max_retries: Attempts for generated aliases before giving up
        """
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.store = store
        self.generator = generator
        self.logger = logger or logging.getLogger(__name__)
        self.max_retries = max_retries

    def save_url(self, url: str, alias: Optional[str] = None) -> SavedURL:
        """
        Save url under alias, or under a generated alias when none is given.

        A caller-chosen alias gets exactly one attempt and URLExistsError
        propagates. A generated alias is regenerated on collision up to
        max_retries times, then AliasGenerationError is raised.
        StorageUnavailableError is never retried.
        """
        op = "services.url.SaveURL"

        if alias:
            try:
                record_id = self.store.save_url(url, alias)
            except URLExistsError:
                self.logger.info("url already exists", extra={"op": op, "alias": alias})
                raise
            except StorageUnavailableError as exc:
                self.logger.error("failed to save url", extra={"op": op, "error": str(exc)})
                raise
            self.logger.info("url saved", extra={"op": op, "alias": alias, "id": record_id})
            return SavedURL(id=record_id, alias=alias)

        for attempt in range(1, self.max_retries + 1):
            candidate = self.generator.generate()
            try:
                record_id = self.store.save_url(url, candidate)
            except URLExistsError:
                self.logger.debug(
                    "generated alias collided",
                    extra={"op": op, "alias": candidate, "attempt": attempt},
                )
                continue
            except StorageUnavailableError as exc:
                self.logger.error("failed to save url", extra={"op": op, "error": str(exc)})
                raise
            self.logger.info("url saved", extra={"op": op, "alias": candidate, "id": record_id})
            return SavedURL(id=record_id, alias=candidate)

        self.logger.error(
            "could not generate a free alias",
            extra={"op": op, "attempts": self.max_retries},
        )
        raise AliasGenerationError(op, self.max_retries)

    def get_url(self, alias: str) -> str:
        """Return the target URL for alias (raises URLNotFoundError on a miss)."""
        op = "services.url.GetURL"
        try:
            url = self.store.get_url(alias)
        except URLNotFoundError:
            self.logger.info("url not found", extra={"op": op, "alias": alias})
            raise
        except StorageUnavailableError as exc:
            self.logger.error("failed to get url", extra={"op": op, "error": str(exc)})
            raise
        self.logger.debug("url found", extra={"op": op, "alias": alias})
        return url

    def delete_url(self, alias: str) -> None:
        op = "services.url.DeleteURL"
        try:
            self.store.delete_url(alias)
        except URLNotFoundError:
            self.logger.info("url not found", extra={"op": op, "alias": alias})
            raise
        except StorageUnavailableError as exc:
            self.logger.error("failed to delete url", extra={"op": op, "error": str(exc)})
            raise
        self.logger.info("url deleted", extra={"op": op, "alias": alias})
