"""
Document store connection management.

A single :class:`DocumentStore` is created at application startup, kept on
``app.state`` and handed to repositories through the ``get_db`` dependency.
"""

import logging
from typing import Any, Callable, Generator, Optional

from fastapi import Request
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from app.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


class DocumentStore:
    """Lazily opened, process-wide handle on one database.

    There is no reconnect or backoff logic: if the server goes away, the
    driver error surfaces on the request that hit it.
    """

    def __init__(self, uri: str, db_name: str, client_factory: Callable[..., Any] = MongoClient,
                 timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self._client_factory = client_factory
        self._timeout_ms = timeout_ms
        self._client: Optional[Any] = None
        self._db: Optional[Database] = None

    def get_connection(self) -> Database:
        """Return the database handle, opening the client on first use."""
        if self._db is not None:
            return self._db

        if not self.uri:
            raise ConfigurationError('Invalid/Missing environment variable: "MONGODB_URI"')
        if not self.db_name:
            raise ConfigurationError('Invalid/Missing environment variable: "MONGODB_DB"')

        logger.info("Opening document store connection to database %r", self.db_name)
        self._client = self._client_factory(self.uri, serverSelectionTimeoutMS=self._timeout_ms)
        self._db = self._client[self.db_name]
        return self._db

    def ping(self) -> bool:
        try:
            self.get_connection().command("ping")
            return True
        except (PyMongoError, ConfigurationError) as e:
            logger.error("Database connection check failed: %s", e)
            return False

    def close(self) -> None:
        if self._client is not None:
            logger.info("Closing document store connection")
            self._client.close()
        self._client = None
        self._db = None


def get_store(request: Request) -> DocumentStore:
    return request.app.state.store


def get_db(request: Request) -> Generator[Database, None, None]:
    """
    Dependency for FastAPI endpoints to get the database handle.

    Example:
        @router.get("/items")
        def get_items(db: Database = Depends(get_db)):
            return list(db["items"].find())
    """
    yield get_store(request).get_connection()
