"""Database connectivity layer for the registration service."""

from __future__ import annotations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from backend.core.config import settings

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Lazily establishes the MongoDB connection backing every store."""

    def __init__(self) -> None:
        self.mongodb: Optional[AsyncIOMotorClient] = None

    async def initialize(self) -> None:
        """Connect to the document store."""

        logger.info("Initializing registration database manager")
        self.mongodb = AsyncIOMotorClient(str(settings.MONGODB_URL))
        logger.info("Database manager initialized")

    @property
    def database(self) -> Optional[AsyncIOMotorDatabase]:
        if self.mongodb is None:
            return None
        return self.mongodb[settings.MONGODB_DATABASE]

    def collection(self, name: str) -> AsyncIOMotorCollection:
        database = self.database
        if database is None:
            raise RuntimeError("MongoDB unavailable; did initialization fail?")
        return database[name]

    async def close(self) -> None:
        """Tear down connections gracefully."""

        logger.info("Closing database connections")

        if self.mongodb is not None:
            self.mongodb.close()
            self.mongodb = None


# Singleton instance used by the API dependencies
database_manager = DatabaseManager()
