"""Initial setup script for the registration document store."""

from __future__ import annotations

import asyncio
import logging

from backend.core.config import settings
from backend.core.database import database_manager

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# (collection setting, keys, options)
INDEXES = [
    ("REGISTRATIONS_COLLECTION", [("_id.eventId", 1)], {"name": "registrations_by_event"}),
    ("REGISTRATIONS_COLLECTION", [("_id.uid", 1)], {"name": "registrations_by_user"}),
    ("ACCOUNTS_COLLECTION", [("email", 1)], {"name": "accounts_by_email", "sparse": True}),
]


async def setup_indexes() -> None:
    for collection_setting, keys, options in INDEXES:
        collection = database_manager.collection(getattr(settings, collection_setting))
        name = await collection.create_index(keys, **options)
        logger.info("Ensured index %s on %s", name, collection.name)


async def main() -> None:
    await database_manager.initialize()
    try:
        await setup_indexes()
    finally:
        await database_manager.close()
    logger.info("Registration store setup complete")


if __name__ == "__main__":
    asyncio.run(main())
