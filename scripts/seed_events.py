#!/usr/bin/env python
"""
Seed the events collection with sample events and their required user fields.

Usage:
    python scripts/seed_events.py
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from backend.core.config import settings
from backend.core.database import database_manager

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("eventreg.seed_events")

EVENTS = [
    {
        "_id": "hackathon-2024",
        "title": "Campus Hackathon",
        "requiredUserField": ["displayName", "prn", "college", "year", "branch", "phone", "github"],
    },
    {
        "_id": "resume-review",
        "title": "Resume Review Session",
        "requiredUserField": ["college", "year", "resumeLink"],
    },
    {
        "_id": "open-talk",
        "title": "Open Tech Talk",
        "requiredUserField": [],
    },
]


async def seed() -> None:
    await database_manager.initialize()
    collection = database_manager.collection(settings.EVENTS_COLLECTION)
    try:
        for event in EVENTS:
            fields = {key: value for key, value in event.items() if key != "_id"}
            await collection.update_one({"_id": event["_id"]}, {"$set": fields}, upsert=True)
            logger.info("Seeded event %s with %d required fields", event["_id"], len(event["requiredUserField"]))
    finally:
        await database_manager.close()
    logger.info("Seeding completed at %s", datetime.now(timezone.utc).isoformat())


if __name__ == "__main__":
    asyncio.run(seed())
