"""Persistence collaborators for the registration engine.

Every write is a field-level merge (`$set` with upsert), so concurrent writers
to the same document converge on the union of their fields and overlapping
keys resolve last-writer-wins at the store.

Field names come from event configuration and user input, so they are escaped
before they become Mongo field paths: ``%``, ``.`` and ``$`` are percent
encoded and a literal ``_id`` becomes ``%5Fid``.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional, Protocol
from urllib.parse import unquote

from motor.motor_asyncio import AsyncIOMotorCollection

from backend.models.registration import EventRecord

logger = logging.getLogger(__name__)


class EventStore(Protocol):
    async def get(self, event_id: str) -> Optional[EventRecord]:
        ...


class ProfileStore(Protocol):
    async def get(self, uid: str) -> Optional[Dict[str, Any]]:
        ...

    async def merge(self, uid: str, data: Mapping[str, Any]) -> None:
        ...


class RegistrationStore(Protocol):
    async def exists(self, event_id: str, uid: str) -> bool:
        ...

    async def merge(self, event_id: str, uid: str, data: Mapping[str, Any]) -> None:
        ...


class IdentityProvider(Protocol):
    async def update_display_name(self, uid: str, display_name: str) -> None:
        ...


def encode_key(name: str) -> str:
    if name == "_id":
        return "%5Fid"
    return name.replace("%", "%25").replace(".", "%2E").replace("$", "%24")


def decode_key(key: str) -> str:
    return unquote(key)


def _encode_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {encode_key(name): value for name, value in data.items()}


def _decode_document(document: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    if document is None:
        return None
    return {decode_key(key): value for key, value in document.items() if key != "_id"}


class MongoEventStore:
    """Events are owned elsewhere; this store only reads them."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection

    async def get(self, event_id: str) -> Optional[EventRecord]:
        document = await self._collection.find_one({"_id": event_id}, {"requiredUserField": 1})
        if document is None:
            return None
        return EventRecord(event_id=event_id, required_user_field=document.get("requiredUserField"))


class MongoProfileStore:
    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection

    async def get(self, uid: str) -> Optional[Dict[str, Any]]:
        return _decode_document(await self._collection.find_one({"_id": uid}))

    async def merge(self, uid: str, data: Mapping[str, Any]) -> None:
        if data:
            update = {"$set": _encode_fields(data)}
        else:
            # Nothing to set, but the profile must still exist afterwards.
            update = {"$setOnInsert": {"createdAt": datetime.now(timezone.utc)}}
        await self._collection.update_one({"_id": uid}, update, upsert=True)
        logger.debug("Merged %d profile fields for %s", len(data), uid)


class MongoRegistrationStore:
    """Registrations keyed by a compound ``_id`` of event and user."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection

    @staticmethod
    def _key(event_id: str, uid: str) -> Dict[str, Dict[str, str]]:
        # Embedded document equality is order sensitive; always build it the same way.
        return {"_id": {"eventId": event_id, "uid": uid}}

    async def exists(self, event_id: str, uid: str) -> bool:
        return await self._collection.count_documents(self._key(event_id, uid), limit=1) > 0

    async def merge(self, event_id: str, uid: str, data: Mapping[str, Any]) -> None:
        await self._collection.update_one(self._key(event_id, uid), {"$set": _encode_fields(data)}, upsert=True)
        logger.debug("Merged registration %s/%s", event_id, uid)


class MongoIdentityProvider:
    """Keeps the identity record's display name in step with registrations."""

    def __init__(self, collection: AsyncIOMotorCollection) -> None:
        self._collection = collection

    async def update_display_name(self, uid: str, display_name: str) -> None:
        await self._collection.update_one({"_id": uid}, {"$set": {"displayName": display_name}}, upsert=True)
        logger.info("Updated display name for %s", uid)


__all__ = [
    "EventStore",
    "IdentityProvider",
    "MongoEventStore",
    "MongoIdentityProvider",
    "MongoProfileStore",
    "MongoRegistrationStore",
    "ProfileStore",
    "RegistrationStore",
    "decode_key",
    "encode_key",
]
