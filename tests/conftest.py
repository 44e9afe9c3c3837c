from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

import pytest

from backend.models import CallerContext, EventRecord, SelectFieldDefinition, TextFieldDefinition
from backend.registration import AccountService, FieldCatalog, RegistrationService, SubmissionValidator


class InMemoryEventStore:
    def __init__(self, events: Optional[Dict[str, List[str]]] = None) -> None:
        self.events = dict(events or {})

    async def get(self, event_id: str) -> Optional[EventRecord]:
        if event_id not in self.events:
            return None
        return EventRecord(event_id=event_id, required_user_field=self.events[event_id])


class InMemoryProfileStore:
    """Mimics a `$set` upsert: merges only touch the keys they carry."""

    def __init__(self, documents: Optional[Dict[str, Dict[str, Any]]] = None) -> None:
        self.documents = {uid: dict(doc) for uid, doc in (documents or {}).items()}
        self.reads = 0
        self.merges: List[Tuple[str, Dict[str, Any]]] = []

    async def get(self, uid: str) -> Optional[Dict[str, Any]]:
        self.reads += 1
        document = self.documents.get(uid)
        return dict(document) if document is not None else None

    async def merge(self, uid: str, data: Mapping[str, Any]) -> None:
        self.merges.append((uid, dict(data)))
        self.documents.setdefault(uid, {}).update(data)


class InMemoryRegistrationStore:
    def __init__(self) -> None:
        self.documents: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.merges = 0

    async def exists(self, event_id: str, uid: str) -> bool:
        return (event_id, uid) in self.documents

    async def merge(self, event_id: str, uid: str, data: Mapping[str, Any]) -> None:
        self.merges += 1
        self.documents.setdefault((event_id, uid), {}).update(data)


class StubIdentityProvider:
    def __init__(self) -> None:
        self.display_names: List[Tuple[str, str]] = []

    async def update_display_name(self, uid: str, display_name: str) -> None:
        self.display_names.append((uid, display_name))


class UnavailableRegistrationStore(InMemoryRegistrationStore):
    async def exists(self, event_id: str, uid: str) -> bool:
        raise ConnectionError("registration store unavailable")

    async def merge(self, event_id: str, uid: str, data: Mapping[str, Any]) -> None:
        raise ConnectionError("registration store unavailable")


TEST_FIELDS = (
    TextFieldDefinition(name="college", label="College", placeholder="College name"),
    SelectFieldDefinition(name="year", label="Year", options=("1", "2", "3", "4")),
    TextFieldDefinition(name="prn", label="PRN", placeholder="PRN", mutable=False, regex=r"^[0-9]{6}$"),
    TextFieldDefinition(name="displayName", label="Name", placeholder="Full name"),
)


@pytest.fixture
def catalog() -> FieldCatalog:
    return FieldCatalog(TEST_FIELDS)


@pytest.fixture
def caller() -> CallerContext:
    return CallerContext(
        uid="user-1",
        email="ada@example.com",
        email_verified=True,
        display_name="Ada Lovelace",
        photo_url="https://example.com/ada.png",
    )


@pytest.fixture
def events() -> InMemoryEventStore:
    return InMemoryEventStore(
        {
            "hackathon": ["college", "year"],
            "open-talk": [],
            "workshop": ["prn", "college", "github"],
        }
    )


@pytest.fixture
def profiles() -> InMemoryProfileStore:
    return InMemoryProfileStore()


@pytest.fixture
def registrations() -> InMemoryRegistrationStore:
    return InMemoryRegistrationStore()


@pytest.fixture
def identity() -> StubIdentityProvider:
    return StubIdentityProvider()


@pytest.fixture
def unavailable_registrations() -> UnavailableRegistrationStore:
    return UnavailableRegistrationStore()


@pytest.fixture
def registration_service(catalog, events, profiles, registrations, identity) -> RegistrationService:
    return RegistrationService(
        events=events,
        profiles=profiles,
        registrations=registrations,
        identity=identity,
        catalog=catalog,
    )


@pytest.fixture
def account_service(catalog, profiles) -> AccountService:
    return AccountService(profiles, SubmissionValidator(catalog))
