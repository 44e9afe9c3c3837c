from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from backend.api.security import authenticate_user
from backend.core.config import settings
from backend.core.database import DatabaseManager, database_manager
from backend.models import CallerContext
from backend.registration import AccountService, FieldCatalog, RegistrationService, SubmissionValidator
from backend.registration.stores import (
    MongoEventStore,
    MongoIdentityProvider,
    MongoProfileStore,
    MongoRegistrationStore,
)


async def get_db() -> DatabaseManager:
    return database_manager


async def get_current_user(user: CallerContext = Depends(authenticate_user)) -> CallerContext:
    return user


@lru_cache()
def get_catalog() -> FieldCatalog:
    if settings.FIELD_CATALOG_PATH:
        return FieldCatalog.from_file(settings.FIELD_CATALOG_PATH)
    return FieldCatalog()


async def get_registration_service(
    db: DatabaseManager = Depends(get_db),
    catalog: FieldCatalog = Depends(get_catalog),
) -> RegistrationService:
    return RegistrationService(
        events=MongoEventStore(db.collection(settings.EVENTS_COLLECTION)),
        profiles=MongoProfileStore(db.collection(settings.ACCOUNTS_COLLECTION)),
        registrations=MongoRegistrationStore(db.collection(settings.REGISTRATIONS_COLLECTION)),
        identity=MongoIdentityProvider(db.collection(settings.IDENTITIES_COLLECTION)),
        catalog=catalog,
        enforce_regex=settings.ENFORCE_FIELD_REGEX,
        report_all_missing=settings.REPORT_ALL_MISSING_FIELDS,
    )


async def get_account_service(
    db: DatabaseManager = Depends(get_db),
    catalog: FieldCatalog = Depends(get_catalog),
) -> AccountService:
    validator = SubmissionValidator(catalog, enforce_regex=settings.ENFORCE_FIELD_REGEX)
    return AccountService(MongoProfileStore(db.collection(settings.ACCOUNTS_COLLECTION)), validator)
