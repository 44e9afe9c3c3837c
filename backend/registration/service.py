"""Registration operations exposed to the API layer."""

from __future__ import annotations

import logging
from typing import Mapping

from backend.core.exceptions import NotFoundError, translate_unexpected
from backend.models.field import FieldStore
from backend.models.registration import EventRecord, RegistrationStatus
from backend.models.user import CallerContext
from backend.registration.catalog import FieldCatalog
from backend.registration.coordinator import MergeCoordinator
from backend.registration.resolver import FieldResolver
from backend.registration.stores import EventStore, IdentityProvider, ProfileStore, RegistrationStore
from backend.registration.validator import SubmissionValidator

logger = logging.getLogger(__name__)

DISPLAY_NAME_FIELD = "displayName"


class RegistrationService:
    """Coordinates the resolver, validator and merge coordinator for one event."""

    def __init__(
        self,
        *,
        events: EventStore,
        profiles: ProfileStore,
        registrations: RegistrationStore,
        identity: IdentityProvider,
        catalog: FieldCatalog,
        enforce_regex: bool = False,
        report_all_missing: bool = False,
    ) -> None:
        self._events = events
        self._profiles = profiles
        self._registrations = registrations
        self.resolver = FieldResolver(catalog, profiles)
        self.validator = SubmissionValidator(
            catalog,
            enforce_regex=enforce_regex,
            report_all_missing=report_all_missing,
        )
        self.coordinator = MergeCoordinator(profiles, registrations, identity)

    async def _require_event(self, event_id: str) -> EventRecord:
        event = await self._events.get(event_id)
        if event is None:
            logger.info("Event %s not found", event_id)
            raise NotFoundError("Event Not Found")
        return event

    @translate_unexpected
    async def get_fields(self, event_id: str, caller: CallerContext) -> FieldStore:
        event = await self._require_event(event_id)
        return await self.resolver.resolve(event_id, event.required_user_field, caller)

    @translate_unexpected
    async def get_status(self, event_id: str, caller: CallerContext) -> RegistrationStatus:
        registered = await self._registrations.exists(event_id, caller.uid)
        return RegistrationStatus(event_id=event_id, registered=registered)

    @translate_unexpected
    async def register(self, event_id: str, caller: CallerContext, submitted: Mapping[str, str]) -> RegistrationStatus:
        event = await self._require_event(event_id)
        required = event.required_user_field

        profile = None
        if self.validator.needs_profile(required):
            profile = await self._profiles.get(caller.uid)
        result = self.validator.validate(required, submitted, profile)

        display_name = None
        if DISPLAY_NAME_FIELD in submitted and DISPLAY_NAME_FIELD not in result.dropped:
            display_name = submitted[DISPLAY_NAME_FIELD]

        await self.coordinator.commit(
            event_id=event_id,
            user=caller,
            accepted_fields=result.accepted,
            display_name=display_name,
        )
        return RegistrationStatus(event_id=event_id, registered=True)


__all__ = ["RegistrationService"]
