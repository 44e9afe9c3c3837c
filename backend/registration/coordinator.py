"""Persist accepted registration data to the profile and registration records."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional

from backend.models.registration import RegistrationRecord
from backend.models.user import CallerContext
from backend.registration.stores import IdentityProvider, ProfileStore, RegistrationStore
from backend.utils.audit import audit_log
from backend.utils.monitoring import registrations_total

logger = logging.getLogger(__name__)


class MergeCoordinator:
    """Writes a submission as independent, idempotent merges.

    There is no rollback: if a later step fails the earlier merges stay, and
    re-running ``commit`` with the same input converges on the same records.
    """

    def __init__(
        self,
        profile_store: ProfileStore,
        registration_store: RegistrationStore,
        identity_provider: IdentityProvider,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._profiles = profile_store
        self._registrations = registration_store
        self._identity = identity_provider
        self._clock = clock

    @audit_log
    async def commit(
        self,
        *,
        event_id: str,
        user: CallerContext,
        accepted_fields: Mapping[str, str],
        display_name: Optional[str] = None,
    ) -> RegistrationRecord:
        if accepted_fields:
            await self._profiles.merge(user.uid, accepted_fields)

        if display_name is not None:
            await self._identity.update_display_name(user.uid, display_name)

        # Identity keys are written last so submitted values cannot re-key the record.
        record = RegistrationRecord.model_validate(
            {
                **accepted_fields,
                "eventId": event_id,
                "uid": user.uid,
                "email": user.email,
                "emailVerified": user.email_verified,
                "modifiedAt": self._clock(),
            }
        )
        await self._registrations.merge(event_id, user.uid, record.to_document())
        registrations_total.labels(event_id=event_id).inc()
        logger.info("Registered %s for %s with %d fields", user.uid, event_id, len(accepted_fields))
        return record


__all__ = ["MergeCoordinator"]
