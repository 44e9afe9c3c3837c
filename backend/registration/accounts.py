"""Caller-facing access to the profile record."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from backend.core.exceptions import NotFoundError, translate_unexpected
from backend.models.user import CallerContext
from backend.registration.stores import ProfileStore
from backend.registration.validator import SubmissionValidator
from backend.utils.audit import audit_log


class AccountService:
    def __init__(self, profiles: ProfileStore, validator: SubmissionValidator) -> None:
        self._profiles = profiles
        self._validator = validator

    @translate_unexpected
    async def get_profile(self, caller: CallerContext) -> Dict[str, Any]:
        profile = await self._profiles.get(caller.uid)
        if profile is None:
            raise NotFoundError("Account not found")
        return profile

    @translate_unexpected
    async def update_profile(self, caller: CallerContext, changes: Mapping[str, str]) -> Dict[str, Any]:
        """Merge ``changes`` into the profile; immutable fields already set are left alone."""

        profile = await self._profiles.get(caller.uid)
        result = self._validator.filter_writable(changes, profile)
        await self._apply(user=caller, changes=result.accepted)
        updated = await self._profiles.get(caller.uid)
        return updated or {}

    @audit_log
    async def _apply(self, *, user: CallerContext, changes: Dict[str, str]) -> None:
        if changes:
            await self._profiles.merge(user.uid, changes)


__all__ = ["AccountService"]
