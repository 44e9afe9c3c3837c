"""Event registration endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Body, Depends

from backend.api.dependencies import get_current_user, get_registration_service
from backend.models import CallerContext, FieldStore, RegistrationStatus, SuccessEnvelope
from backend.registration import RegistrationService

router = APIRouter(prefix="/registration", tags=["registration"])


@router.get("/{event_id}/fields", response_model=SuccessEnvelope[FieldStore])
async def get_fields(
    event_id: str,
    current_user: CallerContext = Depends(get_current_user),
    service: RegistrationService = Depends(get_registration_service),
) -> SuccessEnvelope[FieldStore]:
    """List the fields the event needs from the caller, with values already on file."""

    store = await service.get_fields(event_id, current_user)
    return SuccessEnvelope[FieldStore](data=store)


@router.get("/{event_id}/status", response_model=SuccessEnvelope[RegistrationStatus])
async def get_status(
    event_id: str,
    current_user: CallerContext = Depends(get_current_user),
    service: RegistrationService = Depends(get_registration_service),
) -> SuccessEnvelope[RegistrationStatus]:
    status = await service.get_status(event_id, current_user)
    return SuccessEnvelope[RegistrationStatus](data=status)


@router.post("/{event_id}", response_model=SuccessEnvelope[RegistrationStatus])
async def register(
    event_id: str,
    submitted: Dict[str, str] = Body(...),
    current_user: CallerContext = Depends(get_current_user),
    service: RegistrationService = Depends(get_registration_service),
) -> SuccessEnvelope[RegistrationStatus]:
    """Register the caller for an event using the submitted field values."""

    status = await service.register(event_id, current_user, submitted)
    return SuccessEnvelope[RegistrationStatus](data=status)
