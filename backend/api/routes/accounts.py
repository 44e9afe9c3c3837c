"""Profile endpoints for the authenticated caller."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from backend.api.dependencies import get_account_service, get_current_user
from backend.models import CallerContext, SuccessEnvelope
from backend.registration import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get("/me", response_model=SuccessEnvelope[Dict[str, Any]])
async def get_account(
    current_user: CallerContext = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> SuccessEnvelope[Dict[str, Any]]:
    profile = await service.get_profile(current_user)
    return SuccessEnvelope[Dict[str, Any]](data=profile)


@router.patch("/me", response_model=SuccessEnvelope[Dict[str, Any]])
async def update_account(
    changes: Dict[str, str] = Body(...),
    current_user: CallerContext = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> SuccessEnvelope[Dict[str, Any]]:
    """Update profile fields; immutable fields that already hold a value are kept."""

    profile = await service.update_profile(current_user, changes)
    return SuccessEnvelope[Dict[str, Any]](data=profile)
