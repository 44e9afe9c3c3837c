"""Authentication utilities for API routes."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from backend.core.exceptions import UnauthorizedError
from backend.core.security import verify_access_token
from backend.models import CallerContext

_http_bearer = HTTPBearer(auto_error=False)


async def authenticate_user(
    request: Request,
    bearer_token: Optional[HTTPAuthorizationCredentials] = Depends(_http_bearer),
) -> CallerContext:
    if not bearer_token or not bearer_token.credentials:
        raise UnauthorizedError("Authentication required")

    payload = verify_access_token(bearer_token.credentials)
    subject = payload.get("sub")
    if subject is None:
        raise UnauthorizedError("Invalid token")

    user = CallerContext(
        uid=subject,
        email=payload.get("email"),
        email_verified=bool(payload.get("email_verified", False)),
        display_name=payload.get("name"),
        photo_url=payload.get("picture"),
    )
    request.state.user = user
    return user


__all__ = ["authenticate_user"]
