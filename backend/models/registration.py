"""Event and registration record models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field, field_validator

from backend.models.field import CamelModel


class EventRecord(CamelModel):
    """The slice of an event document this service reads."""

    model_config = ConfigDict(extra="ignore")

    event_id: str
    required_user_field: List[str] = Field(default_factory=list)

    @field_validator("required_user_field", mode="before")
    def _default_fields(cls, value: Optional[List[str]]) -> List[str]:
        return value or []


class RegistrationRecord(CamelModel):
    """Per (event, user) registration document; accepted field values ride along as extras."""

    model_config = ConfigDict(extra="allow")

    event_id: str
    uid: str
    email: Optional[str] = None
    email_verified: bool = False
    modified_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class RegistrationStatus(CamelModel):
    event_id: str
    registered: bool
