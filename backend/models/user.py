from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import Field

from backend.models.field import CamelModel


class CallerContext(CamelModel):
    """Authenticated caller as asserted by the identity provider."""

    uid: str
    email: Optional[str] = None
    email_verified: bool = False
    display_name: Optional[str] = None
    photo_url: Optional[str] = Field(None, alias="photoURL")

    def seed_profile(self) -> Dict[str, Any]:
        """Profile attributes written the first time the caller is seen."""

        seed = {
            "email": self.email,
            "displayName": self.display_name,
            "photoURL": self.photo_url,
        }
        return {key: value for key, value in seed.items() if value is not None}
