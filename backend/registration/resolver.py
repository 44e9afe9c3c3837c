"""Read path: work out which fields to ask a registrant for."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from backend.models.field import (
    FieldDefinition,
    FieldDescriptor,
    FieldStore,
    SelectFieldDescriptor,
    TextFieldDefinition,
    TextFieldDescriptor,
)
from backend.models.user import CallerContext
from backend.registration.catalog import FieldCatalog
from backend.registration.stores import ProfileStore

logger = logging.getLogger(__name__)


def _stored_value(profile: Mapping[str, Any], name: str) -> str:
    value = profile.get(name)
    if value is None:
        return ""
    return str(value)


class FieldResolver:
    """Pairs an event's required field names with the caller's stored values."""

    def __init__(self, catalog: FieldCatalog, profile_store: ProfileStore) -> None:
        self._catalog = catalog
        self._profiles = profile_store

    async def resolve(self, event_id: str, required_names: Sequence[str], caller: CallerContext) -> FieldStore:
        """Build one descriptor per required name, in the order the event lists them.

        The caller's profile is created from identity attributes the first time
        they are seen. An event without required fields never touches the
        profile store.
        """

        if not required_names:
            return FieldStore(event_id=event_id, fields=[])

        profile = await self._profiles.get(caller.uid)
        if profile is None:
            profile = caller.seed_profile()
            await self._profiles.merge(caller.uid, profile)
            logger.info("Created profile for %s while resolving fields of %s", caller.uid, event_id)

        fields = [self.describe(self._catalog.definition_for(name), event_id, profile) for name in required_names]
        return FieldStore(event_id=event_id, fields=fields)

    @staticmethod
    def describe(definition: FieldDefinition, event_id: str, profile: Mapping[str, Any]) -> FieldDescriptor:
        value = _stored_value(profile, definition.name)
        if isinstance(definition, TextFieldDefinition):
            return TextFieldDescriptor(
                name=definition.name,
                label=definition.label,
                placeholder=definition.placeholder,
                mutable=definition.mutable,
                regex=definition.regex,
                value=value,
                event_id=event_id,
            )
        return SelectFieldDescriptor(
            name=definition.name,
            label=definition.label,
            options=definition.options,
            mutable=definition.mutable,
            value=value,
            event_id=event_id,
        )


__all__ = ["FieldResolver"]
