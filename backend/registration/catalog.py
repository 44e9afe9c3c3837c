"""Catalog of the user fields an event can ask for."""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, List, Optional, Sequence

from pydantic import TypeAdapter

from backend.models.field import FieldDefinition, SelectFieldDefinition, TextFieldDefinition

logger = logging.getLogger(__name__)

_DEFINITIONS_ADAPTER = TypeAdapter(List[FieldDefinition])

DEFAULT_FIELDS: Sequence[FieldDefinition] = (
    TextFieldDefinition(
        name="displayName",
        label="Full Name",
        placeholder="Name as it should appear on certificates",
        regex=r"^[A-Za-z][A-Za-z .'-]*$",
    ),
    TextFieldDefinition(
        name="prn",
        label="PRN",
        placeholder="Permanent registration number",
        mutable=False,
        regex=r"^[A-Za-z0-9]{6,16}$",
    ),
    TextFieldDefinition(
        name="college",
        label="College",
        placeholder="Name of your college",
    ),
    SelectFieldDefinition(
        name="year",
        label="Year of Study",
        options=("1", "2", "3", "4"),
    ),
    SelectFieldDefinition(
        name="branch",
        label="Branch",
        options=(
            "Computer Engineering",
            "Information Technology",
            "Electronics and Telecommunication",
            "Mechanical Engineering",
            "Civil Engineering",
            "Other",
        ),
    ),
    SelectFieldDefinition(
        name="gender",
        label="Gender",
        options=("Male", "Female", "Other", "Prefer not to say"),
        mutable=False,
    ),
    TextFieldDefinition(
        name="phone",
        label="Phone Number",
        placeholder="10 digit mobile number",
        regex=r"^\+?[0-9]{10,13}$",
    ),
    TextFieldDefinition(
        name="resumeLink",
        label="Resume Link",
        placeholder="https://",
        regex=r"^https?://\S+$",
    ),
    TextFieldDefinition(
        name="github",
        label="GitHub Username",
        placeholder="octocat",
        regex=r"^[A-Za-z0-9-]{1,39}$",
    ),
)


def default_definition(name: str) -> TextFieldDefinition:
    """Definition used for a required name the catalog does not know."""

    return TextFieldDefinition(name=name, label=name, placeholder=name, mutable=True, regex=".+")


class FieldCatalog:
    """Read-only lookup table from field name to definition."""

    def __init__(self, definitions: Iterable[FieldDefinition] = DEFAULT_FIELDS) -> None:
        self._definitions = MappingProxyType({definition.name: definition for definition in definitions})

    @classmethod
    def from_file(cls, path: Path, base: Iterable[FieldDefinition] = DEFAULT_FIELDS) -> "FieldCatalog":
        """Layer definitions from a JSON list over ``base``; entries in the file win by name."""

        definitions = _DEFINITIONS_ADAPTER.validate_json(Path(path).read_bytes())
        merged = {definition.name: definition for definition in base}
        for definition in definitions:
            merged[definition.name] = definition
        logger.info("Loaded %d field definitions from %s", len(definitions), path)
        return cls(merged.values())

    def lookup(self, name: str) -> Optional[FieldDefinition]:
        return self._definitions.get(name)

    def definition_for(self, name: str) -> FieldDefinition:
        definition = self.lookup(name)
        if definition is None:
            return default_definition(name)
        return definition

    def names(self) -> List[str]:
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[FieldDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)


__all__ = ["DEFAULT_FIELDS", "FieldCatalog", "default_definition"]
