"""Write path: decide which submitted values may be stored."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from backend.core.exceptions import FieldValidationError, RequiredFieldMissingError
from backend.models.field import FieldDefinition, SelectFieldDefinition, TextFieldDefinition
from backend.registration.catalog import FieldCatalog
from backend.utils.monitoring import immutable_field_drops_total

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Values cleared for writing plus the names ignored as locked."""

    accepted: Dict[str, str] = field(default_factory=dict)
    dropped: List[str] = field(default_factory=list)


class SubmissionValidator:
    """Checks a submission against an event's required field names.

    ``enforce_regex`` turns on server side checks of text patterns and select
    options; ``report_all_missing`` names every missing field instead of the
    first one.
    """

    def __init__(self, catalog: FieldCatalog, *, enforce_regex: bool = False, report_all_missing: bool = False) -> None:
        self._catalog = catalog
        self.enforce_regex = enforce_regex
        self.report_all_missing = report_all_missing

    def needs_profile(self, required_names: Sequence[str]) -> bool:
        """Whether validating these names depends on the stored profile."""

        return any(not self._catalog.definition_for(name).mutable for name in required_names)

    def validate(
        self,
        required_names: Sequence[str],
        submitted: Mapping[str, str],
        existing_profile: Optional[Mapping[str, Any]],
    ) -> ValidationResult:
        missing = [name for name in dict.fromkeys(required_names) if name not in submitted]
        if missing:
            raise RequiredFieldMissingError(missing if self.report_all_missing else missing[:1])

        result = ValidationResult()
        for name in dict.fromkeys(required_names):
            definition = self._catalog.definition_for(name)
            value = submitted[name]
            if self.is_locked(definition, existing_profile):
                self._drop(result, name)
                continue
            if self.enforce_regex:
                self._check_value(definition, value)
            result.accepted[name] = value
        return result

    def filter_writable(
        self,
        submitted: Mapping[str, str],
        existing_profile: Optional[Mapping[str, Any]],
    ) -> ValidationResult:
        """Apply only the immutability rule to an arbitrary set of changes."""

        result = ValidationResult()
        for name, value in submitted.items():
            definition = self._catalog.definition_for(name)
            if self.is_locked(definition, existing_profile):
                self._drop(result, name)
                continue
            if self.enforce_regex:
                self._check_value(definition, value)
            result.accepted[name] = value
        return result

    @staticmethod
    def is_locked(definition: FieldDefinition, profile: Optional[Mapping[str, Any]]) -> bool:
        if definition.mutable or not profile:
            return False
        return profile.get(definition.name) not in (None, "")

    @staticmethod
    def _drop(result: ValidationResult, name: str) -> None:
        logger.info("Ignoring submitted value for immutable field %s", name)
        immutable_field_drops_total.labels(field=name).inc()
        result.dropped.append(name)

    @staticmethod
    def _check_value(definition: FieldDefinition, value: str) -> None:
        if isinstance(definition, TextFieldDefinition):
            if re.fullmatch(definition.regex, value) is None:
                raise FieldValidationError(definition.name, f"{definition.label} has an invalid value")
        elif isinstance(definition, SelectFieldDefinition):
            if value not in definition.options:
                raise FieldValidationError(
                    definition.name,
                    f"{definition.label} must be one of: {', '.join(definition.options)}",
                )


__all__ = ["SubmissionValidator", "ValidationResult"]
