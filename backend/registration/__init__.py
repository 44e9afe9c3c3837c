"""Field reconciliation and merge engine for event registration."""

from backend.registration.accounts import AccountService
from backend.registration.catalog import DEFAULT_FIELDS, FieldCatalog, default_definition
from backend.registration.coordinator import MergeCoordinator
from backend.registration.resolver import FieldResolver
from backend.registration.service import RegistrationService
from backend.registration.validator import SubmissionValidator, ValidationResult

__all__ = [
    "AccountService",
    "DEFAULT_FIELDS",
    "FieldCatalog",
    "FieldResolver",
    "MergeCoordinator",
    "RegistrationService",
    "SubmissionValidator",
    "ValidationResult",
    "default_definition",
]
