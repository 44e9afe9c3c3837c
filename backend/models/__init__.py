from .field import (
    CamelModel,
    FieldDefinition,
    FieldDescriptor,
    FieldStore,
    SelectFieldDefinition,
    SelectFieldDescriptor,
    TextFieldDefinition,
    TextFieldDescriptor,
)
from .registration import EventRecord, RegistrationRecord, RegistrationStatus
from .response import ErrorEnvelope, SuccessEnvelope
from .user import CallerContext

__all__ = [
    "CallerContext",
    "CamelModel",
    "ErrorEnvelope",
    "EventRecord",
    "FieldDefinition",
    "FieldDescriptor",
    "FieldStore",
    "RegistrationRecord",
    "RegistrationStatus",
    "SelectFieldDefinition",
    "SelectFieldDescriptor",
    "SuccessEnvelope",
    "TextFieldDefinition",
    "TextFieldDescriptor",
]
