"""Response envelope definitions."""

from __future__ import annotations

from typing import Generic, Literal, TypeVar

from backend.core.exceptions import ApplicationError
from backend.models.field import CamelModel

DataT = TypeVar("DataT")


class SuccessEnvelope(CamelModel, Generic[DataT]):
    is_error: Literal[False] = False
    data: DataT


class ErrorEnvelope(CamelModel):
    is_error: Literal[True] = True
    error_code: str
    error_message: str

    @classmethod
    def from_error(cls, exc: ApplicationError) -> "ErrorEnvelope":
        return cls(error_code=exc.code, error_message=exc.message)
