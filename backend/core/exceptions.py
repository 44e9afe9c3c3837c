"""Custom exception hierarchy for the registration service."""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Awaitable, Callable, Iterable, List, TypeVar

from fastapi import status

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ApplicationError(Exception):
    """Base application error with HTTP semantics."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "APPLICATION_ERROR"

    def __init__(self, message: str, *, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.message = message


class NotFoundError(ApplicationError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class RequiredFieldMissingError(ApplicationError):
    """Raised when a submission omits one or more required fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "REQUIRED_FIELD_MISSING"

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields: List[str] = list(fields)
        if len(self.fields) == 1:
            message = f"{self.fields[0]} is required but not passed!"
        else:
            message = f"{', '.join(self.fields)} are required but not passed!"
        super().__init__(message)


class FieldValidationError(ApplicationError):
    """Raised when a submitted value fails its field definition constraint."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "INVALID_FIELD_VALUE"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class InvalidRequestError(ApplicationError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "INVALID_REQUEST"


class UnauthorizedError(ApplicationError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"


class UncaughtError(ApplicationError):
    """Wraps an unexpected collaborator failure at the operation boundary."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "UNCAUGHT"


def translate_unexpected(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Re-raise anything that is not an `ApplicationError` as `UncaughtError`."""

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except ApplicationError:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure in %s", func.__qualname__)
            raise UncaughtError(str(exc) or exc.__class__.__name__) from exc

    return wrapper
