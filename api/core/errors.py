"""
Error kinds and the result type returned by services.

Services never raise to handlers. They return a `Result` carrying either a
value or one of the failure kinds below, and handlers branch on the kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from fastapi import status
from fastapi.responses import JSONResponse

T = TypeVar("T")

INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class ValidationFailure:
    """Client-side problem; the message is safe to show to the caller."""

    message: str


@dataclass(frozen=True)
class StorageFailure:
    """Any database-layer error. Details are logged, never returned."""

    message: str = INTERNAL_ERROR_MESSAGE


Failure = Union[ValidationFailure, StorageFailure]


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: Failure | None = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Failure) -> "Result[T]":
        return cls(error=error)


def status_code_for(error: Failure) -> int:
    if isinstance(error, ValidationFailure):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(error: Failure) -> JSONResponse:
    return JSONResponse(status_code=status_code_for(error), content={"error": error.message})
