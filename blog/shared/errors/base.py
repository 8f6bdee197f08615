# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure kinds shared by the service and both adapters."""

    CONFLICT = "conflict"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHENTICATED = "unauthenticated"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION_ERROR = "validation_error"
    INTERNAL = "internal"

    @classmethod
    def parse(cls, value: str | None) -> "ErrorKind":
        try:
            return cls(value)
        except ValueError:
            return cls.INTERNAL


@dataclass(slots=True, eq=False)
class AppError(Exception):
    kind: ErrorKind
    message: str
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)

    @property
    def code(self) -> str:
        return self.kind.value

    def to_dict(self) -> dict[str, Any]:
        error: dict[str, Any] = {"code": self.kind.value, "message": self.message}
        if self.context:
            error["context"] = dict(self.context)
        return {"error": error}


class ConflictError(AppError):
    def __init__(self, message: str = "Resource already exists", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(kind=ErrorKind.CONFLICT, message=message, context=context)


class InvalidCredentialsError(AppError):
    def __init__(self, message: str = "Invalid username or password") -> None:
        super().__init__(kind=ErrorKind.INVALID_CREDENTIALS, message=message)


class UnauthenticatedError(AppError):
    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(kind=ErrorKind.UNAUTHENTICATED, message=message)


class ForbiddenError(AppError):
    def __init__(self, message: str = "You don't have permission to perform this action") -> None:
        super().__init__(kind=ErrorKind.FORBIDDEN, message=message)


class NotFoundError(AppError):
    def __init__(self, message: str = "Resource not found", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(kind=ErrorKind.NOT_FOUND, message=message, context=context)


class ValidationError(AppError):
    def __init__(self, message: str = "Invalid request", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(kind=ErrorKind.VALIDATION_ERROR, message=message, context=context)


class InternalError(AppError):
    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(kind=ErrorKind.INTERNAL, message=message)


class InfrastructureError(InternalError):
    def __init__(self, message: str = "Storage backend failure") -> None:
        super().__init__(message)
