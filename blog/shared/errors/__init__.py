from .base import (
    AppError,
    ConflictError,
    ErrorKind,
    ForbiddenError,
    InfrastructureError,
    InternalError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthenticatedError,
    ValidationError,
)

__all__ = [
    "AppError",
    "ConflictError",
    "ErrorKind",
    "ForbiddenError",
    "InfrastructureError",
    "InternalError",
    "InvalidCredentialsError",
    "NotFoundError",
    "UnauthenticatedError",
    "ValidationError",
]
