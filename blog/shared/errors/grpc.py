# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import grpc

from .base import ErrorKind

# Trailing metadata key carrying the exact kind, since two kinds share UNAUTHENTICATED.
ERROR_KIND_METADATA_KEY = "blog-error-kind"

GRPC_STATUS_BY_KIND: dict[ErrorKind, grpc.StatusCode] = {
    ErrorKind.CONFLICT: grpc.StatusCode.ALREADY_EXISTS,
    ErrorKind.INVALID_CREDENTIALS: grpc.StatusCode.UNAUTHENTICATED,
    ErrorKind.UNAUTHENTICATED: grpc.StatusCode.UNAUTHENTICATED,
    ErrorKind.FORBIDDEN: grpc.StatusCode.PERMISSION_DENIED,
    ErrorKind.NOT_FOUND: grpc.StatusCode.NOT_FOUND,
    ErrorKind.VALIDATION_ERROR: grpc.StatusCode.INVALID_ARGUMENT,
    ErrorKind.INTERNAL: grpc.StatusCode.INTERNAL,
}

_KIND_BY_GRPC_STATUS: dict[grpc.StatusCode, ErrorKind] = {
    grpc.StatusCode.ALREADY_EXISTS: ErrorKind.CONFLICT,
    grpc.StatusCode.UNAUTHENTICATED: ErrorKind.UNAUTHENTICATED,
    grpc.StatusCode.PERMISSION_DENIED: ErrorKind.FORBIDDEN,
    grpc.StatusCode.NOT_FOUND: ErrorKind.NOT_FOUND,
    grpc.StatusCode.INVALID_ARGUMENT: ErrorKind.VALIDATION_ERROR,
}


def kind_for_grpc_status(status: grpc.StatusCode | None) -> ErrorKind:
    if status is None:
        return ErrorKind.INTERNAL
    return _KIND_BY_GRPC_STATUS.get(status, ErrorKind.INTERNAL)
