# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from .base import ErrorKind

HTTP_STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: HTTPStatus.UNAUTHORIZED,
    ErrorKind.UNAUTHENTICATED: HTTPStatus.UNAUTHORIZED,
    ErrorKind.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorKind.VALIDATION_ERROR: HTTPStatus.BAD_REQUEST,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}

_KIND_BY_HTTP_STATUS: dict[int, ErrorKind] = {
    HTTPStatus.CONFLICT: ErrorKind.CONFLICT,
    HTTPStatus.UNAUTHORIZED: ErrorKind.UNAUTHENTICATED,
    HTTPStatus.FORBIDDEN: ErrorKind.FORBIDDEN,
    HTTPStatus.NOT_FOUND: ErrorKind.NOT_FOUND,
    HTTPStatus.BAD_REQUEST: ErrorKind.VALIDATION_ERROR,
    HTTPStatus.METHOD_NOT_ALLOWED: ErrorKind.VALIDATION_ERROR,
    HTTPStatus.UNSUPPORTED_MEDIA_TYPE: ErrorKind.VALIDATION_ERROR,
    HTTPStatus.REQUEST_ENTITY_TOO_LARGE: ErrorKind.VALIDATION_ERROR,
}


def kind_for_http_status(status: int) -> ErrorKind:
    return _KIND_BY_HTTP_STATUS.get(status, ErrorKind.INTERNAL)
