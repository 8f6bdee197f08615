# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from blog.shared.logging import logger

from .base import AppError, ErrorKind
from .http_status import HTTP_STATUS_BY_KIND, kind_for_http_status

__all__ = ["HTTP_STATUS_BY_KIND", "handle_app_error", "kind_for_http_status", "register_error_handler"]


def handle_app_error(error: AppError) -> tuple[Response, HTTPStatus]:
    response = jsonify(error.to_dict())
    return response, HTTP_STATUS_BY_KIND[error.kind]


def register_error_handler(
    app: Flask, *, debug_mode: bool = False, default_status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR
) -> None:

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.kind is ErrorKind.INTERNAL:
            logger.error(f"Internal error on {request.method} {request.path}: {exc.message}")
        else:
            logger.info(f"Handled application error {exc.code} on {request.method} {request.path}")
        return handle_app_error(exc)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        status = exc.code or default_status
        kind = kind_for_http_status(status)
        payload = {"error": {"code": kind.value, "message": exc.description or exc.name}}
        response = jsonify(payload)
        if status == HTTPStatus.METHOD_NOT_ALLOWED and exc.valid_methods:  # type: ignore[attr-defined]
            response.headers["Allow"] = ", ".join(exc.valid_methods)  # type: ignore[attr-defined]
        return response, status

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        if debug_mode:
            logger.exception(
                f"Unhandled exception: {request.method} {request.path} "
                f"query={dict(request.args)}, body_size={len(request.get_data(cache=True))}"
            )
        else:
            logger.opt(exception=exc).error(
                f"Error: {type(exc).__name__} on {request.method} {request.path}"
            )

        response = jsonify({"error": {"code": ErrorKind.INTERNAL.value, "message": "Internal server error"}})
        return response, default_status
