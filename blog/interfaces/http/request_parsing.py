# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any, TypeVar

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from blog.interfaces.auth_header import parse_bearer
from blog.shared.errors import ValidationError
from blog.shared.errors.validation import raise_validation_error

ModelT = TypeVar("ModelT", bound=BaseModel)


def bearer_token() -> str | None:
    return parse_bearer(request.headers.get("Authorization"))


def json_body() -> dict[str, Any]:
    if not request.get_data(cache=True):
        return {}
    payload = request.get_json(silent=True, force=True)
    if payload is None:
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def parse_body(model: type[ModelT]) -> ModelT:
    try:
        return model.model_validate(json_body())
    except PydanticValidationError as exc:
        raise_validation_error(exc)


def parse_query(model: type[ModelT]) -> ModelT:
    try:
        return model.model_validate(request.args.to_dict())
    except PydanticValidationError as exc:
        raise_validation_error(exc)
