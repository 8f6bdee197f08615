# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from blog.application.interfaces import BlogServiceCore
from blog.interfaces.dto import (
    LoginRequestDTO,
    LoginResponseDTO,
    RegisteredUserDTO,
    RegisterRequestDTO,
)
from blog.interfaces.http.request_parsing import parse_body
from blog.shared.logging import logger


class AuthController:
    def __init__(self, *, service: BlogServiceCore) -> None:
        self._service = service

    def register(self) -> tuple[Response, int]:
        dto = parse_body(RegisterRequestDTO)

        user_id = self._service.register(dto.username, dto.email, dto.password)

        payload = RegisteredUserDTO(id=user_id, username=dto.username, email=dto.email)
        logger.info(f"auth.register: ok user_id={user_id}")
        return jsonify(payload.model_dump(mode="json")), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        dto = parse_body(LoginRequestDTO)

        result = self._service.login(dto.username, dto.password)

        payload = LoginResponseDTO.model_validate(result)
        logger.info(f"auth.login: ok user_id={result.user.id}")
        return jsonify(payload.model_dump(mode="json")), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
