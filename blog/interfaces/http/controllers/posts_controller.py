# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from blog.application.interfaces import BlogServiceCore
from blog.interfaces.dto import (
    CreatePostRequestDTO,
    PageQueryDTO,
    PostDTO,
    PostListDTO,
    UpdatePostRequestDTO,
)
from blog.interfaces.http.request_parsing import bearer_token, parse_body, parse_query


class PostsController:
    def __init__(self, *, service: BlogServiceCore) -> None:
        self._service = service

    def _authenticated_token(self) -> str | None:
        # the session is verified before the body is parsed
        token = bearer_token()
        self._service.authenticate(token)
        return token

    def list_posts(self) -> tuple[Response, int]:
        query = parse_query(PageQueryDTO)
        page = self._service.list_posts(limit=query.limit, offset=query.offset)
        payload = PostListDTO.model_validate(page)
        return jsonify(payload.model_dump(mode="json")), HTTPStatus.OK

    def get_post(self, post_id: int) -> tuple[Response, int]:
        post = self._service.get_post(post_id)
        return jsonify(PostDTO.model_validate(post).model_dump(mode="json")), HTTPStatus.OK

    def create_post(self) -> tuple[Response, int]:
        token = self._authenticated_token()
        dto = parse_body(CreatePostRequestDTO)
        post = self._service.create_post(token, dto.title, dto.content)
        return jsonify(PostDTO.model_validate(post).model_dump(mode="json")), HTTPStatus.CREATED

    def update_post(self, post_id: int) -> tuple[Response, int]:
        token = self._authenticated_token()
        dto = parse_body(UpdatePostRequestDTO)
        post = self._service.update_post(token, post_id, title=dto.title, content=dto.content)
        return jsonify(PostDTO.model_validate(post).model_dump(mode="json")), HTTPStatus.OK

    def delete_post(self, post_id: int) -> Response:
        self._service.delete_post(bearer_token(), post_id)
        return Response(status=HTTPStatus.NO_CONTENT)

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("posts", __name__, url_prefix="/posts")
        bp.add_url_rule("", view_func=self.list_posts, methods=["GET"])
        bp.add_url_rule("", view_func=self.create_post, methods=["POST"])
        bp.add_url_rule("/<int:post_id>", view_func=self.get_post, methods=["GET"])
        bp.add_url_rule("/<int:post_id>", view_func=self.update_post, methods=["PUT"])
        bp.add_url_rule("/<int:post_id>", view_func=self.delete_post, methods=["DELETE"])
        return bp
