# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blog.domain.posts.entities import Post as DomainPost
from blog.domain.posts.entities import PostChanges, PostDraft
from blog.domain.posts.exceptions import UnknownAuthorError
from blog.domain.posts.repositories import PostRepository
from blog.infrastructure.db.models import PostRow, is_storable_id
from blog.infrastructure.db.session import SessionFactory, session_scope
from blog.infrastructure.repositories._time import as_utc
from blog.shared.errors import InfrastructureError
from blog.shared.logging import logger

_NEWEST_FIRST = (PostRow.created_at.desc(), PostRow.id.desc())


def _to_domain(row: PostRow) -> DomainPost:
    return DomainPost(
        id=row.id,
        title=row.title,
        content=row.content,
        author_id=row.author_id,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlAlchemyPostRepository(PostRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def add(self, draft: PostDraft) -> DomainPost:
        try:
            with session_scope(self._session_factory) as session:
                row = PostRow(
                    title=draft.title,
                    content=draft.content,
                    author_id=draft.author_id,
                    created_at=draft.created_at,
                    updated_at=draft.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                persisted = _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"posts.add: author missing author_id={draft.author_id}")
            raise UnknownAuthorError(draft.author_id) from exc
        except SQLAlchemyError as exc:
            logger.exception(f"posts.add: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc
        return persisted

    def find_by_id(self, post_id: int) -> DomainPost | None:
        if not is_storable_id(post_id):
            return None
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(PostRow, post_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception(f"posts.find_by_id: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc

    def list(self, limit: int, offset: int) -> tuple[Sequence[DomainPost], int]:
        try:
            with session_scope(self._session_factory) as session:
                total = session.scalar(select(func.count()).select_from(PostRow)) or 0
                rows = session.scalars(
                    select(PostRow).order_by(*_NEWEST_FIRST).limit(limit).offset(offset)
                ).all()
                return [_to_domain(row) for row in rows], int(total)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.list: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc

    def update(self, post_id: int, changes: PostChanges) -> DomainPost | None:
        if not is_storable_id(post_id):
            return None
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(PostRow, post_id)
                if row is None:
                    return None
                if changes.title is not None:
                    row.title = changes.title
                if changes.content is not None:
                    row.content = changes.content
                row.updated_at = changes.updated_at
                session.flush()
                return _to_domain(row)
        except SQLAlchemyError as exc:
            logger.exception(f"posts.update: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc

    def delete(self, post_id: int) -> bool:
        if not is_storable_id(post_id):
            return False
        try:
            with session_scope(self._session_factory) as session:
                result = session.execute(delete(PostRow).where(PostRow.id == post_id))
                return result.rowcount > 0
        except SQLAlchemyError as exc:
            logger.exception(f"posts.delete: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc
