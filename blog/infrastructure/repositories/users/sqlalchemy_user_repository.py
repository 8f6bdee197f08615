# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from blog.domain.users.entities import User as DomainUser
from blog.domain.users.exceptions import UserAlreadyExistsError
from blog.domain.users.repositories import UserRepository
from blog.infrastructure.db.models import UserRow, is_storable_id
from blog.infrastructure.db.session import SessionFactory, session_scope
from blog.infrastructure.repositories._time import as_utc
from blog.shared.errors import InfrastructureError
from blog.shared.logging import logger


def _to_domain(row: UserRow) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_username(self, username: str) -> DomainUser | None:
        try:
            with session_scope(self._session_factory) as session:
                row = session.scalars(select(UserRow).where(UserRow.username == username)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception(f"users.find_by_username: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc

    def find_by_id(self, user_id: int) -> DomainUser | None:
        if not is_storable_id(user_id):
            return None
        try:
            with session_scope(self._session_factory) as session:
                row = session.get(UserRow, user_id)
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.exception(f"users.find_by_id: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc

    def add(self, user: DomainUser) -> DomainUser:
        # uniqueness is decided by the constraint, so two racing sign-ups cannot both win
        try:
            with session_scope(self._session_factory) as session:
                row = UserRow(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                persisted = _to_domain(row)
        except IntegrityError as exc:
            logger.info(f"users.add: duplicate username or email username={user.username}")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.exception(f"users.add: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc
        return persisted

    def delete(self, user_id: int) -> bool:
        if not is_storable_id(user_id):
            return False
        try:
            with session_scope(self._session_factory) as session:
                result = session.execute(delete(UserRow).where(UserRow.id == user_id))
                return result.rowcount > 0
        except SQLAlchemyError as exc:
            logger.exception(f"users.delete: storage failure {type(exc).__name__}")
            raise InfrastructureError() from exc
