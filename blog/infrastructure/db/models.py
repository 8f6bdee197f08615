# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from datetime import UTC, datetime

from sqlalchemy import BigInteger, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog.infrastructure.db.session import Base

# SQLite has no native BIGSERIAL; BigInteger with an Integer variant keeps rowid autoincrement
_PK = BigInteger().with_variant(Integer, "sqlite")
# largest value a signed 64-bit INTEGER column holds
MAX_ROW_ID = 2**63 - 1


def is_storable_id(value: int) -> bool:
    return 1 <= value <= MAX_ROW_ID


class UserRow(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(_PK, primary_key=True)
    username: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )
    posts: Mapped[list["PostRow"]] = relationship(
        "PostRow", back_populates="author", passive_deletes=True
    )


class PostRow(Base):
    __tablename__ = "posts"
    id: Mapped[int] = mapped_column(_PK, primary_key=True)
    title: Mapped[str] = mapped_column(String(255))
    content: Mapped[str] = mapped_column(Text)
    author_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC), index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(UTC)
    )
    author: Mapped["UserRow"] = relationship("UserRow", back_populates="posts")
