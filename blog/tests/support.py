"""In-memory fakes and helpers shared by the test modules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from blog.domain.posts.entities import Post, PostChanges, PostDraft
from blog.domain.posts.exceptions import UnknownAuthorError
from blog.domain.posts.repositories import PostRepository
from blog.domain.users.entities import User
from blog.domain.users.exceptions import UserAlreadyExistsError
from blog.domain.users.repositories import PasswordHasher, UserRepository

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1
        self.posts: "InMemoryPostRepository | None" = None

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def add(self, user: User) -> User:
        for existing in self._users.values():
            if existing.username == user.username or existing.email == user.email:
                raise UserAlreadyExistsError()
        new_user = replace(user, id=self._seq)
        self._seq += 1
        self._users[new_user.id] = new_user
        return new_user

    def delete(self, user_id: int) -> bool:
        removed = self._users.pop(user_id, None) is not None
        if removed and self.posts is not None:
            self.posts.drop_author(user_id)
        return removed


class InMemoryPostRepository(PostRepository):
    def __init__(self, users: InMemoryUserRepository) -> None:
        self._users = users
        self._posts: dict[int, Post] = {}
        self._seq = 1
        users.posts = self

    def _ordered(self) -> list[Post]:
        return sorted(self._posts.values(), key=lambda p: (p.created_at, p.id), reverse=True)

    def add(self, draft: PostDraft) -> Post:
        if self._users.find_by_id(draft.author_id) is None:
            raise UnknownAuthorError(draft.author_id)
        post = Post(
            id=self._seq,
            title=draft.title,
            content=draft.content,
            author_id=draft.author_id,
            created_at=draft.created_at,
            updated_at=draft.created_at,
        )
        self._seq += 1
        self._posts[post.id] = post
        return post

    def find_by_id(self, post_id: int) -> Post | None:
        return self._posts.get(post_id)

    def list(self, limit: int, offset: int) -> tuple[Sequence[Post], int]:
        ordered = self._ordered()
        return ordered[offset : offset + limit], len(ordered)

    def update(self, post_id: int, changes: PostChanges) -> Post | None:
        post = self._posts.get(post_id)
        if post is None:
            return None
        updated = replace(
            post,
            title=changes.title if changes.title is not None else post.title,
            content=changes.content if changes.content is not None else post.content,
            updated_at=changes.updated_at,
        )
        self._posts[post_id] = updated
        return updated

    def delete(self, post_id: int) -> bool:
        return self._posts.pop(post_id, None) is not None

    def drop_author(self, author_id: int) -> None:
        for post_id in [p.id for p in self._posts.values() if p.author_id == author_id]:
            del self._posts[post_id]


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


