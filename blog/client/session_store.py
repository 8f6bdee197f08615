# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol

from blog.shared.logging import logger

DEFAULT_TOKEN_FILE = Path.home() / ".blog_token"
_TOKEN_FILE_MODE = 0o600


class SessionStore(Protocol):
    """A single slot holding the current session token."""

    def load(self) -> str | None: ...
    def save(self, token: str) -> None: ...
    def clear(self) -> None: ...


class MemorySessionStore(SessionStore):
    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def load(self) -> str | None:
        return self._token

    def save(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileSessionStore(SessionStore):
    """Token slot backed by a file readable only by its owner."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_TOKEN_FILE

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self._path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, _TOKEN_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(token)
        # O_CREAT mode does not apply to a file that already existed
        os.chmod(self._path, _TOKEN_FILE_MODE)
        logger.debug(f"FileSessionStore: token saved path={self._path}")

    def clear(self) -> None:
        try:
            self._path.unlink()
            logger.debug(f"FileSessionStore: token removed path={self._path}")
        except FileNotFoundError:
            return
