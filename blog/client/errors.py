# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from blog.shared.errors import AppError, ErrorKind


class ClientError(AppError):
    """A failed call as seen by the caller, with the server's error kind."""

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(kind=kind, message=message)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class TransportUnavailableError(ClientError):
    def __init__(self, message: str = "Server is unreachable") -> None:
        super().__init__(ErrorKind.INTERNAL, message)


class NotLoggedInError(ClientError):
    def __init__(self) -> None:
        super().__init__(ErrorKind.UNAUTHENTICATED, "Not logged in; run `login` first")
