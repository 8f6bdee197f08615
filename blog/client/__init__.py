# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .blog_client import BlogClient, SessionStatus
from .errors import ClientError, NotLoggedInError, TransportUnavailableError
from .grpc_transport import GrpcTransport
from .http_transport import HttpTransport
from .session_store import FileSessionStore, MemorySessionStore, SessionStore
from .transport import Transport

__all__ = [
    "BlogClient",
    "ClientError",
    "FileSessionStore",
    "GrpcTransport",
    "HttpTransport",
    "MemorySessionStore",
    "NotLoggedInError",
    "SessionStatus",
    "SessionStore",
    "Transport",
    "TransportUnavailableError",
]
