# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

AUTHORIZATION_KEY = "authorization"
_BEARER_PREFIX = "bearer "


def parse_bearer(header: str | None) -> str | None:
    """Return the token of an ``Authorization: Bearer <token>`` value, if any."""
    if not header or header[: len(_BEARER_PREFIX)].lower() != _BEARER_PREFIX:
        return None
    return header[len(_BEARER_PREFIX):].strip() or None


def bearer_value(token: str) -> str:
    return f"Bearer {token}"
