# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .jwt_tokens import JwtTokenIssuer
from .password_hashing import WerkzeugPasswordHasher

__all__ = ["JwtTokenIssuer", "WerkzeugPasswordHasher"]
