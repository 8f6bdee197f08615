# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import BlogServiceCore, Clock
from .service import BlogService

__all__ = ["BlogService", "BlogServiceCore", "Clock"]
