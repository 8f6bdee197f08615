# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .sqlalchemy_post_repository import SqlAlchemyPostRepository

__all__ = ["SqlAlchemyPostRepository"]
