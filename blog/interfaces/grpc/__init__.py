# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .server import create_grpc_server
from .servicer import BlogServicer

__all__ = ["BlogServicer", "create_grpc_server"]
