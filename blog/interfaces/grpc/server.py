# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from concurrent import futures

import grpc

from blog.application.interfaces import BlogServiceCore
from blog.shared.logging import logger

from .servicer import BlogServicer


def create_grpc_server(
    service: BlogServiceCore,
    *,
    host: str,
    port: int,
    max_workers: int = 10,
) -> tuple[grpc.Server, int]:
    """Build (but do not start) a gRPC server; returns it with the bound port."""
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="grpc"))
    server.add_generic_rpc_handlers((BlogServicer(service).generic_handler(),))
    bound_port = server.add_insecure_port(f"{host}:{port}")
    if not bound_port:
        raise RuntimeError(f"Unable to bind gRPC listener on {host}:{port}")
    logger.info(f"gRPC server bound on {host}:{bound_port} workers={max_workers}")
    return server, bound_port
