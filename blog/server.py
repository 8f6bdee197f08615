# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Run the HTTP and gRPC adapters in one process over one service core."""

from __future__ import annotations

from blog.app import create_app
from blog.container import Container
from blog.interfaces.grpc import create_grpc_server
from blog.shared.config import load_config
from blog.shared.logging import logger, setup_logging

GRPC_SHUTDOWN_GRACE_SECONDS = 5.0


def main() -> None:
    config = load_config()
    setup_logging(debug_mode=config.debug_logging)

    container = Container(config)
    app = create_app(container=container)

    server_config = config.server
    grpc_server, grpc_port = create_grpc_server(
        container.blog_service,
        host=server_config.grpc_host,
        port=server_config.grpc_port,
        max_workers=server_config.grpc_max_workers,
    )
    grpc_server.start()
    logger.info(f"gRPC listening on {server_config.grpc_host}:{grpc_port}")

    try:
        logger.info(f"HTTP listening on {server_config.http_host}:{server_config.http_port}")
        app.run(host=server_config.http_host, port=server_config.http_port, threaded=True)
    finally:
        grpc_server.stop(GRPC_SHUTDOWN_GRACE_SECONDS).wait()
        container.dispose()
        logger.info("Servers stopped")


if __name__ == "__main__":
    main()
