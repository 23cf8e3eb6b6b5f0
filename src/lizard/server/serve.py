"""Serving a lizard App over HTTP with uvicorn.

Uvicorn's ``run()`` takes an import string or an ASGI callable and blocks
without giving back a handle. Lizard needs the handle so that
``App.stop()`` can ask a running server to exit, so it builds a
``uvicorn.Server`` directly.
"""

import logging

import uvicorn

logger = logging.getLogger("lizard.server")


def create_server(
    app: object,
    host: str,
    port: int,
    *,
    log_level: str = "info",
    access_log: bool = True,
) -> uvicorn.Server:
    """Build (but do not start) a uvicorn server for *app*.

    The lifespan protocol is switched off: a lizard App has no startup or
    shutdown hooks and freezes itself on the first request.
    """
    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        access_log=access_log,
        lifespan="off",
    )
    return uvicorn.Server(config)


def run_server(server: uvicorn.Server) -> None:
    """Run *server* until it is stopped (blocks)."""
    logger.info("Server is listening on %s:%d", server.config.host, server.config.port)
    server.run()
