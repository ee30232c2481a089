"""Listen socket setup and uvicorn hand-off."""

import logging
import socket

import uvicorn

from app.config import settings
from app.main import app

logger = logging.getLogger(__name__)

HOST = "0.0.0.0"


def bind_listen_socket(host: str, port: int) -> socket.socket:
    """Bind and listen on (host, port). Raises OSError or OverflowError."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen()
    except (OSError, OverflowError):
        sock.close()
        raise
    return sock


def serve(port: int | None = None) -> None:
    """Bind the listen port and serve the app until the process is stopped.

    Exits with status 1 if the port cannot be bound.
    """
    port = settings.port if port is None else port

    try:
        sock = bind_listen_socket(HOST, port)
    except (OSError, OverflowError) as e:
        logger.error(f"failed to bind {HOST}:{port}: {e}")
        raise SystemExit(1)

    logger.info(f"sample-app listening on {port}")

    config = uvicorn.Config(app, host=HOST, port=port)
    uvicorn.Server(config).run(sockets=[sock])
