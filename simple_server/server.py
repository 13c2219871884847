from __future__ import annotations

import logging
import signal
import socket
from types import FrameType
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .config import Settings, load_settings
from .main import app

logger = logging.getLogger(__name__)


class GracefulServer(uvicorn.Server):
    """uvicorn server that treats SIGTERM as a clean stop.

    New connections are refused as soon as the flag is set; connections
    already accepted are allowed to finish without a deadline.
    """

    def __init__(self, config: uvicorn.Config) -> None:
        super().__init__(config)
        self.public_port = 0
        self.exit_signal: Optional[int] = None

    def handle_exit(self, sig: int, frame: Optional[FrameType]) -> None:
        # Runs inside the signal handler: only flip flags here, log later.
        self.exit_signal = sig
        # A second SIGINT skips the wait for open connections.
        if self.should_exit and sig == signal.SIGINT:
            self.force_exit = True
        else:
            self.should_exit = True

    async def startup(self, sockets: Optional[list[socket.socket]] = None) -> None:
        await super().startup(sockets=sockets)
        if not self.started:
            return
        logger.info("Server is running on http://localhost:%d", self.public_port)
        logger.info("Listening for requests...")

    async def shutdown(self, sockets: Optional[list[socket.socket]] = None) -> None:
        if self.exit_signal is not None:
            name = signal.Signals(self.exit_signal).name
            logger.info("Received %s, shutting down gracefully...", name)
        await super().shutdown(sockets=sockets)


def bind_socket(settings: Settings) -> socket.socket:
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((settings.host, settings.port))
    except OSError as exc:
        sock.close()
        logger.error("Server error: %s", exc.strerror or exc)
        raise
    sock.set_inheritable(True)
    return sock


class Listener:
    """Handle on one bound socket and the uvicorn server running on it."""

    def __init__(self, application: FastAPI, settings: Settings) -> None:
        self.settings = settings
        self.socket = bind_socket(settings)
        self.server = GracefulServer(uvicorn.Config(application, log_level="info"))
        self.server.public_port = self.port

    @property
    def port(self) -> int:
        return self.socket.getsockname()[1]

    @property
    def started(self) -> bool:
        return self.server.started

    def serve(self) -> None:
        """Block until the server has been asked to stop and has drained."""
        try:
            self.server.run(sockets=[self.socket])
        finally:
            self.socket.close()
        if not self.server.started:
            raise RuntimeError("server failed to start")
        logger.info("Server closed")

    def close(self) -> None:
        self.server.should_exit = True


def run(settings: Optional[Settings] = None) -> None:
    listener = Listener(app, settings or load_settings())
    listener.serve()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run()


if __name__ == "__main__":
    main()
