"""Entry point for the guestbook service.

Serves the FastAPI application with Uvicorn on the host and port from
the environment (``GUESTBOOK_HOST`` / ``GUESTBOOK_PORT``, defaults
``0.0.0.0:80``).  The process exits with status 0 on a graceful
shutdown and non‑zero when startup fails, for example when the port
cannot be bound or the message log location is not writable.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from guestbook.app.core.config import settings
from guestbook.app.main import app

STARTUP_FAILURE = 3


def main() -> int:
    """Serve the app until shutdown and return the process exit code."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    asyncio.run(server.serve())
    if not server.started:
        logging.getLogger(__name__).error("Guestbook failed to start")
        return STARTUP_FAILURE
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
