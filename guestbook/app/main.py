"""
Main entrypoint for the Guestbook service.

This module assembles the FastAPI application, sets up logging,
attaches the message store and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn guestbook.app.main:app --port 8080
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from .api.router import router
from .core.config import settings
from .core.exceptions import StorageError
from .core.logging_config import setup_logging
from .core.storage import MessageStore, get_message_store


logger = logging.getLogger(__name__)


def create_app(store: Optional[MessageStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[MessageStore]
        Backend for the message log.  Defaults to the file named by
        ``settings.data_path``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else get_message_store()

    app.include_router(router)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> PlainTextResponse:
        # The caller only learns that the request failed; details go to the log.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
        return PlainTextResponse(
            "Internal Server Error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    @app.on_event("startup")
    async def startup_event() -> None:
        # Refuse to start when the log location is unusable so the
        # process exits non‑zero instead of failing every request.
        app.state.store.check()
        logger.info("Guestbook ready, message log: %r", app.state.store)

    return app


app = create_app()
