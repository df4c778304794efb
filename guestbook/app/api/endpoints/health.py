"""
Health and JSON read endpoints.

``GET /health`` is intended for the container's health check: it
reports whether the message log location is usable.  ``GET
/messages`` returns the log as JSON, which is what
``guestbook_client.py`` reads.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from guestbook.app.api.deps import get_store
from guestbook.app.core.exceptions import StorageError
from guestbook.app.core.storage import MessageStore
from guestbook.app.schemas.message import MessageRead
from guestbook.app.services.message_service import MessageService

router = APIRouter()


@router.get("/health")
async def health(store: MessageStore = Depends(get_store)) -> JSONResponse:
    try:
        store.check()
    except StorageError:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable"},
        )
    return JSONResponse(content={"status": "ok"})


@router.get("/messages", response_model=List[MessageRead])
async def list_messages(store: MessageStore = Depends(get_store)) -> List[MessageRead]:
    """Return every stored message in log order."""
    return await MessageService.list_message_reads(store)
