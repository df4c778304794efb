"""
Guestbook page endpoints.

``GET /`` renders the form and every stored message.  ``POST /``
appends a message and answers with a redirect back to ``GET /`` so
that refreshing the browser does not submit the message again.
Rejected submissions (missing, blank or too long) get the same
redirect and leave the log untouched.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse

from guestbook.app.api.deps import get_store
from guestbook.app.core.exceptions import ValidationError
from guestbook.app.core.storage import MessageStore
from guestbook.app.services.message_service import MessageService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def render_guestbook(store: MessageStore = Depends(get_store)) -> HTMLResponse:
    """Render the submission form and the full message list."""
    page = await MessageService.render_page(store)
    return HTMLResponse(content=page, status_code=status.HTTP_200_OK)


@router.post("/", response_class=RedirectResponse)
async def submit_message(
    message: Optional[str] = Form(None),
    store: MessageStore = Depends(get_store),
) -> RedirectResponse:
    """Append ``message`` to the log and redirect to the page.

    A ``StorageError`` raised by the append propagates to the
    application's error handler.
    """
    try:
        await MessageService.submit(store, message)
    except ValidationError as exc:
        logger.info("Rejected submission: %s", exc)
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)
