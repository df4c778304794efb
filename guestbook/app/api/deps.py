"""FastAPI dependencies shared by the guestbook routes."""

from fastapi import Request

from guestbook.app.core.storage import MessageStore


def get_store(request: Request) -> MessageStore:
    """Return the message store attached to the running application."""
    return request.app.state.store
