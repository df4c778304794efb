"""
Service layer for guestbook messages.

Two operations make up the guestbook:

* the read path (:meth:`MessageService.render_page`), which loads the
  whole log and renders it, and
* the write path (:meth:`MessageService.submit`), which validates a
  submission and appends it to the log.

The write path never renders anything; the endpoint answers a
successful submission with a redirect to the read path.
"""

import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from guestbook.app.core.config import settings
from guestbook.app.core.exceptions import ValidationError
from guestbook.app.core.storage import MessageStore
from guestbook.app.schemas.message import MessageCreate, MessageRead
from guestbook.app.services.render_service import RenderService


logger = logging.getLogger(__name__)


class MessageService:
    """Service for reading and appending guestbook messages."""

    @classmethod
    def validate(cls, raw: Optional[str], max_length: Optional[int] = None) -> str:
        """Return the normalised message text or raise ``ValidationError``.

        The text is trimmed and any line breaks are collapsed into a
        single space.  Missing, blank and over‑long submissions are
        rejected.
        """
        limit = settings.max_message_length if max_length is None else max_length
        try:
            message = MessageCreate(content=raw)
        except PydanticValidationError as exc:
            errors = exc.errors()
            reason = errors[0]["msg"] if errors else "Invalid message"
            raise ValidationError(reason) from exc
        if len(message.content) > limit:
            raise ValidationError(f"Message longer than {limit} characters")
        return message.content

    @classmethod
    async def list_messages(cls, store: MessageStore) -> List[str]:
        """Return all stored messages in log order."""
        return store.read_all()

    @classmethod
    async def list_message_reads(cls, store: MessageStore) -> List[MessageRead]:
        """Return all stored messages with their positions."""
        lines = await cls.list_messages(store)
        return [MessageRead(position=index, content=line) for index, line in enumerate(lines)]

    @classmethod
    async def render_page(
        cls,
        store: MessageStore,
        title: Optional[str] = None,
        max_length: Optional[int] = None,
    ) -> str:
        """Load the log and render the complete guestbook page.

        Raises ``StorageError`` if the log cannot be read; in that case
        nothing is rendered.
        """
        lines = await cls.list_messages(store)
        return RenderService.render_page(
            lines,
            title=title or settings.project_name,
            max_length=settings.max_message_length if max_length is None else max_length,
        )

    @classmethod
    async def submit(
        cls,
        store: MessageStore,
        raw: Optional[str],
        max_length: Optional[int] = None,
    ) -> str:
        """Validate ``raw`` and append it to the log.

        Returns the stored text.  Raises ``ValidationError`` (nothing is
        appended) or ``StorageError`` (the append failed and the message
        must not be considered stored).
        """
        content = cls.validate(raw, max_length=max_length)
        store.append(content)
        logger.info("Appended message (%d characters)", len(content))
        return content
