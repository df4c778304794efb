"""
Pydantic schemas for guestbook messages.

A message is a single line of text.  ``MessageCreate`` normalises a
raw submission into that shape; ``MessageRead`` is the JSON view of a
stored message together with its position in the log.
"""

import re

from pydantic import BaseModel, Field, validator


_LINE_BREAKS = re.compile(r"[\r\n]+")


class MessageCreate(BaseModel):
    """Schema for a new guestbook submission."""

    content: str = Field(..., description="Message text, trimmed and on a single line")

    @validator("content", pre=True)
    def normalise_content(cls, v):
        if v is None:
            raise ValueError("Message is required")
        if not isinstance(v, str):
            raise ValueError("Message must be a string")
        # One submission is one line of the log.
        v = _LINE_BREAKS.sub(" ", v).strip()
        if not v:
            raise ValueError("Message must not be empty")
        return v


class MessageRead(BaseModel):
    """Schema for reading a stored message."""

    position: int = Field(..., description="Zero‑based index of the message in the log")
    content: str
