"""
Error types raised by the guestbook.

``ValidationError`` is recovered inside the service layer and never
reaches the client as an error.  ``StorageError`` propagates to the
application's exception handler and becomes a generic 500 response.
"""


class GuestbookError(Exception):
    """Base class for guestbook errors."""


class ValidationError(GuestbookError):
    """A submitted message is missing, blank or too long."""


class StorageError(GuestbookError):
    """The message log could not be read or written."""
