"""
Application package initializer.

The guestbook is a single page backed by an append‑only message log.
Configuration, logging and storage live under ``core``; the read and
write paths are implemented in ``services`` and exposed by the
routers in ``api/endpoints``.
"""

from .main import app  # noqa: F401
