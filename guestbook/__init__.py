"""
Top‑level package for the Guestbook service.

The service itself lives in the ``app`` subpackage and can be
imported as ``guestbook.app.main``.  This package provides no public
exports.
"""

__all__ = []
