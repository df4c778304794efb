"""
Top‑level router.

The guestbook page is served from the site root; the health probe and
the JSON message listing sit next to it.
"""

from fastapi import APIRouter

from .endpoints import guestbook, health

router = APIRouter()

router.include_router(guestbook.router, tags=["guestbook"])
router.include_router(health.router, tags=["health"])
