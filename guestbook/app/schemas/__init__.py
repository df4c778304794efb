"""
Pydantic schema definitions for guestbook payloads.

Schemas are kept apart from the storage layer, which deals only in
plain lines of text.
"""
