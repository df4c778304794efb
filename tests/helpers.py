"""Helpers shared by the guestbook tests."""

from typing import List, Optional

from guestbook.app.core.storage import MessageStore


class MemoryMessageStore(MessageStore):
    """Message log held in a list."""

    def __init__(self, lines: Optional[List[str]] = None) -> None:
        self._lines: List[str] = list(lines or [])

    def append(self, line: str) -> None:
        self._lines.append(line)

    def read_all(self) -> List[str]:
        return [line for line in self._lines if line.strip()]


def list_items(html: str) -> List[str]:
    """Return the inner text of every ``<li>`` on a rendered page."""
    items = []
    for chunk in html.split("<li>")[1:]:
        items.append(chunk.split("</li>", 1)[0])
    return items
