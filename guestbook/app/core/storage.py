"""
Storage for the message log.

The log is an ordered, append‑only sequence of single‑line messages.
Services talk to it through the two operations of ``MessageStore``:
``append`` and ``read_all``.  ``FileMessageStore`` keeps the log as a
newline‑delimited UTF‑8 text file.  To move the log elsewhere (an
object store, a key‑value store) implement another subclass and pass
it to ``create_app``.

Failures surface as ``StorageError``; logging them is left to the
application's error handler.
"""

import os
from pathlib import Path
from typing import List, Union

from .config import settings
from .exceptions import StorageError


class MessageStore:
    """Interface for message log backends."""

    def append(self, line: str) -> None:
        """Append a single message to the end of the log."""
        raise NotImplementedError

    def read_all(self) -> List[str]:
        """Return every stored message in append order."""
        raise NotImplementedError

    def check(self) -> None:
        """Raise ``StorageError`` if the backend cannot be used."""


class FileMessageStore(MessageStore):
    """Message log kept in a newline‑delimited text file.

    The file is created on the first append.  Lines are written through
    an ``O_APPEND`` descriptor, so an existing line is never rewritten
    and a new line always lands at the end.  A line is stored whole or
    not at all: if a write fails partway, the file is cut back to its
    previous size before the error is raised.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FileMessageStore({str(self.path)!r})"

    def append(self, line: str) -> None:
        data = (line + "\n").encode("utf-8")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_APPEND | os.O_CREAT, 0o644)
        except OSError as exc:
            raise StorageError(f"Cannot write message log {self.path}") from exc
        try:
            start = os.fstat(fd).st_size
            try:
                self._write_all(fd, data)
            except OSError as exc:
                os.ftruncate(fd, start)
                raise StorageError(f"Cannot write message log {self.path}") from exc
        except OSError as exc:
            # fstat or the rollback itself failed.
            raise StorageError(f"Cannot write message log {self.path}") from exc
        finally:
            os.close(fd)

    @staticmethod
    def _write_all(fd: int, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(fd, view)
            if written <= 0:
                raise OSError("short write to message log")
            view = view[written:]

    def read_all(self) -> List[str]:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                content = fh.read()
        except FileNotFoundError:
            # Nothing has been submitted yet.
            return []
        except (OSError, UnicodeError) as exc:
            raise StorageError(f"Cannot read message log {self.path}") from exc
        return [line for line in content.split("\n") if line.strip()]

    def check(self) -> None:
        """Verify the log (or the directory it will be created in) is usable."""
        if self.path.exists():
            if self.path.is_dir():
                raise StorageError(f"Message log path {self.path} is a directory")
            if not os.access(self.path, os.R_OK | os.W_OK):
                raise StorageError(f"Message log {self.path} is not readable and writable")
            return
        # Walk up to the nearest existing ancestor; that is where the
        # first append will create the missing directories.
        parent = self.path.parent
        while not parent.exists() and parent != parent.parent:
            parent = parent.parent
        if not parent.is_dir() or not os.access(parent, os.W_OK | os.X_OK):
            raise StorageError(f"Cannot create message log under {parent}")


def get_message_store() -> MessageStore:
    """Build the store described by the current settings."""
    return FileMessageStore(settings.data_file)
