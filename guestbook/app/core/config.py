"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any environment at all; inside the container
the only value normally overridden is ``GUESTBOOK_DATA_PATH``.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Guestbook"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Network binding.  Port 80 matches the container's exposed port.
    host: str = field(default_factory=lambda: _env("GUESTBOOK_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("GUESTBOOK_PORT", "80")))

    # Location of the message log.  Relative paths are resolved against
    # the current working directory by ``data_file``.
    data_path: str = field(default_factory=lambda: _env("GUESTBOOK_DATA_PATH", "messages.txt"))

    # Longest accepted message, in characters, after trimming.
    max_message_length: int = field(
        default_factory=lambda: int(_env("GUESTBOOK_MAX_MESSAGE_LENGTH", "1000"))
    )

    @property
    def data_file(self) -> Path:
        """Absolute path of the message log file."""
        return Path(self.data_path).expanduser().resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
