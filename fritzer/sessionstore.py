"""Persistence of the last known session id."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from .exceptions import StorePersistFailure

_LOGGER = logging.getLogger(__name__)

DEFAULT_SID_FILENAME = ".fritzer.sid"


def default_sid_path() -> Path:
    """Return the default location of the session id file."""
    return Path.home() / DEFAULT_SID_FILENAME


class SessionStore(ABC):
    """Base class for session id stores."""

    @abstractmethod
    async def load(self) -> str | None:
        """Return the stored session id, if any."""

    @abstractmethod
    async def save(self, sid: str) -> None:
        """Store the session id.

        Implementations raise :class:`StorePersistFailure` if the session id
        could not be stored. Failing to store never fails a login.
        """


class FileSessionStore(SessionStore):
    """Session store keeping the session id in a plain text file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path).expanduser() if path else default_sid_path()

    @property
    def path(self) -> Path:
        """Return the path of the session id file."""
        return self._path

    async def load(self) -> str | None:
        """Return the stored session id, or None if there is none."""
        return await asyncio.to_thread(self._read)

    async def save(self, sid: str) -> None:
        """Write the session id to the file."""
        await asyncio.to_thread(self._write, sid)

    def _read(self) -> str | None:
        try:
            if not self._path.exists():
                _LOGGER.debug("No session id file at %s", self._path)
                return None

            _LOGGER.info("Reading SID from file...")
            sid = self._path.read_text(encoding="ascii").strip()
        except (OSError, UnicodeDecodeError) as ex:
            _LOGGER.debug("Unable to read session id from %s: %s", self._path, ex)
            return None
        return sid or None

    def _write(self, sid: str) -> None:
        try:
            self._path.write_text(sid, encoding="ascii")
        except OSError as ex:
            raise StorePersistFailure(
                f"Unable to write session id to {self._path}: {ex}"
            ) from ex
