"""Record store backed by a single text file, spliced in place."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..config import FILE_MODE, resolve_path
from ..errors import FileError
from .base import RecordStore

logger = logging.getLogger(__name__)


class TextFile(RecordStore):
    """Record store over one open read-write file handle.

    The store assumes it is the only writer for the lifetime of the
    handle; there is no locking. ``remove`` writes the shorter buffer and
    then truncates, so a crash between the two steps can leave stale
    trailing bytes past the intended end of file.

    Use ``TextFile.open(path)`` rather than the constructor.
    """

    def __init__(self, path: Path, fd, strict: bool = False) -> None:
        super().__init__(strict=strict)
        self.path = path
        self._fd = fd

    @classmethod
    def open(cls, path: str | os.PathLike[str] | None = None, strict: bool = False) -> TextFile:
        """Open (creating if absent) the store file at path.

        A relative path is taken relative to the home directory.
        """
        full_path = resolve_path(path)
        try:
            handle = os.open(full_path, os.O_RDWR | os.O_CREAT, FILE_MODE)
        except OSError as e:
            raise FileError("Cannot open store", str(full_path)) from e
        try:
            fd = os.fdopen(handle, "r+b")
        except OSError as e:
            os.close(handle)
            raise FileError("Cannot open store", str(full_path)) from e
        logger.debug("Opened %s", full_path)
        return cls(full_path, fd, strict=strict)

    @property
    def closed(self) -> bool:
        return self._fd.closed

    def close(self) -> None:
        if not self._fd.closed:
            self._fd.close()
            logger.debug("Closed %s", self.path)

    def read(self) -> bytes:
        """Raw file content."""
        return self._read()

    def _check_open(self) -> None:
        if self._fd.closed:
            raise FileError("Store is closed", str(self.path))

    def _read(self) -> bytes:
        self._check_open()
        try:
            self._fd.seek(0)
            return self._fd.read()
        except OSError as e:
            raise FileError("Cannot read store", str(self.path)) from e

    def _write(self, data: bytes, truncate: bool = False) -> None:
        self._check_open()
        try:
            self._fd.seek(0)
            self._fd.write(data)
            self._fd.flush()
            if truncate:
                self._fd.truncate(len(data))
        except OSError as e:
            raise FileError("Cannot write store", str(self.path)) from e
