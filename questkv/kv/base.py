"""Abstract record store interface."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable

from .. import entries
from ..config import COOKIE_KEY

logger = logging.getLogger(__name__)


class RecordStore(ABC):
    """Key-value record store over one encoded ``KEY=VALUE`` buffer.

    Every operation is read-modify-write: the whole buffer is read, a new
    buffer is spliced together, and the result is written back from offset
    0. Nothing is cached between operations. Backends only provide raw
    buffer I/O.

    Args:
        strict: Raise ``FormatError`` on a line without ``=`` instead of
            skipping it.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    @abstractmethod
    def _read(self) -> bytes:
        """Return the full current buffer."""

    @abstractmethod
    def _write(self, data: bytes, truncate: bool = False) -> None:
        """Write ``data`` at offset 0, truncating to its length if asked."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resources."""

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def get(self, key: str) -> str:
        """Value of the first entry for key, or ``""`` if absent."""
        encoded = entries.check_key(key)
        data = self._read()
        span = entries.find(data, encoded, self.strict)
        if span is None:
            return ""
        return entries.decode(data[span.value_start : span.value_end])

    def append(self, key: str, value: str) -> str:
        """Append value to key's history, creating the entry if needed.

        Returns the full value stored under key afterwards.
        """
        encoded_key = entries.check_key(key)
        encoded_value = entries.check_value(value)
        data = self._read()
        span = entries.find(data, encoded_key, self.strict)
        if span is None:
            new_data = entries.add(data, encoded_key, encoded_value)
            full = encoded_value
        else:
            new_data = entries.extend(data, span, encoded_value)
            grown = len(new_data) - len(data)
            full = new_data[span.value_start : span.value_end + grown]
        self._write(new_data)
        logger.debug(
            "Appended to %s (%s, %d -> %d bytes)",
            key,
            "new" if span is None else "existing",
            len(data),
            len(new_data),
        )
        return entries.decode(full)

    def remove(self, key: str) -> bool:
        """Remove the first entry for key. Returns True if one was removed."""
        encoded = entries.check_key(key)
        data = self._read()
        span = entries.find(data, encoded, self.strict)
        if span is None:
            return False
        new_data = entries.excise(data, span)
        self._write(new_data, truncate=True)
        logger.debug("Removed %s (%d -> %d bytes)", key, len(data), len(new_data))
        return True

    def keys(self) -> Iterable[str]:
        for key, _ in self.items():
            yield key

    def items(self) -> Iterable[tuple[str, str]]:
        seen: set[bytes] = set()
        for _, key, value in entries.entries(self._read(), self.strict):
            if key in seen:
                continue
            seen.add(key)
            yield entries.decode(key), entries.decode(value)

    def __contains__(self, key: str) -> bool:
        encoded = entries.check_key(key)
        return entries.find(self._read(), encoded, self.strict) is not None

    def history(self, key: str) -> list[str]:
        """Split key's value on ``"; "``; empty list if absent."""
        return entries.split_history(self.get(key))

    def get_cookie(self) -> str:
        return self.get(COOKIE_KEY)

    def set_cookie(self, cookie: str) -> str:
        return self.append(COOKIE_KEY, cookie)

    def clear_cookie(self) -> bool:
        return self.remove(COOKIE_KEY)
