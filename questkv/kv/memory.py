"""In-memory record store."""

from .. import entries
from .base import RecordStore


class Memory(RecordStore):
    """A memory-backed record store.

    Holds the same encoded buffer a ``TextFile`` would write to disk, so
    splicing behaves byte-for-byte identically.
    """

    def __init__(self, data: bytes = b"", strict: bool = False) -> None:
        super().__init__(strict=strict)
        if not isinstance(data, bytes):
            raise TypeError(f"Expected bytes, got {type(data).__name__}")
        self.data = data

    @classmethod
    def from_items(cls, items: dict[str, str], strict: bool = False) -> "Memory":
        store = cls(strict=strict)
        for key, value in items.items():
            store.data = entries.add(
                store.data, entries.check_key(key), entries.check_value(value)
            )
        return store

    def _read(self) -> bytes:
        return self.data

    def _write(self, data: bytes, truncate: bool = False) -> None:
        self.data = data

    def close(self) -> None:
        pass
