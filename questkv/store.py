"""Store protocol and factory function."""

from __future__ import annotations

import os
from typing import Iterable, Literal, Protocol, runtime_checkable


@runtime_checkable
class Store(Protocol):
    """Protocol for the record store surface used by collaborators.

    Implementations: ``TextFile``, ``Memory``.
    """

    def get(self, key: str) -> str: ...
    def append(self, key: str, value: str) -> str: ...
    def remove(self, key: str) -> bool: ...
    def keys(self) -> Iterable[str]: ...
    def __contains__(self, key: str) -> bool: ...
    def get_cookie(self) -> str: ...
    def set_cookie(self, cookie: str) -> str: ...
    def clear_cookie(self) -> bool: ...
    def close(self) -> None: ...


def store(
    storage: Literal["file", "memory"] = "file",
    *,
    path: str | os.PathLike[str] | None = None,
    strict: bool = False,
) -> Store:
    """Create a Store with sensible defaults.

    Args:
        storage: ``"file"`` (default) for the on-disk store, or
            ``"memory"`` for a throwaway in-process buffer.
        path: Store file for ``storage="file"``. Relative paths are
            taken from the home directory; defaults to ``~/.questconfig``
            (or ``$QUESTKV_PATH``).
        strict: Raise ``FormatError`` on malformed lines instead of
            skipping them.

    Returns:
        A ``Store`` instance (``TextFile`` or ``Memory``).
    """
    if storage == "file":
        from .kv.file import TextFile

        return TextFile.open(path, strict=strict)

    if storage == "memory":
        if path is not None:
            raise ValueError("path is only valid for storage='file'")
        from .kv.memory import Memory

        return Memory(strict=strict)

    raise ValueError(f"Unknown storage: {storage!r}")
