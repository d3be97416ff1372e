"""questkv: Persistent KEY=VALUE record store for a command-line HTTP client."""

from .config import COOKIE_KEY, DEFAULT_FILENAME, resolve_path
from .errors import FileError, FormatError, StoreError
from .kv.base import RecordStore
from .kv.file import TextFile
from .kv.memory import Memory
from .store import Store, store

__all__ = [
    "COOKIE_KEY",
    "DEFAULT_FILENAME",
    "FileError",
    "FormatError",
    "Memory",
    "RecordStore",
    "Store",
    "StoreError",
    "TextFile",
    "resolve_path",
    "store",
]
