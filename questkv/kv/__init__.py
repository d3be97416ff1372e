"""Record store backends."""

from .base import RecordStore
from .file import TextFile
from .memory import Memory

__all__ = ["Memory", "RecordStore", "TextFile"]
