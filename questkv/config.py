"""Location and constants for the record store file."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import FileError

DEFAULT_FILENAME = ".questconfig"
CONFIG_ENV = "QUESTKV_PATH"
COOKIE_KEY = "COOKIE"
FILE_MODE = 0o755


def resolve_path(filename: str | os.PathLike[str] | None = None) -> Path:
    """Resolve where the store file lives.

    An absolute ``filename`` is used as is and a relative one is taken from
    the user's home directory. Without a ``filename``, ``$QUESTKV_PATH``
    wins when set, and failing that ``~/.questconfig`` is used.
    """
    if filename is not None:
        candidate = Path(filename).expanduser()
        if candidate.is_absolute():
            return candidate
    else:
        override = os.environ.get(CONFIG_ENV)
        if override:
            return Path(override).expanduser()

    try:
        home = Path.home()
    except RuntimeError as e:
        raise FileError("Cannot resolve home directory") from e
    return home / (filename if filename is not None else DEFAULT_FILENAME)
