"""Line scanning and byte splicing over an encoded ``KEY=VALUE`` buffer.

Entries are joined by a single ``\\n`` with no trailing newline, so a
buffer of ``n`` entries is exactly ``sum(len(entry)) + n - 1`` bytes long.
Every function here is pure: it takes the current buffer and returns a
new one, leaving I/O to the backends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .errors import FormatError

logger = logging.getLogger(__name__)

NEWLINE = b"\n"
SEPARATOR = b"="
HISTORY_SEPARATOR = "; "
ENCODING = "utf-8"
ERRORS = "surrogateescape"


@dataclass(frozen=True)
class Line:
    """Offsets of one line; ``end`` excludes the terminating newline."""

    number: int
    start: int
    end: int


@dataclass(frozen=True)
class Span:
    """Offsets of a located entry.

    ``line_start`` is where the key begins (0 or just past a newline),
    ``value_start`` is just past the ``=``, and ``value_end`` is the index
    of the next newline or the buffer length.
    """

    line_start: int
    value_start: int
    value_end: int


def check_key(key: str) -> bytes:
    """Validate a key and return its encoding."""
    if not isinstance(key, str):
        raise TypeError(f"Expected str key, got {type(key).__name__}")
    if not key:
        raise ValueError("Key must not be empty")
    if "=" in key or "\n" in key:
        raise ValueError(f"Key must not contain '=' or newline: {key!r}")
    return key.encode(ENCODING, ERRORS)


def check_value(value: str) -> bytes:
    """Validate a value and return its encoding."""
    if not isinstance(value, str):
        raise TypeError(f"Expected str value, got {type(value).__name__}")
    if "\n" in value:
        raise ValueError("Value must not contain a newline")
    return value.encode(ENCODING, ERRORS)


def decode(raw: bytes) -> str:
    """Decode stored bytes; undecodable bytes round-trip as lone surrogates."""
    return raw.decode(ENCODING, ERRORS)


def iter_lines(data: bytes) -> Iterator[Line]:
    if not data:
        return
    start = 0
    number = 1
    while True:
        end = data.find(NEWLINE, start)
        if end == -1:
            yield Line(number, start, len(data))
            return
        yield Line(number, start, end)
        start = end + 1
        number += 1


def parse(data: bytes, line: Line, strict: bool = False) -> tuple[bytes, bytes] | None:
    """Split a line once on the first ``=``.

    Blank lines are not entries and are skipped silently. Returns None for
    any other line without ``=`` (logged and skipped), or raises
    ``FormatError`` when ``strict`` is set.
    """
    raw = data[line.start : line.end]
    if not raw:
        return None
    key, sep, value = raw.partition(SEPARATOR)
    if not sep:
        if strict:
            raise FormatError(line.number, raw)
        logger.warning("Skipping malformed line %d (no '=')", line.number)
        return None
    return key, value


def entries(data: bytes, strict: bool = False) -> Iterator[tuple[Line, bytes, bytes]]:
    """Yield ``(line, key, value)`` for every well-formed line in file order."""
    for line in iter_lines(data):
        parsed = parse(data, line, strict)
        if parsed is not None:
            yield line, parsed[0], parsed[1]


def find(data: bytes, key: bytes, strict: bool = False) -> Span | None:
    """Locate the first entry for ``key``.

    Lines are anchored at the buffer start or just past a newline, so a key
    that merely appears inside another entry's value never matches.
    """
    for line, candidate, _ in entries(data, strict):
        if candidate == key:
            value_start = line.start + len(key) + len(SEPARATOR)
            return Span(line.start, value_start, line.end)
    return None


def _check_span(data: bytes, span: Span) -> None:
    if not 0 <= span.line_start < span.value_start <= span.value_end <= len(data):
        raise ValueError(f"Span {span} out of bounds for {len(data)} bytes")
    if span.line_start > 0 and data[span.line_start - 1 : span.line_start] != NEWLINE:
        raise ValueError(f"Span {span} is not anchored at a line start")


def extend(data: bytes, span: Span, value: bytes) -> bytes:
    """Splice ``"; " + value`` onto the end of an existing entry's value."""
    _check_span(data, span)
    insert = HISTORY_SEPARATOR.encode(ENCODING) + value
    return data[: span.value_end] + insert + data[span.value_end :]


def add(data: bytes, key: bytes, value: bytes) -> bytes:
    """Append a new ``KEY=VALUE`` entry at the end of the buffer.

    A trailing newline left by an editor is reused as the separator.
    """
    entry = key + SEPARATOR + value
    if not data or data.endswith(NEWLINE):
        return data + entry
    return data + NEWLINE + entry


def excise(data: bytes, span: Span) -> bytes:
    """Remove an entry's line together with exactly one separator.

    A mid-file entry takes its leading newline with it. The first entry
    has none, so it takes its trailing newline instead (if any).
    """
    _check_span(data, span)
    if span.line_start > 0:
        start, end = span.line_start - 1, span.value_end
    else:
        start = 0
        end = span.value_end + 1 if span.value_end < len(data) else span.value_end
    return data[:start] + data[end:]


def split_history(value: str) -> list[str]:
    """Split a ``"; "``-joined history value into its parts."""
    if not value:
        return []
    return value.split(HISTORY_SEPARATOR)
