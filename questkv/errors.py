"""questkv error types."""


class StoreError(Exception):
    """Base class for record store errors."""


class FileError(StoreError):
    """Raised when the backing file cannot be opened, read, written or truncated.

    The underlying ``OSError`` (if any) is chained as ``__cause__``.

    Attributes:
        path: The backing file path, when known.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        if path is not None:
            message = f"{message}: {path}"
        super().__init__(message)


class FormatError(StoreError):
    """Raised in strict mode when a line has no ``=`` separator.

    Attributes:
        line_number: 1-based line number within the file.
        line: The raw line bytes.
    """

    def __init__(self, line_number: int, line: bytes) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Line {line_number} is not KEY=VALUE: {line!r}")
