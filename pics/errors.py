from __future__ import annotations


class OrganiserError(Exception):
    """Base error for every engine failure.

    `path` is the offending filesystem path, `operation` the step that failed
    (e.g. "rename", "mkdir"). The original OSError, if any, is chained as
    `__cause__`.
    """

    def __init__(self, message: str, *, path: str | None = None, operation: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.operation = operation

    def __str__(self) -> str:
        base = super().__str__()
        if self.operation and self.path:
            return f"{self.operation} {self.path!r}: {base}"
        if self.path:
            return f"{self.path!r}: {base}"
        return base


class NotFoundError(OrganiserError):
    pass


class FormatError(OrganiserError):
    pass


class ConflictError(OrganiserError):
    pass


class FileSystemError(OrganiserError):
    """Wraps an OSError raised by stat/mkdir/rename/scandir."""


class CountMismatchError(OrganiserError):
    def __init__(self, source_count: int, target_count: int, *, path: str | None = None) -> None:
        super().__init__(
            f"file count mismatch: source={source_count} target={target_count} "
            f"difference={target_count - source_count}",
            path=path,
            operation="verify",
        )
        self.source_count = source_count
        self.target_count = target_count
