from __future__ import annotations

from pics.config import OrganiserConfig
from pics.errors import ConflictError, CountMismatchError, FileSystemError, FormatError, NotFoundError, OrganiserError
from pics.organiser import FileOrganiser

__all__ = [
    "ConflictError",
    "CountMismatchError",
    "FileOrganiser",
    "FileSystemError",
    "FormatError",
    "NotFoundError",
    "OrganiserConfig",
    "OrganiserError",
]
