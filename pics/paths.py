from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from pics.errors import FileSystemError, NotFoundError
from pics.models import MediaFile, MediaKind


def expand(path_str: str | os.PathLike[str]) -> Path:
    return Path(os.path.normpath(os.path.abspath(Path(path_str).expanduser())))


def require_directory(path: Path, *, operation: str) -> Path:
    try:
        is_dir = path.is_dir()
        exists = is_dir or path.exists()
    except OSError as exc:
        raise FileSystemError(str(exc), path=str(path), operation=operation) from exc
    if not exists:
        raise NotFoundError("directory does not exist", path=str(path), operation=operation)
    if not is_dir:
        raise NotFoundError("not a directory", path=str(path), operation=operation)
    return path


def scan(directory: Path, *, operation: str) -> list[os.DirEntry[str]]:
    """Direct entries of `directory`, sorted by name."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except FileNotFoundError as exc:
        raise NotFoundError("directory does not exist", path=str(directory), operation=operation) from exc
    except OSError as exc:
        raise FileSystemError(str(exc), path=str(directory), operation=operation) from exc
    entries.sort(key=lambda entry: entry.name)
    return entries


def _is_dir(entry: os.DirEntry[str]) -> bool:
    try:
        return entry.is_dir()
    except OSError:
        return False


def list_subdirectories(directory: Path, *, operation: str) -> list[Path]:
    return [Path(entry.path) for entry in scan(directory, operation=operation) if _is_dir(entry)]


def list_files(directory: Path, *, operation: str) -> list[Path]:
    return [Path(entry.path) for entry in scan(directory, operation=operation) if not _is_dir(entry)]


def match_media(directory: Path, extensions: Iterable[str], kind: MediaKind, *, operation: str) -> list[MediaFile]:
    """Non-directory entries of `directory` whose extension is in `extensions` (case-sensitive)."""
    wanted = set(extensions)
    matched: list[MediaFile] = []
    for path in list_files(directory, operation=operation):
        if path.suffix in wanted:
            matched.append(MediaFile(path=path, kind=kind))
    return matched
