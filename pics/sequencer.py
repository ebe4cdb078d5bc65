"""Deterministic sequence numbering and collision-checked batch renames."""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from pics.errors import ConflictError, FileSystemError
from pics.models import MediaFile

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Move:
    src: Path
    dst: Path


def sequence(paths: Iterable[str]) -> list[str]:
    """Sort paths ascending by code point; position i gets number i + 1."""
    return sorted(paths)


def sequence_media(files: Iterable[MediaFile], *, start: int = 1) -> list[tuple[int, MediaFile]]:
    by_path = {str(media.path): media for media in files}
    return [(index, by_path[path]) for index, path in enumerate(sequence(by_path), start=start)]


def plan_renames(
    files: Iterable[MediaFile], destination_for: Callable[[int, MediaFile], Path], *, start: int = 1
) -> list[Move]:
    """Pair every file with its sequenced destination, dropping moves onto itself."""
    plan: list[Move] = []
    for number, media in sequence_media(files, start=start):
        dst = destination_for(number, media)
        if dst != media.path:
            plan.append(Move(src=media.path, dst=dst))
    return plan


def validate_plan(plan: list[Move]) -> bool:
    """Raise ConflictError if the plan would overwrite a file it does not own.

    Returns True when some destination is also a pending source, i.e. the
    moves must be staged through temporary names.
    """
    sources = {move.src for move in plan}
    seen: set[Path] = set()
    staged = False
    for move in plan:
        if move.dst in seen:
            raise ConflictError("two files map to the same destination", path=str(move.dst), operation="rename")
        seen.add(move.dst)
        if move.dst in sources:
            staged = True
            continue
        if os.path.lexists(move.dst):
            raise ConflictError("destination already exists", path=str(move.dst), operation="rename")
    return staged


def _rename(src: Path, dst: Path, log: logging.Logger) -> None:
    log.debug("Renaming %s -> %s", src, dst)
    try:
        os.rename(src, dst)
    except OSError as exc:
        raise FileSystemError(f"failed to rename to {dst}: {exc}", path=str(src), operation="rename") from exc


def _staging_name(token: str, index: int, src: Path) -> str:
    # Short and non-hidden: counted by get_file_count and matched again on re-run.
    return f"~pics-{token}-{index:05d}{src.suffix}"


def _roll_back(staged: list[Move], placed: list[Move], log: logging.Logger) -> None:
    try:
        for move in reversed(placed):
            os.rename(move.dst, move.src)
        for move in reversed(staged):
            os.rename(move.dst, move.src)
    except OSError as exc:
        log.error("Rollback stopped, staged files left in place: %s", exc)
        return
    log.info("Rolled back %s staged renames", len(staged))


def apply_renames(plan: list[Move], *, logger: logging.Logger | None = None) -> int:
    """Execute a rename plan and return how many files moved.

    The whole plan is validated before the first rename. Plain plans are not
    rolled back on failure. Staged plans go through ``~pics-<hex>-<NNNNN><ext>``
    names and are undone if any rename fails, so every file is back under its
    original name when the error propagates.
    """
    log = logger or LOGGER
    if not plan:
        return 0

    if not validate_plan(plan):
        for move in plan:
            _rename(move.src, move.dst, log)
        return len(plan)

    token = uuid.uuid4().hex[:8]
    staged: list[Move] = []
    placed: list[Move] = []
    try:
        for index, move in enumerate(plan, start=1):
            tmp = move.src.with_name(_staging_name(token, index, move.src))
            _rename(move.src, tmp, log)
            staged.append(Move(src=move.src, dst=tmp))
        for move, stage in zip(plan, staged):
            _rename(stage.dst, move.dst, log)
            placed.append(Move(src=stage.dst, dst=move.dst))
    except FileSystemError:
        _roll_back(staged, placed, log)
        raise
    return len(plan)
