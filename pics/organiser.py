from __future__ import annotations

import logging
import os
from pathlib import Path

from pics.config import OrganiserConfig
from pics.errors import ConflictError, FileSystemError, FormatError
from pics.models import MediaFile, MediaKind
from pics.naming import (
    DATE_TOKEN_COUNT,
    bucket_dir_name,
    canonical_dir_name,
    canonical_file_prefix,
    sequence_file_name,
    tokenize,
    tokenize_exact,
)
from pics.paths import expand, list_files, list_subdirectories, match_media, require_directory, scan
from pics.sequencer import Move, apply_renames, plan_renames, validate_plan
from pics.time_utils import local_from_timestamp

LOGGER = logging.getLogger(__name__)


def _sequenced_plan(files: list[MediaFile], directory: Path, prefix: str, *, start: int = 1) -> list[Move]:
    return plan_renames(
        files,
        lambda number, media: directory / sequence_file_name(prefix, number, media.target_extension),
        start=start,
    )


class FileOrganiser:
    """Date bucketing, per-bucket normalisation and bucket renames.

    All operations are synchronous and assume exclusive access to the trees
    they touch. Errors are raised on the first failure. Only staged rename
    batches are undone; every other completed step stays in place.
    """

    def __init__(self, config: OrganiserConfig | None = None, *, logger: logging.Logger | None = None) -> None:
        self.config = config or OrganiserConfig()
        self.logger = logger or LOGGER

    # -- date bucketer -------------------------------------------------

    def organise_by_date(self, source_dir: str | os.PathLike[str], target_dir: str | os.PathLike[str]) -> None:
        source = Path(source_dir)
        target = Path(target_dir)

        for file_path in list_files(source, operation="read source"):
            try:
                mtime = file_path.stat().st_mtime
            except OSError as exc:
                raise FileSystemError(str(exc), path=str(file_path), operation="stat") from exc

            dest_dir = target / bucket_dir_name(local_from_timestamp(mtime))
            self._mkdir(dest_dir)

            dest_path = dest_dir / file_path.name
            if os.path.lexists(dest_path):
                raise ConflictError("destination already exists", path=str(dest_path), operation="move")
            try:
                os.rename(file_path, dest_path)
            except OSError as exc:
                raise FileSystemError(
                    f"failed to move to {dest_path}: {exc}", path=str(file_path), operation="move"
                ) from exc
            self.logger.debug("Moved %s -> %s", file_path, dest_path)

    # -- bucket normaliser ---------------------------------------------

    def organise_videos_and_rename_images(self, target_dir: str | os.PathLike[str]) -> None:
        target = Path(target_dir)
        for bucket in list_subdirectories(target, operation="read target"):
            self._organise_videos(bucket)
            self._rename_images(bucket)

    def _organise_videos(self, bucket: Path) -> None:
        videos = match_media(bucket, self.config.video_extensions, MediaKind.VIDEO, operation="match videos")
        if not videos:
            return

        prefix = canonical_file_prefix(tokenize_exact(bucket.name))
        videos_dir = bucket / self.config.videos_dir_name
        # Videos already filed keep the front of the sequence; new arrivals follow them.
        filed: list[MediaFile] = []
        if videos_dir.is_dir():
            filed = match_media(videos_dir, self.config.video_extensions, MediaKind.VIDEO, operation="match videos")
        plan = _sequenced_plan(filed, videos_dir, prefix)
        plan += _sequenced_plan(videos, videos_dir, prefix, start=len(filed) + 1)
        self._mkdir(videos_dir)
        moved = apply_renames(plan, logger=self.logger)
        self.logger.info("Moved %s videos into %s", moved, videos_dir)

    def _rename_images(self, bucket: Path) -> None:
        images = match_media(bucket, self.config.image_extensions, MediaKind.IMAGE, operation="match images")
        if not images:
            return

        prefix = canonical_file_prefix(tokenize_exact(bucket.name))
        plan = _sequenced_plan(images, bucket, prefix)
        renamed = apply_renames(plan, logger=self.logger)
        self.logger.info("Renamed %s images in %s", renamed, bucket)

    # -- bucket renamer ------------------------------------------------

    def rename_directory(self, directory: str | os.PathLike[str], new_name: str) -> None:
        abs_dir = require_directory(expand(directory), operation="rename directory")

        date_tokens = tokenize(abs_dir.name)[:DATE_TOKEN_COUNT]
        if os.sep in new_name or (os.altsep and os.altsep in new_name):
            raise FormatError("new name must not contain a path separator", path=new_name, operation="rename directory")
        name_tokens = new_name.split()

        new_dir_name = canonical_dir_name(date_tokens + name_tokens)
        new_dir_path = abs_dir.parent / new_dir_name
        prefix = canonical_file_prefix(date_tokens + name_tokens)
        self.logger.debug("Rename paths original=%s absolute=%s new_path=%s", directory, abs_dir, new_dir_path)

        move_dir = new_dir_path != abs_dir
        if move_dir:
            if os.path.lexists(new_dir_path):
                raise ConflictError(
                    "target directory already exists", path=str(new_dir_path), operation="rename directory"
                )
            self.logger.info("Renaming directory %s -> %s", abs_dir, new_dir_path)
        else:
            self.logger.info("Directory name unchanged, updating files only")

        images = match_media(abs_dir, self.config.image_extensions, MediaKind.IMAGE, operation="match images")
        image_plan = _sequenced_plan(images, abs_dir, prefix)

        video_plan: list[Move] = []
        videos_dir = abs_dir / self.config.videos_dir_name
        if videos_dir.is_dir():
            videos = match_media(videos_dir, self.config.video_extensions, MediaKind.VIDEO, operation="match videos")
            video_plan = _sequenced_plan(videos, videos_dir, prefix)

        # Both plans are checked before the first file is touched.
        validate_plan(image_plan)
        validate_plan(video_plan)

        if image_plan:
            self.logger.info("Renaming %s images with prefix %s", len(image_plan), prefix)
            apply_renames(image_plan, logger=self.logger)
        if video_plan:
            self.logger.info("Renaming %s videos with prefix %s", len(video_plan), prefix)
            apply_renames(video_plan, logger=self.logger)

        if move_dir:
            try:
                os.rename(abs_dir, new_dir_path)
            except OSError as exc:
                raise FileSystemError(
                    f"failed to rename directory to {new_dir_path}: {exc}",
                    path=str(abs_dir),
                    operation="rename directory",
                ) from exc
            self.logger.info("Directory renamed successfully new_path=%s", new_dir_path)

    # -- file counter --------------------------------------------------

    def get_file_count(self, root: str | os.PathLike[str]) -> int:
        return self._count(Path(root))

    def _count(self, directory: Path) -> int:
        count = 0
        for entry in scan(directory, operation="count"):
            if entry.name.startswith("."):
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    count += self._count(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    count += 1
            except OSError as exc:
                raise FileSystemError(str(exc), path=entry.path, operation="count") from exc
        return count

    def _mkdir(self, path: Path) -> None:
        if path.is_dir():
            return
        try:
            path.mkdir(mode=self.config.dir_mode, parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSystemError(str(exc), path=str(path), operation="mkdir") from exc
        self.logger.info("Created directory %s", path)
