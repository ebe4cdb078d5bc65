from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pics.errors import CountMismatchError, FileSystemError
from pics.organiser import FileOrganiser
from pics.paths import require_directory
from pics.time_utils import local_timestamp_str

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


@dataclass
class ParseReport:
    run_ts: str
    source_dir: str
    target_dir: str
    source_count: int
    target_count: int

    @property
    def verified(self) -> bool:
        return self.source_count == self.target_count


def _build_summary(report: ParseReport) -> list[str]:
    return [
        f"--- Parse Summary [{report.run_ts}] ---",
        f"source: {report.source_dir}",
        f"target: {report.target_dir}",
        f"source_files: {report.source_count}",
        f"target_files: {report.target_count}",
        f"verified: {report.verified}",
    ]


def validate_directories(source_dir: Path, target_dir: Path, *, dir_mode: int) -> None:
    require_directory(source_dir, operation="validate source")
    try:
        target_dir.mkdir(mode=dir_mode, parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(str(exc), path=str(target_dir), operation="mkdir") from exc
    require_directory(target_dir, operation="validate target")


def run_parse(
    source_dir: str | os.PathLike[str],
    target_dir: str | os.PathLike[str],
    organiser: FileOrganiser | None = None,
    *,
    logger: logging.Logger | None = None,
) -> ParseReport:
    """Bucket a flat source directory by date, then normalise every bucket.

    Counts non-hidden files on both sides and raises CountMismatchError when
    they differ. Any engine error propagates unchanged.
    """
    log = logger or LOGGER
    organiser = organiser or FileOrganiser(logger=log)
    source = Path(source_dir)
    target = Path(target_dir)

    validate_directories(source, target, dir_mode=organiser.config.dir_mode)

    run_ts = local_timestamp_str()
    source_count = organiser.get_file_count(source)
    log.info("Starting media parsing source=%s target=%s files=%s", source, target, source_count)

    organiser.organise_by_date(source, target)
    organiser.organise_videos_and_rename_images(target)

    target_count = organiser.get_file_count(target)
    report = ParseReport(
        run_ts=run_ts,
        source_dir=str(source),
        target_dir=str(target),
        source_count=source_count,
        target_count=target_count,
    )
    for line in _build_summary(report):
        log.info(line)

    if not report.verified:
        raise CountMismatchError(source_count, target_count, path=str(target))
    return report
