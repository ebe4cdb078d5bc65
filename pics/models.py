from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path

from pics.config import JPEG_EXTENSIONS

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(slots=True)
class MediaFile:
    path: Path
    kind: MediaKind

    @property
    def extension(self) -> str:
        # Case as found on disk.
        return self.path.suffix

    @property
    def target_extension(self) -> str:
        if self.kind is MediaKind.VIDEO:
            return self.extension
        lowered = self.extension.lower()
        if lowered in JPEG_EXTENSIONS:
            return ".jpg"
        return lowered


@dataclass(frozen=True, slots=True)
class BucketName:
    year: int
    month: int
    day: int
    suffix: str = ""

    @classmethod
    def from_datetime(cls, moment: datetime) -> BucketName:
        return cls(year=moment.year, month=moment.month, day=moment.day)

    @property
    def tokens(self) -> list[str]:
        # English month names regardless of the process locale.
        tokens = [f"{self.year:04d}", f"{self.month:02d}", MONTH_NAMES[self.month - 1], f"{self.day:02d}"]
        tokens.extend(self.suffix.split())
        return tokens
