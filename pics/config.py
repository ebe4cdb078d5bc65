from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_IMAGE_EXTENSIONS = [".jpg", ".JPG", ".jpeg", ".JPEG"]
DEFAULT_VIDEO_EXTENSIONS = [".mov", ".MOV"]
# JPEG family is always written back as ".jpg"; other image types keep their own extension, lower-cased.
JPEG_EXTENSIONS = frozenset({".jpg", ".jpeg"})

VIDEOS_DIR_NAME = "videos"
DEFAULT_DIR_MODE = 0o755


def _parse_extensions(value: str) -> list[str]:
    exts: list[str] = []
    for item in value.split(","):
        item = item.strip()
        if not item:
            continue
        exts.append(item if item.startswith(".") else f".{item}")
    return exts


@dataclass
class OrganiserConfig:
    # Membership is case-sensitive: list every casing that should match.
    image_extensions: list[str] = field(default_factory=lambda: list(DEFAULT_IMAGE_EXTENSIONS))
    video_extensions: list[str] = field(default_factory=lambda: list(DEFAULT_VIDEO_EXTENSIONS))

    videos_dir_name: str = VIDEOS_DIR_NAME
    dir_mode: int = DEFAULT_DIR_MODE

    @classmethod
    def from_env(cls) -> OrganiserConfig:
        """Build a config from PICS_* environment variables.

        - PICS_IMAGE_EXTENSIONS: comma separated, e.g. "jpg,JPG,heic,HEIC"
        - PICS_VIDEO_EXTENSIONS: comma separated, e.g. ".mov,.MOV,.mp4"

        Unset or empty variables keep the defaults.
        """

        config = cls()
        images = _parse_extensions(os.getenv("PICS_IMAGE_EXTENSIONS", ""))
        if images:
            config.image_extensions = images
        videos = _parse_extensions(os.getenv("PICS_VIDEO_EXTENSIONS", ""))
        if videos:
            config.video_extensions = videos
        return config
