"""Bucket directory names and the file-name prefixes derived from them.

A bucket is named ``YYYY MM Month DD[ free text]``. Its files are named
``YYYY_MM_Month_DD[_free_text]_NNNNN.ext``. Both forms are always rebuilt
from the whitespace-split tokens, so a directory called ``2023  06 June 15``
still yields ``2023_06_June_15``.
"""

from __future__ import annotations

from datetime import datetime

from pics.errors import FormatError
from pics.models import BucketName

DATE_TOKEN_COUNT = 4
SEQUENCE_WIDTH = 5


def tokenize(name: str) -> list[str]:
    tokens = name.split()
    if len(tokens) < DATE_TOKEN_COUNT:
        raise FormatError(
            "directory name does not match expected format (YYYY MM Month DD [name])",
            path=name,
            operation="tokenize",
        )
    return tokens


def tokenize_exact(name: str) -> list[str]:
    """Tokenize a bucket name that must carry the date and nothing else."""
    tokens = tokenize(name)
    if len(tokens) != DATE_TOKEN_COUNT:
        raise FormatError("unexpected directory name format (YYYY MM Month DD)", path=name, operation="tokenize")
    return tokens


def canonical_dir_name(tokens: list[str]) -> str:
    return " ".join(tokens)


def canonical_file_prefix(tokens: list[str]) -> str:
    return "_".join(tokens)


def bucket_dir_name(moment: datetime) -> str:
    return canonical_dir_name(BucketName.from_datetime(moment).tokens)


def sequence_file_name(prefix: str, number: int, extension: str) -> str:
    return f"{prefix}_{number:0{SEQUENCE_WIDTH}d}{extension}"
