from __future__ import annotations

from datetime import datetime


def local_from_timestamp(ts: float) -> datetime:
    # Buckets follow the wall clock of the machine running the organiser.
    return datetime.fromtimestamp(ts).astimezone()


def now_local() -> datetime:
    return datetime.now().astimezone()


def local_timestamp_str() -> str:
    return now_local().isoformat(timespec="seconds")
