from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from pics.errors import CountMismatchError, NotFoundError
from pics.organiser import FileOrganiser
from pics.runner import run_parse

from conftest import make_file, names


def test_parse_buckets_and_normalises(dirs):
    source, target = dirs
    when = datetime(2023, 6, 15, 10, 30)
    make_file(source, "IMG_0002.JPG", when)
    make_file(source, "IMG_0001.jpg", when)
    make_file(source, "clip.MOV", when)
    make_file(source, "other.jpg", datetime(2024, 2, 29, 8, 0))

    report = run_parse(source, target)

    assert report.verified
    assert report.source_count == report.target_count == 4
    assert names(target) == ["2023 06 June 15", "2024 02 February 29"]
    assert names(target / "2023 06 June 15") == ["2023_06_June_15_00001.jpg", "2023_06_June_15_00002.jpg", "videos"]
    assert names(target / "2023 06 June 15" / "videos") == ["2023_06_June_15_00001.MOV"]
    assert names(target / "2024 02 February 29") == ["2024_02_February_29_00001.jpg"]


def test_parse_creates_missing_target(dirs):
    source, target = dirs
    assert not target.exists()

    report = run_parse(source, target)

    assert target.is_dir()
    assert report.source_count == 0


def test_parse_missing_source(tmp_path: Path):
    with pytest.raises(NotFoundError):
        run_parse(tmp_path / "nonexistent", tmp_path / "target")


def test_parse_reports_count_mismatch(dirs):
    source, target = dirs
    make_file(source, "a.jpg", datetime(2023, 6, 15, 10, 30))
    make_file(target / "misc", "already-there.txt")

    with pytest.raises(CountMismatchError) as info:
        run_parse(source, target)

    assert info.value.source_count == 1
    assert info.value.target_count == 2


def test_second_run_appends_to_existing_buckets(tmp_path: Path):
    source = tmp_path / "source"
    target = tmp_path / "target"
    june = datetime(2023, 6, 15, 10, 30)
    make_file(source, "a.mov", june, content="first clip")
    make_file(source, "a.jpg", june)
    make_file(source, "x.jpg", june)
    assert run_parse(source, target).verified

    make_file(source, "b.mov", june, content="second clip")
    make_file(source, "c.jpg", datetime(2025, 1, 1, 12, 0))
    organiser = FileOrganiser()
    organiser.organise_by_date(source, target)
    organiser.organise_videos_and_rename_images(target)

    bucket = target / "2023 06 June 15"
    assert names(bucket) == ["2023_06_June_15_00001.jpg", "2023_06_June_15_00002.jpg", "videos"]
    assert names(bucket / "videos") == ["2023_06_June_15_00001.mov", "2023_06_June_15_00002.mov"]
    assert (bucket / "videos" / "2023_06_June_15_00002.mov").read_text(encoding="utf-8") == "second clip"
    assert names(target / "2025 01 January 01") == ["2025_01_January_01_00001.jpg"]
    assert organiser.get_file_count(target) == 5
