from __future__ import annotations

from datetime import datetime
from pathlib import Path

from typer.testing import CliRunner

from pics.cli import app
from pics.runner import EXIT_ERROR, EXIT_MISMATCH

from conftest import make_file, names

runner = CliRunner()


def test_parse_command(dirs):
    source, target = dirs
    make_file(source, "a.jpg", datetime(2023, 6, 15, 10, 30))

    result = runner.invoke(app, ["parse", str(source), str(target)])

    assert result.exit_code == 0, result.output
    assert names(target / "2023 06 June 15") == ["2023_06_June_15_00001.jpg"]


def test_parse_command_mismatch(dirs):
    source, target = dirs
    make_file(target, "stray.txt")

    result = runner.invoke(app, ["parse", str(source), str(target)])

    assert result.exit_code == EXIT_MISMATCH


def test_rename_command(tmp_path: Path):
    bucket = tmp_path / "2023 06 June 15 Paris"
    make_file(bucket, "x.jpg")

    result = runner.invoke(app, ["rename", str(bucket), "Rome"])

    assert result.exit_code == 0, result.output
    assert names(tmp_path / "2023 06 June 15 Rome") == ["2023_06_June_15_Rome_00001.jpg"]


def test_rename_command_missing_directory(tmp_path: Path):
    result = runner.invoke(app, ["rename", str(tmp_path / "2023 06 June 15"), "Rome"])
    assert result.exit_code == EXIT_ERROR


def test_count_command(tmp_path: Path):
    make_file(tmp_path, "a.jpg")
    make_file(tmp_path / "sub", "b.mov")
    make_file(tmp_path, ".hidden")

    result = runner.invoke(app, ["count", str(tmp_path)])

    assert result.exit_code == 0
    assert result.output.strip().splitlines()[-1] == "2"
