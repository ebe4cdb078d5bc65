from __future__ import annotations

from datetime import datetime

import pytest

from pics.errors import FormatError
from pics.naming import (
    bucket_dir_name,
    canonical_dir_name,
    canonical_file_prefix,
    sequence_file_name,
    tokenize,
    tokenize_exact,
)


def test_tokenize_collapses_whitespace():
    assert tokenize("2023  06 June\t15  Paris") == ["2023", "06", "June", "15", "Paris"]


def test_tokenize_rejects_short_names():
    with pytest.raises(FormatError):
        tokenize("invalid format")


def test_tokenize_exact_rejects_free_text():
    assert tokenize_exact("2023 06 June 15") == ["2023", "06", "June", "15"]
    with pytest.raises(FormatError):
        tokenize_exact("2023 06 June 15 Paris")


def test_dir_name_and_prefix_stay_in_lockstep():
    tokens = tokenize("2023 06  June 15 Paris Trip")
    assert canonical_dir_name(tokens) == "2023 06 June 15 Paris Trip"
    assert canonical_file_prefix(tokens) == "2023_06_June_15_Paris_Trip"


def test_bucket_dir_name_is_zero_padded_english():
    assert bucket_dir_name(datetime(2024, 1, 5, 23, 59)) == "2024 01 January 05"
    assert bucket_dir_name(datetime(2023, 12, 31)) == "2023 12 December 31"


def test_sequence_file_name_pads_to_five_digits():
    assert sequence_file_name("2023_06_June_15", 1, ".jpg") == "2023_06_June_15_00001.jpg"
    assert sequence_file_name("p", 123456, ".MOV") == "p_123456.MOV"
