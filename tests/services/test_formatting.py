from __future__ import annotations

import pytest

from bundlesize.services.formatting import estimate_gzip_size, format_size, percentage


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 B"),
        (512, "512 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (1536, "1.5 KB"),
        (1024 * 1024, "1.0 MB"),
        (1024 * 1024 * 1024, "1.0 GB"),
        (1024**4, "1.0 TB"),
    ],
)
def test_format_size(size: int, expected: str) -> None:
    assert format_size(size) == expected


def test_format_size_stops_at_terabytes() -> None:
    assert format_size(2048 * 1024**4) == "2048.0 TB"


def test_gzip_estimate_truncates() -> None:
    assert estimate_gzip_size(1536) == 537
    assert estimate_gzip_size(0) == 0


def test_percentage_of_zero_total_is_zero() -> None:
    assert percentage(0, 0) == 0.0
    assert percentage(1, 4) == 25.0
