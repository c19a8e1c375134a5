from __future__ import annotations

from bundlesize.config.defaults import default_config
from bundlesize.config.schema import AnalyzerConfig
from bundlesize.services.analysis import analyze


def test_entries_sorted_largest_first() -> None:
    result = analyze({"style.css": 512, "main.js": 1024, "app.js": 2048}, default_config())

    assert [entry.name for entry in result.entries] == ["app.js", "main.js", "style.css"]
    sizes = [entry.size for entry in result.entries]
    assert sizes == sorted(sizes, reverse=True)


def test_ties_are_alphabetical() -> None:
    result = analyze({"c.js": 10, "a.js": 10, "b.js": 10, "big.js": 50}, default_config())

    assert [entry.name for entry in result.entries] == ["big.js", "a.js", "b.js", "c.js"]


def test_totals_and_percentages() -> None:
    sizes = {f"chunk_{i}.js": 1024 + i * 100 for i in range(100)}
    result = analyze(sizes, default_config())

    assert result.total_size == sum(sizes.values())
    assert result.file_count == 100
    assert abs(sum(entry.percentage for entry in result.entries) - 100.0) < 1e-6


def test_large_file_classification_is_strict() -> None:
    config = AnalyzerConfig(warning_threshold=1024)
    result = analyze({"large.js": 2048, "edge.js": 1024, "small.js": 512}, config)

    flags = {entry.name: entry.is_large for entry in result.entries}
    assert flags == {"large.js": True, "edge.js": False, "small.js": False}
    assert [entry.name for entry in result.large_files] == ["large.js"]


def test_all_zero_sizes_have_zero_percentage() -> None:
    result = analyze({"empty.js": 0, "blank.css": 0}, default_config())

    assert result.total_size == 0
    assert [entry.percentage for entry in result.entries] == [0.0, 0.0]
    assert not result.is_empty


def test_empty_input() -> None:
    result = analyze({}, default_config())

    assert result.is_empty
    assert result.total_size == 0
    assert result.estimated_gzip_size == 0
