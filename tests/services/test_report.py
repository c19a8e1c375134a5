from __future__ import annotations

import io

from rich.console import Console

from bundlesize.config.defaults import default_config
from bundlesize.config.schema import AnalyzerConfig
from bundlesize.services.analysis import analyze
from bundlesize.services.report import print_report, render_report


def _render(sizes: dict[str, int], config: AnalyzerConfig | None = None) -> list[str]:
    cfg = config or default_config()
    return list(render_report(analyze(sizes, cfg), cfg).lines)


def test_empty_bundle_is_single_line() -> None:
    assert _render({}) == ["No resources found in the bundle"]


def test_small_bundle_report() -> None:
    lines = _render({"style.css": 512, "main.js": 1024})

    assert lines == [
        "\nFarm Bundle Size Analysis",
        "============================================",
        "main.js: 1.0 KB (66.7%)",
        "style.css: 512 B (33.3%)",
        "\nSummary",
        "--------------------------------------------",
        "Total files: 2",
        "Total size: 1.5 KB",
        "Estimated gzipped: ~537 B",
    ]


def test_large_files_get_suggestions() -> None:
    lines = _render({"large.js": 2048, "small.js": 512}, AnalyzerConfig(warning_threshold=1024))

    assert "large.js: 2.0 KB (80.0%) [LARGE FILE]" in lines
    assert "small.js: 512 B (20.0%)" in lines
    assert lines[-5:] == [
        "\nOptimization Suggestions",
        "--------------------------------------------",
        "WARNING: 1 large files detected (> 1.0 KB)",
        "   - large.js: 2.0 KB",
        "   Consider code splitting or lazy loading for these files.",
    ]


def test_suggestions_hidden_when_disabled() -> None:
    config = AnalyzerConfig(warning_threshold=1024, show_suggestions=False)
    lines = _render({"large.js": 2048}, config)

    assert "large.js: 2.0 KB (100.0%) [LARGE FILE]" in lines
    assert "\nOptimization Suggestions" not in lines


def test_no_suggestions_without_large_files() -> None:
    lines = _render({"a.js": 100, "b.js": 200}, AnalyzerConfig(show_suggestions=True))

    assert "\nOptimization Suggestions" not in lines
    assert not any("[LARGE FILE]" in line for line in lines)


def test_print_report_keeps_brackets_verbatim() -> None:
    console = Console(file=io.StringIO(), record=True, width=40, color_system=None)
    cfg = AnalyzerConfig(warning_threshold=10)
    report = render_report(analyze({"[id]/page.js": 2048}, cfg), cfg)

    print_report(console, report)

    text = console.export_text()
    assert "[id]/page.js: 2.0 KB (100.0%) [LARGE FILE]" in text
    assert "WARNING: 1 large files detected (> 10 B)" in text
