from __future__ import annotations

from rich.console import Console

from bundlesize.config.schema import AnalyzerConfig
from bundlesize.models.report import BundleAnalysis, Report
from bundlesize.services.formatting import format_size

EMPTY_MESSAGE = "No resources found in the bundle"
TITLE = "\nFarm Bundle Size Analysis"
SUMMARY_TITLE = "\nSummary"
SUGGESTIONS_TITLE = "\nOptimization Suggestions"
HEAVY_RULE = "=" * 44
RULE = "-" * 44
LARGE_MARKER = " [LARGE FILE]"
SPLIT_ADVICE = "   Consider code splitting or lazy loading for these files."

_WARN_STYLE = "yellow"


def render_report(analysis: BundleAnalysis, config: AnalyzerConfig) -> Report:
    if analysis.is_empty:
        return Report(lines=(EMPTY_MESSAGE,), analysis=analysis)

    lines: list[str] = [TITLE, HEAVY_RULE]
    for entry in analysis.entries:
        line = f"{entry.name}: {format_size(entry.size)} ({entry.percentage:.1f}%)"
        if entry.is_large:
            line += LARGE_MARKER
        lines.append(line)

    lines += [
        SUMMARY_TITLE,
        RULE,
        f"Total files: {analysis.file_count}",
        f"Total size: {format_size(analysis.total_size)}",
        f"Estimated gzipped: ~{format_size(analysis.estimated_gzip_size)}",
    ]

    large_files = analysis.large_files
    if large_files and config.show_suggestions:
        lines += [
            SUGGESTIONS_TITLE,
            RULE,
            f"WARNING: {len(large_files)} large files detected (> {format_size(analysis.warning_threshold)})",
        ]
        lines += [f"   - {entry.name}: {format_size(entry.size)}" for entry in large_files]
        lines.append(SPLIT_ADVICE)

    return Report(lines=tuple(lines), analysis=analysis)


def print_report(console: Console, report: Report) -> None:
    # Artifact names may contain brackets; print verbatim.
    for line in report.lines:
        style = _WARN_STYLE if line.endswith(LARGE_MARKER) or line.startswith("WARNING:") else None
        console.print(line, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)
