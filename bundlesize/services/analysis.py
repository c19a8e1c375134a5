from __future__ import annotations

from collections.abc import Mapping

from bundlesize.config.schema import AnalyzerConfig
from bundlesize.models.report import BundleAnalysis, FileEntry
from bundlesize.services.formatting import estimate_gzip_size, percentage


def analyze(sizes: Mapping[str, int], config: AnalyzerConfig) -> BundleAnalysis:
    """Rank artifacts by size and classify them against the warning threshold.

    *sizes* is a snapshot of ``{name: byte_length}``. Entries come back largest
    first; equal sizes keep alphabetical order.
    """
    ordered = sorted(sizes.items(), key=lambda item: item[0])
    ordered.sort(key=lambda item: item[1], reverse=True)

    total_size = sum(size for _, size in ordered)
    threshold = config.warning_threshold

    entries = [
        FileEntry(
            name=name,
            size=size,
            percentage=percentage(size, total_size),
            is_large=size > threshold,
        )
        for name, size in ordered
    ]

    return BundleAnalysis(
        entries=entries,
        total_size=total_size,
        estimated_gzip_size=estimate_gzip_size(total_size),
        warning_threshold=threshold,
    )
