from __future__ import annotations

from bundlesize.config.schema import AnalyzerConfig
from bundlesize.models.artifacts import ArtifactSource, ArtifactStore
from bundlesize.models.report import BundleAnalysis, FileEntry, Report
from bundlesize.plugin import BuildHook, BundleSizeAnalyzer
from bundlesize.services.formatting import format_size

__all__ = [
    "AnalyzerConfig",
    "ArtifactSource",
    "ArtifactStore",
    "BuildHook",
    "BundleAnalysis",
    "BundleSizeAnalyzer",
    "FileEntry",
    "Report",
    "format_size",
]
