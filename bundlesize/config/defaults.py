from __future__ import annotations

from bundlesize.config.schema import AnalyzerConfig

PLUGIN_NAME = "farm-bundle-size-analyzer"

DEFAULT_WARNING_THRESHOLD = 1024 * 1024
DEFAULT_SHOW_SUGGESTIONS = True
DEFAULT_GENERATE_REPORT = False


def default_config() -> AnalyzerConfig:
    return AnalyzerConfig(
        warning_threshold=DEFAULT_WARNING_THRESHOLD,
        show_suggestions=DEFAULT_SHOW_SUGGESTIONS,
        generate_report=DEFAULT_GENERATE_REPORT,
    )
