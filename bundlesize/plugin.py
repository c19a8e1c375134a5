from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

from rich.console import Console

from bundlesize.config.defaults import PLUGIN_NAME
from bundlesize.config.loader import resolve_options
from bundlesize.config.schema import AnalyzerConfig
from bundlesize.models.artifacts import ArtifactSource, MappingSource
from bundlesize.models.report import Report
from bundlesize.services.analysis import analyze
from bundlesize.services.report import print_report, render_report


class BuildHook(Protocol):
    @property
    def name(self) -> str: ...

    def on_build_complete(self, source: ArtifactSource) -> Report: ...


class BundleSizeAnalyzer:
    """Build-completion hook that prints a size report for the emitted artifacts.

    *options* is the host's raw JSON options string. An empty or unparsable
    payload leaves the analyzer on its default configuration. An explicit
    *config* takes precedence over *options*.
    """

    def __init__(
        self,
        options: str | None = None,
        console: Console | None = None,
        *,
        config: AnalyzerConfig | None = None,
    ) -> None:
        self._config = config if config is not None else resolve_options(options)
        self._console = console or Console(highlight=False)

    @property
    def name(self) -> str:
        return PLUGIN_NAME

    @property
    def config(self) -> AnalyzerConfig:
        return self._config

    def analyze(self, artifacts: ArtifactSource | Mapping[str, bytes]) -> Report:
        """Compute the report without printing it."""
        source = MappingSource(artifacts) if isinstance(artifacts, Mapping) else artifacts
        sizes = source.snapshot()
        return render_report(analyze(sizes, self._config), self._config)

    def on_build_complete(self, source: ArtifactSource) -> Report:
        report = self.analyze(source)
        print_report(self._console, report)
        return report
