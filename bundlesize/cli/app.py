from __future__ import annotations

from dataclasses import replace
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from result import Err

from bundlesize.config.defaults import default_config
from bundlesize.config.loader import load_config, parse_options, sample_config_json
from bundlesize.config.schema import AnalyzerConfig
from bundlesize.plugin import BundleSizeAnalyzer
from bundlesize.services.collect import collect_artifacts

console = Console(soft_wrap=True)


def _resolve_config(options: str | None, config_path: str | None) -> AnalyzerConfig:
    if config_path is not None:
        config_result = load_config(config_path)
    else:
        config_result = parse_options(options)
    if isinstance(config_result, Err):
        console.print(f"[yellow]{escape(config_result.unwrap_err())} Using defaults.[/]")
        return default_config()
    return config_result.unwrap()


def run(
    path: Annotated[str, typer.Argument(help="Build output directory to analyze.")] = "dist",
    options: Annotated[str | None, typer.Option("--options", "-o", help="Options as a JSON object.")] = None,
    config_path: Annotated[
        str | None, typer.Option("--config", "-c", help="Read options from a JSON file.")
    ] = None,
    threshold: Annotated[
        int | None, typer.Option("--threshold", "-t", help="Warning threshold in bytes.", min=0)
    ] = None,
    no_suggestions: Annotated[
        bool, typer.Option("--no-suggestions", help="Hide the optimization suggestions section.")
    ] = False,
    sample_config: Annotated[bool, typer.Option("--sample-config", help="Print sample options JSON.")] = False,
) -> None:
    if sample_config:
        console.print(sample_config_json(), markup=False, highlight=False)
        raise typer.Exit(0)

    config = _resolve_config(options, config_path)

    overrides: dict[str, object] = {}
    if threshold is not None:
        overrides["warning_threshold"] = max(0, threshold)
    if no_suggestions:
        overrides["show_suggestions"] = False
    if overrides:
        config = replace(config, **overrides)

    collected = collect_artifacts(path)
    if isinstance(collected, Err):
        error = collected.unwrap_err()
        console.print(f"[red]Cannot analyze {escape(error.path)}: {escape(error.message)}[/]")
        raise typer.Exit(1)
    artifacts = collected.unwrap()

    if artifacts.read_errors:
        console.print(f"[red]{artifacts.read_errors:,} files could not be read[/red]")

    BundleSizeAnalyzer(config=config, console=console).on_build_complete(artifacts.store)


def cli() -> None:
    typer.run(run)


if __name__ == "__main__":
    cli()
