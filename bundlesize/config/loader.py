from __future__ import annotations

import json
from typing import Any

from result import Err, Ok, Result

from bundlesize.config.defaults import PLUGIN_NAME, default_config
from bundlesize.config.schema import AnalyzerConfig, from_dict
from bundlesize.services.fs import DEFAULT_FS, FileSystem


def parse_options(payload: str | None) -> Result[AnalyzerConfig, str]:
    if payload is None or not payload.strip():
        return Ok(default_config())

    try:
        data = json.loads(payload)
    except ValueError as exc:
        return Err(f"Invalid options JSON: {exc}.")
    if not isinstance(data, dict):
        return Err("Options must be a JSON object.")
    try:
        return Ok(from_dict(data, default_config()))
    except (TypeError, ValueError) as exc:
        return Err(f"Invalid options: {exc}.")


def resolve_options(payload: str | None) -> AnalyzerConfig:
    """Parse *payload*, falling back to the defaults on any failure."""
    return parse_options(payload).unwrap_or(default_config())


def load_config(path: str, fs: FileSystem = DEFAULT_FS) -> Result[AnalyzerConfig, str]:
    resolved = fs.expanduser(path)
    if not fs.exists(resolved):
        return Err(f"Config not found at {resolved}.")

    try:
        text = fs.read_text(resolved)
    except OSError as exc:
        return Err(f"Failed reading config at {resolved}: {exc}.")

    parsed = parse_options(text)
    if isinstance(parsed, Err):
        return Err(f"Failed reading config at {resolved}: {parsed.unwrap_err()}")
    return parsed


def with_config(**overrides: Any) -> dict[str, Any]:
    """Registration descriptor for the host: defaults with *overrides* on top."""
    return {
        "name": PLUGIN_NAME,
        "options": {**default_config().to_dict(), **overrides},
    }


def sample_config_json() -> str:
    return json.dumps(default_config().to_dict(), indent=2)
