from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class AnalyzerConfig:
    warning_threshold: int = 1024 * 1024
    show_suggestions: bool = True
    # Reserved: accepted and carried through, not read by the analysis.
    generate_report: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "warning_threshold": self.warning_threshold,
            "show_suggestions": self.show_suggestions,
            "generate_report": self.generate_report,
        }


def _threshold(value: Any) -> int:
    # bool is an int subclass; JSON true/false is not a byte count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"warning_threshold must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"warning_threshold must be non-negative, got {value}")
    return value


def _flag(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{key} must be a boolean, got {type(value).__name__}")
    return value


def from_dict(data: dict[str, Any], defaults: AnalyzerConfig) -> AnalyzerConfig:
    """Build a config from a decoded options object.

    Missing keys fall back to *defaults*, unknown keys are ignored and any
    value of the wrong type raises ``TypeError`` or ``ValueError``.
    """
    return AnalyzerConfig(
        warning_threshold=_threshold(data.get("warning_threshold", defaults.warning_threshold)),
        show_suggestions=_flag("show_suggestions", data.get("show_suggestions", defaults.show_suggestions)),
        generate_report=_flag("generate_report", data.get("generate_report", defaults.generate_report)),
    )
