from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class FileEntry:
    name: str
    size: int
    percentage: float = 0.0
    is_large: bool = False


@dataclass(slots=True)
class BundleAnalysis:
    entries: list[FileEntry]
    total_size: int
    estimated_gzip_size: int
    warning_threshold: int

    @property
    def file_count(self) -> int:
        return len(self.entries)

    @property
    def large_files(self) -> list[FileEntry]:
        return [entry for entry in self.entries if entry.is_large]

    @property
    def is_empty(self) -> bool:
        return not self.entries


@dataclass(slots=True, frozen=True)
class Report:
    lines: tuple[str, ...]
    analysis: BundleAnalysis | None = field(default=None, compare=False)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
