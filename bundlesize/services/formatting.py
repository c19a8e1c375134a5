from __future__ import annotations

UNITS = ["B", "KB", "MB", "GB", "TB"]

GZIP_RATIO = 0.35


def format_size(size: int) -> str:
    if size <= 0:
        return "0 B"
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(UNITS) - 1:
        value /= 1024.0
        unit += 1
    if unit == 0:
        return f"{int(value)} {UNITS[unit]}"
    return f"{value:.1f} {UNITS[unit]}"


def estimate_gzip_size(total_size: int) -> int:
    """Fixed-ratio guess at the compressed size, truncated to whole bytes."""
    return int(total_size * GZIP_RATIO)


def percentage(size: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return size / total * 100.0
