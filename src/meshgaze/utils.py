"""Formatting helpers shared by the metrics engine and the widgets."""

from __future__ import annotations

SI_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB")


def format_bytes(num_bytes: int | float, si: bool = False, precision: int = 1) -> str:
    """Format a byte count (or a byte rate) to a human-readable string.

    Examples:
        format_bytes(0) -> "0 B"
        format_bytes(1023) -> "1023 B"
        format_bytes(1536) -> "1.5 KiB"
        format_bytes(1000, si=True) -> "1.0 kB"
        format_bytes(-1024) -> "-1.0 KiB"
    """
    threshold = 1000 if si else 1024
    if abs(num_bytes) < threshold:
        return f"{_plain_number(num_bytes)} B"

    units = SI_UNITS if si else BINARY_UNITS
    scale = 10**precision
    value = float(num_bytes)
    unit_idx = -1
    while True:
        value /= threshold
        unit_idx += 1
        if round(abs(value) * scale) / scale < threshold or unit_idx == len(units) - 1:
            break
    return f"{value:.{precision}f} {units[unit_idx]}"


def _plain_number(value: int | float) -> str:
    """Render a small quantity without a spurious fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def truncate(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 1] + "…"
