from __future__ import annotations

"""
Size parsing and formatting helpers.

- parse_size_to_bytes: parse strings like "500M", "2GB", "64KiB", "1024" into an int byte count.
- format_bytes_decimal: format a byte count using decimal units (kB, MB, GB, ...).

Formatting is only used for display; size comparisons always use raw byte counts.
"""

from typing import Optional, Union


DECIMAL_UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]

_UNIT_MAP = {
    "b": 1,
    "k": 1000,
    "kb": 1000,
    "m": 1000**2,
    "mb": 1000**2,
    "g": 1000**3,
    "gb": 1000**3,
    "t": 1000**4,
    "tb": 1000**4,
    "kib": 1024,
    "mib": 1024**2,
    "gib": 1024**3,
    "tib": 1024**4,
}


def parse_size_to_bytes(raw: Optional[Union[str, int]]) -> Optional[int]:
    """
    Parse a human-friendly size string into bytes.

    Accepted forms (case-insensitive):
    - "123" -> 123 bytes
    - "500K", "500kB" (1000-based, matching the report units)
    - "2G", "2GB"
    - "64KiB", "1GiB" (1024-based)

    Returns None if input is None or empty.
    Raises ValueError on invalid input.
    """
    if raw is None:
        return None
    if isinstance(raw, int) and not isinstance(raw, bool):
        if raw < 0:
            raise ValueError(f"Size must not be negative: {raw}")
        return raw
    s = str(raw).strip()
    if not s:
        return None

    i = 0
    n = len(s)
    while i < n and (s[i].isdigit() or s[i] in ".,"):
        i += 1
    num_str = s[:i].replace(",", "")
    unit_str = s[i:].strip().lower()

    if not num_str:
        raise ValueError(f"Invalid size value: {raw}")
    try:
        value = float(num_str)
    except ValueError as e:
        raise ValueError(f"Invalid size value: {raw}") from e

    if not unit_str:
        return int(value)

    if unit_str not in _UNIT_MAP:
        raise ValueError(f"Unknown size unit in '{raw}'; expected one of K, M, G, T (optional 'B' or 'iB').")
    return int(value * _UNIT_MAP[unit_str])


def format_bytes_decimal(num: Union[int, float]) -> str:
    """
    Format a byte count using 1000-based units with two decimals.

    Examples:
        0 -> "0 B"
        0.5 -> "0.5 B"
        1500000 -> "1.50 MB"
        -2048 -> "-2.05 kB"
    """
    negative = "-" if num < 0 else ""
    value = abs(num)
    if value < 1:
        return f"{negative}{value} B"

    value = float(value)
    idx = 0
    while value >= 1000.0 and idx < len(DECIMAL_UNITS) - 1:
        value /= 1000.0
        idx += 1
    return f"{negative}{value:.2f} {DECIMAL_UNITS[idx]}"
