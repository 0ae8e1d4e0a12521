# Copyright (c) 2025 Vitalii Shkibtan
# Licensed under the MIT License.
# See LICENSE file in the project root for full license text.

import re
from datetime import datetime, timezone
from itertools import islice
from typing import Iterable, Iterator, TypeVar

T = TypeVar("T")

_SIZE_UNITS = {
    "": 1,
    "B": 1,
    "K": 10**3,
    "KB": 10**3,
    "M": 10**6,
    "MB": 10**6,
    "G": 10**9,
    "GB": 10**9,
    "KI": 2**10,
    "KIB": 2**10,
    "MI": 2**20,
    "MIB": 2**20,
    "GI": 2**30,
    "GIB": 2**30,
    "T": 10**12,
    "TB": 10**12,
    "TI": 2**40,
    "TIB": 2**40,
}


def str_file_size_to_int(size_str: str) -> int:
    """
    Convert a human-readable size string (e.g. '1MiB', '64K', '512')
    to an integer number of bytes.

    Decimal (KB, MB, GB) and binary (KiB, MiB, GiB) units are supported.
    Raises ValueError for malformed numbers or unknown units.
    """
    match = re.fullmatch(
        r"\s*(\d+(?:\.\d*)?|\.\d+)\s*([A-Z]*)\s*", size_str, re.IGNORECASE
    )
    if not match:
        raise ValueError(f"Invalid size string: {size_str!r}")

    number, unit = match.groups()
    unit = unit.upper()
    if unit not in _SIZE_UNITS:
        raise ValueError(f"Unknown size unit: {unit}")
    return int(float(number) * _SIZE_UNITS[unit])


def int_file_size_to_str(size_bytes: int) -> str:
    """
    Convert a file size in bytes to a human-readable string (e.g. '1.2 MB').

    Args:
        size_bytes (int): The size in bytes.

    Returns:
        str: Human-readable file size, or 'Invalid size' for invalid input.
    """
    if (size_bytes is None or isinstance(size_bytes, bool) or
            not isinstance(size_bytes, (int, float)) or size_bytes < 0):
        return "Invalid size"

    tmp_size_bytes = float(size_bytes)

    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if tmp_size_bytes < 1024:
            return (
                f"{int(tmp_size_bytes)} {unit}"
                if unit == "B"
                else f"{tmp_size_bytes:.1f} {unit}"
            )
        tmp_size_bytes /= 1024
    return f"{tmp_size_bytes:.1f} PB"


def batched(items: Iterable[T], size: int) -> Iterator[list[T]]:
    """Yield consecutive lists of at most `size` items."""
    if size < 1:
        raise ValueError("Batch size must be at least 1")
    iterator = iter(items)
    while batch := list(islice(iterator, size)):
        yield batch


def report_timestamp(now: datetime | None = None) -> str:
    # Filesystem-safe ISO-8601, e.g. 2025-01-31T10-20-30-123Z
    now = now or datetime.now(timezone.utc)
    iso = now.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return re.sub(r"[:.]", "-", iso.replace("+00:00", "Z"))
