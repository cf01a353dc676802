"""Helpers for showing the bits of integers."""

from __future__ import annotations

import sys
from typing import TextIO


def format_bits(value: int, width: int) -> str:
    """Return the ``width`` low bits of ``value`` from most to least significant.

    A space precedes every group of eight bits, counted from the top.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    if value < 0 or value >= 1 << width:
        raise ValueError(f"value does not fit in {width} bits")
    digits = format(value, f"0{width}b")
    return "".join(" " + digits[start:start + 8] for start in range(0, width, 8))


def dump_bits(value: int, width: int, file: TextIO | None = None) -> None:
    """Print the logical bits of ``value`` as produced by :func:`format_bits`."""
    print(format_bits(value, width), file=sys.stdout if file is None else file)


def format_memory_bits_u64(value: int) -> str:
    """Describe the bytes of a 64-bit value in this machine's memory order."""
    if value < 0 or value >= 1 << 64:
        raise ValueError("value does not fit in 64 bits")
    raw = value.to_bytes(8, sys.byteorder)
    return "".join(f"Byte {index}: {byte:08b} " for index, byte in enumerate(raw))