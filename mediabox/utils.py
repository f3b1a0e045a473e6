"""String helpers used when describing boxes."""

from __future__ import annotations

from collections.abc import Iterable

_HEX_WIDTHS = {8: 2, 16: 4, 32: 8, 64: 16}


def pad(s: str, length: int) -> str:
    """Pad ``s`` with spaces up to ``length``; longer strings are returned as is."""
    if length <= len(s):
        return s
    return s + " " * (length - len(s))


def _value_to_string(value: object) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:f}"
    return str(value)


def to_string(values: Iterable[object]) -> str:
    """Join values with ``", "``, formatting numbers the way the box dumps do."""
    return ", ".join(_value_to_string(v) for v in values)


def to_hex_string(value: int, bits: int) -> str:
    """Format an unsigned integer of ``bits`` width as zero-padded upper-case hex.

    As in the reference behaviour, a 64-bit value only shows its low 32 bits,
    padded to sixteen digits.
    """
    try:
        width = _HEX_WIDTHS[bits]
    except KeyError:
        raise ValueError(f"Unsupported integer width: {bits}") from None
    masked = value & ((1 << min(bits, 32)) - 1)
    return f"0x{masked:0{width}X}"