"""Checked numeric conversions between fixed-width integer types."""

from __future__ import annotations

import enum
import math
from typing import Union


class NumericCastError(OverflowError):
    """Raised when a value does not fit the target numeric type."""

    def __init__(self, message: str = "Bad numeric cast") -> None:
        super().__init__(message)


class IntType(enum.Enum):
    """Fixed-width integer types, as (bits, signed)."""

    UINT8 = (8, False)
    INT8 = (8, True)
    UINT16 = (16, False)
    INT16 = (16, True)
    UINT32 = (32, False)
    INT32 = (32, True)
    UINT64 = (64, False)
    INT64 = (64, True)

    @property
    def bits(self) -> int:
        return self.value[0]

    @property
    def signed(self) -> bool:
        return self.value[1]

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


Number = Union[int, float]


def numeric_cast(value: Number, target: Union[IntType, type]) -> Number:
    """Convert ``value`` to ``target``, raising NumericCastError if it does not fit.

    ``target`` is an :class:`IntType` or ``float``. Floating-point values cast
    to an integer type are truncated toward zero after the range check.
    """
    if target is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Cannot cast {type(value).__name__} to float")
        return float(value)

    if not isinstance(target, IntType):
        raise TypeError(f"Unsupported cast target: {target!r}")

    if isinstance(value, float):
        if math.isnan(value) or value < target.min or value > target.max:
            raise NumericCastError()
        result = int(value)
        if result < target.min or result > target.max:
            raise NumericCastError()
        return result

    if isinstance(value, int):
        value = int(value)
        if value < target.min or value > target.max:
            raise NumericCastError()
        return value

    raise TypeError(f"Cannot cast {type(value).__name__} to an integer type")