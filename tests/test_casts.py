import math

import pytest

from mediabox.casts import IntType, NumericCastError, numeric_cast


@pytest.mark.parametrize("target", list(IntType))
def test_bounds_accepted(target):
    assert numeric_cast(target.min, target) == target.min
    assert numeric_cast(target.max, target) == target.max


@pytest.mark.parametrize("target", list(IntType))
def test_out_of_bounds_rejected(target):
    with pytest.raises(NumericCastError):
        numeric_cast(target.max + 1, target)
    with pytest.raises(NumericCastError):
        numeric_cast(target.min - 1, target)


def test_uint8_limits():
    assert IntType.UINT8.max == 255
    with pytest.raises(NumericCastError):
        numeric_cast(256, IntType.UINT8)


def test_negative_to_unsigned_rejected():
    with pytest.raises(NumericCastError):
        numeric_cast(-1, IntType.UINT64)


def test_error_message():
    with pytest.raises(NumericCastError, match="Bad numeric cast"):
        numeric_cast(-5, IntType.UINT16)


def test_float_truncates_toward_zero():
    assert numeric_cast(3.7, IntType.INT32) == 3
    assert numeric_cast(-3.7, IntType.INT32) == -3


def test_negative_float_to_unsigned_rejected():
    with pytest.raises(NumericCastError):
        numeric_cast(-0.5 - 1, IntType.UINT32)


def test_float_too_large_rejected():
    with pytest.raises(NumericCastError):
        numeric_cast(float(IntType.INT16.max) + 10.0, IntType.INT16)


def test_nan_rejected():
    with pytest.raises(NumericCastError):
        numeric_cast(math.nan, IntType.INT64)


def test_int_to_float():
    result = numeric_cast(5, float)
    assert result == 5.0
    assert isinstance(result, float)


def test_unsupported_target():
    with pytest.raises(TypeError):
        numeric_cast(1, str)


def test_intermediate_value_roundtrip():
    for target in IntType:
        mid = (target.min + target.max) // 2
        assert numeric_cast(mid, target) == mid