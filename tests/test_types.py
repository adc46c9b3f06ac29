import sys

from fuzzycoco.types import (
    INFINITY_DOUBLE,
    MISSING_DATA_DOUBLE,
    MISSING_DATA_INT,
    NA_D,
    NA_I,
    is_na,
)


def test_double_sentinel_is_lowest_double():
    assert MISSING_DATA_DOUBLE == -sys.float_info.max
    assert is_na(MISSING_DATA_DOUBLE)
    assert is_na(NA_D)


def test_int_sentinel_is_lowest_int32():
    assert MISSING_DATA_INT == -(2**31)
    assert is_na(MISSING_DATA_INT)
    assert is_na(NA_I)


def test_regular_values_are_not_missing():
    assert not is_na(0.0)
    assert not is_na(0)
    assert not is_na(-1.5)
    assert not is_na(INFINITY_DOUBLE)
    assert not is_na(-INFINITY_DOUBLE)


def test_sentinels_do_not_cross_types():
    assert not is_na(float(MISSING_DATA_INT))