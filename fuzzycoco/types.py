"""Shared sentinels for missing data and the test that recognises them."""

import math
import sys

# sentinel encoding a missing value in a floating point slot (lowest finite double)
MISSING_DATA_DOUBLE = -sys.float_info.max
NA_D = MISSING_DATA_DOUBLE
INFINITY_DOUBLE = math.inf
# sentinel encoding a missing value in an integer slot (lowest 32-bit int)
MISSING_DATA_INT = -(2**31)
NA_I = MISSING_DATA_INT


def is_na(value):
    """Return True if ``value`` is the missing-data sentinel for its type."""
    if isinstance(value, float):
        return value == MISSING_DATA_DOUBLE
    return value == MISSING_DATA_INT