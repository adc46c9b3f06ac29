"""Mapping between a real interval and the integers encodable on a number of bits."""

import math

from .types import is_na


def _lround(x):
    """Round to nearest integer, halves away from zero."""
    magnitude = abs(x)
    floor = math.floor(magnitude)
    rounded = floor + 1 if magnitude - floor >= 0.5 else floor
    return int(rounded) if x >= 0 else -int(rounded)


class Discretizer:
    """Splits [low, high] into 2**nb_bits - 1 equal steps."""

    def __init__(self, nb_bits, low, high):
        self.reset(nb_bits, low, high)

    @classmethod
    def from_data(cls, nb_bits, data):
        """Build a discretizer spanning the non-missing values of ``data``."""
        values = [v for v in data if not is_na(v)]
        if not values:
            raise ValueError("empty or all missing data in Discretizer")
        return cls(nb_bits, min(values), max(values))

    def reset(self, nb_bits, low, high):
        self.nb_bits = nb_bits
        self.low = low
        self.high = high
        self._step = (high - low) / ((1 << nb_bits) - 1)

    @property
    def step(self):
        return self._step

    def discretize(self, value):
        if self._step == 0:
            return 0
        return _lround((value - self.low) / self._step)

    def undiscretize(self, discret):
        return self.low + discret * self._step

    def __eq__(self, other):
        if not isinstance(other, Discretizer):
            return NotImplemented
        return (
            self.low == other.low
            and self.high == other.high
            and self.nb_bits == other.nb_bits
            and self._step == other._step
        )

    __hash__ = None

    def __str__(self):
        return f"Discretizer: [{self.low:g}-{self.high:g}] by {self._step:g} on {self.nb_bits}"

    def __repr__(self):
        return f"Discretizer({self.nb_bits!r}, {self.low!r}, {self.high!r})"