"""Seedable random number generator used throughout the evolution."""

import random as _random


class RandomGenerator:
    """Mersenne-Twister based generator; an unseeded instance draws its seed from the OS."""

    def __init__(self, seed=None):
        self._rng = _random.Random(seed)

    def random(self, low, high):
        """Uniform integer in the closed range [low, high]."""
        return self._rng.randint(low, high)

    def random_ints(self, low, high, nb):
        """``nb`` uniform integers in [low, high]."""
        return [self._rng.randint(low, high) for _ in range(nb)]

    def choice(self, items):
        """A uniformly chosen element of a non-empty sequence."""
        if not items:
            raise ValueError("cannot choose from an empty sequence")
        return items[self.random(0, len(items) - 1)]

    def random_real(self, low, high):
        """Uniform real in [low, high)."""
        return low + (high - low) * self._rng.random()

    def random_reals(self, low, high, nb):
        """``nb`` uniform reals in [low, high)."""
        return [self.random_real(low, high) for _ in range(nb)]