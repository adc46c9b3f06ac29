"""A named fuzzy set located at a position on its variable's universe."""

from __future__ import annotations

from dataclasses import dataclass

from .named_list import NamedList
from .types import MISSING_DATA_DOUBLE


@dataclass
class FuzzySet:
    """A fuzzy set: a name and a position (missing by default)."""

    name: str
    position: float = MISSING_DATA_DOUBLE

    def describe(self) -> NamedList:
        return NamedList(self.name, self.position)

    @classmethod
    def load(cls, desc: NamedList) -> FuzzySet:
        """Build a set from a scalar description holding a double position."""
        value = desc.value
        if isinstance(value, bool) or not isinstance(value, float):
            raise TypeError(f"position of set {desc.name!r} is not a double")
        return cls(desc.name, value)

    def __str__(self) -> str:
        return str(self.describe())