"""A fuzzy variable: a name and an ordered collection of fuzzy sets."""

from __future__ import annotations

from .fuzzy_set import FuzzySet
from .named_list import NamedList
from .types import MISSING_DATA_DOUBLE, is_na


def build_default_set_names(nbsets, base_name):
    """Default set names: ``base_name.1``, ``base_name.2``, ..."""
    return [f"{base_name}.{i}" for i in range(1, nbsets + 1)]


class FuzzyVariable:
    """A named variable whose sets are ordered by position."""

    __hash__ = None

    def __init__(self, name, sets=()):
        self.name = name
        self.sets = list(sets)

    @classmethod
    def with_set_count(cls, name, nbsets):
        return cls.with_set_names(name, build_default_set_names(nbsets, name))

    @classmethod
    def with_set_names(cls, name, set_names):
        return cls(name, [FuzzySet(set_name) for set_name in set_names])

    def __len__(self):
        return len(self.sets)

    def __eq__(self, other):
        if not isinstance(other, FuzzyVariable):
            return NotImplemented
        return self.name == other.name and self.sets == other.sets

    def __repr__(self):
        return f"FuzzyVariable({self.name!r}, {self.sets!r})"

    def set_index_by_name(self, name):
        """Index of the first set called ``name``."""
        for idx, fuzzy_set in enumerate(self.sets):
            if fuzzy_set.name == name:
                return idx
        raise KeyError(f"set name not found: {name}")

    def set_sets_positions(self, desc):
        """Rename and reposition all sets from a list description (or its text)."""
        if isinstance(desc, str):
            desc = NamedList.parse(desc)
        if not desc.is_list():
            raise ValueError("not a list")
        if len(desc) != len(self.sets):
            raise ValueError("incompatible number of sets")
        for fuzzy_set, item in zip(self.sets, desc):
            fuzzy_set.name = item.name
            fuzzy_set.position = item.get_numeric()

    def describe(self):
        lst = NamedList(self.name)
        for fuzzy_set in self.sets:
            lst.add(fuzzy_set.name, fuzzy_set.describe())
        return lst

    @classmethod
    def load(cls, desc):
        """Build a variable from its description (a NamedList or its text)."""
        if isinstance(desc, str):
            desc = NamedList.parse(desc)
        var = cls.with_set_count(desc.name, len(desc))
        var.set_sets_positions(desc)
        return var

    def fuzzify(self, set_idx, value):
        """Membership degree of ``value`` in the set ``set_idx`` (triangular/shoulder sets)."""
        nb = len(self.sets)
        if nb < 2:
            raise ValueError("fuzzification needs at least two sets")
        if not 0 <= set_idx < nb:
            raise IndexError(f"set index out of range: {set_idx}")
        last = nb - 1
        position = self.sets[set_idx].position

        if is_na(position):
            return MISSING_DATA_DOUBLE
        if value == position:
            return 1.0

        if set_idx == last or (set_idx != 0 and value < position):
            if value > position:
                return 1.0
            before = self.sets[set_idx - 1].position
            if value <= before:
                return 0.0
            return (value - before) / (position - before)

        if value < position:
            return 1.0
        after = self.sets[set_idx + 1].position
        if value >= after:
            return 0.0
        return 1.0 - (value - position) / (after - position)

    def defuzz(self, set_evals):
        """Weighted mean of set positions by their evaluations.

        Sets whose position or evaluation is missing are ignored; if all are
        ignored the result is missing. If no set fired the result is 0.
        """
        if not self.sets or len(set_evals) != len(self.sets):
            raise ValueError("one evaluation per set is required")
        eval_sum = 0.0
        eval_product = 0.0
        nb_non_missing = 0
        for fuzzy_set, evaluation in zip(self.sets, set_evals):
            pos = fuzzy_set.position
            if not is_na(pos) and not is_na(evaluation):
                nb_non_missing += 1
                eval_sum += evaluation
                eval_product += evaluation * pos
        if nb_non_missing == 0:
            return MISSING_DATA_DOUBLE
        return 0.0 if eval_sum == 0.0 else eval_product / eval_sum

    def __str__(self):
        return str(self.describe())