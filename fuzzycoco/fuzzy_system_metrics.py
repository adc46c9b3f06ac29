"""Performance metrics of a fuzzy system, also usable as metric weights."""

from __future__ import annotations

from dataclasses import dataclass, fields

from .named_list import NamedList
from .types import is_na

# nb_vars describes the system itself and is not accumulated
_NOT_ACCUMULATED = frozenset({"nb_vars"})

_LABELS = {
    "true_positives": "TP",
    "false_positives": "FP",
    "true_negatives": "TN",
    "false_negatives": "FN",
}


@dataclass
class FuzzySystemMetrics:
    """All metrics are floats so that an instance can also serve as a set of weights."""

    sensitivity: float = 0.0
    specificity: float = 0.0
    accuracy: float = 0.0
    ppv: float = 0.0
    rmse: float = 0.0
    rrse: float = 0.0
    rae: float = 0.0
    mse: float = 0.0
    distanceThreshold: float = 0.0
    distanceMinThreshold: float = 0.0
    nb_vars: float = 0.0
    overLearn: float = 0.0
    true_positives: float = 0.0
    false_positives: float = 0.0
    true_negatives: float = 0.0
    false_negatives: float = 0.0

    @classmethod
    def from_description(cls, desc: NamedList) -> FuzzySystemMetrics:
        """Metrics read from a description; absent entries keep their zero default."""
        metrics = cls()
        metrics.set_values(desc)
        return metrics

    def set_values(self, desc: NamedList) -> None:
        """Overwrite the metrics present in ``desc``, leaving the others untouched."""
        for field in fields(self):
            setattr(self, field.name, desc.get_double(field.name, getattr(self, field.name)))

    def reset(self) -> None:
        for field in fields(self):
            setattr(self, field.name, 0.0)

    def __iadd__(self, other: FuzzySystemMetrics) -> FuzzySystemMetrics:
        """Add the non-missing metrics of ``other`` (nb_vars excepted)."""
        if not isinstance(other, FuzzySystemMetrics):
            return NotImplemented
        for field in fields(self):
            if field.name in _NOT_ACCUMULATED:
                continue
            value = getattr(other, field.name)
            if not is_na(value):
                setattr(self, field.name, getattr(self, field.name) + value)
        return self

    def describe(self) -> NamedList:
        desc = NamedList()
        for field in fields(self):
            desc.add(field.name, float(getattr(self, field.name)))
        return desc

    def __str__(self) -> str:
        return ", ".join(
            f"{_LABELS.get(field.name, field.name)}={getattr(self, field.name):g}"
            for field in fields(self)
        )