"""Parameters of a genetic evolution."""

from __future__ import annotations

from dataclasses import dataclass

from .named_list import NamedList
from .types import MISSING_DATA_INT, is_na

_NAMES = ("pop_size", "elite_size", "cx_prob", "mut_flip_genome", "mut_flip_bit")


@dataclass
class EvolutionParams:
    """Population size, elitism, crossover and mutation probabilities."""

    # number of genomes in the population to evolve
    pop_size: int = MISSING_DATA_INT
    # number of elite individuals
    elite_size: int = 5
    # crossover probability
    cx_prob: float = 0.5
    # probability that a genome is a target for a mutation
    mut_flip_genome: float = 0.5
    # probability that a bit of a genome is mutated
    mut_flip_bit: float = 0.025

    @classmethod
    def from_description(cls, desc: NamedList) -> EvolutionParams:
        """Parameters read from a description; absent entries keep their defaults."""
        p = cls()
        return cls(
            pop_size=desc.get_as_int("pop_size", p.pop_size),
            elite_size=desc.get_as_int("elite_size", p.elite_size),
            cx_prob=desc.get_double("cx_prob", p.cx_prob),
            mut_flip_genome=desc.get_double("mut_flip_genome", p.mut_flip_genome),
            mut_flip_bit=desc.get_double("mut_flip_bit", p.mut_flip_bit),
        )

    def has_missing(self) -> bool:
        return any(is_na(getattr(self, name)) for name in _NAMES)

    def describe(self) -> NamedList:
        desc = NamedList()
        desc.add("pop_size", int(self.pop_size))
        desc.add("elite_size", int(self.elite_size))
        desc.add("cx_prob", float(self.cx_prob))
        desc.add("mut_flip_genome", float(self.mut_flip_genome))
        desc.add("mut_flip_bit", float(self.mut_flip_bit))
        return desc

    def __str__(self) -> str:
        def fmt(value):
            return "NA" if is_na(value) else f"{value:g}"

        header = "\t".join(_NAMES)
        row = "\t".join(fmt(getattr(self, name)) for name in _NAMES)
        return f"{header}\n{row}\n"