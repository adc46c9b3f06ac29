"""Selection of individuals according to their fitness."""

from __future__ import annotations

from .types import MISSING_DATA_DOUBLE


def _check(nb, fitnesses):
    if nb > len(fitnesses):
        raise ValueError(f"cannot select {nb} among {len(fitnesses)} entities")


class RankBasedSelectionMethod:
    """Tournament-like selection: each pick is the fittest of a random sample."""

    # the sample size is the number of entities divided by this
    NB_SPLIT = 10

    def __init__(self, rng):
        self.rng = rng

    def select_entities(self, nb, fitnesses):
        """Return ``nb`` selected indexes (repetitions allowed)."""
        fitnesses = list(fitnesses)
        _check(nb, fitnesses)
        nb_entities = len(fitnesses)
        if nb_entities == 0 or nb == 0:
            return []
        nb_tries = nb_entities // self.NB_SPLIT
        indexes = []
        for _ in range(nb):
            best_fitness = MISSING_DATA_DOUBLE
            best_idx = 0
            for idx in self.rng.random_ints(0, nb_entities - 1, nb_tries):
                if fitnesses[idx] > best_fitness:
                    best_fitness = fitnesses[idx]
                    best_idx = idx
            indexes.append(best_idx)
        return indexes


class ElitismWithRandomMethod:
    """Selects the ``nb - 1`` fittest entities plus one chosen at random."""

    def __init__(self, rng):
        self.rng = rng

    def select_entities(self, nb, fitnesses):
        fitnesses = list(fitnesses)
        _check(nb, fitnesses)
        nb_entities = len(fitnesses)
        if nb_entities == 0 or nb == 0:
            return []
        ranked = sorted(range(nb_entities), key=lambda i: fitnesses[i], reverse=True)
        indexes = ranked[: min(nb - 1, nb_entities)]
        indexes.append(self.rng.choice(ranked))
        return indexes