"""Mutation of genomes by toggling bits."""

from __future__ import annotations


class TogglingMutationMethod:
    """Flips bits of genomes at random.

    ``mut_flip_ind`` is the probability that a genome is a mutation target;
    ``mut_flip_genome`` is the probability that each of its bits flips. When
    the latter is 0, a single random bit is flipped instead.
    """

    def __init__(self, rng, mut_flip_ind, mut_flip_genome):
        self.rng = rng
        self.mut_flip_ind = mut_flip_ind
        self.mut_flip_genome = mut_flip_genome

    def mutate(self, genome):
        """Mutate one genome in place."""
        nb = len(genome)
        if self.mut_flip_genome == 0:
            idx = self.rng.random(0, nb - 1)
            genome[idx] = not genome[idx]
            return
        probs = self.rng.random_reals(0, 1, nb)
        for idx, prob in enumerate(probs):
            if prob < self.mut_flip_genome:
                genome[idx] = not genome[idx]

    def mutate_all(self, genomes):
        """Mutate, in place, each genome selected with probability ``mut_flip_ind``."""
        for genome in genomes:
            if self.rng.random_real(0, 1) < self.mut_flip_ind:
                self.mutate(genome)