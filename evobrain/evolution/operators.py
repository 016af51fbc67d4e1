"""
Evolutionary operators: selection, crossover, and mutation.

Each operator is a small strategy object with one method. They hold only
their construction parameters, so one instance can be reused across any
number of generations.

Every operator draws exclusively from the numpy Generator it is handed,
in a fixed order, so an identically seeded generator replays the same
result:
- RouletteWheelSelection: one weighted draw per call
- UniformCrossover: one draw per gene
- GaussianMutation: per gene a sign draw, a touch draw, and a magnitude
  draw only when the gene is touched
"""

import math
from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np

from ..exceptions import (
    EmptyPopulationError,
    InvalidParameterError,
    LengthMismatchError,
)
from .chromosome import Chromosome
from .individual import Individual


# =============================================================================
# Selection Operators
# =============================================================================

class SelectionMethod(ABC):
    """Picks one parent from a population."""

    @abstractmethod
    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        pass


class RouletteWheelSelection(SelectionMethod):
    """
    Fitness-proportionate selection.

    Each individual is chosen with probability fitness / sum(fitnesses).
    Fitness values must be non-negative and finite, and not all zero.
    """

    def select(self, rng: np.random.Generator, population: Sequence[Individual]) -> Individual:
        if not population:
            raise EmptyPopulationError("got an empty population")

        fitnesses = np.array([individual.fitness() for individual in population], dtype=np.float64)

        if not np.all(np.isfinite(fitnesses)) or np.any(fitnesses < 0):
            raise InvalidParameterError(
                f"Roulette wheel selection requires non-negative finite fitness, got {fitnesses.tolist()}"
            )
        total = fitnesses.sum()
        if total <= 0:
            raise InvalidParameterError("Roulette wheel selection requires at least one positive fitness")

        index = rng.choice(len(population), p=fitnesses / total)
        return population[int(index)]

    def __repr__(self) -> str:
        return "RouletteWheelSelection()"


# =============================================================================
# Crossover Operators
# =============================================================================

class CrossoverMethod(ABC):
    """Combines two parent chromosomes into one child."""

    @abstractmethod
    def crossover(
        self,
        rng: np.random.Generator,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        pass


class UniformCrossover(CrossoverMethod):
    """
    Uniform crossover with gene-by-gene coin flips.

    Each child gene is copied from parent_a or parent_b with probability
    0.5 each. No gene value is ever synthesized.

    Example:
        Parent A: [1, 2, 3, 4]
        Parent B: [-1, -2, -3, -4]
        Child:    [1, -2, -3, 4]   (one possible outcome)
    """

    def crossover(
        self,
        rng: np.random.Generator,
        parent_a: Chromosome,
        parent_b: Chromosome,
    ) -> Chromosome:
        if len(parent_a) != len(parent_b):
            raise LengthMismatchError(
                f"Parents must have equal length, got {len(parent_a)} and {len(parent_b)}"
            )

        from_a = rng.random(len(parent_a)) < 0.5
        return Chromosome.from_array(np.where(from_a, parent_a.genes, parent_b.genes))

    def __repr__(self) -> str:
        return "UniformCrossover()"


# =============================================================================
# Mutation Operators
# =============================================================================

class MutationMethod(ABC):
    """Perturbs a chromosome in place."""

    @abstractmethod
    def mutate(self, rng: np.random.Generator, child: Chromosome) -> None:
        pass


class GaussianMutation(MutationMethod):
    """
    Random additive perturbation of individual genes.

    Args:
        chance: Probability of changing a gene
            - 0.0 = no genes will be touched
            - 1.0 = all genes will be touched
        coeff: Magnitude of that change
            - 0.0 = touched genes will not be modified
            - 3.0 = touched genes will be += or -= by at most 3.0
    """

    def __init__(self, chance: float, coeff: float):
        if not 0.0 <= chance <= 1.0:
            raise InvalidParameterError(f"Mutation chance {chance} out of range [0.0, 1.0]")
        if math.isnan(coeff):
            raise InvalidParameterError("Mutation coefficient must be a number")

        self.chance = float(chance)
        self.coeff = float(coeff)

    def mutate(self, rng: np.random.Generator, child: Chromosome) -> None:
        for i in range(len(child)):
            # Sign is drawn for every gene, touched or not
            sign = -1.0 if rng.random() < 0.5 else 1.0

            if rng.random() < self.chance:
                child[i] = child[i] + sign * self.coeff * rng.random()

    def __repr__(self) -> str:
        return f"GaussianMutation(chance={self.chance}, coeff={self.coeff})"
