"""
Generational genetic algorithm.

Orchestrates one generation:
1. Summarize the incoming population
2. Select two parents per offspring slot
3. Recombine their chromosomes
4. Mutate the child in place
5. Rebuild an individual from the child chromosome
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple
import logging

import numpy as np

from ..exceptions import EmptyPopulationError, InvalidParameterError
from .individual import Individual
from .operators import (
    CrossoverMethod,
    GaussianMutation,
    MutationMethod,
    RouletteWheelSelection,
    SelectionMethod,
    UniformCrossover,
)
from .statistics import EvolutionHistory, Statistics


logger = logging.getLogger(__name__)


class GeneticAlgorithm:
    """
    Composes one selection, one crossover and one mutation strategy.

    The strategies are fixed at construction and shared by every call to
    evolve(); they carry no state between calls.
    """

    def __init__(
        self,
        selection_method: SelectionMethod,
        crossover_method: CrossoverMethod,
        mutation_method: MutationMethod,
    ):
        self.selection_method = selection_method
        self.crossover_method = crossover_method
        self.mutation_method = mutation_method

    def evolve(
        self,
        rng: np.random.Generator,
        population: Sequence[Individual],
    ) -> Tuple[List[Individual], Statistics]:
        """
        Breed the next generation.

        Args:
            rng: Random source; per offspring it is consumed by two
                selections, one crossover and one mutation pass, in that order
            population: Current, scored population

        Returns:
            Tuple of (new population of the same size, statistics of the
            input population)
        """
        if not population:
            raise EmptyPopulationError("got an empty population")

        create = type(population[0]).create
        new_population = []

        for _ in range(len(population)):
            parent_a = self.selection_method.select(rng, population).chromosome()
            parent_b = self.selection_method.select(rng, population).chromosome()

            child = self.crossover_method.crossover(rng, parent_a, parent_b)
            self.mutation_method.mutate(rng, child)

            new_population.append(create(child))

        stats = Statistics.from_population(population)
        logger.debug("Evolved %d individuals (%s)", len(new_population), stats)
        return new_population, stats

    def run(
        self,
        rng: np.random.Generator,
        population: Sequence[Individual],
        generations: int,
        history: Optional[EvolutionHistory] = None,
    ) -> Tuple[List[Individual], EvolutionHistory]:
        """
        Evolve a population for a fixed number of generations.

        Only meaningful when individuals carry their fitness from creation
        (e.g. fitness derived from the chromosome); simulations that score
        individuals externally should call evolve() once per generation.

        Returns:
            Tuple of (final population, history with one entry per generation)
        """
        if history is None:
            history = EvolutionHistory()

        current = list(population)
        for generation in range(generations):
            current, stats = self.evolve(rng, current)
            history.record(stats)
            logger.info("Generation %d: %s", generation + 1, stats)

        return current, history

    def __repr__(self) -> str:
        return (
            f"GeneticAlgorithm({self.selection_method!r}, "
            f"{self.crossover_method!r}, {self.mutation_method!r})"
        )


@dataclass
class EvolutionConfig:
    """Configuration for an evolution run."""
    # Population parameters
    population_size: int = 20
    generations: int = 10

    # Mutation parameters
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3

    # Brain shape
    eye_cells: int = 9

    def __post_init__(self):
        """Validate configuration ranges."""
        if self.population_size < 1:
            raise InvalidParameterError(f"population_size must be positive, got {self.population_size}")
        if self.generations < 0:
            raise InvalidParameterError(f"generations must be non-negative, got {self.generations}")
        if not 0.0 <= self.mutation_chance <= 1.0:
            raise InvalidParameterError(f"mutation_chance {self.mutation_chance} out of range [0.0, 1.0]")
        if self.eye_cells < 0:
            raise InvalidParameterError(f"eye_cells must be non-negative, got {self.eye_cells}")

    def build_algorithm(self) -> GeneticAlgorithm:
        """Roulette wheel selection, uniform crossover, gaussian mutation."""
        return GeneticAlgorithm(
            RouletteWheelSelection(),
            UniformCrossover(),
            GaussianMutation(self.mutation_chance, self.mutation_coeff),
        )

    def run(
        self,
        rng: np.random.Generator,
        population: Sequence[Individual],
    ) -> Tuple[List[Individual], EvolutionHistory]:
        """
        Evolve `population` for `generations` generations.

        Raises:
            InvalidParameterError: if the population size differs from
                `population_size`
        """
        if len(population) != self.population_size:
            raise InvalidParameterError(
                f"Expected a population of {self.population_size}, got {len(population)}"
            )
        return self.build_algorithm().run(rng, population, self.generations)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'population_size': self.population_size,
            'generations': self.generations,
            'mutation_chance': self.mutation_chance,
            'mutation_coeff': self.mutation_coeff,
            'eye_cells': self.eye_cells,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EvolutionConfig':
        """Create from dictionary, ignoring unknown keys."""
        known = cls().to_dict().keys()
        return cls(**{k: v for k, v in data.items() if k in known})
