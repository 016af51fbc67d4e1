"""
evobrain - Genetic Algorithm

This module provides a generic genetic algorithm over fixed-length
real-valued chromosomes. Anything implementing the Individual contract
can be evolved.

Key components:
- Chromosome: Ordered vector of float32 genes
- Individual: Contract between candidate solutions and the engine
- Operators: Selection, crossover, and mutation strategies
- GeneticAlgorithm: One generational step composed from the operators
- Statistics / EvolutionHistory: Fitness summaries per generation

Example usage:
    import numpy as np
    from evobrain.evolution import (
        GeneticAlgorithm,
        RouletteWheelSelection,
        UniformCrossover,
        GaussianMutation,
    )

    ga = GeneticAlgorithm(
        RouletteWheelSelection(),
        UniformCrossover(),
        GaussianMutation(chance=0.01, coeff=0.3),
    )
    rng = np.random.default_rng(0)
    population, stats = ga.evolve(rng, population)

    print(stats)
"""

from .chromosome import Chromosome
from .individual import Individual
from .operators import (
    SelectionMethod,
    RouletteWheelSelection,
    CrossoverMethod,
    UniformCrossover,
    MutationMethod,
    GaussianMutation,
)
from .statistics import Statistics, EvolutionHistory
from .engine import GeneticAlgorithm, EvolutionConfig

__all__ = [
    # Core classes
    'Chromosome',
    'Individual',
    'GeneticAlgorithm',
    'EvolutionConfig',
    'Statistics',
    'EvolutionHistory',
    # Operators
    'SelectionMethod',
    'RouletteWheelSelection',
    'CrossoverMethod',
    'UniformCrossover',
    'MutationMethod',
    'GaussianMutation',
]
