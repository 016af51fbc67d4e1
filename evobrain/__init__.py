"""
evobrain - evolving neural-network brains with a genetic algorithm.

Subpackages:
- evobrain.evolution: chromosomes, operators and the generational engine
- evobrain.core: feed-forward networks with a flat weight encoding
- evobrain.brain: adapter turning chromosomes into networks and back
"""

from .exceptions import (
    EvoBrainError,
    EmptyPopulationError,
    LengthMismatchError,
    InvalidParameterError,
)
from .evolution import (
    Chromosome,
    Individual,
    GeneticAlgorithm,
    EvolutionConfig,
    Statistics,
    EvolutionHistory,
    RouletteWheelSelection,
    UniformCrossover,
    GaussianMutation,
)
from .brain import Brain, BrainIndividual, Eye

__version__ = '0.1.0'

__all__ = [
    'EvoBrainError',
    'EmptyPopulationError',
    'LengthMismatchError',
    'InvalidParameterError',
    'Chromosome',
    'Individual',
    'GeneticAlgorithm',
    'EvolutionConfig',
    'Statistics',
    'EvolutionHistory',
    'RouletteWheelSelection',
    'UniformCrossover',
    'GaussianMutation',
    'Brain',
    'BrainIndividual',
    'Eye',
]
