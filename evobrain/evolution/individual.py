"""Individual contract bridging candidate solutions to the engine."""

from abc import ABC, abstractmethod

from .chromosome import Chromosome


class Individual(ABC):
    """
    A candidate solution the genetic algorithm can score and breed.

    Implementations decide what fitness means; higher is better. The
    engine never inspects anything beyond these three operations.
    """

    @abstractmethod
    def fitness(self) -> float:
        """Non-negative, finite fitness score."""

    @abstractmethod
    def chromosome(self) -> Chromosome:
        """The chromosome encoding this individual. Treated as read-only."""

    @classmethod
    @abstractmethod
    def create(cls, chromosome: Chromosome) -> 'Individual':
        """Build a new individual from an offspring chromosome."""
