"""
Brains: neural networks whose weights are chromosomes.

A Brain maps what a creature's eye sees to two actuator channels (e.g.
speed and rotation). Its network shape is derived from the eye alone:

    input layer   eye.cells neurons
    hidden layer  2 * eye.cells neurons
    output layer  2 neurons

Because the shape is fixed by the eye, every brain built for the same
eye has the same chromosome length, which is what crossover requires.
"""

from dataclasses import dataclass
from typing import Iterable, List, Protocol

import numpy as np

from .core.network import LayerTopology, Network
from .evolution.chromosome import Chromosome
from .evolution.individual import Individual


class Sensor(Protocol):
    """Anything exposing how many input cells it produces."""

    @property
    def cells(self) -> int:
        ...


@dataclass(frozen=True)
class Eye:
    """Field-of-view sensor split into `cells` equal sectors."""
    cells: int = 9


class Brain:
    """Network adapter between chromosomes and runnable networks."""

    def __init__(self, network: Network):
        self.network = network

    @staticmethod
    def topology(eye: Sensor) -> List[LayerTopology]:
        return [
            LayerTopology(neurons=eye.cells),
            LayerTopology(neurons=2 * eye.cells),
            LayerTopology(neurons=2),
        ]

    @classmethod
    def random(cls, rng: np.random.Generator, eye: Sensor) -> 'Brain':
        return cls(Network.random(rng, cls.topology(eye)))

    @classmethod
    def from_chromosome(cls, chromosome: Chromosome, eye: Sensor) -> 'Brain':
        """
        Build a brain whose network weights are the chromosome's genes.

        Raises:
            LengthMismatchError: if the chromosome length differs from the
                weight count of the eye's topology
        """
        return cls(Network.from_weights(cls.topology(eye), chromosome))

    def as_chromosome(self) -> Chromosome:
        return Chromosome.from_array(self.network.weights())

    def propagate(self, vision: Iterable[float]) -> np.ndarray:
        """Actuator outputs (two values) for one reading of the eye."""
        return self.network.propagate(vision)

    def __repr__(self):
        return f"Brain({self.network!r})"


class BrainIndividual(Individual):
    """
    A scored brain, as seen by the genetic algorithm.

    Offspring created by the engine start with zero fitness; the
    surrounding simulation scores them after they have lived.
    """

    def __init__(self, fitness: float, chromosome: Chromosome):
        self._fitness = fitness
        self._chromosome = chromosome

    @classmethod
    def from_brain(cls, brain: Brain, fitness: float) -> 'BrainIndividual':
        return cls(fitness, brain.as_chromosome())

    def into_brain(self, eye: Sensor) -> Brain:
        return Brain.from_chromosome(self._chromosome, eye)

    def fitness(self) -> float:
        return self._fitness

    def chromosome(self) -> Chromosome:
        return self._chromosome

    @classmethod
    def create(cls, chromosome: Chromosome) -> 'BrainIndividual':
        return cls(0.0, chromosome)

    def __repr__(self):
        return f"BrainIndividual(fitness={self._fitness}, genes={len(self._chromosome)})"
