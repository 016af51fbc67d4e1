"""
Fitness statistics for populations.

Enables:
- Summarizing one population (min / max / average fitness)
- Recording generation-by-generation history
- Detecting stagnation across generations
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..exceptions import EmptyPopulationError
from .individual import Individual


@dataclass(frozen=True)
class Statistics:
    """Fitness snapshot of a single, non-empty population."""
    min_fitness: float
    max_fitness: float
    avg_fitness: float

    @classmethod
    def from_population(cls, population: Sequence[Individual]) -> 'Statistics':
        """Compute min, max and mean fitness in a single pass."""
        if not population:
            raise EmptyPopulationError("Cannot compute statistics of an empty population")

        min_fitness = population[0].fitness()
        max_fitness = min_fitness
        sum_fitness = 0.0

        for individual in population:
            fitness = individual.fitness()
            min_fitness = min(min_fitness, fitness)
            max_fitness = max(max_fitness, fitness)
            sum_fitness += fitness

        return cls(
            min_fitness=float(min_fitness),
            max_fitness=float(max_fitness),
            avg_fitness=sum_fitness / len(population),
        )

    def __str__(self) -> str:
        return (
            f"min={self.min_fitness:.2f}, "
            f"max={self.max_fitness:.2f}, "
            f"avg={self.avg_fitness:.2f}"
        )


class EvolutionHistory:
    """
    Tracks evolution progress over generations.

    Each recorded entry describes the population that was fed into that
    generation's evolve call.
    """

    def __init__(self):
        self.generations: List[Statistics] = []

    def record(self, stats: Statistics) -> None:
        self.generations.append(stats)

    def __len__(self) -> int:
        return len(self.generations)

    @property
    def min_trajectory(self) -> List[float]:
        return [s.min_fitness for s in self.generations]

    @property
    def max_trajectory(self) -> List[float]:
        return [s.max_fitness for s in self.generations]

    @property
    def avg_trajectory(self) -> List[float]:
        return [s.avg_fitness for s in self.generations]

    @property
    def best_ever(self) -> Optional[float]:
        """Highest fitness seen in any recorded generation."""
        if not self.generations:
            return None
        return max(self.max_trajectory)

    def is_improving(self) -> bool:
        """True if the last average fitness beats the first one."""
        if len(self.generations) < 2:
            return False
        return self.avg_trajectory[-1] > self.avg_trajectory[0]

    def should_early_stop(
        self,
        patience: int = 10,
        min_improvement: float = 0.001,
    ) -> bool:
        """
        Check whether average fitness has stagnated.

        Args:
            patience: Number of generations without improvement to wait
            min_improvement: Minimum gain in average fitness that counts

        Returns:
            True if the last `patience` generations improved on the best
            earlier average by less than `min_improvement`
        """
        if len(self.generations) <= patience:
            return False

        trajectory = self.avg_trajectory
        best_before = max(trajectory[:-patience])
        best_recent = max(trajectory[-patience:])
        return best_recent - best_before < min_improvement
