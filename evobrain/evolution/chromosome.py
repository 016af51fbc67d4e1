"""
Chromosome representation.

A Chromosome is an ordered, fixed-length vector of float32 genes. Gene
order is significant: position i in the chromosome is position i in the
flattened network weights it eventually becomes.
"""

from typing import Iterable, Iterator, List

import numpy as np


GENE_DTYPE = np.float32


class Chromosome:
    """
    Ordered vector of real-valued genes.

    Built from any iterable of floats and decomposed back with list(),
    preserving order:

        >>> c = Chromosome([1.0, 2.0, 3.0])
        >>> Chromosome(list(c)) == c
        True
    """

    __slots__ = ('_genes',)

    def __init__(self, genes: Iterable[float] = ()):
        self._genes = np.array(list(genes), dtype=GENE_DTYPE)

    @classmethod
    def from_array(cls, genes: np.ndarray) -> 'Chromosome':
        """Wrap a copy of an existing 1-D array."""
        chromosome = cls.__new__(cls)
        chromosome._genes = np.array(genes, dtype=GENE_DTYPE).reshape(-1)
        return chromosome

    @property
    def genes(self) -> np.ndarray:
        """Read-only view of the underlying genes."""
        view = self._genes.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[float]:
        return (float(g) for g in self._genes)

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self._genes):
            raise IndexError(f"Gene index {index} out of range [0, {len(self._genes) - 1}]")
        return index

    def __getitem__(self, index: int) -> float:
        return float(self._genes[self._check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._genes[self._check_index(index)] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chromosome):
            return NotImplemented
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._genes, other._genes))

    __hash__ = None

    def to_list(self) -> List[float]:
        """Decompose into an ordered list of floats."""
        return [float(g) for g in self._genes]

    def copy(self) -> 'Chromosome':
        return Chromosome.from_array(self._genes)

    def __repr__(self) -> str:
        genes = ', '.join(f'{g:.4f}' for g in self._genes)
        return f"Chromosome([{genes}])"
