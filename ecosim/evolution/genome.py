"""Genome: the fixed-length, real-valued unit of heredity.

Genes are stored as float32 so that crossover and mutation round exactly the
same way on every platform. A genome never changes length; the only way to
change a gene after construction is item assignment, which mutation
strategies use explicitly.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

import numpy as np

# Genetic operators introduce float rounding, so equality is tolerance based
GENE_RTOL = 1e-5
GENE_ATOL = 1e-6


class Genome:
    """Ordered, fixed-length sequence of float32 genes.

    Supports ``len``, indexing, iteration and ``==`` (tolerance based).
    Slicing and length-changing operations are intentionally absent.

    Example:
        genome = Genome([0.5, -1.0, 2.0])
        genome[1] = genome[1] + 0.25
        list(genome)  # [0.5, -0.75, 2.0]
    """

    __slots__ = ("_genes",)

    def __init__(self, genes: Iterable[float]) -> None:
        self._genes = np.array(list(genes), dtype=np.float32)

    @classmethod
    def from_array(cls, genes: np.ndarray) -> "Genome":
        """Build a genome from a 1-D array, copying it."""
        genome = cls.__new__(cls)
        genome._genes = np.array(genes, dtype=np.float32).reshape(-1)
        return genome

    def __len__(self) -> int:
        return len(self._genes)

    def __getitem__(self, index: int) -> np.float32:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"Genome indices must be integers, not {type(index).__name__}")
        return self._genes[index]

    def __setitem__(self, index: int, value: float) -> None:
        if not isinstance(index, (int, np.integer)):
            raise TypeError(f"Genome indices must be integers, not {type(index).__name__}")
        self._genes[index] = value

    def __iter__(self) -> Iterator[float]:
        return (float(gene) for gene in self._genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        if len(self) != len(other):
            return False
        return bool(np.allclose(self._genes, other._genes, rtol=GENE_RTOL, atol=GENE_ATOL))

    __hash__ = None

    def __repr__(self) -> str:
        genes = ", ".join(f"{gene:.6g}" for gene in self)
        return f"Genome([{genes}])"

    def to_list(self) -> List[float]:
        return list(self)

    def as_array(self) -> np.ndarray:
        """Read-only float32 view of the genes."""
        view = self._genes.view()
        view.flags.writeable = False
        return view

    def copy(self) -> "Genome":
        return Genome.from_array(self._genes)
