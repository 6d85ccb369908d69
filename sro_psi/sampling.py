"""
Random term generation and order-consistency checks.

Provides:
1. TermGenerator: seeded sampler of well-formed terms of bounded depth
2. comparison_matrix: pairwise -1/0/1 comparison table as a numpy array
3. count_violations, check_total_order: trichotomy and transitivity audit of
   the comparator
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from .terms import Term, ZERO, ONE, OMEGA, LOMEGA, MAHLO, IOTA, add, collapse, psi, eq
from .comparison import lt

SEED_TERMS = (ONE, OMEGA, LOMEGA, MAHLO, IOTA)


class TermGenerator:
    """
    Samples well-formed terms.

    Shape probabilities are fixed; depth bounds the nesting of M and ψ so
    that every sample stays small enough for exhaustive pairwise checks.
    """

    def __init__(self, seed: int = 42, max_addends: int = 3):
        self.rng = np.random.default_rng(seed)
        self.max_addends = max_addends

    def random_principal(self, max_depth: int = 3) -> Term:
        """A ψ or M term of nesting depth at most max_depth."""
        if max_depth <= 1:
            return SEED_TERMS[self.rng.integers(len(SEED_TERMS))]
        roll = self.rng.random()
        if roll < 0.25:
            return SEED_TERMS[self.rng.integers(len(SEED_TERMS))]
        if roll < 0.4:
            return collapse(self.random_term(max_depth - 1))
        return psi(self.random_term(max_depth - 1), self.random_term(max_depth - 1))

    def random_term(self, max_depth: int = 3) -> Term:
        """Zero, a principal term, or a sum of principal terms."""
        if self.rng.random() < 0.15:
            return ZERO
        n = int(self.rng.integers(1, self.max_addends + 1))
        term = ZERO
        for _ in range(n):
            term = add(term, self.random_principal(max_depth))
        return term

    def sample(self, n: int, max_depth: int = 3) -> List[Term]:
        return [self.random_term(max_depth) for _ in range(n)]


def comparison_matrix(terms: Sequence[Term]) -> np.ndarray:
    """
    Pairwise comparison table.

    Entry [i, j] is -1 if terms[i] < terms[j], 0 if they are equal and 1
    otherwise. Pairs where neither or both of lt/eq hold are marked 2.
    """
    n = len(terms)
    matrix = np.zeros((n, n), dtype=np.int8)
    for i in range(n):
        for j in range(n):
            less = lt(terms[i], terms[j])
            same = eq(terms[i], terms[j])
            greater = lt(terms[j], terms[i])
            if less + same + greater != 1:
                matrix[i, j] = 2
            elif less:
                matrix[i, j] = -1
            elif greater:
                matrix[i, j] = 1
    return matrix


@dataclass
class OrderReport:
    """Outcome of check_total_order."""
    n_terms: int
    trichotomy_violations: int
    transitivity_violations: int

    @property
    def consistent(self) -> bool:
        return self.trichotomy_violations == 0 and self.transitivity_violations == 0


def count_violations(matrix: np.ndarray) -> Tuple[int, int]:
    """
    Count order violations in a comparison_matrix table.

    Returns (trichotomy, transitivity). Each unordered pair is counted at most
    once for trichotomy: either it is marked 2, or its two entries fail to be
    negatives of each other.
    """
    upper = np.triu(np.ones(matrix.shape, dtype=bool))
    broken = (matrix == 2) | (matrix.T == 2)
    undecided = int((broken & upper).sum())
    mismatched = (matrix != -matrix.T) & ~broken
    asymmetric = int((mismatched & upper).sum())

    less = (matrix == -1).astype(np.int64)
    # i < j and j < k but not i < k
    reachable = (less @ less) > 0
    transitivity = int((reachable & (less == 0)).sum())
    return undecided + asymmetric, transitivity


def check_total_order(terms: Sequence[Term]) -> OrderReport:
    """Audit lt over all pairs and triples of the given terms."""
    trichotomy, transitivity = count_violations(comparison_matrix(terms))
    return OrderReport(
        n_terms=len(terms),
        trichotomy_violations=trichotomy,
        transitivity_violations=transitivity,
    )
