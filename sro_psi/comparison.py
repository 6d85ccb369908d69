"""
Ordinal comparison for SROψ terms.

The order is lexicographic on the flattened addend sequence, with principal
terms ordered recursively:
- Zero is below everything
- every ψ term is below every M term
- ψ terms compare by subscript first, then by argument
- M terms compare by their inner term
"""

from __future__ import annotations
from functools import cmp_to_key
from typing import Iterable, List

from .terms import Term, Zero, Sum, Collapse, eq


def lt(s: Term, t: Term) -> bool:
    """Strict comparison s < t."""
    if isinstance(t, Zero):
        return False
    if isinstance(s, Zero):
        return True

    if isinstance(s, Sum):
        if isinstance(t, Sum):
            return _lt_sums(s.components, t.components)
        return lt(s.first, t)

    if isinstance(s, Collapse):
        if isinstance(t, Sum):
            return le(s, t.first)
        if isinstance(t, Collapse):
            return lt(s.inner, t.inner)
        return False

    # s is a ψ term
    if isinstance(t, Sum):
        return le(s, t.first)
    if isinstance(t, Collapse):
        return True
    return lt(s.sub, t.sub) or (eq(s.sub, t.sub) and lt(s.arg, t.arg))


def _lt_sums(ss, ts) -> bool:
    """
    Compare two addend sequences left to right.

    The first differing pair decides. When one sequence is a prefix of the
    other, the shorter one is smaller.
    """
    for x, y in zip(ss, ts):
        if not eq(x, y):
            return lt(x, y)
    return len(ss) < len(ts)


def le(s: Term, t: Term) -> bool:
    """s <= t."""
    return eq(s, t) or lt(s, t)


def compare_less_than(a: Term, b: Term) -> bool:
    """Public entry point: is a < b?"""
    return lt(a, b)


def compare(s: Term, t: Term) -> int:
    """Three-way comparison: -1, 0 or 1."""
    if eq(s, t):
        return 0
    return -1 if lt(s, t) else 1


def sort_terms(terms: Iterable[Term], reverse: bool = False) -> List[Term]:
    """Sort terms in ascending ordinal order."""
    return sorted(terms, key=cmp_to_key(compare), reverse=reverse)
