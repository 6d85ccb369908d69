"""
Term Algebra for the SROψ Ordinal Notation

A term is one of:
- Zero: the ordinal 0
- Sum: a flat sequence of two or more principal terms, added left to right
- Collapse: the Mahlo operator M(a)
- Psi: the collapsing function ψ(a, b)

Collapse and Psi are the principal terms. Terms are immutable values and may
be shared freely as subterms. Sums are flattened at construction time: a sum
never contains Zero or another Sum, and a one-element sum is the element
itself.

Landmark ordinals:
- 1 = ψ(0,0)
- ω = ψ(0,1)
- Ω = ψ(1,0)
- I = ψ(M(0),0)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Tuple, Union


class Term:
    """Base class of every term. Ordering follows the notation's comparator."""

    __slots__ = ()

    def __lt__(self, other: Term) -> bool:
        from .comparison import lt
        return lt(self, other)

    def __le__(self, other: Term) -> bool:
        from .comparison import le
        return le(self, other)

    def __gt__(self, other: Term) -> bool:
        from .comparison import lt
        return lt(other, self)

    def __ge__(self, other: Term) -> bool:
        from .comparison import le
        return le(other, self)

    def __add__(self, other: Term) -> Term:
        """Formal ordinal addition (non-commutative)."""
        return add(self, other)

    def is_zero(self) -> bool:
        return False

    def is_principal(self) -> bool:
        return False


@dataclass(frozen=True, repr=False)
class Zero(Term):
    """The ordinal 0."""

    def is_zero(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "0"


@dataclass(frozen=True, repr=False)
class Collapse(Term):
    """Mahlo operator M(inner)."""
    inner: Term

    def is_principal(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"M({self.inner!r})"


@dataclass(frozen=True, repr=False)
class Psi(Term):
    """Collapsing function ψ(sub, arg)."""
    sub: Term
    arg: Term

    def is_principal(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"ψ({self.sub!r},{self.arg!r})"


Principal = Union[Collapse, Psi]


@dataclass(frozen=True, repr=False)
class Sum(Term):
    """
    Ordinal sum of principal terms, evaluated left to right.

    Build sums with sum_of() or add(); they maintain the flatness invariant.
    """
    components: Tuple[Principal, ...]

    def __post_init__(self):
        assert len(self.components) >= 2, "A sum has at least two addends"
        assert all(c.is_principal() for c in self.components), \
            "Sum addends must be principal terms"

    @property
    def first(self) -> Principal:
        return self.components[0]

    @property
    def last(self) -> Principal:
        return self.components[-1]

    def __len__(self) -> int:
        return len(self.components)

    def __repr__(self) -> str:
        return "+".join(repr(c) for c in self.components)


ZERO = Zero()


def collapse(inner: Term) -> Collapse:
    """Build M(inner)."""
    return Collapse(inner)


def psi(sub: Term, arg: Term) -> Psi:
    """Build ψ(sub, arg)."""
    return Psi(sub, arg)


ONE = psi(ZERO, ZERO)
OMEGA = psi(ZERO, ONE)
LOMEGA = psi(ONE, ZERO)
MAHLO = collapse(ZERO)
IOTA = psi(MAHLO, ZERO)


def addends(t: Term) -> Tuple[Principal, ...]:
    """Flattened principal sequence of a term (empty for Zero)."""
    if isinstance(t, Zero):
        return ()
    if isinstance(t, Sum):
        return t.components
    return (t,)


def sum_of(components: Iterable[Term]) -> Term:
    """
    Combine principal terms into a term.

    Sum elements are spliced in place and a single element is returned
    unwrapped. The sequence must not be empty.
    """
    flat = []
    for c in components:
        if isinstance(c, Sum):
            flat.extend(c.components)
        else:
            flat.append(c)
    if len(flat) == 1:
        return flat[0]
    return Sum(tuple(flat))


def add(s: Term, t: Term) -> Term:
    """
    Formal ordinal addition s + t.

    Zero is the identity on both sides. No reordering or absorption happens:
    1 + ω and ω + 1 are different terms.
    """
    if isinstance(s, Zero):
        return t
    if isinstance(t, Zero):
        return s
    return Sum(addends(s) + addends(t))


def eq(s: Term, t: Term) -> bool:
    """Structural equality; sums compare position by position."""
    if isinstance(t, Zero):
        return isinstance(s, Zero)
    if isinstance(s, Zero):
        return False
    if isinstance(s, Sum):
        if not isinstance(t, Sum) or len(s) != len(t):
            return False
        return all(eq(x, y) for x, y in zip(s.components, t.components))
    if isinstance(s, Collapse):
        return isinstance(t, Collapse) and eq(s.inner, t.inner)
    return isinstance(t, Psi) and eq(s.sub, t.sub) and eq(s.arg, t.arg)


def from_nat(n: int) -> Term:
    """The natural number n as a sum of n copies of 1."""
    assert n >= 0, "Natural numbers are non-negative"
    if n == 0:
        return ZERO
    return sum_of([ONE] * n)


def as_nat(t: Term):
    """Return n if t is a sum of n copies of 1 (or Zero), else None."""
    parts = addends(t)
    if all(eq(p, ONE) for p in parts):
        return len(parts)
    return None


# Named landmark terms
LANDMARKS = {
    "zero": ZERO,
    "one": ONE,
    "omega": OMEGA,
    "big_omega": LOMEGA,
    "mahlo": MAHLO,
    "iota": IOTA,
}
