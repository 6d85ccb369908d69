"""
Fundamental sequences for SROψ terms.

fund(s, t) computes s[t]. The case analysis follows dom():
- dom(s) = 0 or s is successor-like at its own level: s[t] = t
- dom(s) = 1 on an M or ψ argument: s[t] is the predecessor step, and is
  only non-zero when t itself is a successor
- otherwise the index is pushed into the subterm that carries the
  cofinality, refining it through a diagonal when that cofinality is larger
  than s itself

While descending, the first diagonal term met on a cofinality-ω branch is
recorded in a WitnessSlot and returned alongside the value.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional

from .terms import Term, Zero, Sum, Collapse, Psi, ZERO, ONE, add, psi, collapse, sum_of, eq
from .comparison import le
from .cofinality import dom
from .errors import InternalInconsistency

logger = logging.getLogger(__name__)


@dataclass
class WitnessSlot:
    """Holds the diagonal witness for one fund_and_witness call."""
    term: Term = ZERO

    @property
    def empty(self) -> bool:
        return isinstance(self.term, Zero)


@dataclass(frozen=True)
class FundamentalResult:
    """Value of a[b] together with its diagonal witness."""
    fund: Term
    witness: Term


def leading_psi(s: Term) -> Term:
    """
    Strip leading non-ψ structure down to the first ψ-led part.

    A sum led by a ψ term is returned whole; otherwise its first addend is
    dropped. M wrappers are unwrapped. Returns 0 when nothing ψ-led remains.
    """
    while True:
        if isinstance(s, Zero) or isinstance(s, Psi):
            return s
        if isinstance(s, Sum):
            if isinstance(s.first, Psi):
                return s
            s = sum_of(s.components[1:])
        else:
            s = s.inner


def _expect_psi(term: Term, description: str) -> Psi:
    if not isinstance(term, Psi):
        raise InternalInconsistency(description, term)
    return term


def fund(s: Term, t: Term, slot: Optional[WitnessSlot] = None) -> Term:
    """Fundamental sequence value s[t]."""
    if slot is None:
        slot = WitnessSlot()

    if isinstance(s, Zero):
        return ZERO

    if isinstance(s, Sum):
        last = fund(s.last, t, slot)
        return add(sum_of(s.components[:-1]), last)

    if isinstance(s, Collapse):
        a = s.inner
        dom_a = dom(a)
        if isinstance(dom_a, Zero):
            return t
        if eq(dom_a, ONE):
            if slot.empty:
                slot.term = collapse(fund(a, ZERO, slot))
            # (t-1) + M(a-1) when t is a successor
            if eq(dom(t), ONE):
                return add(fund(t, ZERO, slot), collapse(fund(a, ZERO, slot)))
            return ZERO
        return collapse(fund(a, t, slot))

    a = s.sub
    b = s.arg
    dom_b = dom(b)

    if isinstance(dom_b, Zero):
        dom_a = dom(a)
        if isinstance(dom_a, Zero) or eq(dom_a, ONE):
            return t
        if le(dom_a, s) or isinstance(dom_a, Collapse):
            return psi(fund(a, t, slot), b)
        c = _expect_psi(dom_a, "dom of a ψ subscript above the term must be a ψ term").sub
        if eq(dom(c), ONE):
            if slot.empty:
                slot.term = psi(fund(c, ZERO, slot), leading_psi(fund(a, ZERO, slot)))
            if eq(dom(t), ONE):
                p = _expect_psi(fund(s, fund(t, ZERO, slot), slot),
                                "previous step of a ψ term must be a ψ term")
                gamma = leading_psi(p.sub)
                _expect_psi(gamma, "diagonal of the previous subscript must be ψ-led")
                return psi(fund(a, psi(fund(c, ZERO, slot), gamma), slot), b)
            return psi(fund(a, ZERO, slot), b)
        if slot.empty:
            slot.term = leading_psi(fund(a, ZERO, slot))
        if eq(dom(t), ONE):
            p = _expect_psi(fund(s, fund(t, ZERO, slot), slot),
                            "previous step of a ψ term must be a ψ term")
            return psi(fund(a, leading_psi(p.sub), slot), b)
        return psi(fund(a, ZERO, slot), b)

    if eq(dom_b, ONE):
        if slot.empty:
            slot.term = psi(a, fund(b, ZERO, slot))
        if eq(dom(t), ONE):
            return add(fund(t, ZERO, slot), psi(a, fund(b, ZERO, slot)))
        return ZERO

    if le(dom_b, s):
        return psi(a, fund(b, t, slot))
    c = _expect_psi(dom_b, "dom of a ψ argument above the term must be a ψ term").sub
    if eq(dom(c), ONE):
        if slot.empty:
            slot.term = psi(fund(c, ZERO, slot), fund(b, ZERO, slot))
        if eq(dom(t), ONE):
            p = _expect_psi(fund(s, fund(t, ZERO, slot), slot),
                            "previous step of a ψ term must be a ψ term")
            return psi(a, fund(b, psi(fund(c, ZERO, slot), p.arg), slot))
        return psi(a, fund(b, ZERO, slot))
    if slot.empty:
        slot.term = fund(b, ZERO, slot)
    if eq(dom(t), ONE):
        p = _expect_psi(fund(s, fund(t, ZERO, slot), slot),
                        "previous step of a ψ term must be a ψ term")
        return psi(a, fund(b, p.arg, slot))
    return psi(a, fund(b, ZERO, slot))


def fund_and_witness(a: Term, b: Term) -> FundamentalResult:
    """
    Compute a[b] and the diagonal witness found along the way.

    The witness is 0 when no cofinality-ω diagonal was met.

    Raises:
        InternalInconsistency: an intermediate step was not ψ-shaped, which
            happens only for terms outside the notation's well-formed fragment
            (for example an M term directly inside a ψ argument).
    """
    slot = WitnessSlot()
    value = fund(a, b, slot)
    logger.debug("fund %r[%r] = %r (witness %r)", a, b, value, slot.term)
    return FundamentalResult(fund=value, witness=slot.term)
