"""
Cofinality classification (dom) for SROψ terms.

dom(s) returns:
- 0 when s is 0
- s itself when s is a successor-type principal term (dom(1) = 1) or carries
  its own uncountable cofinality (Ω, M(0), I, ...)
- ω when the fundamental sequence of s is indexed by natural numbers
- some smaller term c when s[x] must be resolved by recursion on c
"""

from __future__ import annotations
from enum import IntEnum

from .terms import Term, Zero, Sum, Collapse, ONE, OMEGA, eq
from .comparison import le


class CofinalityType(IntEnum):
    """Coarse classification of dom(s) for reporting."""
    ZERO = 0          # s = 0
    SUCCESSOR = 1     # dom(s) = 1
    OMEGA = 2         # dom(s) = ω
    UNCOUNTABLE = 3   # dom(s) is some other term


def dom(s: Term) -> Term:
    """Cofinality witness of s."""
    if isinstance(s, Zero):
        return s
    if isinstance(s, Sum):
        return dom(s.last)

    if isinstance(s, Collapse):
        d = dom(s.inner)
        if isinstance(d, Zero):
            return s
        if eq(d, ONE):
            return OMEGA
        return d

    dom_arg = dom(s.arg)
    if isinstance(dom_arg, Zero):
        dom_sub = dom(s.sub)
        if isinstance(dom_sub, Zero) or eq(dom_sub, ONE):
            return s
        if le(dom_sub, s):
            return dom_sub
        if isinstance(dom_sub, Collapse):
            return s
        return OMEGA
    if eq(dom_arg, ONE):
        return OMEGA
    if le(dom_arg, s):
        return dom_arg
    return OMEGA


def cofinality(a: Term) -> Term:
    """Public entry point for dom."""
    return dom(a)


def classify(s: Term) -> CofinalityType:
    """Map dom(s) onto a CofinalityType."""
    d = dom(s)
    if isinstance(d, Zero):
        return CofinalityType.ZERO
    if eq(d, ONE):
        return CofinalityType.SUCCESSOR
    if eq(d, OMEGA):
        return CofinalityType.OMEGA
    return CofinalityType.UNCOUNTABLE


def is_successor(s: Term) -> bool:
    """True when dom(s) = 1, i.e. s = s[0] + 1."""
    return eq(dom(s), ONE)
