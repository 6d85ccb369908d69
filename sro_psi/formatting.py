"""
Display formatting for SROψ terms.

Rendering happens in two passes:
1. term_to_string writes the term structurally (ψ(a,b), ψ_a(b), M(a), a+b)
2. abbreviate rewrites landmark ordinals (1, ω, Ω, I), optionally escapes
   for TeX, and collapses runs 1+1+...+1 into decimal numbers

Formatting carries no algebraic meaning; it only reads terms.
"""

from __future__ import annotations
import re
from dataclasses import dataclass

from .terms import Term, Zero, Sum, Collapse, ONE, OMEGA, LOMEGA, IOTA, eq, as_nat


@dataclass(frozen=True)
class DisplayOptions:
    """Display switches, all off by default."""
    omega: bool = False        # ψ(0,1) as ω
    big_omega: bool = False    # ψ(1,0) as Ω
    iota: bool = False         # ψ(M(0),0) as I
    subscript: bool = False    # ψ(a,b) as ψ_a(b)
    braces: bool = False       # with subscript: always ψ_{a}(b)
    unary: bool = False        # ψ(0,b) as ψ(b)
    tex: bool = False          # TeX output

    @classmethod
    def all_abbreviations(cls) -> DisplayOptions:
        return cls(omega=True, big_omega=True, iota=True, subscript=True, unary=True)


PLAIN = DisplayOptions()

_NUMERAL_RUN = re.compile(r"1(\+1)+")

_ONE_FORMS = ["ψ(0)", "ψ_{0}(0)", "ψ_0(0)", "ψ(0,0)"]
_OMEGA_FORMS = ["ψ(1)", "ψ_{0}(1)", "ψ_0(1)", "ψ(0,1)"]
_BIG_OMEGA_FORMS = ["ψ_{1}(0)", "ψ_1(0)", "ψ(1,0)"]
_IOTA_FORMS = ["ψ_{M(0)}(0)", "ψ(M(0),0)"]

_TEX_REPLACEMENTS = [
    ("ψ", "\\psi"),
    ("M", "\\mathbb{M}"),
    ("ω", "\\omega"),
    ("Ω", "\\Omega"),
    ("I", "\\textrm{I}"),
]


def to_tex(text: str) -> str:
    """Escape notation symbols for TeX."""
    for symbol, tex in _TEX_REPLACEMENTS:
        text = text.replace(symbol, tex)
    return text


def _bare_subscript(sub: Term, options: DisplayOptions) -> bool:
    # subscripts that read unambiguously without braces
    if isinstance(sub, Sum):
        return as_nat(sub) is not None
    return (eq(sub, ONE)
            or (options.omega and eq(sub, OMEGA))
            or (options.big_omega and eq(sub, LOMEGA))
            or (options.iota and eq(sub, IOTA)))


def term_to_string(t: Term, options: DisplayOptions = PLAIN) -> str:
    """Structural rendering, without abbreviations."""
    if isinstance(t, Zero):
        return "0"
    if isinstance(t, Collapse):
        return f"M({term_to_string(t.inner, options)})"
    if isinstance(t, Sum):
        return "+".join(term_to_string(c, options) for c in t.components)

    sub = term_to_string(t.sub, options)
    arg = term_to_string(t.arg, options)
    if options.unary and isinstance(t.sub, Zero):
        return f"ψ({arg})"
    if options.subscript:
        if options.braces or options.tex:
            return f"ψ_{{{sub}}}({arg})"
        if isinstance(t.sub, Zero):
            return f"ψ_0({arg})"
        if _bare_subscript(t.sub, options):
            return f"ψ_{sub}({arg})"
        return f"ψ_{{{sub}}}({arg})"
    return f"ψ({sub},{arg})"


def abbreviate(text: str, options: DisplayOptions = PLAIN) -> str:
    """Apply landmark abbreviations, TeX escaping and numeral collapsing."""
    for form in _ONE_FORMS:
        text = text.replace(form, "1")
    if options.omega:
        for form in _OMEGA_FORMS:
            text = text.replace(form, "ω")
    if options.big_omega:
        for form in _BIG_OMEGA_FORMS:
            text = text.replace(form, "Ω")
    if options.iota:
        for form in _IOTA_FORMS:
            text = text.replace(form, "I")
    if options.tex:
        text = to_tex(text)

    match = _NUMERAL_RUN.search(text)
    while match:
        count = match.group(0).count("1")
        text = text[:match.start()] + str(count) + text[match.end():]
        match = _NUMERAL_RUN.search(text)
    return text


def render(t: Term, options: DisplayOptions = PLAIN) -> str:
    """Full display string for a term."""
    return abbreviate(term_to_string(t, options), options)
