"""
SROψ: Ordinal Notation Calculator for the ψ Function with a Mahlo Operator

Terms of the notation are built from 0, sums, the collapsing function ψ(a,b)
and the Mahlo operator M(a). Landmark ordinals: 1 = ψ(0,0), ω = ψ(0,1),
Ω = ψ(1,0), I = ψ(M(0),0).

This package provides:
- Term algebra: Zero, Sum, Psi, Collapse, add, eq
- Comparator: total order lt/le over terms
- Cofinality classifier: dom
- Fundamental sequences: fund_and_witness computes a[b] and its diagonal witness
- Parser: text to terms, with the usual abbreviations
- Formatting: display strings with optional abbreviations and TeX escaping
- Calculator and CLI: the parse / compute / render flow

Example usage:
    from sro_psi import parse, fund_and_witness, render

    result = fund_and_witness(parse("ψ(0,Ω)"), parse("2"))
    print(render(result.fund))      # ψ(0,ψ(0,1))
"""

__version__ = "0.1.0"

from .terms import (
    Term,
    Zero,
    Sum,
    Collapse,
    Psi,
    ZERO,
    ONE,
    OMEGA,
    LOMEGA,
    MAHLO,
    IOTA,
    LANDMARKS,
    add,
    eq,
    sum_of,
    collapse,
    psi,
    from_nat,
)

from .comparison import (
    lt,
    le,
    compare_less_than,
    sort_terms,
)

from .cofinality import (
    dom,
    cofinality,
    classify,
    CofinalityType,
)

from .fundamental import (
    fund,
    fund_and_witness,
    leading_psi,
    FundamentalResult,
    WitnessSlot,
)

from .parser import (
    Scanner,
    parse,
)

from .formatting import (
    DisplayOptions,
    render,
    term_to_string,
    abbreviate,
    to_tex,
)

from .calculator import (
    Calculator,
    CalculatorConfig,
    CalculationResult,
    Operation,
)

from .errors import (
    SROPsiError,
    TermSyntaxError,
    NestingTooDeep,
    TermTooLarge,
    InternalInconsistency,
    OperandRequired,
)

__all__ = [
    # Terms
    "Term",
    "Zero",
    "Sum",
    "Collapse",
    "Psi",
    "ZERO",
    "ONE",
    "OMEGA",
    "LOMEGA",
    "MAHLO",
    "IOTA",
    "LANDMARKS",
    "add",
    "eq",
    "sum_of",
    "collapse",
    "psi",
    "from_nat",
    # Comparison
    "lt",
    "le",
    "compare_less_than",
    "sort_terms",
    # Cofinality
    "dom",
    "cofinality",
    "classify",
    "CofinalityType",
    # Fundamental sequences
    "fund",
    "fund_and_witness",
    "leading_psi",
    "FundamentalResult",
    "WitnessSlot",
    # Parsing and display
    "Scanner",
    "parse",
    "DisplayOptions",
    "render",
    "term_to_string",
    "abbreviate",
    "to_tex",
    # Calculator
    "Calculator",
    "CalculatorConfig",
    "CalculationResult",
    "Operation",
    # Errors
    "SROPsiError",
    "TermSyntaxError",
    "NestingTooDeep",
    "TermTooLarge",
    "InternalInconsistency",
    "OperandRequired",
]
