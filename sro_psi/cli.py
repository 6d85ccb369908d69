"""
Command line interface for the SROψ calculator.

    sro-psi fund "ψ(0,Ω)" 3
    sro-psi dom "ψ(I,0)"
    sro-psi lt "ψ(0,0)" "M(0)" --all-abbrev
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .calculator import Calculator, CalculatorConfig, Operation
from .formatting import DisplayOptions
from .parser import DEFAULT_MAX_DEPTH, DEFAULT_MAX_ADDENDS
from .errors import InternalInconsistency, SROPsiError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_INTERNAL_ERROR = 2
EXIT_TOO_DEEP = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sro-psi",
        description="Calculator for the SROψ ordinal notation with Mahlo operator M",
    )
    parser.add_argument("operation", choices=[op.value for op in Operation],
                        help="fund: A[B], dom: dom(A), lt: A < B")
    parser.add_argument("a", help="term A")
    parser.add_argument("b", nargs="?", default=None, help="term B (fund and lt)")

    display = parser.add_argument_group("display")
    display.add_argument("--omega", action="store_true", help="print ψ(0,1) as ω")
    display.add_argument("--big-omega", action="store_true", help="print ψ(1,0) as Ω")
    display.add_argument("--iota", action="store_true", help="print ψ(M(0),0) as I")
    display.add_argument("--subscript", action="store_true", help="print ψ(a,b) as ψ_a(b)")
    display.add_argument("--braces", action="store_true", help="with --subscript, always ψ_{a}(b)")
    display.add_argument("--unary", action="store_true", help="print ψ(0,b) as ψ(b)")
    display.add_argument("--tex", action="store_true", help="TeX output")
    display.add_argument("--all-abbrev", action="store_true",
                         help="enable ω, Ω, I, subscript and unary abbreviations")

    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH,
                        help="maximum term nesting accepted by the parser")
    parser.add_argument("--max-addends", type=int, default=DEFAULT_MAX_ADDENDS,
                        help="maximum number of addends in a term, numerals counted in full")
    parser.add_argument("--verbose", action="store_true", help="debug logging")
    return parser


def options_from_args(args: argparse.Namespace) -> DisplayOptions:
    if args.all_abbrev:
        base = DisplayOptions.all_abbreviations()
    else:
        base = DisplayOptions()
    return DisplayOptions(
        omega=base.omega or args.omega,
        big_omega=base.big_omega or args.big_omega,
        iota=base.iota or args.iota,
        subscript=base.subscript or args.subscript,
        braces=args.braces,
        unary=base.unary or args.unary,
        tex=args.tex,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = CalculatorConfig(display=options_from_args(args), max_depth=args.max_depth,
                              max_addends=args.max_addends)
    calculator = Calculator(config)
    try:
        result = calculator.compute(Operation(args.operation), args.a, args.b)
    except InternalInconsistency as exc:
        logger.error("internal inconsistency: %s", exc)
        return EXIT_INTERNAL_ERROR
    except SROPsiError as exc:
        logger.error("%s", exc)
        return EXIT_USER_ERROR
    except RecursionError:
        logger.error("term nested too deeply to evaluate; lower --max-depth")
        return EXIT_TOO_DEEP

    print(result.to_text())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
