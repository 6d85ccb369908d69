"""
SROψ Calculator

Host-side flow around the core operations:
1. Parse the operand strings into terms
2. Run exactly one of fund (A[B]), dom (dom(A)) or less-than (A < B)
3. Render the inputs and the result with the configured display options

This is the library counterpart of the interactive calculator form; the
command line interface in cli.py is a thin wrapper around it.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .terms import Term
from .comparison import compare_less_than
from .cofinality import cofinality
from .fundamental import fund_and_witness
from .formatting import DisplayOptions, render
from .parser import parse, DEFAULT_MAX_DEPTH, DEFAULT_MAX_ADDENDS
from .errors import OperandRequired

logger = logging.getLogger(__name__)


class Operation(Enum):
    """Operations offered by the calculator."""
    FUND = "fund"
    DOM = "dom"
    LESS_THAN = "lt"


@dataclass
class CalculatorConfig:
    """Configuration for the calculator."""
    display: DisplayOptions = field(default_factory=DisplayOptions)
    max_depth: int = DEFAULT_MAX_DEPTH    # parser nesting limit
    max_addends: int = DEFAULT_MAX_ADDENDS    # parser limit on addends, numerals counted in full


@dataclass
class CalculationResult:
    """Rendered outcome of one calculator operation."""
    operation: Operation
    expression: str                 # rendered input, e.g. "ω[3]"
    output: str                     # rendered result
    value: Union[Term, bool]
    witness: Optional[str] = None   # rendered diagonal witness (fund only)

    def to_text(self) -> str:
        """Format as an input/witness/output report."""
        lines = [f"Input: {self.expression}"]
        if self.witness is not None:
            lines.append(f"Witness: {self.witness}")
        lines.append(f"Output: {self.output}")
        return "\n".join(lines)


class Calculator:
    """Parses operands and evaluates one SROψ operation at a time."""

    def __init__(self, config: Optional[CalculatorConfig] = None):
        self.config = config or CalculatorConfig()

    @property
    def display(self) -> DisplayOptions:
        return self.config.display

    def parse(self, text: Optional[str], operand: str) -> Term:
        """Parse one operand; missing or empty text raises OperandRequired."""
        if not text:
            raise OperandRequired(operand)
        return parse(text, max_depth=self.config.max_depth,
                     max_addends=self.config.max_addends)

    def _math(self, text: str) -> str:
        return f"${text}$" if self.display.tex else text

    def compute(
        self,
        operation: Operation,
        a_text: Optional[str],
        b_text: Optional[str] = None,
    ) -> CalculationResult:
        """
        Run one operation on textual operands.

        Raises:
            OperandRequired: A (or B, for fund and lt) is missing.
            TermSyntaxError: an operand does not parse.
            InternalInconsistency: the fundamental sequence hit a term outside
                the notation's well-formed fragment.
        """
        x = self.parse(a_text, "A")
        x_str = render(x, self.display)

        if operation is Operation.DOM:
            logger.debug("dom(%r)", x)
            d = cofinality(x)
            expression = f"\\textrm{{dom}}({x_str})" if self.display.tex else f"dom({x_str})"
            return CalculationResult(
                operation=operation,
                expression=self._math(expression),
                output=self._math(render(d, self.display)),
                value=d,
            )

        y = self.parse(b_text, "B")
        y_str = render(y, self.display)

        if operation is Operation.FUND:
            logger.debug("fund(%r, %r)", x, y)
            result = fund_and_witness(x, y)
            return CalculationResult(
                operation=operation,
                expression=self._math(f"{x_str}[{y_str}]"),
                output=self._math(render(result.fund, self.display)),
                value=result.fund,
                witness=self._math(render(result.witness, self.display)),
            )

        logger.debug("lt(%r, %r)", x, y)
        less = compare_less_than(x, y)
        symbol = "\\lt" if self.display.tex else "<"
        return CalculationResult(
            operation=operation,
            expression=self._math(f"{x_str} {symbol} {y_str}"),
            output="true" if less else "false",
            value=less,
        )
