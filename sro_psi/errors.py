"""
Error types raised by the SROψ calculator.

Two kinds of error originate in the core:
- TermSyntaxError: malformed or oversized input text, recoverable by correcting
  the input
- InternalInconsistency: a structural expectation of the evaluator was
  violated (an intermediate term that must be a ψ term was not)

OperandRequired belongs to the calculator host, which rejects missing
operands before any core operation runs.
"""

from __future__ import annotations
from typing import Optional


class SROPsiError(Exception):
    """Base class for all calculator errors."""


class TermSyntaxError(SROPsiError, ValueError):
    """Malformed term text, annotated with the failing position."""

    def __init__(self, position: int, expected: str, found: Optional[str] = None):
        self.position = position
        self.expected = expected
        self.found = found
        if found is None:
            detail = f"expected {expected} at column {position + 1}, but the input ended"
        else:
            detail = f"expected {expected} at column {position + 1}, found {found!r}"
        super().__init__(detail)


class NestingTooDeep(TermSyntaxError):
    """Term nesting exceeded the configured depth limit."""

    def __init__(self, position: int, max_depth: int):
        self.max_depth = max_depth
        super().__init__(position, f"nesting depth <= {max_depth}", "deeper nesting")


class TermTooLarge(TermSyntaxError):
    """A term had more addends, numerals included, than the configured limit."""

    def __init__(self, position: int, max_addends: int):
        self.max_addends = max_addends
        super().__init__(position, f"at most {max_addends} addends", "a larger term")


class InternalInconsistency(SROPsiError, RuntimeError):
    """An evaluator intermediate did not have the shape the notation guarantees."""

    def __init__(self, description: str, term=None):
        self.description = description
        self.term = term
        if term is not None:
            description = f"{description} (got {term!r})"
        super().__init__(description)


class OperandRequired(SROPsiError, ValueError):
    """A calculator operation was requested without one of its operands."""

    def __init__(self, operand: str):
        self.operand = operand
        super().__init__(f"input {operand} is required")
