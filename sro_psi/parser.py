"""
Recursive-descent parser for SROψ terms.

Accepted forms:
- ψ(a,b), ψ_{a}(b), ψ_a(b), ψ{a}(b), ψa(b), and ψ(b) for ψ(0,b)
- M(a)
- 0, and sums a+b+... of non-zero terms

Abbreviations: n = 1+1+...+1 (n ones), ω = ψ(0,1), Ω = ψ(1,0),
I = ψ(M(0),0). ASCII stand-ins: p for ψ, m for M, w for ω, W for Ω, i for I.
Whitespace is ignored everywhere.
"""

from __future__ import annotations
import re
from typing import List, Optional

from .terms import Term, Zero, ZERO, ONE, OMEGA, LOMEGA, IOTA, collapse, psi, sum_of, from_nat
from .errors import TermSyntaxError, NestingTooDeep, TermTooLarge

DIGITS = "0123456789"
DEFAULT_MAX_DEPTH = 100
DEFAULT_MAX_ADDENDS = 10000

_WHITESPACE = re.compile(r"\s")


class Scanner:
    """Cursor over whitespace-stripped input."""

    def __init__(self, text: str, max_depth: int = DEFAULT_MAX_DEPTH,
                 max_addends: int = DEFAULT_MAX_ADDENDS):
        self.text = _WHITESPACE.sub("", text)
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth
        self.max_addends = max_addends
        self.addends = 0    # principal addends produced so far, numerals counted in full

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def consume(self, op: str) -> bool:
        """Advance past op if it is the next character."""
        if self.peek() != op:
            return False
        self.pos += 1
        return True

    def expect(self, op: str) -> None:
        """Advance past op, or fail if something else comes next."""
        if not self.consume(op):
            raise TermSyntaxError(self.pos, repr(op), self.peek())

    def parse_number(self) -> Term:
        """A maximal run of decimal digits, read as a natural number."""
        start = self.pos
        while self.peek() is not None and self.peek() in DIGITS:
            self.pos += 1
        digits = self.text[start:self.pos]
        # checked on length first so huge runs never reach int()
        if len(digits.lstrip("0")) > len(str(self.max_addends)):
            raise TermTooLarge(start, self.max_addends)
        n = int(digits)
        self._count_addends(start, n)
        return from_nat(n)

    def _count_addends(self, start: int, n: int) -> None:
        self.addends += n
        if self.addends > self.max_addends:
            raise TermTooLarge(start, self.max_addends)

    def parse_term(self) -> Term:
        """term := "0" | principal ("+" principal)*"""
        if self.at_end():
            raise TermSyntaxError(self.pos, "a term")
        self.depth += 1
        if self.depth > self.max_depth:
            raise NestingTooDeep(self.pos, self.max_depth)
        try:
            if self.consume("0"):
                return ZERO
            parts: List[Term] = []
            while True:
                start = self.pos
                ch = self.peek()
                if ch is not None and ch in DIGITS:
                    term = self.parse_number()
                else:
                    term = self.parse_principal()
                    self._count_addends(start, 1)
                if isinstance(term, Zero):
                    raise TermSyntaxError(start, "a non-zero addend", "0")
                parts.append(term)
                if not self.consume("+"):
                    break
            return sum_of(parts)
        finally:
            self.depth -= 1

    def parse_principal(self) -> Term:
        if self.consume("1"):
            return ONE
        if self.consume("w") or self.consume("ω"):
            return OMEGA
        if self.consume("W") or self.consume("Ω"):
            return LOMEGA
        if self.consume("i") or self.consume("I"):
            return IOTA
        if self.consume("m") or self.consume("M"):
            self.expect("(")
            inner = self.parse_term()
            self.expect(")")
            return collapse(inner)
        if self.consume("p") or self.consume("ψ"):
            return self.parse_psi_args()
        raise TermSyntaxError(self.pos, "a term", self.peek())

    def parse_psi_args(self) -> Term:
        if self.consume("("):
            sub = self.parse_term()
            if self.consume(")"):
                return psi(ZERO, sub)
            self.expect(",")
        else:
            self.consume("_")
            if self.consume("{"):
                sub = self.parse_term()
                self.expect("}")
            else:
                sub = self.parse_term()
            self.expect("(")
        arg = self.parse_term()
        self.expect(")")
        return psi(sub, arg)


def parse(text: str, max_depth: int = DEFAULT_MAX_DEPTH,
          max_addends: int = DEFAULT_MAX_ADDENDS) -> Term:
    """
    Parse a complete term.

    Raises:
        TermSyntaxError: on malformed input or trailing characters.
        NestingTooDeep: when nesting exceeds max_depth.
        TermTooLarge: when the term has more than max_addends addends in total.
    """
    scanner = Scanner(text, max_depth=max_depth, max_addends=max_addends)
    term = scanner.parse_term()
    if not scanner.at_end():
        raise TermSyntaxError(scanner.pos, "end of input", scanner.peek())
    return term
