# formula/exceptions.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Custom exceptions for formula scanning and parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines the two user-facing failures that can occur while
turning formula text into an AST. Both carry a human-readable description
and a half-open character span ``[start, end)`` into the original input so
the caller can underline the offending text. No partial AST is ever
returned alongside one of these errors.
"""

from typing import Tuple


class FormulaError(RuntimeError):
    """Base class for errors raised while compiling a formula.

    Attributes:
        description: Human-readable explanation of the problem
        start: Index of the first offending character (inclusive)
        end: Index one past the last offending character (exclusive)
    """

    def __init__(self, description: str, start: int, end: int):
        super().__init__(description)
        self.description = description
        self.start = start
        self.end = end

    @property
    def span(self) -> Tuple[int, int]:
        """Offending character range as a ``(start, end)`` pair."""
        return self.start, self.end

    def __str__(self) -> str:
        return self.description


class LexError(FormulaError):
    """Raised when the input contains a character that cannot start a token."""

    pass


class FormulaSyntaxError(FormulaError):
    """Raised when the token sequence does not form a well-formed formula.

    Covers empty input, unmatched parentheses in either direction, dangling
    negations, operators missing an operand and unexpected tokens.
    """

    pass
