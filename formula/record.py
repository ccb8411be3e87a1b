# formula/record.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Compiled formula record handed to the analysis layer

"""Packages a successfully parsed formula for analysis.

A ``FormulaRecord`` bundles the submitted text, its canonical rendering, the
AST and the variable table the AST's indices refer to. Records are created
once per submitted formula and never modified; the caller owns the
collection they live in.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from .ast_nodes import Expr


@dataclass(frozen=True)
class FormulaRecord:
    """A compiled propositional formula.

    Attributes:
        source: Formula text as submitted
        formatted: Fully parenthesized rendering using display glyphs
        ast: Root of the syntax tree
        variables: Sorted variable names; ``ast`` Var indices point here
    """

    source: str
    formatted: str
    ast: Expr
    variables: Tuple[str, ...]

    @property
    def variable_count(self) -> int:
        return len(self.variables)

    def evaluate(self, assignment: Sequence[bool]) -> bool:
        """Evaluate the formula under an assignment indexed like ``variables``.

        Raises:
            ValueError: The assignment length does not match the variable count
        """
        if len(assignment) != self.variable_count:
            raise ValueError(
                f"Assignment has {len(assignment)} values but formula "
                f"{self.formatted} has {self.variable_count} variables"
            )
        return self.ast.evaluate(assignment)

    def __str__(self) -> str:
        return self.formatted
