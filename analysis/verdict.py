# analysis/verdict.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Result enumerations for formula classification and joint satisfiability

"""Result enumerations returned by the analysis layer.

The numeric values are the classification codes the display layer keys its
labels and colours on, so they are part of the interface.
"""

from enum import Enum


class Classification(Enum):
    """Truth-table classification of a single formula."""

    TAUTOLOGY = 0  # true under every assignment
    CONTINGENCY = 1  # true under some assignments, false under others
    CONTRADICTION = 2  # false under every assignment

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        return self.name.capitalize()


class JointVerdict(Enum):
    """Joint satisfiability of a set of formulas."""

    SATISFIABLE = 0  # some assignment makes every formula true
    NO_FORMULAS = 1  # nothing to check
    UNSATISFIABLE = 2  # no assignment makes every formula true

    def __str__(self) -> str:
        return self.name

    @property
    def label(self) -> str:
        if self is JointVerdict.NO_FORMULAS:
            return "No formulas"
        return self.name.capitalize()
