# analysis/classifier.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Single-formula classification and full truth table generation

"""Classifies a formula by evaluating it under every assignment.

A formula is a tautology when every row is true, a contradiction when every
row is false, and a contingency otherwise. A formula without variables has a
single, empty assignment and is therefore always a tautology or a
contradiction.

The full truth table has one input column per variable, in variable table
order, followed by one column per distinct subexpression in breadth-first
discovery order (the whole formula first).
"""

from dataclasses import dataclass
from typing import List, Tuple

from formula.record import FormulaRecord
from formula.subexpressions import subexpressions
from utils.logger import get_logger

from .assignments import enumerate_assignments
from .verdict import Classification


@dataclass(frozen=True)
class TruthTable:
    """Header and rows of a truth table.

    Attributes:
        header: Column titles, input variables first
        rows: One tuple of truth values per assignment, aligned with ``header``
    """

    header: Tuple[str, ...]
    rows: Tuple[Tuple[bool, ...], ...]

    def column(self, title: str) -> List[bool]:
        """Return the truth values under the column titled ``title``.

        Raises:
            KeyError: No column has that title
        """
        try:
            position = self.header.index(title)
        except ValueError:
            raise KeyError(title) from None
        return [row[position] for row in self.rows]


def classify(record: FormulaRecord) -> Classification:
    """Classify a formula as tautology, contingency or contradiction.

    Args:
        record: Compiled formula

    Returns:
        The formula's Classification
    """
    logger = get_logger()

    true_seen = False
    false_seen = False
    for assignment in enumerate_assignments(record.variable_count):
        if record.ast.evaluate(assignment):
            true_seen = True
        else:
            false_seen = True
        if true_seen and false_seen:
            break

    if true_seen and false_seen:
        result = Classification.CONTINGENCY
    elif true_seen:
        result = Classification.TAUTOLOGY
    else:
        result = Classification.CONTRADICTION

    logger.debug(f"Classified {record.formatted} as {result}")
    return result


def full_table(record: FormulaRecord) -> TruthTable:
    """Build the truth table of a formula and all of its subexpressions.

    Args:
        record: Compiled formula

    Returns:
        TruthTable with variable columns followed by subexpression columns
    """
    columns = subexpressions(record.ast)
    header = tuple(record.variables) + tuple(
        node.format(record.variables) for node in columns
    )

    rows = tuple(
        assignment + tuple(node.evaluate(assignment) for node in columns)
        for assignment in enumerate_assignments(record.variable_count)
    )

    get_logger().debug(
        f"Built truth table for {record.formatted}: "
        f"{len(header)} columns, {len(rows)} rows"
    )
    return TruthTable(header=header, rows=rows)
