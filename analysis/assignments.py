# analysis/assignments.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Enumeration of truth assignments in truth table row order

"""Generates every boolean assignment for a fixed number of variables.

Rows follow the conventional truth table order: the first variable varies
slowest and every column starts with true. For row ``i`` of ``n`` variables,
variable ``j`` is true exactly when ``i % 2**(n-j) < 2**(n-j-1)``.

Nothing is cached; the sequence is recomputed on every call. The row count
doubles with each variable, so callers are expected to bound ``n``.
"""

from typing import Iterator, Tuple

Assignment = Tuple[bool, ...]


def assignment_count(n: int) -> int:
    """Number of assignments over ``n`` variables."""
    _check_variable_count(n)
    return 1 << n


def assignment_at(i: int, n: int) -> Assignment:
    """Return row ``i`` of the assignment sequence over ``n`` variables.

    Raises:
        ValueError: ``n`` is negative or ``i`` is out of range
    """
    if not 0 <= i < assignment_count(n):
        raise ValueError(f"Row {i} out of range for {n} variables")
    return tuple(i % (1 << (n - j)) < (1 << (n - j - 1)) for j in range(n))


def enumerate_assignments(n: int) -> Iterator[Assignment]:
    """Lazily produce all ``2**n`` assignments in truth table row order.

    The variable count is validated immediately; rows are computed on demand.

    Args:
        n: Number of variables

    Returns:
        Iterator over tuples of ``n`` booleans, indexed like the variable table

    Raises:
        ValueError: ``n`` is negative
    """
    total = assignment_count(n)
    return (assignment_at(i, n) for i in range(total))


def _check_variable_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"Variable count must be non-negative, got {n}")
