# analysis/joint.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Joint satisfiability across a set of formulas

"""Checks whether a set of formulas can all be true at the same time.

Formulas may share variables. Their variable tables are merged into one
universe in first-seen order: the variables of the first formula in its
sorted order, then any new variables of the second formula, and so on. The
merged universe is not re-sorted, so its row order can differ from a single
formula's own table.

For every assignment over the merged universe, each formula receives the
projection onto its own variables and is evaluated. The set is satisfiable
when at least one merged assignment makes every formula true. An empty set
is reported as ``NO_FORMULAS`` rather than as either verdict.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from formula.record import FormulaRecord
from utils.logger import get_logger

from .assignments import Assignment, enumerate_assignments
from .classifier import TruthTable
from .verdict import JointVerdict


def merge_variables(records: Sequence[FormulaRecord]) -> Tuple[str, ...]:
    """Union of all variable names, in first-seen order."""
    merged: Dict[str, None] = {}
    for record in records:
        for name in record.variables:
            merged.setdefault(name, None)
    return tuple(merged)


def _projections(
    records: Sequence[FormulaRecord], universe: Tuple[str, ...]
) -> List[Tuple[int, ...]]:
    """For each record, the merged-universe position of each of its variables."""
    position = {name: i for i, name in enumerate(universe)}
    return [tuple(position[name] for name in record.variables) for record in records]


def _evaluate_all(
    records: Sequence[FormulaRecord],
) -> Iterator[Tuple[Assignment, Tuple[bool, ...]]]:
    """Yield each merged assignment with every formula's value under it."""
    universe = merge_variables(records)
    projections = _projections(records, universe)

    for merged in enumerate_assignments(len(universe)):
        values = tuple(
            record.ast.evaluate(tuple(merged[i] for i in projection))
            for record, projection in zip(records, projections)
        )
        yield merged, values


def find_joint_witness(records: Sequence[FormulaRecord]) -> Optional[Dict[str, bool]]:
    """Return the first merged assignment satisfying every formula.

    Args:
        records: Compiled formulas

    Returns:
        Mapping from variable name to value, or None when no assignment
        satisfies them all (or there are no formulas)
    """
    if not records:
        return None

    universe = merge_variables(records)
    for merged, values in _evaluate_all(records):
        if all(values):
            return dict(zip(universe, merged))
    return None


def joint_satisfiable(records: Sequence[FormulaRecord]) -> JointVerdict:
    """Decide whether all formulas can be true simultaneously.

    Args:
        records: Compiled formulas, possibly sharing variables

    Returns:
        SATISFIABLE, UNSATISFIABLE, or NO_FORMULAS for an empty set
    """
    logger = get_logger()

    if not records:
        logger.debug("Joint check requested with no formulas")
        return JointVerdict.NO_FORMULAS

    witness = find_joint_witness(records)
    verdict = JointVerdict.SATISFIABLE if witness is not None else JointVerdict.UNSATISFIABLE

    logger.debug(
        f"Joint check over {len(records)} formulas "
        f"({len(merge_variables(records))} variables): {verdict}"
    )
    return verdict


def joint_table(records: Sequence[FormulaRecord]) -> TruthTable:
    """Build the combined truth table of a formula set.

    One input column per merged variable, then one column per formula headed
    by its formatted text. An empty set yields an empty table.
    """
    if not records:
        return TruthTable(header=(), rows=())

    universe = merge_variables(records)
    header = universe + tuple(record.formatted for record in records)
    rows = tuple(merged + values for merged, values in _evaluate_all(records))
    return TruthTable(header=header, rows=rows)
