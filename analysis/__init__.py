# analysis/__init__.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Truth-table analysis over compiled formulas

"""Truth-table analysis interface.

This package provides:
  • enumerate_assignments: every truth assignment in table row order
  • classify / full_table: per-formula classification and truth table
  • joint_satisfiable / find_joint_witness / joint_table: analysis across
    a set of formulas sharing variables
  • Classification, JointVerdict: result enumerations
"""

from .assignments import assignment_at, assignment_count, enumerate_assignments
from .classifier import TruthTable, classify, full_table
from .joint import (
    find_joint_witness,
    joint_satisfiable,
    joint_table,
    merge_variables,
)
from .verdict import Classification, JointVerdict

__all__ = [
    "assignment_at",
    "assignment_count",
    "enumerate_assignments",
    "TruthTable",
    "classify",
    "full_table",
    "find_joint_witness",
    "joint_satisfiable",
    "joint_table",
    "merge_variables",
    "Classification",
    "JointVerdict",
]
