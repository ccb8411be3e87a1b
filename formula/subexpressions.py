# formula/subexpressions.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Breadth-first collection of a formula's compound subexpressions

"""Collects the subexpressions that get their own truth table column.

A full truth table shows one input column per variable followed by one
column per subexpression. This module walks the AST breadth-first and
returns every non-variable node in discovery order. Variables are skipped
because they already appear as input columns. Constants are kept, as in the
original table view.

Children are enqueued right before left, so for ``(p ∧ q) ∨ (r ∧ s)`` the
column for ``(r ∧ s)`` precedes the one for ``(p ∧ q)``. Structurally equal
subtrees produce a single column; they are recognised by ``StructuralKey``
numbers rather than by comparing nodes, which would recurse.
"""

from __future__ import annotations
from collections import deque
from typing import Deque, List, Set, Tuple

from . import ast_nodes as ast
from utils.logger import get_logger


class SubexpressionCollector(ast.Visitor):
    """Breadth-first walker collecting distinct compound subexpressions.

    Each ``visit_*`` method returns the children to enqueue next and whether
    the visited node earns its own column.
    """

    def collect(self, root: ast.Expr) -> List[ast.Expr]:
        """Return the distinct non-variable subexpressions of ``root``.

        Args:
            root: Root node of the formula

        Returns:
            Subexpressions in breadth-first discovery order, root first
        """
        keys = ast.StructuralKey()
        keys.run(root)

        seen: Set[int] = set()
        collected: List[ast.Expr] = []
        queue: Deque[ast.Expr] = deque([root])

        while queue:
            node = queue.popleft()
            keep, children = node.accept(self)
            key = keys.value_of(node)
            if keep and key not in seen:
                seen.add(key)
                collected.append(node)
            queue.extend(children)

        get_logger().debug(f"Collected {len(collected)} subexpression columns")
        return collected

    def visit_true(self, n: ast.TrueConst) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return True, ()

    def visit_false(self, n: ast.FalseConst) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return True, ()

    def visit_var(self, n: ast.Var) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return False, ()

    def visit_not(self, n: ast.Not) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return True, (n.operand,)

    def visit_and(self, n: ast.And) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return True, (n.right, n.left)

    def visit_or(self, n: ast.Or) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return True, (n.right, n.left)

    def visit_implies(self, n: ast.Implies) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return True, (n.right, n.left)

    def visit_iff(self, n: ast.Iff) -> Tuple[bool, Tuple[ast.Expr, ...]]:
        return True, (n.right, n.left)


def subexpressions(root: ast.Expr) -> List[ast.Expr]:
    """Convenience wrapper around ``SubexpressionCollector``."""
    return SubexpressionCollector().collect(root)
