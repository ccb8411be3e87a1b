# formula/ast_nodes.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional logic formulas. The variant set is closed:

Node Types:
    TrueConst, FalseConst: Boolean constants
    Var: Propositional variable, referenced by variable table index
    Not: Negation
    And, Or, Implies, Iff: Binary connectives

All nodes support the visitor design pattern. Evaluation and pretty-printing
are provided by the ``Evaluator`` and ``Formatter`` visitors, so walking the
tree never requires inspecting which attributes a node happens to have.

Formulas may be arbitrarily deep, so tree walks never recurse: visitors that
need their children's results derive from ``PostOrderVisitor``, which drives
the walk from an explicit stack.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Sequence, Tuple


# Display glyphs used when rendering a formula
TRUE_GLYPH = "⊤"
FALSE_GLYPH = "⊥"
NOT_GLYPH = "¬"
AND_GLYPH = "∧"
OR_GLYPH = "∨"
IMPLIES_GLYPH = "→"
IFF_GLYPH = "↔"


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type.
    """

    def visit_true(self, n: TrueConst): ...

    def visit_false(self, n: FalseConst): ...

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_iff(self, n: Iff): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and implement
    ``accept`` for visitor dispatch.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def children(self) -> Tuple[Expr, ...]:
        """Return the direct subtrees of this node, left to right."""
        return ()

    def evaluate(self, assignment: Sequence[bool]) -> bool:
        """Evaluate this formula under a variable assignment.

        Args:
            assignment: One boolean per variable table index

        Returns:
            Truth value of the formula
        """
        return Evaluator(assignment).run(self)

    def format(self, variables: Sequence[str]) -> str:
        """Render this formula with display glyphs and full parenthesization.

        Args:
            variables: Variable table used to name Var leaves

        Returns:
            Human-readable formula text
        """
        return Formatter(variables).run(self)


@dataclass(frozen=True, slots=True)
class TrueConst(Expr):
    """The Boolean constant true."""

    def accept(self, v: Visitor):
        return v.visit_true(self)


@dataclass(frozen=True, slots=True)
class FalseConst(Expr):
    """The Boolean constant false."""

    def accept(self, v: Visitor):
        return v.visit_false(self)


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Propositional variable.

    Attributes:
        index: Position of the variable in the owning formula's variable table
    """

    index: int

    def accept(self, v: Visitor):
        return v.visit_var(self)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)


@dataclass(frozen=True, slots=True)
class BinaryExpr(Expr):
    """Common shape of the binary connectives.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class And(BinaryExpr):
    """Logical conjunction, true when both operands are true.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryExpr):
    """Logical disjunction, true when at least one operand is true.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryExpr):
    """Material implication, false only when left is true and right is false.

    Attributes:
        left: Antecedent
        right: Consequent
    """

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Iff(BinaryExpr):
    """Biconditional, true when both operands have the same truth value.

    Attributes:
        left: Left operand
        right: Right operand
    """

    def accept(self, v: Visitor):
        return v.visit_iff(self)


class PostOrderVisitor(Visitor):
    """Visitor whose results are computed bottom-up without recursion.

    ``run`` walks the tree from an explicit stack and calls ``accept`` on a
    node only after all of its children have been visited. The ``visit_*``
    methods read their children's results through ``value_of``. Results are
    keyed by node identity, so a subtree object shared by several parents is
    visited once.
    """

    def run(self, root: Expr) -> Any:
        """Visit every node of ``root`` in post-order and return the root's result."""
        self._values: Dict[int, Any] = {}
        stack: List[Tuple[Expr, bool]] = [(root, False)]

        while stack:
            node, expanded = stack.pop()
            if id(node) in self._values:
                continue
            children = node.children()
            if expanded or not children:
                self._values[id(node)] = node.accept(self)
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(children))

        return self._values[id(root)]

    def value_of(self, n: Expr) -> Any:
        """Return the result already computed for ``n``."""
        return self._values[id(n)]


class Evaluator(PostOrderVisitor):
    """Visitor computing the truth value of a tree under one assignment."""

    def __init__(self, assignment: Sequence[bool]):
        self._assignment = assignment

    def visit_true(self, n: TrueConst) -> bool:
        return True

    def visit_false(self, n: FalseConst) -> bool:
        return False

    def visit_var(self, n: Var) -> bool:
        return bool(self._assignment[n.index])

    def visit_not(self, n: Not) -> bool:
        return not self.value_of(n.operand)

    def visit_and(self, n: And) -> bool:
        return self.value_of(n.left) and self.value_of(n.right)

    def visit_or(self, n: Or) -> bool:
        return self.value_of(n.left) or self.value_of(n.right)

    def visit_implies(self, n: Implies) -> bool:
        # p -> q is equivalent to ~p \/ q
        return (not self.value_of(n.left)) or self.value_of(n.right)

    def visit_iff(self, n: Iff) -> bool:
        return self.value_of(n.left) == self.value_of(n.right)


class Formatter(PostOrderVisitor):
    """Visitor rendering a tree as display text.

    Every binary application is wrapped in parentheses regardless of
    precedence, so the output is unambiguous and can be parsed again.
    """

    def __init__(self, variables: Sequence[str]):
        self._variables = variables

    def visit_true(self, n: TrueConst) -> str:
        return TRUE_GLYPH

    def visit_false(self, n: FalseConst) -> str:
        return FALSE_GLYPH

    def visit_var(self, n: Var) -> str:
        return self._variables[n.index]

    def visit_not(self, n: Not) -> str:
        return f"{NOT_GLYPH}{self.value_of(n.operand)}"

    def _binary(self, n: BinaryExpr, glyph: str) -> str:
        return f"({self.value_of(n.left)} {glyph} {self.value_of(n.right)})"

    def visit_and(self, n: And) -> str:
        return self._binary(n, AND_GLYPH)

    def visit_or(self, n: Or) -> str:
        return self._binary(n, OR_GLYPH)

    def visit_implies(self, n: Implies) -> str:
        return self._binary(n, IMPLIES_GLYPH)

    def visit_iff(self, n: Iff) -> str:
        return self._binary(n, IFF_GLYPH)


class StructuralKey(PostOrderVisitor):
    """Visitor numbering subtrees so that equal structures share a number.

    Each node's key is built from its variant and its children's keys, so
    comparing two subtrees costs one integer comparison instead of a walk.
    """

    def __init__(self):
        self._numbers: Dict[Tuple, int] = {}

    def _number(self, shape: Tuple) -> int:
        return self._numbers.setdefault(shape, len(self._numbers))

    def visit_true(self, n: TrueConst) -> int:
        return self._number(("true",))

    def visit_false(self, n: FalseConst) -> int:
        return self._number(("false",))

    def visit_var(self, n: Var) -> int:
        return self._number(("var", n.index))

    def visit_not(self, n: Not) -> int:
        return self._number(("not", self.value_of(n.operand)))

    def _binary(self, n: BinaryExpr, tag: str) -> int:
        return self._number((tag, self.value_of(n.left), self.value_of(n.right)))

    def visit_and(self, n: And) -> int:
        return self._binary(n, "and")

    def visit_or(self, n: Or) -> int:
        return self._binary(n, "or")

    def visit_implies(self, n: Implies) -> int:
        return self._binary(n, "implies")

    def visit_iff(self, n: Iff) -> int:
        return self._binary(n, "iff")
