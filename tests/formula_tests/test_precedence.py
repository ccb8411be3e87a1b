# tests/formula_tests/test_precedence.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Test suite for parser operator precedence and associativity

"""Test suite for parser operator precedence and associativity.

This module verifies that the shunting-yard parser groups expressions
according to the connective precedence table and the equal-precedence
tie-break, and that negation and parentheses bind as expected.

Operator precedence (highest to lowest):
1. () - parentheses for grouping
2. ~ - negation, applied to the next operand
3. /\\ - conjunction
4. \\/ - disjunction
5. -> - implication
6. <-> - biconditional

Chains of the same connective group to the right.
"""

import pytest
from formula import parse
from formula.ast_nodes import And, Or, Not, Implies, Iff, Var, TrueConst, FalseConst
from utils.logger import get_logger


# Variable indices for formulas over a, b, c, d (sorted table)
a, b, c, d = Var(0), Var(1), Var(2), Var(3)


class TestFormulaPrecedence:
    """Test cases for operator precedence and associativity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    PRECEDENCE_TEST_CASES = [
        # AND binds tighter than OR
        ("a or b and c", Or(a, And(b, c))),
        ("a and b or c", Or(And(a, b), c)),
        # OR binds tighter than IMPLIES
        ("a -> b or c", Implies(a, Or(b, c))),
        ("a or b -> c", Implies(Or(a, b), c)),
        # IMPLIES binds tighter than IFF
        ("a <-> b -> c", Iff(a, Implies(b, c))),
        ("a -> b <-> c", Iff(Implies(a, b), c)),
        # Full ladder
        ("a <-> b -> c or d and a", Iff(a, Implies(b, Or(c, And(d, a))))),
        ("a and b or c -> d <-> a", Iff(Implies(Or(And(a, b), c), d), a)),
        # Negation binds tightest
        ("~a and b", And(Not(a), b)),
        ("a or ~b and c", Or(a, And(Not(b), c))),
        ("~~a", Not(Not(a))),
        ("~(a or b) and c", And(Not(Or(a, b)), c)),
        ("~~(a)", Not(Not(a))),
        # Parentheses override precedence
        ("(a or b) and c", And(Or(a, b), c)),
        ("a and (b or c)", And(a, Or(b, c))),
        ("(a <-> b) and c", And(Iff(a, b), c)),
        ("((a))", a),
        # Constants as operands
        ("T and F", And(TrueConst(), FalseConst())),
        ("~T or a", Or(Not(TrueConst()), a)),
    ]

    @pytest.mark.parametrize("formula, expected_ast", PRECEDENCE_TEST_CASES)
    def test_operator_precedence(self, formula, expected_ast):
        """Test that formulas are grouped by connective precedence.

        Args:
            formula: Input formula text
            expected_ast: Expected tree structure
        """
        actual = parse(formula).ast
        self.logger.debug(f"{formula} -> {actual}")

        assert actual == expected_ast, (
            f"Precedence mismatch for '{formula}':\n"
            f"Expected: {expected_ast}\n"
            f"Actual:   {actual}"
        )

    ASSOCIATIVITY_TEST_CASES = [
        ("a -> b -> c", Implies(a, Implies(b, c))),
        ("a <-> b <-> c", Iff(a, Iff(b, c))),
        ("a and b and c", And(a, And(b, c))),
        ("a or b or c", Or(a, Or(b, c))),
        ("a and b and c and d", And(a, And(b, And(c, d)))),
        ("(a -> b) -> c", Implies(Implies(a, b), c)),
    ]

    @pytest.mark.parametrize("formula, expected_ast", ASSOCIATIVITY_TEST_CASES)
    def test_equal_precedence_groups_right(self, formula, expected_ast):
        """Test that chains of one connective group to the right.

        Args:
            formula: Input formula text
            expected_ast: Expected tree structure
        """
        assert parse(formula).ast == expected_ast

    def test_spellings_do_not_affect_grouping(self):
        """Test that mixed spellings produce the same tree as canonical ones."""
        canonical = parse("~a /\\ b \\/ c -> d <-> a").ast
        mixed = parse("not a and b || c \\Rightarrow d iff a").ast
        latex = parse("\\neg a \\wedge b \\vee c \\to d \\leftrightarrow a").ast
        glyphs = parse("¬a ∧ b ∨ c → d ↔ a").ast

        assert canonical == mixed == latex == glyphs

    def test_variable_indices_resolve_to_names(self):
        """Test that leaf indices point at the sorted variable table."""
        result = parse("r and p and q")

        assert result.variables == ("p", "q", "r")
        assert result.ast == And(Var(2), And(Var(0), Var(1)))
        assert result.ast.format(result.variables) == "(r ∧ (p ∧ q))"
