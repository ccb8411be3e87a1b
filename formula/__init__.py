# formula/__init__.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Formula scanning and parsing components for propositional logic expressions

"""Propositional formula compilation for truth table analysis.

This package turns formula text into an Abstract Syntax Tree together with a
canonical, alphabetically sorted variable table. The pipeline has two stages:
a SLY-based scanner that accepts symbolic, ASCII, word and LaTeX spellings of
every connective, and a shunting-yard parser that builds the tree and
localizes syntax errors to the offending characters.

Core Functions:
    scan: Converts formula text into tokens and a variable table
    parse: Converts formula text into an AST and variable table
    compile_formula: Parses text and packages it as a FormulaRecord

Supported Logic:
    - Constants (T, F)
    - Negation, conjunction, disjunction, implication, biconditional
    - Propositional variables named by identifiers

Example:
    >>> from formula import compile_formula
    >>> record = compile_formula("r and p and q")
    >>> record.variables
    ('p', 'q', 'r')
    >>> record.formatted
    '(r ∧ (p ∧ q))'
"""

from .exceptions import FormulaError, LexError, FormulaSyntaxError
from .scanner import scan
from .grammar import ParseResult, parse_tokens
from .record import FormulaRecord
from utils.logger import get_logger


def parse(source: str) -> ParseResult:
    """Parse formula text into an Abstract Syntax Tree.

    Uses a fresh parser instance for each invocation so that parsing is
    stateless and safe to call from independent threads.

    Args:
        source: Formula text to parse

    Returns:
        ParseResult with the AST root and the sorted variable table

    Raises:
        LexError: The text contains an illegal or misplaced character
        FormulaSyntaxError: The text is not a well-formed formula

    Example:
        >>> parse("p or q and r").ast
        Or(left=Var(index=0), right=And(left=Var(index=1), right=Var(index=2)))
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    try:
        return parse_tokens(scan(source))
    except FormulaError as exc:
        logger.debug(f"{type(exc).__name__} at {exc.span}: {exc.description}")
        raise


def compile_formula(source: str) -> FormulaRecord:
    """Parse formula text and package it with its formatted rendering.

    Args:
        source: Formula text as submitted by the user

    Returns:
        FormulaRecord ready for classification and joint analysis

    Raises:
        LexError: The text contains an illegal or misplaced character
        FormulaSyntaxError: The text is not a well-formed formula
    """
    result = parse(source)
    formatted = result.ast.format(result.variables)

    get_logger().debug(f"Compiled formula {source!r} as {formatted}")
    return FormulaRecord(
        source=source,
        formatted=formatted,
        ast=result.ast,
        variables=result.variables,
    )


__all__ = [
    "scan",
    "parse",
    "compile_formula",
    "FormulaRecord",
    "ParseResult",
    "FormulaError",
    "LexError",
    "FormulaSyntaxError",
]

__version__ = "1.0.0"
__description__ = "Propositional formula scanning and parsing components"
