# formula/scanner.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional logic formula strings.

This module turns formula text into a token sequence plus an alphabetically
indexed variable table. Every connective can be written in several ways and
all spellings map onto one canonical token type:

- Negation: ~, !, not, ¬, \\lnot, \\neg
- And: /\\, &&, and, ^, ∧, \\land, \\wedge
- Or: \\/, ||, or, ∨, \\lor, \\vee
- Implies: ->, =>, implies, →, \\to, \\rightarrow, \\Rightarrow
- Iff: <->, <=>, iff, ↔, \\leftrightarrow, \\Leftrightarrow
- Constants: T, true, ⊤, \\top and F, false, ⊥, \\bot
- Parentheses: ( and )

Scanning happens in three stages: an allow-list check over every character,
a preliminary maximal-munch scan in which variables keep their names, and a
numbering pass that sorts the variable names and replaces each name with its
position in the sorted table.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

from sly import Lexer

from .exceptions import LexError
from utils.logger import get_logger


class TokenKind(Enum):
    """Canonical token types produced by the scanner."""

    LPAREN = auto()
    RPAREN = auto()
    NOT = auto()
    AND = auto()
    OR = auto()
    IMPLIES = auto()
    IFF = auto()
    TRUE = auto()
    FALSE = auto()
    VARIABLE = auto()
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    Attributes:
        kind: Canonical token type
        start: Offset of the first character of the lexeme
        end: Offset one past the last character of the lexeme
        lexeme: Text as it appeared in the input
        index: Variable table position for VARIABLE tokens, otherwise None
    """

    kind: TokenKind
    start: int
    end: int
    lexeme: str
    index: Optional[int] = None


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Output of a successful scan.

    Attributes:
        tokens: Token sequence terminated by a single EOF token
        variables: Sorted, duplicate-free variable names
    """

    tokens: Tuple[Token, ...]
    variables: Tuple[str, ...]


# Characters allowed anywhere in a formula
_ALLOWED_CHARACTER = re.compile(r"[A-Za-z0-9_\s\\/<>\-~^()&|=!∧∨→↔⊤⊥¬]")


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formulas.

    Token patterns are tried in the order they are listed, so spellings that
    share a prefix with a shorter one come first (``\\top`` before ``\\to``).
    Identifiers are matched as a whole and reserved words are remapped to
    their operator token, which keeps ``implies`` from being split into a
    variable and leftover characters.
    """

    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "IFF",
        "TRUE",
        "FALSE",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"
    ignore_whitespace = r"\s+"

    IFF = r"<->|<=>|↔|\\leftrightarrow|\\Leftrightarrow"
    TRUE = r"⊤|\\top"
    FALSE = r"⊥|\\bot"
    IMPLIES = r"->|=>|→|\\rightarrow|\\Rightarrow|\\to"
    NOT = r"~|!|¬|\\lnot|\\neg"
    AND = r"/\\|&&|\^|∧|\\land|\\wedge"
    OR = r"\\/|\|\||∨|\\lor|\\vee"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Identifier pattern: starts with letter/underscore, followed by alphanumerics/underscores
    ID = r"[A-Za-z_][A-Za-z0-9_]*"

    # Keyword mapping: reserved words become operator tokens
    ID["T"] = "TRUE"
    ID["true"] = "TRUE"
    ID["F"] = "FALSE"
    ID["false"] = "FALSE"
    ID["not"] = "NOT"
    ID["and"] = "AND"
    ID["or"] = "OR"
    ID["implies"] = "IMPLIES"
    ID["iff"] = "IFF"

    def error(self, t):
        """Handle characters that are allowed but cannot start any token.

        Args:
            t: SLY token object containing error context

        Raises:
            LexError: Always raised with the offending single-character span
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Unexpected character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise LexError(
            f"The character {illegal_char} shouldn't be here.", error_pos, error_pos + 1
        )


_KIND_BY_TYPE = {
    "ID": TokenKind.VARIABLE,
    "NOT": TokenKind.NOT,
    "AND": TokenKind.AND,
    "OR": TokenKind.OR,
    "IMPLIES": TokenKind.IMPLIES,
    "IFF": TokenKind.IFF,
    "TRUE": TokenKind.TRUE,
    "FALSE": TokenKind.FALSE,
    "LPAREN": TokenKind.LPAREN,
    "RPAREN": TokenKind.RPAREN,
}


def check_integrity(text: str) -> None:
    """Reject input containing characters outside the allow-list.

    Raises:
        LexError: At the first illegal character
    """
    for position, char in enumerate(text):
        if not _ALLOWED_CHARACTER.match(char):
            raise LexError("Illegal character", position, position + 1)


def preliminary_scan(text: str) -> Tuple[List[Token], Dict[str, None]]:
    """Tokenize the input with variables still carried by name.

    Returns:
        The token list (EOF-terminated) and the variables seen, deduplicated
        in first-seen order
    """
    seen: Dict[str, None] = {}
    tokens: List[Token] = []

    for sly_token in FormulaLexer().tokenize(text):
        kind = _KIND_BY_TYPE[sly_token.type]
        if kind is TokenKind.VARIABLE:
            seen.setdefault(sly_token.value, None)
        tokens.append(
            Token(
                kind=kind,
                start=sly_token.index,
                end=sly_token.index + len(sly_token.value),
                lexeme=sly_token.value,
            )
        )

    tokens.append(Token(TokenKind.EOF, len(text), len(text), ""))
    return tokens, seen


def number_variables(tokens: List[Token], seen: Dict[str, None]) -> ScanResult:
    """Sort the collected variable names and index every variable token."""
    variables = tuple(sorted(seen))
    position = {name: i for i, name in enumerate(variables)}

    numbered = tuple(
        replace(token, index=position[token.lexeme])
        if token.kind is TokenKind.VARIABLE
        else token
        for token in tokens
    )
    return ScanResult(tokens=numbered, variables=variables)


def scan(text: str) -> ScanResult:
    """Scan formula text into tokens and a canonical variable table.

    Args:
        text: Raw formula text

    Returns:
        ScanResult with EOF-terminated tokens and sorted variable names

    Raises:
        LexError: Input contains an illegal or misplaced character

    Example:
        >>> scan("r and p and q").variables
        ('p', 'q', 'r')
    """
    logger = get_logger()
    logger.debug(f"Scanning formula: {text!r}")

    check_integrity(text)
    tokens, seen = preliminary_scan(text)
    result = number_variables(tokens, seen)

    logger.debug(
        f"Scanned {len(result.tokens)} tokens, variables: {list(result.variables)}"
    )
    return result
