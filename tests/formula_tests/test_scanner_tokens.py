# tests/formula_tests/test_scanner_tokens.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Test suite for formula scanner tokenization and error handling

"""Test suite for the formula scanner.

This module tests the lexical analysis phase: every accepted spelling of each
connective, maximal munch, reserved-word handling, variable numbering and
error localization for illegal characters.
"""

import pytest
from formula import scan, LexError
from formula.scanner import TokenKind, check_integrity
from utils.logger import get_logger


K = TokenKind


class TestFormulaScanner:
    """Test cases for scanner tokenization and error handling."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    def _kinds(self, text: str) -> list:
        """Scan text and return token kinds without the trailing EOF.

        Args:
            text: Input string to scan

        Returns:
            List of TokenKind values
        """
        self.logger.debug(f"Scanning: '{text}'")
        tokens = scan(text).tokens
        assert tokens[-1].kind is K.EOF, "Token stream must end with EOF"
        return [token.kind for token in tokens[:-1]]

    SPELLING_CASES = [
        # Negation
        ("~", K.NOT),
        ("!", K.NOT),
        ("not", K.NOT),
        ("¬", K.NOT),
        ("\\lnot", K.NOT),
        ("\\neg", K.NOT),
        # Conjunction
        ("/\\", K.AND),
        ("&&", K.AND),
        ("and", K.AND),
        ("^", K.AND),
        ("∧", K.AND),
        ("\\land", K.AND),
        ("\\wedge", K.AND),
        # Disjunction
        ("\\/", K.OR),
        ("||", K.OR),
        ("or", K.OR),
        ("∨", K.OR),
        ("\\lor", K.OR),
        ("\\vee", K.OR),
        # Implication
        ("->", K.IMPLIES),
        ("=>", K.IMPLIES),
        ("implies", K.IMPLIES),
        ("→", K.IMPLIES),
        ("\\to", K.IMPLIES),
        ("\\rightarrow", K.IMPLIES),
        ("\\Rightarrow", K.IMPLIES),
        # Biconditional
        ("<->", K.IFF),
        ("<=>", K.IFF),
        ("iff", K.IFF),
        ("↔", K.IFF),
        ("\\leftrightarrow", K.IFF),
        ("\\Leftrightarrow", K.IFF),
        # Constants
        ("T", K.TRUE),
        ("true", K.TRUE),
        ("⊤", K.TRUE),
        ("\\top", K.TRUE),
        ("F", K.FALSE),
        ("false", K.FALSE),
        ("⊥", K.FALSE),
        ("\\bot", K.FALSE),
        # Parentheses
        ("(", K.LPAREN),
        (")", K.RPAREN),
    ]

    @pytest.mark.parametrize("spelling, expected_kind", SPELLING_CASES)
    def test_every_spelling_maps_to_canonical_kind(self, spelling, expected_kind):
        """Test that each accepted spelling yields exactly one canonical token.

        Args:
            spelling: Operator lexeme
            expected_kind: Canonical TokenKind
        """
        assert self._kinds(spelling) == [expected_kind]

    VALID_TOKENIZATION_CASES = [
        ("p /\\ q", [K.VARIABLE, K.AND, K.VARIABLE]),
        ("p&&q||!r", [K.VARIABLE, K.AND, K.VARIABLE, K.OR, K.NOT, K.VARIABLE]),
        ("~(a -> b)", [K.NOT, K.LPAREN, K.VARIABLE, K.IMPLIES, K.VARIABLE, K.RPAREN]),
        # Maximal munch across LaTeX spellings sharing prefixes
        ("p \\Leftrightarrow q", [K.VARIABLE, K.IFF, K.VARIABLE]),
        ("\\top\\to\\bot", [K.TRUE, K.IMPLIES, K.FALSE]),
        ("p<->q", [K.VARIABLE, K.IFF, K.VARIABLE]),
        ("p<=>q=>r", [K.VARIABLE, K.IFF, K.VARIABLE, K.IMPLIES, K.VARIABLE]),
        # Reserved words are only reserved as whole identifiers
        ("implies", [K.IMPLIES]),
        ("impl", [K.VARIABLE]),
        ("notp", [K.VARIABLE]),
        ("andy or orville", [K.VARIABLE, K.OR, K.VARIABLE]),
        ("Tx", [K.VARIABLE]),
        ("True", [K.VARIABLE]),
        ("p_1 and _q2", [K.VARIABLE, K.AND, K.VARIABLE]),
        # Whitespace handling
        (" \t p \n and\r\nq ", [K.VARIABLE, K.AND, K.VARIABLE]),
        ("p or q", [K.VARIABLE, K.OR, K.VARIABLE]),
        ("", []),
    ]

    @pytest.mark.parametrize("input_text, expected_kinds", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_kinds):
        """Test scanner correctly tokenizes valid formula text.

        Args:
            input_text: Valid formula string
            expected_kinds: Expected sequence of token kinds
        """
        actual_kinds = self._kinds(input_text)

        assert actual_kinds == expected_kinds, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_kinds}\n"
            f"Actual:   {actual_kinds}"
        )

    def test_token_offsets_cover_lexemes(self):
        """Test that token spans point at the original characters."""
        text = "alpha \\land ~beta"
        tokens = scan(text).tokens

        assert [text[t.start:t.end] for t in tokens[:-1]] == [
            "alpha",
            "\\land",
            "~",
            "beta",
        ]
        assert (tokens[-1].start, tokens[-1].end) == (len(text), len(text))

    def test_variables_sorted_and_indexed(self):
        """Test that the variable table is sorted and tokens carry sorted indices."""
        result = scan("r and p and q")

        assert result.variables == ("p", "q", "r")
        indices = [t.index for t in result.tokens if t.kind is K.VARIABLE]
        assert indices == [2, 0, 1]

    def test_duplicate_variables_share_index(self):
        """Test that repeated names collapse to one table entry."""
        result = scan("q or p or q")

        assert result.variables == ("p", "q")
        indices = [t.index for t in result.tokens if t.kind is K.VARIABLE]
        assert indices == [1, 0, 1]

    def test_non_variable_tokens_have_no_index(self):
        """Test that only variable tokens carry an index."""
        result = scan("~T -> (F)")
        assert all(t.index is None for t in result.tokens)
        assert result.variables == ()

    ILLEGAL_CHARACTER_CASES = [
        ("p @ q", 2),
        ("p; q", 1),
        ("p $", 2),
        ("p [q]", 2),
        ("café", 3),
    ]

    @pytest.mark.parametrize("invalid_input, position", ILLEGAL_CHARACTER_CASES)
    def test_illegal_characters_raise_lex_error(self, invalid_input, position):
        """Test that characters outside the allow-list are rejected.

        Args:
            invalid_input: Formula containing an illegal character
            position: Offset of the first illegal character
        """
        with pytest.raises(LexError) as exc_info:
            scan(invalid_input)

        assert exc_info.value.description == "Illegal character"
        assert exc_info.value.span == (position, position + 1)

    MISPLACED_CHARACTER_CASES = [
        ("p < q", 2, "<"),
        ("p = q", 2, "="),
        ("p - q", 2, "-"),
        ("1p", 0, "1"),
        ("p / q", 2, "/"),
        ("p & q", 2, "&"),
        ("p | q", 2, "|"),
        ("p \\ q", 2, "\\"),
    ]

    @pytest.mark.parametrize("invalid_input, position, char", MISPLACED_CHARACTER_CASES)
    def test_allowed_but_unmatched_characters(self, invalid_input, position, char):
        """Test that allowed characters starting no token are reported.

        Args:
            invalid_input: Formula with a stray character
            position: Offset of the stray character
            char: The stray character itself
        """
        with pytest.raises(LexError) as exc_info:
            scan(invalid_input)

        assert exc_info.value.span == (position, position + 1)
        assert char in exc_info.value.description

    def test_integrity_check_runs_before_scanning(self):
        """Test that an illegal character wins over an earlier misplaced one."""
        with pytest.raises(LexError) as exc_info:
            scan("p < q @")

        assert exc_info.value.description == "Illegal character"
        assert exc_info.value.start == 6

    def test_check_integrity_accepts_all_operator_glyphs(self):
        """Test that the allow-list admits every operator glyph."""
        check_integrity("¬∧∨→↔⊤⊥ ~!^&|/\\<>=-() abc_XYZ 019")
