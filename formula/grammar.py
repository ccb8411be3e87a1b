# formula/grammar.py
# This file is part of Tabula - A Propositional Truth Table Compiler
#
# Operator-precedence (shunting-yard) parser for propositional formulas

"""Propositional formula parser based on Dijkstra's shunting-yard algorithm.

The parser consumes the token stream produced by the scanner and builds an
Abstract Syntax Tree using two stacks: one for operators and open
parentheses, one for finished operands. A two-state machine decides what may
come next: while an operand is needed we accept constants, variables, ``(``
and ``~``; once an operand is available we accept a binary connective, ``)``
or the end of input.

Negation modifies an operand that has not been read yet, so ``~`` waits on
the operator stack. Whenever an operand becomes available, every ``~`` sitting
on top of the operator stack is popped and wrapped around it.

Operator Precedence (lowest to highest):
- IFF (<->): 0
- IMPLIES (->): 1
- OR (\\/): 2
- AND (/\\): 3
- NOT (~): applied eagerly to the next operand

The end of input behaves as an operator of precedence -1 so that it forces
every pending operator to be reduced. An operator on the stack is reduced
only when its precedence is strictly greater than the incoming one, so chains
of equal precedence group to the right: ``p -> q -> r`` is ``p -> (q -> r)``.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .scanner import ScanResult, Token, TokenKind
from .ast_nodes import Expr, TrueConst, FalseConst, Var, Not, And, Or, Implies, Iff
from .exceptions import FormulaSyntaxError
from utils.logger import get_logger


PRECEDENCE = {
    TokenKind.EOF: -1,
    TokenKind.IFF: 0,
    TokenKind.IMPLIES: 1,
    TokenKind.OR: 2,
    TokenKind.AND: 3,
}

BINARY_OPERATORS = {
    TokenKind.IFF: Iff,
    TokenKind.IMPLIES: Implies,
    TokenKind.OR: Or,
    TokenKind.AND: And,
}

OPERAND_KINDS = frozenset({TokenKind.TRUE, TokenKind.FALSE, TokenKind.VARIABLE})


@dataclass(frozen=True)
class ParseResult:
    """Output of a successful parse.

    Attributes:
        ast: Root of the formula's syntax tree
        variables: Variable table the tree's Var indices refer to
    """

    ast: Expr
    variables: Tuple[str, ...]


def _check_invariant(condition: bool, what: str) -> None:
    """Abort loudly when the parser's own bookkeeping is inconsistent."""
    if not condition:
        raise AssertionError(f"Parser invariant violated: {what}")


def _syntax_error(description: str, token: Token) -> FormulaSyntaxError:
    return FormulaSyntaxError(description, token.start, token.end)


class ShuntingYardParser:
    """Single-use parser turning a scanned token stream into an AST.

    Attributes:
        operators: Stack of pending operator, negation and ``(`` tokens
        operands: Stack of finished subtrees
    """

    def __init__(self):
        self.operators: List[Token] = []
        self.operands: List[Expr] = []

    def parse(self, scanned: ScanResult) -> ParseResult:
        """Parse a scanned formula into an AST.

        Args:
            scanned: Output of the scanner, EOF-terminated

        Returns:
            ParseResult holding the AST root and the variable table

        Raises:
            FormulaSyntaxError: The token sequence is not a well-formed formula
        """
        logger = get_logger()
        need_operand = True

        for token in scanned.tokens:
            if need_operand:
                need_operand = self._read_operand(token)
            else:
                need_operand = self._read_operator(token)
                if token.kind is TokenKind.EOF:
                    break

        root = self._finish()
        logger.debug(f"Parsed formula into {type(root).__name__}")
        return ParseResult(ast=root, variables=scanned.variables)

    def _top(self) -> Token:
        _check_invariant(len(self.operators) > 0, "top of an empty operator stack")
        return self.operators[-1]

    def _push_operand(self, node: Expr) -> None:
        """Apply any pending negations, then push the operand."""
        while self.operators and self.operators[-1].kind is TokenKind.NOT:
            self.operators.pop()
            node = Not(node)
        self.operands.append(node)

    def _reduce(self, operator: Token) -> None:
        """Pop two operands, combine them with ``operator`` and push the result."""
        _check_invariant(len(self.operands) >= 2, "binary operator without two operands")
        rhs = self.operands.pop()
        lhs = self.operands.pop()
        self._push_operand(BINARY_OPERATORS[operator.kind](lhs, rhs))

    def _read_operand(self, token: Token) -> bool:
        """Handle a token while an operand is expected.

        Returns:
            Whether an operand is still needed afterwards
        """
        if token.kind in OPERAND_KINDS:
            self._push_operand(_wrap_operand(token))
            return False

        if token.kind in (TokenKind.LPAREN, TokenKind.NOT):
            self.operators.append(token)
            return True

        if token.kind is TokenKind.EOF:
            if not self.operators:
                raise FormulaSyntaxError("The formula is empty.", 0, 0)

            top = self._top()
            if top.kind is TokenKind.LPAREN:
                raise _syntax_error(
                    "This open parenthesis has no matching close parenthesis.", top
                )
            raise _syntax_error("This operator is missing an operand.", top)

        if token.kind is TokenKind.RPAREN and not any(
            op.kind is TokenKind.LPAREN for op in self.operators
        ):
            raise _syntax_error(
                "This close parenthesis doesn't match any open parenthesis.", token
            )

        raise _syntax_error(
            "We were expecting a variable, constant, or open parenthesis here.", token
        )

    def _read_operator(self, token: Token) -> bool:
        """Handle a token once an operand is available.

        Returns:
            Whether an operand is needed afterwards
        """
        if token.kind in BINARY_OPERATORS or token.kind is TokenKind.EOF:
            incoming = PRECEDENCE[token.kind]
            while self.operators:
                top = self.operators[-1]
                if top.kind is TokenKind.LPAREN:
                    break
                if PRECEDENCE[top.kind] <= incoming:
                    break
                self._reduce(self.operators.pop())

            self.operators.append(token)
            return True

        if token.kind is TokenKind.RPAREN:
            while True:
                if not self.operators:
                    raise _syntax_error(
                        "This close parenthesis doesn't match any open parenthesis.",
                        token,
                    )
                current = self.operators.pop()
                if current.kind is TokenKind.LPAREN:
                    break
                # Negations are flushed onto every operand as soon as it is pushed
                _check_invariant(
                    current.kind is not TokenKind.NOT, "negation pending inside a group"
                )
                self._reduce(current)

            # The grouped value has not yet seen the negations waiting outside it
            _check_invariant(len(self.operands) > 0, "empty group after close parenthesis")
            self._push_operand(self.operands.pop())
            return False

        raise _syntax_error(
            "We were expecting a close parenthesis or a binary connective here.", token
        )

    def _finish(self) -> Expr:
        """Validate the stacks after EOF and return the AST root."""
        _check_invariant(len(self.operators) > 0, "no EOF on the operator stack")
        _check_invariant(
            self.operators.pop().kind is TokenKind.EOF, "operator stack top is not EOF"
        )

        if self.operators:
            mismatched = self.operators.pop()
            _check_invariant(
                mismatched.kind is TokenKind.LPAREN,
                "operator left unreduced after EOF",
            )
            raise _syntax_error(
                "No matching close parenthesis for this open parenthesis.", mismatched
            )

        _check_invariant(len(self.operands) == 1, "operand stack does not hold one root")
        return self.operands.pop()


def _wrap_operand(token: Token) -> Expr:
    """Build the leaf node for a constant or variable token."""
    if token.kind is TokenKind.TRUE:
        return TrueConst()
    if token.kind is TokenKind.FALSE:
        return FalseConst()
    _check_invariant(token.index is not None, "variable token without an index")
    return Var(token.index)


def parse_tokens(scanned: ScanResult) -> ParseResult:
    """Parse a scanned token stream with a fresh parser instance."""
    return ShuntingYardParser().parse(scanned)
