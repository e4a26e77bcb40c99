"""Data models for the infixeval evaluator.

TokenKind, Token, PreviousTokenKind and the operator/bracket tables: all the
typed structures that flow through tokenizer → evaluator → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


OPERATORS = frozenset("+-*/^")
OPEN_BRACKETS = frozenset("([")
CLOSE_BRACKETS = frozenset(")]")

# Close bracket → the open bracket it must pair with.
MATCHING_BRACKET: dict[str, str] = {")": "(", "]": "["}


class TokenKind(str, Enum):
    """Lexical token categories produced by a token source."""

    NUMBER = "number"
    OPERATOR = "operator"
    OPEN_BRACKET = "open-bracket"
    CLOSE_BRACKET = "close-bracket"
    END = "end"
    INVALID = "invalid"


class PreviousTokenKind(str, Enum):
    """Adjacency state: what kind of token the evaluator accepted last."""

    START = "start"
    OPERAND = "operand"
    OPERATOR = "operator"
    OPEN_BRACKET = "open-bracket"
    CLOSE_BRACKET = "close-bracket"


@dataclass(frozen=True)
class Token:
    """A single token from the expression.

    Only the field matching ``kind`` is meaningful: ``value`` for numbers,
    ``symbol`` for operators and brackets, ``text`` for invalid input.
    """

    kind: TokenKind
    value: Optional[float] = None
    symbol: str = ""
    text: str = ""
    position: int = -1

    @classmethod
    def number(cls, value: float, position: int = -1) -> Token:
        return cls(TokenKind.NUMBER, value=float(value), position=position)

    @classmethod
    def operator(cls, symbol: str, position: int = -1) -> Token:
        if symbol not in OPERATORS:
            raise ValueError(f"Not an operator: {symbol!r}")
        return cls(TokenKind.OPERATOR, symbol=symbol, position=position)

    @classmethod
    def open_bracket(cls, symbol: str, position: int = -1) -> Token:
        if symbol not in OPEN_BRACKETS:
            raise ValueError(f"Not an open bracket: {symbol!r}")
        return cls(TokenKind.OPEN_BRACKET, symbol=symbol, position=position)

    @classmethod
    def close_bracket(cls, symbol: str, position: int = -1) -> Token:
        if symbol not in CLOSE_BRACKETS:
            raise ValueError(f"Not a close bracket: {symbol!r}")
        return cls(TokenKind.CLOSE_BRACKET, symbol=symbol, position=position)

    @classmethod
    def end(cls, position: int = -1) -> Token:
        return cls(TokenKind.END, position=position)

    @classmethod
    def invalid(cls, text: str, position: int = -1) -> Token:
        return cls(TokenKind.INVALID, text=text, position=position)

    def __str__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return repr(self.value)
        if self.kind == TokenKind.INVALID:
            return self.text
        if self.kind == TokenKind.END:
            return "<end>"
        return self.symbol
