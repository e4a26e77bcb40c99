"""Error taxonomy for infixeval.

Every way an expression can be rejected is an ``ErrorKind`` with a fixed
human-readable message. ``ExpressionError`` is the only error a caller needs
to handle for bad input; the other classes signal programming faults.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Expression error classification."""

    UNRECOGNIZED_TOKEN = "unrecognized-token"
    MULTIPLE_OPERANDS = "multiple-operands"
    IMPLIED_MULTIPLICATION = "implied-multiplication"
    MULTIPLE_OPERATORS = "multiple-operators"
    OPEN_BRACKET_MISSING = "open-bracket-missing"
    INCORRECT_BRACKET_FORMAT = "incorrect-bracket-format"
    MISSING_CLOSED_BRACKET = "missing-closed-bracket"
    MISSING_OPERAND = "missing-operand"
    TRAILING_OPERATOR = "trailing-operator"
    EMPTY_EXPRESSION = "empty-expression"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.UNRECOGNIZED_TOKEN: "Unrecognized token",
    ErrorKind.MULTIPLE_OPERANDS: "Multiple operands entered in a row",
    ErrorKind.IMPLIED_MULTIPLICATION: "Implied multiplication not supported",
    ErrorKind.MULTIPLE_OPERATORS: "Multiple operators entered in a row",
    ErrorKind.OPEN_BRACKET_MISSING: "Open bracket missing",
    ErrorKind.INCORRECT_BRACKET_FORMAT: "Incorrect bracket format",
    ErrorKind.MISSING_CLOSED_BRACKET: "Expression missing closed bracket",
    ErrorKind.MISSING_OPERAND: "Operand missing before close bracket",
    ErrorKind.TRAILING_OPERATOR: "Expression ends with an operator",
    ErrorKind.EMPTY_EXPRESSION: "Empty expression",
}


class ExpressionError(ValueError):
    """The expression is invalid.

    Attributes:
        kind: Which rule was violated.
        detail: Extra context appended to the message (the offending text
            for UNRECOGNIZED_TOKEN, empty otherwise).
        position: 0-based column of the offending token, or None when the
            token source does not track positions.
    """

    def __init__(self, kind: ErrorKind, detail: str = "", position: Optional[int] = None) -> None:
        self.kind = kind
        self.detail = detail
        self.position = position
        message = f"{kind.message}: {detail}" if detail else kind.message
        super().__init__(message)


class EvaluatorStateError(RuntimeError):
    """The evaluator's stacks ended up in a state no valid input can produce."""


class StackUnderflowError(IndexError):
    """pop() or peek() on an empty stack."""
