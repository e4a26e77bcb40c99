"""infixeval: infix arithmetic expression evaluator.

Evaluates expressions such as ``2 + 3 * (4 - 1) ^ 2`` in a single
left-to-right pass over the tokens using an operator stack and an operand
stack, and reports exactly which rule an invalid expression breaks.

Usage:
    echo "2 + 3 * 4" | python -m infixeval    # prints 14.0
    python -m infixeval "[1 + 2] / 0"          # prints Infinity

    >>> from infixeval import evaluate
    >>> evaluate("2^3^2")
    512.0
"""

from infixeval.errors import ErrorKind, EvaluatorStateError, ExpressionError, StackUnderflowError
from infixeval.evaluator import Evaluator, evaluate
from infixeval.models import PreviousTokenKind, Token, TokenKind
from infixeval.stack import Stack
from infixeval.tokenizer import Tokenizer, tokenize

__all__ = [
    "ErrorKind",
    "Evaluator",
    "EvaluatorStateError",
    "ExpressionError",
    "PreviousTokenKind",
    "Stack",
    "StackUnderflowError",
    "Token",
    "TokenKind",
    "Tokenizer",
    "evaluate",
    "tokenize",
]
