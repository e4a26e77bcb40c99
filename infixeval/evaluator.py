"""Two-stack infix evaluator.

Tokens are consumed once, left to right. Numbers go onto the operand stack;
operators and open brackets go onto the operator stack and are reduced
(popped and applied to the top two operands) as soon as precedence or a
close bracket allows. No parse tree is built.

Syntax is validated on the fly from the kind of the previous token, so the
first bad token aborts evaluation with an ExpressionError.
"""

from __future__ import annotations

import logging
from typing import Protocol, TextIO, Union

from infixeval.arithmetic import apply_operator, greater_precedence
from infixeval.errors import ErrorKind, EvaluatorStateError, ExpressionError
from infixeval.models import MATCHING_BRACKET, OPEN_BRACKETS, PreviousTokenKind, Token, TokenKind
from infixeval.stack import Stack
from infixeval.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


class TokenSource(Protocol):
    def next_token(self) -> Token: ...


Source = Union[str, TextIO, TokenSource]


def _as_token_source(source: Source) -> TokenSource:
    if isinstance(source, str):
        return Tokenizer(source)
    if hasattr(source, "next_token"):
        return source
    if hasattr(source, "readline"):
        return Tokenizer.from_stream(source)
    raise TypeError(f"Cannot read tokens from {type(source).__name__}")


class Evaluator:
    """Evaluates one expression per evaluate() call.

    The stacks and the previous-token marker are reset at the start of every
    call. An instance must not be shared between threads.
    """

    def __init__(self) -> None:
        self.operators: Stack[str] = Stack()
        self.operands: Stack[float] = Stack()
        self.previous = PreviousTokenKind.START

    def _reset(self) -> None:
        self.operators.clear()
        self.operands.clear()
        self.previous = PreviousTokenKind.START

    def evaluate(self, source: Source) -> float:
        """Evaluate an expression and return its value.

        Args:
            source: Expression text, a text stream (one line is read), or any
                object with a next_token() method.

        Raises:
            ExpressionError: The expression is invalid.
            EvaluatorStateError: The operand stack is inconsistent after
                draining.
        """
        tokens = _as_token_source(source)
        self._reset()

        token = tokens.next_token()
        try:
            while token.kind != TokenKind.END:
                self._dispatch(token)
                token = tokens.next_token()
            self._check_end(token)
            result = self.process_remaining_operators()
        except ExpressionError as e:
            logger.info(f"Rejected expression at token {token}: {e}")
            raise

        logger.debug(f"Result: {result!r}")
        return result

    def _dispatch(self, token: Token) -> None:
        if token.kind == TokenKind.NUMBER:
            self.process_operand(token.value, token.position)
        elif token.kind == TokenKind.OPERATOR:
            self.process_operator(token.symbol, token.position)
        elif token.kind == TokenKind.OPEN_BRACKET:
            self.process_open_bracket(token.symbol, token.position)
        elif token.kind == TokenKind.CLOSE_BRACKET:
            self.process_close_bracket(token.symbol, token.position)
        else:
            raise ExpressionError(ErrorKind.UNRECOGNIZED_TOKEN, token.text, _pos(token.position))

    def _reduce(self) -> None:
        """Pop one operator and two operands, push the result."""
        operator = self.operators.pop()
        right = self.operands.pop()
        left = self.operands.pop()
        result = apply_operator(operator, left, right)
        logger.debug(f"Reduce {left!r} {operator} {right!r} -> {result!r}")
        self.operands.push(result)

    def process_operand(self, value: float, position: int = -1) -> None:
        if self.previous == PreviousTokenKind.OPERAND:
            raise ExpressionError(ErrorKind.MULTIPLE_OPERANDS, position=_pos(position))
        if self.previous == PreviousTokenKind.CLOSE_BRACKET:
            raise ExpressionError(ErrorKind.IMPLIED_MULTIPLICATION, position=_pos(position))

        self.operands.push(float(value))
        self.previous = PreviousTokenKind.OPERAND

    def process_operator(self, operator: str, position: int = -1) -> None:
        if self.previous not in (PreviousTokenKind.OPERAND, PreviousTokenKind.CLOSE_BRACKET):
            raise ExpressionError(ErrorKind.MULTIPLE_OPERATORS, position=_pos(position))

        while not self.operators.is_empty() and greater_precedence(operator, self.operators.peek()):
            self._reduce()

        self.operators.push(operator)
        self.previous = PreviousTokenKind.OPERATOR

    def process_open_bracket(self, bracket: str, position: int = -1) -> None:
        # "2(3)" and "(2)(3)" both imply a multiplication.
        if self.previous in (PreviousTokenKind.OPERAND, PreviousTokenKind.CLOSE_BRACKET):
            raise ExpressionError(ErrorKind.IMPLIED_MULTIPLICATION, position=_pos(position))

        self.operators.push(bracket)
        self.previous = PreviousTokenKind.OPEN_BRACKET

    def process_close_bracket(self, bracket: str, position: int = -1) -> None:
        if self.operators.is_empty():
            raise ExpressionError(ErrorKind.OPEN_BRACKET_MISSING, position=_pos(position))
        if self.previous in (PreviousTokenKind.OPERATOR, PreviousTokenKind.OPEN_BRACKET):
            raise ExpressionError(ErrorKind.MISSING_OPERAND, position=_pos(position))

        while self.operators.peek() not in OPEN_BRACKETS:
            self._reduce()
            if self.operators.is_empty():
                raise ExpressionError(ErrorKind.OPEN_BRACKET_MISSING, position=_pos(position))

        opened = self.operators.pop()
        if MATCHING_BRACKET[bracket] != opened:
            raise ExpressionError(ErrorKind.INCORRECT_BRACKET_FORMAT, position=_pos(position))
        self.previous = PreviousTokenKind.CLOSE_BRACKET

    def _check_end(self, token: Token) -> None:
        """Only an operand or a close bracket may end the expression."""
        if self.previous == PreviousTokenKind.START:
            raise ExpressionError(ErrorKind.EMPTY_EXPRESSION, position=_pos(token.position))
        if self.previous == PreviousTokenKind.OPERATOR:
            raise ExpressionError(ErrorKind.TRAILING_OPERATOR, position=_pos(token.position))
        if self.previous == PreviousTokenKind.OPEN_BRACKET:
            raise ExpressionError(ErrorKind.MISSING_CLOSED_BRACKET, position=_pos(token.position))

    def process_remaining_operators(self) -> float:
        """Apply every pending operator and return the final value."""
        while not self.operators.is_empty():
            if self.operators.peek() in OPEN_BRACKETS:
                raise ExpressionError(ErrorKind.MISSING_CLOSED_BRACKET)
            self._reduce()

        if self.operands.size() != 1:
            raise EvaluatorStateError(
                f"Expected exactly one operand after evaluation, found {self.operands.size()}"
            )
        return self.operands.pop()


def _pos(position: int) -> int | None:
    return position if position >= 0 else None


def evaluate(source: Source) -> float:
    """Evaluate an expression with a fresh Evaluator."""
    return Evaluator().evaluate(source)
