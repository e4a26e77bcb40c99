"""Token source for infixeval: scans one line of text into Tokens on demand.

Lexical rules:
- spaces and tabs separate tokens and are otherwise ignored
- numbers are unsigned ASCII decimal literals: ``12``, ``3.5``, ``4.``, ``.25``
- ``+ - * / ^`` are operators, ``( [`` and ``) ]`` are brackets
- a newline or the end of input ends the expression
- a word (``abc``, ``x1``) or any other character is reported as INVALID
  so the evaluator can name it in its diagnostic
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional, TextIO

from infixeval.models import CLOSE_BRACKETS, OPEN_BRACKETS, OPERATORS, Token, TokenKind

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)
_WORD_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_.]*")
_BLANKS = " \t\f\v"
_LINE_ENDS = "\r\n"


class Tokenizer:
    """Produces Tokens left to right, one per next_token() call.

    After the END token has been produced, every further call returns END
    again. Only the first line of the input is considered.
    """

    def __init__(self, text: str) -> None:
        self._stream: Optional[TextIO] = None
        self._text: Optional[str] = text
        self._pos = 0
        self._finished = False

    @classmethod
    def from_stream(cls, stream: TextIO) -> Tokenizer:
        """Tokenize the next line of a text stream.

        The line is read lazily on the first next_token() call. Errors raised
        by the stream propagate to the caller unchanged.
        """
        tokenizer = cls("")
        tokenizer._stream = stream
        tokenizer._text = None
        return tokenizer

    def _line(self) -> str:
        if self._text is None:
            # Not retried: a failing stream aborts the evaluation.
            self._text = self._stream.readline()
            logger.debug(f"Read expression line: {self._text!r}")
        return self._text

    def next_token(self) -> Token:
        """Scan and return the next token."""
        if self._finished:
            return Token.end(self._pos)

        text = self._line()
        pos = self._pos
        while pos < len(text) and text[pos] in _BLANKS:
            pos += 1

        if pos >= len(text) or text[pos] in _LINE_ENDS:
            self._pos = pos
            self._finished = True
            return Token.end(pos)

        ch = text[pos]
        number_match = _NUMBER_RE.match(text, pos)
        if number_match:
            self._pos = number_match.end()
            return Token.number(float(number_match.group()), pos)

        self._pos = pos + 1
        if ch in OPERATORS:
            return Token.operator(ch, pos)
        if ch in OPEN_BRACKETS:
            return Token.open_bracket(ch, pos)
        if ch in CLOSE_BRACKETS:
            return Token.close_bracket(ch, pos)

        word_match = _WORD_RE.match(text, pos)
        if word_match:
            self._pos = word_match.end()
            return Token.invalid(word_match.group(), pos)
        return Token.invalid(ch, pos)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including END."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.END:
                return


def tokenize(text: str) -> list[Token]:
    """Tokenize a whole expression, END token included."""
    return list(Tokenizer(text))
