"""Tests for the line tokenizer."""

import io

import pytest

from infixeval import Token, TokenKind, Tokenizer, tokenize


def kinds(text):
    return [t.kind for t in tokenize(text)]


def test_full_expression():
    tokens = tokenize("[1 + 2.5) * ^ /-")
    assert tokens == [
        Token.open_bracket("[", 0),
        Token.number(1.0, 1),
        Token.operator("+", 3),
        Token.number(2.5, 5),
        Token.close_bracket(")", 8),
        Token.operator("*", 10),
        Token.operator("^", 12),
        Token.operator("/", 14),
        Token.operator("-", 15),
        Token.end(16),
    ]


@pytest.mark.parametrize("text, value", [
    ("12", 12.0),
    ("3.5", 3.5),
    ("4.", 4.0),
    (".25", 0.25),
    ("007", 7.0),
])
def test_number_literals(text, value):
    token = tokenize(text)[0]
    assert token.kind == TokenKind.NUMBER
    assert token.value == value


def test_minus_is_never_part_of_a_number():
    assert kinds("-3") == [TokenKind.OPERATOR, TokenKind.NUMBER, TokenKind.END]


def test_second_decimal_point_starts_a_new_number():
    values = [t.value for t in tokenize("1.2.3")[:-1]]
    assert values == [1.2, 0.3]


def test_words_are_invalid():
    token = tokenize("sqrt2 + 1")[0]
    assert token.kind == TokenKind.INVALID
    assert token.text == "sqrt2"


def test_exponent_notation_is_not_a_number():
    tokens = tokenize("1e5")
    assert tokens[0] == Token.number(1.0, 0)
    assert tokens[1] == Token.invalid("e5", 1)


def test_non_ascii_digits_are_not_numbers():
    assert tokenize("\u0663 + 1")[0] == Token.invalid("\u0663", 0)


def test_unknown_symbol_is_invalid():
    assert tokenize("2 % 3")[1] == Token.invalid("%", 2)


def test_whitespace_is_skipped():
    assert kinds(" \t1\t+  2 ") == [TokenKind.NUMBER, TokenKind.OPERATOR, TokenKind.NUMBER, TokenKind.END]


def test_newline_ends_expression():
    assert kinds("1 +\n2") == [TokenKind.NUMBER, TokenKind.OPERATOR, TokenKind.END]
    assert kinds("1\r\n") == [TokenKind.NUMBER, TokenKind.END]


def test_empty_input_is_just_end():
    assert kinds("") == [TokenKind.END]


def test_end_repeats():
    tokenizer = Tokenizer("7")
    tokenizer.next_token()
    assert tokenizer.next_token().kind == TokenKind.END
    assert tokenizer.next_token().kind == TokenKind.END


def test_from_stream_reads_lazily_one_line():
    stream = io.StringIO("1 + 2\n3 + 4\n")
    tokenizer = Tokenizer.from_stream(stream)
    assert stream.tell() == 0
    assert [str(t) for t in tokenizer] == ["1.0", "+", "2.0", "<end>"]
    assert stream.readline() == "3 + 4\n"


def test_token_constructors_reject_wrong_symbols():
    with pytest.raises(ValueError):
        Token.operator("(")
    with pytest.raises(ValueError):
        Token.open_bracket(")")
    with pytest.raises(ValueError):
        Token.close_bracket("%")
