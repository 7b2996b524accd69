"""Tests for the top-level calclex API."""

import pytest

import calclex
from calclex import (
    Expression,
    InvalidBraceSequenceError,
    InvalidExpressionError,
    Token,
    parse,
    tokenize,
)


class TestParse:
    """parse() scans and validates in one call."""

    def test_returns_expression(self) -> None:
        expression = parse("(1+2)*3")
        assert isinstance(expression, Expression)
        assert expression.to_list() == [
            Token.open_paren(),
            Token.number(1),
            Token.operator("+"),
            Token.number(2),
            Token.close_paren(),
            Token.operator("*"),
            Token.number(3),
        ]

    def test_decimal_operands(self) -> None:
        assert [t.value for t in parse("0.5 / .25")] == [0.5, "/", 0.25]

    def test_leading_minus_rejected(self) -> None:
        with pytest.raises(InvalidExpressionError) as exc_info:
            parse("-0")
        assert exc_info.value.offset == 0

    def test_unclosed_paren(self) -> None:
        with pytest.raises(InvalidBraceSequenceError) as exc_info:
            parse("(1+2")
        assert exc_info.value.offset == 0

    def test_adjacent_numbers(self) -> None:
        with pytest.raises(InvalidExpressionError) as exc_info:
            parse("1 2")
        assert exc_info.value.offset == 2


class TestTokenize:
    """tokenize() scans without grammar checks."""

    def test_offsets_and_tokens(self) -> None:
        assert tokenize("-0") == [(0, Token.operator("-")), (1, Token.number(0))]

    def test_no_grammar_checks(self) -> None:
        assert len(tokenize(")))")) == 3


class TestExpression:
    """Expression is an immutable sequence."""

    def test_sequence_protocol(self) -> None:
        expression = parse("1 + 2")
        assert len(expression) == 3
        assert expression[1] == Token.operator("+")
        assert expression[1:] == (Token.operator("+"), Token.number(2))
        assert list(expression) == expression.to_list()
        assert bool(expression) is True

    def test_immutable(self) -> None:
        expression = parse("1")
        with pytest.raises(AttributeError):
            expression.tokens = ()  # type: ignore[misc]

    def test_to_list_is_a_copy(self) -> None:
        expression = parse("1")
        tokens = expression.to_list()
        tokens.append(Token.number(2))
        assert len(expression) == 1


class TestPublicExports:
    """Everything in __all__ is importable."""

    def test_all_names_resolve(self) -> None:
        for name in calclex.__all__:
            assert hasattr(calclex, name), name
