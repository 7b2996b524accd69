"""Grammar validator producing a flat, checked token sequence.

Pulls tokens from a TokenSource and checks each one against the token
before it. Single pass, no lookahead, no backtracking; the first violation
is raised and nothing is returned.

Placement rules (predecessor = last accepted token, or start):

    OPEN_PAREN   after start, OPERATOR or OPEN_PAREN
    CLOSE_PAREN  after NUMBER or CLOSE_PAREN, with an open paren pending
    NUMBER       after start, OPERATOR or OPEN_PAREN
    OPERATOR     after NUMBER or CLOSE_PAREN

Pending open parens live in an explicit list of offsets, so nesting depth
is bounded by memory and not by the call stack.

Thread Safety:
- Validator keeps no state between validate() calls
- Configuration is read from ContextVar (thread-local)
- The returned Expression is immutable

"""

from __future__ import annotations

from calclex.config import get_scan_config
from calclex.errors import (
    InvalidBraceSequenceError,
    InvalidExpressionError,
    NoMoreTokens,
    ValidationError,
)
from calclex.expression import Expression
from calclex.protocols import TokenSource
from calclex.tokens import Token, TokenType
from calclex.utils.logger import get_logger

logger = get_logger(__name__)

# Token types that may directly precede each token type. None stands for
# the start of the expression.
_ALLOWED_PREDECESSORS: dict[TokenType, frozenset[TokenType | None]] = {
    TokenType.OPEN_PAREN: frozenset({None, TokenType.OPERATOR, TokenType.OPEN_PAREN}),
    TokenType.CLOSE_PAREN: frozenset({TokenType.NUMBER, TokenType.CLOSE_PAREN}),
    TokenType.NUMBER: frozenset({None, TokenType.OPERATOR, TokenType.OPEN_PAREN}),
    TokenType.OPERATOR: frozenset({TokenType.NUMBER, TokenType.CLOSE_PAREN}),
}

# Token types an expression may not end with
_DANGLING: frozenset[TokenType] = frozenset({TokenType.OPERATOR, TokenType.OPEN_PAREN})


class Validator:
    """Arithmetic-expression grammar checker.

    Usage:
            >>> from calclex.lexer import Scanner
            >>> expression = Validator().validate(Scanner("(1+2)*3"))
            >>> len(expression)
        7

    Scanner errors (InvalidArgumentError, InvalidTokenError) propagate
    unchanged; grammar violations raise InvalidExpressionError or
    InvalidBraceSequenceError.

    """

    __slots__ = ()

    def validate(self, source: TokenSource) -> Expression:
        """Consume source and return the validated expression.

        Args:
            source: Token source, usually a fresh Scanner

        Returns:
            Expression holding every token in source order

        Raises:
            InvalidExpressionError: Token in a forbidden position, or the
                expression ends with an operator or open paren
            InvalidBraceSequenceError: Open paren never closed
            ScanError: Whatever the token source raises
        """
        reject_empty = get_scan_config().reject_empty_expression
        try:
            tokens = self._validate_tokens(source, reject_empty)
        except ValidationError as exc:
            logger.debug("Rejected expression: %s", exc)
            raise
        return Expression(tuple(tokens))

    def _validate_tokens(self, source: TokenSource, reject_empty: bool) -> list[Token]:
        tokens: list[Token] = []
        braces: list[int] = []  # Offsets of unmatched open parens

        while True:
            try:
                offset, token = source.next_token()
            except NoMoreTokens:
                break

            previous = tokens[-1].type if tokens else None

            if token.type is TokenType.OPEN_PAREN:
                braces.append(offset)
            elif token.type is TokenType.CLOSE_PAREN:
                if not braces:
                    raise InvalidExpressionError(offset)
                braces.pop()

            if previous not in _ALLOWED_PREDECESSORS[token.type]:
                raise InvalidExpressionError(offset)

            tokens.append(token)

        end = len(source.source)
        if tokens and tokens[-1].type in _DANGLING:
            raise InvalidExpressionError(end)
        if braces:
            raise InvalidBraceSequenceError(braces[-1])
        if not tokens and reject_empty:
            raise InvalidExpressionError(end)
        return tokens
