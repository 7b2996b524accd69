"""
calclex — Arithmetic Expression Scanner and Validator

Turns expression text (digits, ``+ - * /``, parentheses, whitespace) into a
flat, grammar-checked token sequence ready for an evaluator.
No precedence handling and no AST; zero runtime dependencies.

Quick Start:
    >>> from calclex import parse
    >>> expression = parse("(1 + 2) * 3")
    >>> list(expression)
    [Token(OPEN_PAREN), Token(NUMBER, 1.0), Token(OPERATOR, '+'), Token(NUMBER, 2.0),
     Token(CLOSE_PAREN), Token(OPERATOR, '*'), Token(NUMBER, 3.0)]

    >>> # Or drive the stages yourself
    >>> from calclex import Scanner, Validator
    >>> expression = Validator().validate(Scanner("4 / 2"))

Errors:
    >>> from calclex import CalcLexError
    >>> try:
    ...     parse("1 +")
    ... except CalcLexError as exc:
    ...     print(exc.offset)
    3

Installation:
    pip install calclex
"""

from calclex.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from calclex.errors import (
    CalcLexError,
    InvalidArgumentError,
    InvalidBraceSequenceError,
    InvalidExpressionError,
    InvalidTokenError,
    NoMoreTokens,
    ScanError,
    ValidationError,
)
from calclex.expression import Expression
from calclex.lexer import Scanner
from calclex.protocols import TokenSource
from calclex.tokens import OPERATORS, Token, TokenType
from calclex.validator import Validator

__version__ = "0.1.0"


def parse(text: str) -> Expression:
    """Scan and validate an arithmetic expression.

    Args:
        text: Expression source text

    Returns:
        Validated Expression (empty for whitespace-only text)

    Raises:
        InvalidArgumentError: text is empty
        InvalidTokenError: a numeric run could not be parsed
        InvalidExpressionError: a token is out of place
        InvalidBraceSequenceError: an open paren is never closed

    Example:
        >>> parse("2*(3+4)")[2]
        Token(OPEN_PAREN)
    """
    return Validator().validate(Scanner(text))


def tokenize(text: str) -> list[tuple[int, Token]]:
    """Scan text into (offset, token) pairs without grammar checks.

    Example:
        >>> tokenize("1 1")
        [(0, Token(NUMBER, 1.0)), (2, Token(NUMBER, 1.0))]
    """
    return list(Scanner(text).tokenize())


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "parse",
    "tokenize",
    # Components
    "Scanner",
    "Validator",
    "TokenSource",
    # Data
    "Expression",
    "OPERATORS",
    "Token",
    "TokenType",
    # Errors
    "CalcLexError",
    "ScanError",
    "InvalidArgumentError",
    "InvalidTokenError",
    "NoMoreTokens",
    "ValidationError",
    "InvalidExpressionError",
    "InvalidBraceSequenceError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
