"""Scanner for calclex arithmetic expressions.

Turns raw expression text into (offset, Token) pairs, one at a time.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner
├── core.py              # Scanner class (cursor, whitespace skip, numbers)
└── charsets.py          # Character classes

Usage:
    >>> from calclex.lexer import Scanner
    >>> scanner = Scanner("2 * 3")
    >>> for offset, token in scanner.tokenize():
    ...     print(offset, token)
0 Token(NUMBER, 2.0)
2 Token(OPERATOR, '*')
4 Token(NUMBER, 3.0)

"""

from calclex.lexer.core import Scanner

__all__ = ["Scanner"]
