"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from calclex.lexer.charsets import DIGITS

    if char in DIGITS:  # O(1) lookup
        ...
"""

from calclex.tokens import OPERATORS

# ASCII only; str.isdigit() would also accept other scripts' digits
DIGITS: frozenset[str] = frozenset("0123456789")

DECIMAL_POINT = "."

# Characters a numeric run may contain
NUMBER_CHARS: frozenset[str] = DIGITS | frozenset(DECIMAL_POINT)

# Vertical tab is deliberately absent
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f")

OPEN_PAREN = "("
CLOSE_PAREN = ")"

__all__ = [
    "CLOSE_PAREN",
    "DECIMAL_POINT",
    "DIGITS",
    "NUMBER_CHARS",
    "OPEN_PAREN",
    "OPERATORS",
    "WHITESPACE",
]
