"""Single-pass scanner with O(n) guaranteed performance.

Uses a peek-then-commit approach: whitespace is skipped on a local copy of
the cursor, and the cursor only moves when a token is actually produced.
This keeps has_more() free of side effects and guarantees forward progress.

No regex in the hot path.

Thread Safety:
Scanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from calclex.config import get_scan_config
from calclex.errors import InvalidArgumentError, InvalidTokenError, NoMoreTokens
from calclex.lexer.charsets import (
    CLOSE_PAREN,
    DECIMAL_POINT,
    NUMBER_CHARS,
    OPEN_PAREN,
    OPERATORS,
    WHITESPACE,
)
from calclex.tokens import Token


class Scanner:
    """Lexical scanner for arithmetic expressions.

    Produces one (offset, Token) pair per call to next_token():
    1. Skip whitespace (on a local cursor)
    2. Classify the character at the new position
    3. Commit the cursor past the token

    ``+`` and ``-`` are always operators, never a numeric sign; whether an
    operator may appear at a given point is the validator's decision.

    Usage:
            >>> scanner = Scanner("(1 + 2)")
            >>> list(scanner.tokenize())
        [(0, Token(OPEN_PAREN)), (1, Token(NUMBER, 1.0)), (3, Token(OPERATOR, '+')),
         (5, Token(NUMBER, 2.0)), (6, Token(CLOSE_PAREN))]

    Thread Safety:
        Scanner instances are single-use and not safe for concurrent
        extraction. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_strict_decimal_point",
    )

    def __init__(self, source: str) -> None:
        """Initialize scanner with source text.

        Args:
            source: Expression text, must be non-empty

        Raises:
            InvalidArgumentError: If source is empty
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")
        if not source:
            raise InvalidArgumentError()

        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._strict_decimal_point = get_scan_config().strict_decimal_point

    @property
    def source(self) -> str:
        return self._source

    @property
    def cursor(self) -> int:
        """Offset of the next unconsumed character."""
        return self._pos

    def has_more(self) -> bool:
        """Check whether a non-whitespace character remains.

        Does not move the cursor; calling it repeatedly gives the same answer.
        """
        return self._skip_whitespace() < self._source_len

    def next_token(self) -> tuple[int, Token]:
        """Extract the next token.

        Returns:
            (offset, token) where offset is where the token begins

        Raises:
            NoMoreTokens: If only whitespace remains
            InvalidTokenError: If a numeric run cannot be parsed
        """
        start = self._skip_whitespace()
        if start >= self._source_len:
            raise NoMoreTokens()
        self._pos = start

        char = self._source[start]
        if char == OPEN_PAREN:
            self._pos += 1
            return start, Token.open_paren()
        if char == CLOSE_PAREN:
            self._pos += 1
            return start, Token.close_paren()
        if char in OPERATORS:
            self._pos += 1
            return start, Token.operator(char)
        return start, self._scan_number(start)

    def tokenize(self) -> Iterator[tuple[int, Token]]:
        """Scan the remaining source into (offset, token) pairs.

        Yields:
            (offset, token) pairs one at a time

        Complexity: O(n) where n = len(source)
        """
        while self.has_more():
            yield self.next_token()

    # =========================================================================
    # Scanning helpers
    # =========================================================================

    def _skip_whitespace(self) -> int:
        """Find the first non-whitespace position at or after the cursor.

        Returns:
            Position of the next non-whitespace character, or len(source).
        """
        pos = self._pos
        source = self._source
        source_len = self._source_len
        while pos < source_len and source[pos] in WHITESPACE:
            pos += 1
        return pos

    def _scan_number(self, start: int) -> Token:
        """Consume the digit run at start and parse it as a float.

        The whole run of digits and '.' is consumed before parsing, so
        "1.2.3" fails as one run rather than scanning as "1.2" plus a rest.
        With strict_decimal_point the run ends before a second '.'.

        Raises:
            InvalidTokenError: If the run is empty or not a valid number
        """
        source = self._source
        source_len = self._source_len
        pos = start
        seen_point = False
        while pos < source_len and source[pos] in NUMBER_CHARS:
            if source[pos] == DECIMAL_POINT:
                if seen_point and self._strict_decimal_point:
                    break
                seen_point = True
            pos += 1

        try:
            value = float(source[start:pos])
        except ValueError:
            raise InvalidTokenError(start, source[start]) from None

        self._pos = pos
        return Token.number(value)
