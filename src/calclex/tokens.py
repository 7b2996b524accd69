"""Token and TokenType definitions for the calclex scanner.

The scanner produces (offset, Token) pairs that the validator consumes.
A Token has a type and a value; the offset travels next to it rather than
inside it, so two tokens with the same type and value compare equal no
matter where they came from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto

# The four binary operators recognised by the scanner
OPERATORS: frozenset[str] = frozenset("+-*/")


class TokenType(Enum):
    """Token types produced by the scanner."""

    NUMBER = auto()  # 12, 3.5, .5, 7.
    OPERATOR = auto()  # + - * /
    OPEN_PAREN = auto()  # (
    CLOSE_PAREN = auto()  # )


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: float for NUMBER, the operator character for OPERATOR,
            None for parentheses

    Use the classmethod constructors rather than building tokens by hand:

            >>> Token.number(2)
        Token(NUMBER, 2.0)
            >>> Token.operator("*")
        Token(OPERATOR, '*')

    """

    type: TokenType
    value: float | str | None = None

    @classmethod
    def number(cls, value: float) -> "Token":
        return cls(TokenType.NUMBER, float(value))

    @classmethod
    def operator(cls, symbol: str) -> "Token":
        if symbol not in OPERATORS:
            raise ValueError(f"Unknown operator {symbol!r}")
        return cls(TokenType.OPERATOR, symbol)

    @classmethod
    def open_paren(cls) -> "Token":
        return cls(TokenType.OPEN_PAREN)

    @classmethod
    def close_paren(cls) -> "Token":
        return cls(TokenType.CLOSE_PAREN)

    @property
    def is_number(self) -> bool:
        return self.type is TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type is TokenType.OPERATOR

    @property
    def is_open_paren(self) -> bool:
        return self.type is TokenType.OPEN_PAREN

    @property
    def is_close_paren(self) -> bool:
        return self.type is TokenType.CLOSE_PAREN

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"
