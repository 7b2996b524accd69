"""Exception classes for calclex.

Scanner errors (ScanError) and grammar errors (ValidationError) share the
CalcLexError base so callers can catch everything with a single clause.
The validator lets scanner errors through untouched, so the offset and
offending character reach the caller exactly as the scanner reported them.
"""

from __future__ import annotations


class CalcLexError(Exception):
    """Base exception for all calclex errors.

    Attributes:
        offset: Position in the source the error refers to, or None
    """

    offset: int | None = None


class ScanError(CalcLexError):
    """Error raised by the scanner while reading source text."""

    pass


class InvalidArgumentError(ScanError):
    """Raised when a Scanner is constructed from an empty string."""

    def __init__(self, message: str = "Invalid argument") -> None:
        super().__init__(message)


class InvalidTokenError(ScanError):
    """A digit-like run could not be parsed as a number.

    Raised for inputs like ``"1.2.3"``, ``"."`` or any character outside
    the expression alphabet.
    """

    def __init__(self, offset: int, character: str) -> None:
        """Initialize invalid token error.

        Args:
            offset: Position where the rejected run began
            character: First character of the rejected run
        """
        self.offset = offset
        self.character = character
        super().__init__(f"Found invalid token {character!r} at position {offset}")


class ValidationError(CalcLexError):
    """Error raised by the validator for structurally invalid expressions."""

    def __init__(self, offset: int, message: str) -> None:
        self.offset = offset
        super().__init__(f"{message} at position {offset}")


class InvalidExpressionError(ValidationError):
    """A token appears where the grammar forbids it.

    Covers stray or leading operators, unmatched close-parens, adjacent
    numbers and trailing operators or open-parens. For trailing tokens the
    offset is the length of the source text.
    """

    def __init__(self, offset: int) -> None:
        super().__init__(offset, "Invalid expression")


class InvalidBraceSequenceError(ValidationError):
    """One or more open-parens were never closed.

    The offset is that of the innermost unmatched open-paren.
    """

    def __init__(self, offset: int) -> None:
        super().__init__(offset, "Invalid brace sequence")


class NoMoreTokens(CalcLexError):
    """End of the token stream.

    Raised by Scanner.next_token() once only whitespace remains. Used to end
    the validator's pull loop and never surfaced by Validator.validate().
    """

    def __init__(self) -> None:
        super().__init__("Token not found")
