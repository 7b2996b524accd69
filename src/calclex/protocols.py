"""Protocols for calclex.

Defines the contract between the scanner and the validator, so the
validator can be driven by any token source, not just Scanner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from calclex.tokens import Token


@runtime_checkable
class TokenSource(Protocol):
    """Protocol for objects that hand out tokens one at a time.

    Thread Safety:
        Implementations are stateful (they own a cursor) and are used by one
        caller at a time.

    """

    @property
    def source(self) -> str:
        """The full source text (read-only)."""
        ...

    @property
    def cursor(self) -> int:
        """Offset of the next unconsumed character."""
        ...

    def has_more(self) -> bool:
        """Check whether another token can be produced."""
        ...

    def next_token(self) -> tuple[int, Token]:
        """Return the next (offset, token) pair.

        Raises:
            NoMoreTokens: When the stream is exhausted
            ScanError: When the source cannot be tokenized
        """
        ...
