"""Validated expression container."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import overload

from calclex.tokens import Token


@dataclass(frozen=True, slots=True)
class Expression:
    """An ordered, grammar-checked token sequence.

    Only the Validator creates these. On success the sequence has balanced
    parentheses and no operator at either end or next to another operator.
    An expression built from whitespace-only input is empty (and falsy);
    callers that evaluate it should treat that case themselves.

    Attributes:
        tokens: The validated tokens, in source order

    Thread Safety:
        Frozen dataclass over a tuple; safe to share across threads.

    """

    tokens: tuple[Token, ...] = ()

    def __len__(self) -> int:
        return len(self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __bool__(self) -> bool:
        return bool(self.tokens)

    @overload
    def __getitem__(self, index: int) -> Token: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Token, ...]: ...

    def __getitem__(self, index: int | slice) -> Token | tuple[Token, ...]:
        return self.tokens[index]

    def to_list(self) -> list[Token]:
        """Return the tokens as a new list."""
        return list(self.tokens)
