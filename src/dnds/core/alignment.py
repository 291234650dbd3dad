"""Sequence items and pairwise alignment columns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A recognized value at one position of a sequence."""

    value: T

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Gap:
    """An alignment gap ('-' or '---')."""

    def unwrap(self):  # type: ignore[no-untyped-def]
        raise ValueError("Cannot unwrap a gap")


@dataclass(frozen=True)
class Unknown:
    """A position whose value is unknown ('N', 'NNN' or 'X')."""

    def unwrap(self):  # type: ignore[no-untyped-def]
        raise ValueError("Cannot unwrap an unknown item")


@dataclass(frozen=True)
class Invalid:
    """A token that could not be parsed."""

    cause: str

    def unwrap(self):  # type: ignore[no-untyped-def]
        raise ValueError(f"Cannot unwrap an invalid item: {self.cause}")


SequenceItem = Union[Present[T], Gap, Unknown, Invalid]


@dataclass(frozen=True)
class AlignedColumn(Generic[T]):
    """One aligned site across two sequences.

    Attributes:
        first: Item from the first sequence
        second: Item from the second sequence
        position: 1-based column index in the alignment
    """

    first: SequenceItem[T]
    second: SequenceItem[T]
    position: int

    def _count(self, kind: type) -> int:
        return isinstance(self.first, kind) + isinstance(self.second, kind)

    def both_valid(self) -> bool:
        """Both sides hold a present value."""
        return self._count(Present) == 2

    def any_valid(self) -> bool:
        return self._count(Present) > 0

    def both_gap(self) -> bool:
        return self._count(Gap) == 2

    def any_gap(self) -> bool:
        return self._count(Gap) > 0

    def both_unknown(self) -> bool:
        return self._count(Unknown) == 2

    def any_unknown(self) -> bool:
        return self._count(Unknown) > 0

    def both_invalid(self) -> bool:
        return self._count(Invalid) == 2

    def any_invalid(self) -> bool:
        return self._count(Invalid) > 0

    def unwrap(self) -> tuple[T, T]:
        """Return both present values.

        Raises:
            ValueError: If either side is not present
        """
        return self.first.unwrap(), self.second.unwrap()
