"""Exceptions raised by dnds."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dnds.core.codons import Codon


class DndsError(ValueError):
    """Base class for all dnds errors."""


class ParseError(DndsError):
    """A character or triplet could not be converted to a sequence value."""


class LengthMismatchError(DndsError):
    """Sequence length is incompatible with the requested tokenization.

    Raised when a nucleotide string is not a multiple of 3 long, or when
    two aligned sequences do not have the same number of items.
    """


class StopCodonError(DndsError):
    """A stop codon was passed to a counting function."""

    def __init__(self, *codons: Codon, position: int | None = None) -> None:
        self.codons = codons
        self.position = position
        message = "Stop codon not allowed (codons: " + ", ".join(str(c) for c in codons) + ")"
        if position is not None:
            message += f" at alignment column {position}"
        super().__init__(message)


class NoValidPathwayError(DndsError):
    """Every mutation pathway between two codons passes through a stop codon."""

    def __init__(self, codon1: Codon, codon2: Codon) -> None:
        self.codon1 = codon1
        self.codon2 = codon2
        super().__init__(
            f"No mutation pathway from {codon1} to {codon2} avoids a stop codon"
        )
