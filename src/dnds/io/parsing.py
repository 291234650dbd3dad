"""Conversion of aligned sequence strings into typed items and columns."""

from __future__ import annotations

from typing import Sequence, TypeVar

from dnds.core.alignment import AlignedColumn, Gap, Invalid, Present, SequenceItem, Unknown
from dnds.core.codons import AminoAcid, Codon, Nucleotide
from dnds.errors import LengthMismatchError, ParseError

T = TypeVar("T")


def parse_nucleotide(char: str) -> SequenceItem[Nucleotide]:
    """Parse one alignment character as a nucleotide.

    A, C, G, T (either case) are present, N (either case) is unknown,
    '-' is a gap, and anything else is invalid.
    """
    upper = char.upper()
    if upper in ("A", "C", "G", "T"):
        return Present(Nucleotide(upper))
    if upper == "N":
        return Unknown()
    if char == "-":
        return Gap()
    return Invalid(f"Unrecognized nucleotide {char!r}")


def parse_codon(triplet: str) -> SequenceItem[Codon]:
    """Parse a 3-character string as a codon.

    Only the 64 uppercase canonical triplets are present. 'NNN' is unknown
    and '---' is a gap; every other triplet is invalid.
    """
    if triplet == "NNN":
        return Unknown()
    if triplet == "---":
        return Gap()
    try:
        return Present(Codon.from_str(triplet))
    except ValueError:
        return Invalid(f"Unrecognized codon {triplet!r}")


def parse_amino_acid(token: str) -> SequenceItem[AminoAcid]:
    """Parse a one- or three-letter amino acid code.

    One-letter: IUPAC codes, '*' for stop, 'X' unknown, '-' gap.
    Three-letter: 'Ala'..'Val', 'Ter' for stop, 'Unk' unknown, 'Gap' gap.
    Both forms are case-insensitive.
    """
    if len(token) == 1:
        if token.upper() == "X":
            return Unknown()
        if token == "-":
            return Gap()
        try:
            return Present(AminoAcid.from_one_letter(token))
        except ValueError:
            return Invalid(f"Unrecognized amino acid {token!r}")
    if len(token) == 3:
        if token.lower() == "unk":
            return Unknown()
        if token.lower() == "gap":
            return Gap()
        try:
            return Present(AminoAcid.from_three_letter(token))
        except ValueError:
            return Invalid(f"Unrecognized amino acid {token!r}")
    return Invalid(f"Amino acid code must be 1 or 3 characters, got {token!r}")


def split_codons(sequence: str) -> list[str]:
    """Split a nucleotide string into triplets.

    Raises:
        LengthMismatchError: If the length is not a multiple of 3
    """
    if len(sequence) % 3 != 0:
        raise LengthMismatchError(
            f"Sequence length {len(sequence)} is not a multiple of 3"
        )
    return [sequence[i : i + 3] for i in range(0, len(sequence), 3)]


def aligned_str_to_nucleotides(sequence: str) -> list[SequenceItem[Nucleotide]]:
    return [parse_nucleotide(c) for c in sequence]


def aligned_str_to_codons(sequence: str) -> list[SequenceItem[Codon]]:
    """Tokenize an aligned nucleotide string into codon items.

    Raises:
        LengthMismatchError: If the length is not a multiple of 3
    """
    return [parse_codon(t) for t in split_codons(sequence)]


def aligned_str_to_amino_acids(sequence: str) -> list[SequenceItem[AminoAcid]]:
    return [parse_amino_acid(c) for c in sequence]


def pair_columns(
    items1: Sequence[SequenceItem[T]],
    items2: Sequence[SequenceItem[T]],
) -> list[AlignedColumn[T]]:
    """Zip two aligned item sequences into columns with 1-based positions.

    Raises:
        LengthMismatchError: If the sequences differ in length
    """
    if len(items1) != len(items2):
        raise LengthMismatchError(
            f"Aligned sequences differ in length: {len(items1)} vs {len(items2)}"
        )
    return [
        AlignedColumn(first, second, position)
        for position, (first, second) in enumerate(zip(items1, items2), start=1)
    ]


def pairwise_str_to_nucleotide_columns(seq1: str, seq2: str) -> list[AlignedColumn[Nucleotide]]:
    return pair_columns(aligned_str_to_nucleotides(seq1), aligned_str_to_nucleotides(seq2))


def pairwise_str_to_codon_columns(seq1: str, seq2: str) -> list[AlignedColumn[Codon]]:
    return pair_columns(aligned_str_to_codons(seq1), aligned_str_to_codons(seq2))


def pairwise_str_to_amino_acid_columns(seq1: str, seq2: str) -> list[AlignedColumn[AminoAcid]]:
    return pair_columns(aligned_str_to_amino_acids(seq1), aligned_str_to_amino_acids(seq2))


def _strict(items: list[SequenceItem[T]], tokens: Sequence[str], kind: str) -> list[T]:
    values = []
    for i, (item, token) in enumerate(zip(items, tokens), start=1):
        if not isinstance(item, Present):
            raise ParseError(f"Invalid {kind} {token!r} at position {i}")
        values.append(item.value)
    return values


def str_to_nucleotides(sequence: str) -> list[Nucleotide]:
    """Convert an ungapped string to nucleotides.

    Raises:
        ParseError: On any gap, unknown, or unrecognized character
    """
    return _strict(aligned_str_to_nucleotides(sequence), sequence, "nucleotide")


def str_to_codons(sequence: str) -> list[Codon]:
    """Convert an ungapped nucleotide string to codons.

    Raises:
        LengthMismatchError: If the length is not a multiple of 3
        ParseError: On any gap, unknown, or unrecognized triplet
    """
    triplets = split_codons(sequence)
    return _strict([parse_codon(t) for t in triplets], triplets, "codon")


def str_to_amino_acids(sequence: str) -> list[AminoAcid]:
    """Convert an ungapped one-letter protein string to amino acids.

    Raises:
        ParseError: On any gap, unknown, or unrecognized character
    """
    return _strict(aligned_str_to_amino_acids(sequence), sequence, "amino acid")
