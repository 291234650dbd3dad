"""Genetic code and codon utilities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from dnds.data.genetic_codes import (
    AMINO_ACID_NAMES,
    CODONS,
    START_CODON,
    STANDARD_CODE,
)


class Nucleotide(Enum):
    """One of the four unambiguous DNA bases."""

    A = "A"
    C = "C"
    G = "G"
    T = "T"

    def __str__(self) -> str:
        return self.value


class AminoAcid(Enum):
    """The 20 standard amino acids plus the stop marker."""

    ALA = "A"
    ARG = "R"
    ASN = "N"
    ASP = "D"
    CYS = "C"
    GLU = "E"
    GLN = "Q"
    GLY = "G"
    HIS = "H"
    ILE = "I"
    LEU = "L"
    LYS = "K"
    MET = "M"
    PHE = "F"
    PRO = "P"
    SER = "S"
    THR = "T"
    TRP = "W"
    TYR = "Y"
    VAL = "V"
    STOP = "*"

    def __str__(self) -> str:
        return self.value

    @property
    def one_letter(self) -> str:
        """IUPAC one-letter code ('*' for stop)."""
        return self.value

    @property
    def three_letter(self) -> str:
        """Three-letter code ('Ter' for stop)."""
        return AMINO_ACID_NAMES[self.value]

    @property
    def is_stop(self) -> bool:
        return self is AminoAcid.STOP

    @classmethod
    def from_one_letter(cls, letter: str) -> AminoAcid:
        """Look up an amino acid by one-letter code (case-insensitive).

        Raises:
            ValueError: If the letter is not a standard code or '*'
        """
        return cls(letter.upper())

    @classmethod
    def from_three_letter(cls, name: str) -> AminoAcid:
        """Look up an amino acid by three-letter code (case-insensitive).

        Raises:
            ValueError: If the name is not a standard code or 'Ter'
        """
        try:
            return _BY_THREE_LETTER[name.lower()]
        except KeyError:
            raise ValueError(f"{name!r} is not a valid three-letter amino acid code") from None

    def backtranslate(self, code: GeneticCode | None = None) -> list[Codon]:
        """Return the codons encoding this amino acid, in alphabetical order."""
        code = code if code is not None else DEFAULT_CODE
        return [c for c in ALL_CODONS if code.translate(c) is self]


_BY_THREE_LETTER = {aa.three_letter.lower(): aa for aa in AminoAcid}


@dataclass(frozen=True)
class Codon:
    """An ordered triple of nucleotides.

    Every combination of three Nucleotides is a valid codon, so the 64
    values are closed by construction.
    """

    first: Nucleotide
    second: Nucleotide
    third: Nucleotide

    def __str__(self) -> str:
        return f"{self.first}{self.second}{self.third}"

    def __repr__(self) -> str:
        return f"Codon('{self}')"

    def __getitem__(self, position: int) -> Nucleotide:
        return self.to_nucleotides()[position]

    @classmethod
    def from_str(cls, text: str) -> Codon:
        """Build a codon from a 3-character uppercase string.

        Raises:
            ValueError: If the string is not one of the 64 canonical triplets
        """
        if len(text) != 3:
            raise ValueError(f"Codon string must be 3 characters long, got {text!r}")
        return cls(Nucleotide(text[0]), Nucleotide(text[1]), Nucleotide(text[2]))

    @classmethod
    def from_nucleotides(cls, n1: Nucleotide, n2: Nucleotide, n3: Nucleotide) -> Codon:
        return cls(n1, n2, n3)

    @classmethod
    def all(cls) -> tuple[Codon, ...]:
        """All 64 codons in alphabetical order."""
        return ALL_CODONS

    def to_nucleotides(self) -> tuple[Nucleotide, Nucleotide, Nucleotide]:
        return (self.first, self.second, self.third)

    def replace_at(self, position: int, nucleotide: Nucleotide) -> Codon:
        """Return a copy with the nucleotide at `position` (0-2) replaced."""
        bases = list(self.to_nucleotides())
        bases[position] = nucleotide
        return Codon(*bases)

    def translate(self) -> AminoAcid:
        return DEFAULT_CODE.translate(self)

    def is_start_codon(self) -> bool:
        return DEFAULT_CODE.is_start_codon(self)

    def is_stop_codon(self) -> bool:
        return DEFAULT_CODE.is_stop_codon(self)

    def is_synonymous_change(self, other: Codon) -> bool:
        return DEFAULT_CODE.is_synonymous_change(self, other)


ALL_CODONS: tuple[Codon, ...] = tuple(Codon.from_str(c) for c in CODONS)


class GeneticCode:
    """Represents a genetic code for codon translation."""

    def __init__(self, code: dict[str, str] | None = None):
        """Initialize with a codon-to-amino-acid mapping.

        Args:
            code: Dict mapping all 64 codons to one-letter amino acids
                  ('*' for stop). Uses the standard code if not provided.

        Raises:
            ValueError: If the mapping does not cover all 64 codons
        """
        self.code = code if code is not None else STANDARD_CODE
        missing = set(CODONS) - set(self.code)
        if missing:
            raise ValueError(f"Genetic code is missing codons: {', '.join(sorted(missing))}")
        self._table: dict[Codon, AminoAcid] = {
            codon: AminoAcid.from_one_letter(self.code[str(codon)]) for codon in ALL_CODONS
        }
        self._start = Codon.from_str(START_CODON)

    def translate(self, codon: Codon) -> AminoAcid:
        """Translate a codon to its amino acid (AminoAcid.STOP for stop codons)."""
        return self._table[codon]

    def translate_sequence(self, codons: Iterable[Codon]) -> str:
        """Translate codons to a one-letter amino acid string."""
        return "".join(self._table[c].one_letter for c in codons)

    def is_start_codon(self, codon: Codon) -> bool:
        return codon == self._start

    def is_stop_codon(self, codon: Codon) -> bool:
        return self._table[codon].is_stop

    @property
    def stop_codons(self) -> list[Codon]:
        return [c for c in ALL_CODONS if self.is_stop_codon(c)]

    def is_synonymous_change(self, codon1: Codon, codon2: Codon) -> bool:
        """Check whether two codons encode the same amino acid.

        Only two codons translating to the same non-stop amino acid count
        as synonymous. Stop to stop is classified as nonsynonymous.
        """
        aa1 = self._table[codon1]
        aa2 = self._table[codon2]
        return aa1 is aa2 and not aa1.is_stop


# Default genetic code instance
DEFAULT_CODE = GeneticCode()


def to_nucleotides(codon: Codon) -> tuple[Nucleotide, Nucleotide, Nucleotide]:
    return codon.to_nucleotides()


def from_nucleotides(n1: Nucleotide, n2: Nucleotide, n3: Nucleotide) -> Codon:
    return Codon(n1, n2, n3)


def translate(codon: Codon) -> AminoAcid:
    return DEFAULT_CODE.translate(codon)


def is_start_codon(codon: Codon) -> bool:
    return DEFAULT_CODE.is_start_codon(codon)


def is_stop_codon(codon: Codon) -> bool:
    return DEFAULT_CODE.is_stop_codon(codon)
