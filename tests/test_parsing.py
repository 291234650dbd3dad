"""Tests for parsing aligned strings into items and columns."""

import pytest

from dnds.core.alignment import AlignedColumn, Gap, Invalid, Present, Unknown
from dnds.core.codons import AminoAcid, Codon, Nucleotide
from dnds.errors import LengthMismatchError, ParseError
from dnds.io.parsing import (
    aligned_str_to_codons,
    pair_columns,
    pairwise_str_to_amino_acid_columns,
    pairwise_str_to_codon_columns,
    pairwise_str_to_nucleotide_columns,
    parse_amino_acid,
    parse_codon,
    parse_nucleotide,
    str_to_amino_acids,
    str_to_codons,
    str_to_nucleotides,
)


def pc(text: str) -> Present:
    return Present(Codon.from_str(text))


class TestParseItems:
    """Tests for single-token parsers."""

    def test_parse_nucleotide(self) -> None:
        assert parse_nucleotide("A") == Present(Nucleotide.A)
        assert parse_nucleotide("t") == Present(Nucleotide.T)
        assert parse_nucleotide("N") == Unknown()
        assert parse_nucleotide("n") == Unknown()
        assert parse_nucleotide("-") == Gap()
        assert isinstance(parse_nucleotide("R"), Invalid)

    def test_parse_codon(self) -> None:
        assert parse_codon("ATG") == pc("ATG")
        assert parse_codon("NNN") == Unknown()
        assert parse_codon("---") == Gap()
        assert isinstance(parse_codon("atg"), Invalid)
        assert isinstance(parse_codon("AT-"), Invalid)
        assert isinstance(parse_codon("ANG"), Invalid)

    def test_parse_amino_acid_one_letter(self) -> None:
        assert parse_amino_acid("M") == Present(AminoAcid.MET)
        assert parse_amino_acid("m") == Present(AminoAcid.MET)
        assert parse_amino_acid("*") == Present(AminoAcid.STOP)
        assert parse_amino_acid("X") == Unknown()
        assert parse_amino_acid("-") == Gap()
        assert isinstance(parse_amino_acid("B"), Invalid)

    def test_parse_amino_acid_three_letter(self) -> None:
        assert parse_amino_acid("Met") == Present(AminoAcid.MET)
        assert parse_amino_acid("TRP") == Present(AminoAcid.TRP)
        assert parse_amino_acid("Ter") == Present(AminoAcid.STOP)
        assert parse_amino_acid("Unk") == Unknown()
        assert parse_amino_acid("Gap") == Gap()
        assert isinstance(parse_amino_acid("Xyz"), Invalid)

    def test_parse_amino_acid_bad_length(self) -> None:
        assert isinstance(parse_amino_acid("Me"), Invalid)

    def test_unwrap(self) -> None:
        assert pc("ATG").unwrap() == Codon.from_str("ATG")
        for item in (Gap(), Unknown(), Invalid("x")):
            with pytest.raises(ValueError):
                item.unwrap()


class TestAlignedStrings:
    """Tests for tokenizing aligned sequences."""

    def test_codons_len_9(self) -> None:
        assert aligned_str_to_codons("ATGCGCTTT") == [pc("ATG"), pc("CGC"), pc("TTT")]

    @pytest.mark.parametrize("seq", ["ATGCGCTT", "ATGCGCTTTG"])
    def test_codons_length_not_multiple_of_3(self, seq: str) -> None:
        with pytest.raises(LengthMismatchError):
            aligned_str_to_codons(seq)

    def test_codons_empty(self) -> None:
        assert aligned_str_to_codons("") == []

    def test_paired_nucleotides(self) -> None:
        result = pairwise_str_to_nucleotide_columns("ATG-A", "AT-NA")
        assert result == [
            AlignedColumn(Present(Nucleotide.A), Present(Nucleotide.A), 1),
            AlignedColumn(Present(Nucleotide.T), Present(Nucleotide.T), 2),
            AlignedColumn(Present(Nucleotide.G), Gap(), 3),
            AlignedColumn(Gap(), Unknown(), 4),
            AlignedColumn(Present(Nucleotide.A), Present(Nucleotide.A), 5),
        ]

    def test_paired_amino_acids(self) -> None:
        result = pairwise_str_to_amino_acid_columns("M-GY*", "MGGY*")
        assert result[1] == AlignedColumn(Gap(), Present(AminoAcid.GLY), 2)
        assert result[4] == AlignedColumn(Present(AminoAcid.STOP), Present(AminoAcid.STOP), 5)

    def test_paired_codons(self) -> None:
        result = pairwise_str_to_codon_columns("ATGATATTTTGA", "ATG---TCTTGA")
        assert result == [
            AlignedColumn(pc("ATG"), pc("ATG"), 1),
            AlignedColumn(pc("ATA"), Gap(), 2),
            AlignedColumn(pc("TTT"), pc("TCT"), 3),
            AlignedColumn(pc("TGA"), pc("TGA"), 4),
        ]

    def test_pair_columns_unequal_length(self) -> None:
        with pytest.raises(LengthMismatchError):
            pair_columns([Gap()], [Gap(), Gap()])


class TestAlignedColumnPredicates:
    """Tests for AlignedColumn state queries."""

    def test_predicates(self) -> None:
        column = AlignedColumn(Gap(), Unknown(), 1)
        assert not column.both_valid()
        assert not column.any_valid()
        assert column.any_gap() and not column.both_gap()
        assert column.any_unknown() and not column.both_unknown()
        assert not column.any_invalid()

        column = AlignedColumn(Invalid("a"), Invalid("b"), 2)
        assert column.both_invalid()

        column = AlignedColumn(pc("ATG"), Gap(), 3)
        assert column.any_valid() and not column.both_valid()
        with pytest.raises(ValueError):
            column.unwrap()


class TestStrictConversion:
    """Tests for strict string conversion."""

    def test_str_to_codons(self) -> None:
        assert str_to_codons("ATGCGCTTT") == [Codon.from_str(c) for c in ("ATG", "CGC", "TTT")]
        assert str_to_codons("") == []

    def test_str_to_codons_errors(self) -> None:
        with pytest.raises(LengthMismatchError):
            str_to_codons("ATGCG")
        with pytest.raises(ParseError, match="position 2"):
            str_to_codons("ATG---")

    def test_str_to_nucleotides(self) -> None:
        assert str_to_nucleotides("ACgt") == [Nucleotide.A, Nucleotide.C, Nucleotide.G, Nucleotide.T]
        with pytest.raises(ParseError):
            str_to_nucleotides("ACN")

    def test_str_to_amino_acids(self) -> None:
        assert str_to_amino_acids("MA*") == [AminoAcid.MET, AminoAcid.ALA, AminoAcid.STOP]
        with pytest.raises(ParseError):
            str_to_amino_acids("MX")
