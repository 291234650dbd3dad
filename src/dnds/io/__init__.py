"""Input/output utilities."""

from dnds.io.fasta import Sequence, read_fasta, select_pair, write_fasta
from dnds.io.output import OutputFormat, format_batch_results, format_result
from dnds.io.parsing import (
    pair_columns,
    pairwise_str_to_codon_columns,
    parse_amino_acid,
    parse_codon,
    parse_nucleotide,
    str_to_codons,
)

__all__ = [
    "Sequence",
    "read_fasta",
    "write_fasta",
    "select_pair",
    "format_result",
    "format_batch_results",
    "OutputFormat",
    "parse_nucleotide",
    "parse_codon",
    "parse_amino_acid",
    "pair_columns",
    "pairwise_str_to_codon_columns",
    "str_to_codons",
]
