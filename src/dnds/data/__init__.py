"""Static data for genetic codes and codon tables."""

from dnds.data.genetic_codes import (
    AMINO_ACID_NAMES,
    CODONS,
    MUTATION_ORDERS,
    STANDARD_CODE,
)

__all__ = [
    "STANDARD_CODE",
    "AMINO_ACID_NAMES",
    "CODONS",
    "MUTATION_ORDERS",
]
