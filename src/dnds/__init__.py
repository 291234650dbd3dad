"""dnds: Nei-Gojobori synonymous and nonsynonymous site and difference counts."""

__version__ = "0.1.0"

from dnds.core.codons import AminoAcid, Codon, GeneticCode, Nucleotide
from dnds.analysis.sites import count_sites, count_sites_single_codon
from dnds.analysis.differences import count_differences
from dnds.analysis.aggregate import (
    PairwiseCounts,
    count_alignment,
    count_total_differences,
    count_total_sites,
)

__all__ = [
    "Nucleotide",
    "Codon",
    "AminoAcid",
    "GeneticCode",
    "count_sites_single_codon",
    "count_sites",
    "count_differences",
    "count_total_sites",
    "count_total_differences",
    "count_alignment",
    "PairwiseCounts",
]
