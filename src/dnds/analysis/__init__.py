"""Site and difference counting."""

from dnds.analysis.aggregate import (
    PairwiseCounts,
    count_alignment,
    count_total_differences,
    count_total_sites,
    keep_valid_sites,
)
from dnds.analysis.differences import count_differences
from dnds.analysis.sites import count_sites, count_sites_single_codon

__all__ = [
    "count_sites_single_codon",
    "count_sites",
    "count_differences",
    "keep_valid_sites",
    "count_total_sites",
    "count_total_differences",
    "count_alignment",
    "PairwiseCounts",
]
