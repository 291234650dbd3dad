"""Site and difference totals over a pairwise codon alignment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, TypeVar

import numpy as np

from dnds.analysis.differences import count_differences
from dnds.analysis.sites import count_sites
from dnds.core.alignment import AlignedColumn
from dnds.core.codons import DEFAULT_CODE, Codon, GeneticCode
from dnds.errors import StopCodonError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PairCounter = Callable[[Codon, Codon, GeneticCode], tuple[float, float]]


@dataclass
class PairwiseCounts:
    """Site and difference totals for two aligned coding sequences."""

    synonymous_sites: float
    nonsynonymous_sites: float
    synonymous_differences: float
    nonsynonymous_differences: float
    num_codons: int
    num_skipped: int = 0

    def __str__(self) -> str:
        lines = [
            "Nei-Gojobori Counts:",
            f"  Codons compared: {self.num_codons} ({self.num_skipped} columns skipped)",
            f"  Sites:           S={self.synonymous_sites:.4f}, N={self.nonsynonymous_sites:.4f}",
            f"  Differences:     Sd={self.synonymous_differences:.4f}, "
            f"Nd={self.nonsynonymous_differences:.4f}",
        ]
        return "\n".join(lines)

    def to_dict(self) -> dict:
        """Convert results to a dictionary."""
        return {
            "synonymous_sites": self.synonymous_sites,
            "nonsynonymous_sites": self.nonsynonymous_sites,
            "synonymous_differences": self.synonymous_differences,
            "nonsynonymous_differences": self.nonsynonymous_differences,
            "num_codons": self.num_codons,
            "num_skipped": self.num_skipped,
        }


def keep_valid_sites(columns: Iterable[AlignedColumn[T]]) -> list[AlignedColumn[T]]:
    """Keep only columns where both sequences hold a present value.

    Gaps, unknowns, and unparseable tokens are dropped silently.
    """
    kept = []
    for column in columns:
        if column.both_valid():
            kept.append(column)
        else:
            logger.debug("Skipping column %d: %r / %r", column.position, column.first, column.second)
    return kept


def _sum_pairs(
    columns: Iterable[AlignedColumn[Codon]],
    counter: PairCounter,
    code: GeneticCode,
) -> tuple[float, float]:
    """Apply a pairwise counter to each valid column and sum the results."""
    counts = []
    for column in keep_valid_sites(columns):
        codon1, codon2 = column.unwrap()
        try:
            counts.append(counter(codon1, codon2, code))
        except StopCodonError as e:
            raise StopCodonError(*e.codons, position=column.position) from e

    totals = np.sum(np.asarray(counts, dtype=np.float64).reshape(-1, 2), axis=0)
    return float(totals[0]), float(totals[1])


def count_total_sites(
    columns: Iterable[AlignedColumn[Codon]],
    code: GeneticCode = DEFAULT_CODE,
) -> tuple[float, float]:
    """Sum synonymous and nonsynonymous sites over an alignment.

    Args:
        columns: Aligned codon columns
        code: Genetic code used for translation

    Returns:
        Tuple of (total S, total N)

    Raises:
        StopCodonError: If any compared column holds a stop codon. No
            partial totals are returned.
    """
    return _sum_pairs(columns, count_sites, code)


def count_total_differences(
    columns: Iterable[AlignedColumn[Codon]],
    code: GeneticCode = DEFAULT_CODE,
) -> tuple[float, float]:
    """Sum synonymous and nonsynonymous differences over an alignment.

    Returns:
        Tuple of (total Sd, total Nd)

    Raises:
        StopCodonError: If any compared column with differing codons holds
            a stop codon
    """
    return _sum_pairs(columns, count_differences, code)


def count_alignment(
    columns: Iterable[AlignedColumn[Codon]],
    code: GeneticCode = DEFAULT_CODE,
) -> PairwiseCounts:
    """Compute site and difference totals for a pairwise codon alignment."""
    columns = list(columns)
    valid = keep_valid_sites(columns)
    s, n = count_total_sites(valid, code)
    sd, nd = count_total_differences(valid, code)
    return PairwiseCounts(
        synonymous_sites=s,
        nonsynonymous_sites=n,
        synonymous_differences=sd,
        nonsynonymous_differences=nd,
        num_codons=len(valid),
        num_skipped=len(columns) - len(valid),
    )
