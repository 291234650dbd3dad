"""Synonymous and nonsynonymous site counting.

Implements the per-codon site weighting of Nei & Gojobori (1986): each of
the three positions of a codon is one site, split between synonymous and
nonsynonymous in proportion to the outcomes of its non-stop one-hit mutants.
"""

from __future__ import annotations

from dnds.core.codons import DEFAULT_CODE, Codon, GeneticCode
from dnds.core.mutations import one_hit_mutants
from dnds.errors import StopCodonError


def count_sites_single_codon(
    codon: Codon,
    code: GeneticCode = DEFAULT_CODE,
) -> tuple[float, float]:
    """Count synonymous and nonsynonymous sites of a single codon.

    The 9 one-hit mutants are classified after discarding stop codons, and
    the synonymous fraction is scaled to the 3 sites of the codon.

    Args:
        codon: Sense codon
        code: Genetic code used for translation

    Returns:
        Tuple of (S, N) with S + N == 3.0

    Raises:
        StopCodonError: If codon is a stop codon
    """
    if code.is_stop_codon(codon):
        raise StopCodonError(codon)

    syn_count = 0
    nonsyn_count = 0
    for mutant in one_hit_mutants(codon):
        if code.is_stop_codon(mutant):
            continue
        if code.is_synonymous_change(codon, mutant):
            syn_count += 1
        else:
            nonsyn_count += 1

    total = syn_count + nonsyn_count
    return 3.0 * syn_count / total, 3.0 * nonsyn_count / total


def count_sites(
    codon1: Codon,
    codon2: Codon,
    code: GeneticCode = DEFAULT_CODE,
) -> tuple[float, float]:
    """Average the site counts of two aligned codons.

    Returns:
        Tuple of (S, N) with S + N == 3.0

    Raises:
        StopCodonError: If either codon is a stop codon
    """
    if code.is_stop_codon(codon1) or code.is_stop_codon(codon2):
        raise StopCodonError(codon1, codon2)

    s1, n1 = count_sites_single_codon(codon1, code)
    s2, n2 = count_sites_single_codon(codon2, code)
    return (s1 + s2) / 2, (n1 + n2) / 2
