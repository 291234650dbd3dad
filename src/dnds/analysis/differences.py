"""Synonymous and nonsynonymous difference counting."""

from __future__ import annotations

from dnds.core.codons import DEFAULT_CODE, Codon, GeneticCode
from dnds.core.mutations import list_mutation_pathways
from dnds.errors import NoValidPathwayError, StopCodonError


def count_differences(
    codon1: Codon,
    codon2: Codon,
    code: GeneticCode = DEFAULT_CODE,
) -> tuple[float, float]:
    """Count synonymous and nonsynonymous differences between two codons.

    Every single-nucleotide step along every valid mutation pathway is
    classified, and the totals are averaged over the pathways (unweighted
    pathway method of Nei & Gojobori 1986).

    Args:
        codon1: First codon
        codon2: Second codon
        code: Genetic code used for translation

    Returns:
        Tuple of (Sd, Nd). Sd + Nd equals the number of differing positions.

    Raises:
        StopCodonError: If the codons differ and either is a stop codon
        NoValidPathwayError: If every pathway passes through a stop codon
    """
    if codon1 == codon2:
        return 0.0, 0.0
    if code.is_stop_codon(codon1) or code.is_stop_codon(codon2):
        raise StopCodonError(codon1, codon2)

    pathways = list_mutation_pathways(codon1, codon2, code)
    if not pathways:
        raise NoValidPathwayError(codon1, codon2)

    syn_diff = 0
    nonsyn_diff = 0
    for path in pathways:
        for before, after in zip(path, path[1:]):
            if code.is_synonymous_change(before, after):
                syn_diff += 1
            else:
                nonsyn_diff += 1

    num_paths = len(pathways)
    return syn_diff / num_paths, nonsyn_diff / num_paths
