"""One-hit mutants and mutational pathways between codons.

Nei & Gojobori (1986) count substitutions between two codons that differ
at more than one position by averaging over every order in which the
differing positions could have mutated, excluding orders that pass
through a stop codon.
"""

from __future__ import annotations

from dnds.core.codons import DEFAULT_CODE, Codon, GeneticCode, Nucleotide
from dnds.data.genetic_codes import MUTATION_ORDERS

BaseChange = tuple[Nucleotide, Nucleotide]


def one_hit_mutants_at_position(codon: Codon, position: int) -> list[Codon]:
    """Return the 3 codons that differ from `codon` only at `position`.

    Args:
        codon: Starting codon
        position: Codon position (0, 1, or 2)

    Returns:
        Mutant codons in A, C, G, T order of the substituted base

    Raises:
        ValueError: If position is not 0, 1, or 2
    """
    if position not in (0, 1, 2):
        raise ValueError(f"Codon position must be 0, 1, or 2, got {position}")
    current = codon[position]
    return [codon.replace_at(position, nt) for nt in Nucleotide if nt is not current]


def one_hit_mutants(codon: Codon) -> list[Codon]:
    """Return all 9 single-nucleotide mutants of `codon`.

    Stop codons are not filtered out.
    """
    return [mutant for pos in range(3) for mutant in one_hit_mutants_at_position(codon, pos)]


def base_changes_by_position(
    codon1: Codon, codon2: Codon
) -> tuple[BaseChange | None, BaseChange | None, BaseChange | None]:
    """Compare two codons position by position.

    Returns:
        3-tuple with None where the bases match, else (base1, base2)
    """
    changes = [
        None if b1 is b2 else (b1, b2)
        for b1, b2 in zip(codon1.to_nucleotides(), codon2.to_nucleotides())
    ]
    return changes[0], changes[1], changes[2]


def count_base_changes(codon1: Codon, codon2: Codon) -> int:
    """Number of positions at which two codons differ (0-3)."""
    return sum(1 for change in base_changes_by_position(codon1, codon2) if change is not None)


def list_mutation_pathways(
    codon1: Codon,
    codon2: Codon,
    code: GeneticCode = DEFAULT_CODE,
) -> list[tuple[Codon, ...]]:
    """Enumerate the single-step mutational pathways from codon1 to codon2.

    Each pathway is a tuple of k+1 codons, where k is the number of
    differing positions, starting at codon1 and ending at codon2.
    Pathways that visit a stop codon are discarded.

    Args:
        codon1: Starting codon
        codon2: Ending codon
        code: Genetic code used to recognize stop codons

    Returns:
        Surviving pathways. Empty when the codons are identical, when
        either is a stop codon, or when every ordering hits a stop codon.
    """
    if code.is_stop_codon(codon1) or code.is_stop_codon(codon2):
        return []

    changes = base_changes_by_position(codon1, codon2)
    differing = tuple(pos for pos, change in enumerate(changes) if change is not None)

    pathways = []
    for order in MUTATION_ORDERS[differing]:
        path = [codon1]
        for pos in order:
            path.append(path[-1].replace_at(pos, codon2[pos]))
        if any(code.is_stop_codon(c) for c in path):
            continue
        pathways.append(tuple(path))
    return pathways
