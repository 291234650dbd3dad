"""Core data structures and utilities."""

from dnds.core.alignment import AlignedColumn, Gap, Invalid, Present, SequenceItem, Unknown
from dnds.core.codons import DEFAULT_CODE, AminoAcid, Codon, GeneticCode, Nucleotide
from dnds.core.mutations import (
    base_changes_by_position,
    count_base_changes,
    list_mutation_pathways,
    one_hit_mutants,
    one_hit_mutants_at_position,
)

__all__ = [
    "Nucleotide",
    "Codon",
    "AminoAcid",
    "GeneticCode",
    "DEFAULT_CODE",
    "SequenceItem",
    "Present",
    "Gap",
    "Unknown",
    "Invalid",
    "AlignedColumn",
    "one_hit_mutants",
    "one_hit_mutants_at_position",
    "base_changes_by_position",
    "count_base_changes",
    "list_mutation_pathways",
]
