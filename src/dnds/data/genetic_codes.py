"""Genetic code tables and codon data."""

from __future__ import annotations

# Standard genetic code (NCBI table 1)
STANDARD_CODE: dict[str, str] = {
    "TTT": "F", "TTC": "F", "TTA": "L", "TTG": "L",
    "TCT": "S", "TCC": "S", "TCA": "S", "TCG": "S",
    "TAT": "Y", "TAC": "Y", "TAA": "*", "TAG": "*",
    "TGT": "C", "TGC": "C", "TGA": "*", "TGG": "W",
    "CTT": "L", "CTC": "L", "CTA": "L", "CTG": "L",
    "CCT": "P", "CCC": "P", "CCA": "P", "CCG": "P",
    "CAT": "H", "CAC": "H", "CAA": "Q", "CAG": "Q",
    "CGT": "R", "CGC": "R", "CGA": "R", "CGG": "R",
    "ATT": "I", "ATC": "I", "ATA": "I", "ATG": "M",
    "ACT": "T", "ACC": "T", "ACA": "T", "ACG": "T",
    "AAT": "N", "AAC": "N", "AAA": "K", "AAG": "K",
    "AGT": "S", "AGC": "S", "AGA": "R", "AGG": "R",
    "GTT": "V", "GTC": "V", "GTA": "V", "GTG": "V",
    "GCT": "A", "GCC": "A", "GCA": "A", "GCG": "A",
    "GAT": "D", "GAC": "D", "GAA": "E", "GAG": "E",
    "GGT": "G", "GGC": "G", "GGA": "G", "GGG": "G",
}

# One-letter code -> three-letter code, including the stop marker
AMINO_ACID_NAMES: dict[str, str] = {
    "A": "Ala", "R": "Arg", "N": "Asn", "D": "Asp",
    "C": "Cys", "E": "Glu", "Q": "Gln", "G": "Gly",
    "H": "His", "I": "Ile", "L": "Leu", "K": "Lys",
    "M": "Met", "F": "Phe", "P": "Pro", "S": "Ser",
    "T": "Thr", "W": "Trp", "Y": "Tyr", "V": "Val",
    "*": "Ter",
}

# All 64 codons in alphabetical order
CODONS = sorted(STANDARD_CODE.keys())


START_CODON = "ATG"

# Orderings in which k differing codon positions can mutate, keyed by the
# tuple of differing positions. Codons have three positions, so k <= 3.
MUTATION_ORDERS: dict[tuple[int, ...], tuple[tuple[int, ...], ...]] = {
    (): (),
    (0,): ((0,),),
    (1,): ((1,),),
    (2,): ((2,),),
    (0, 1): ((0, 1), (1, 0)),
    (0, 2): ((0, 2), (2, 0)),
    (1, 2): ((1, 2), (2, 1)),
    (0, 1, 2): (
        (0, 1, 2),
        (2, 1, 0),
        (1, 2, 0),
        (0, 2, 1),
        (2, 0, 1),
        (1, 0, 2),
    ),
}
