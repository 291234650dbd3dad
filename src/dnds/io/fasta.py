"""FASTA reading and writing."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sequence:
    """A named aligned nucleotide sequence."""

    name: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def in_frame(self, reading_frame: int = 1) -> str:
        """Return the sequence read in the given reading frame (1, 2, or 3).

        Frame 1 is the whole sequence. Frames 2 and 3 drop the leading bases
        and the trailing partial codon left by the shift.
        """
        if reading_frame not in (1, 2, 3):
            raise ValueError(f"Reading frame must be 1, 2, or 3, got {reading_frame}")
        if reading_frame == 1:
            return self.sequence
        shifted = self.sequence[reading_frame - 1 :]
        return shifted[: len(shifted) // 3 * 3]


def read_fasta(path: Path | str) -> list[Sequence]:
    """Read all records from a FASTA file.

    Sequence lines are concatenated with whitespace removed. Case is kept,
    so lowercase bases are later reported as unrecognized codons.

    Raises:
        ValueError: If sequence data appears before the first header
    """
    path = Path(path)
    records: list[Sequence] = []
    name: str | None = None
    chunks: list[str] = []

    with path.open() as handle:
        for line_number, line in enumerate(handle, start=1):
            line = line.strip()
            if not line:
                continue
            if line.startswith(">"):
                if name is not None:
                    records.append(Sequence(name, "".join(chunks)))
                name = line[1:].strip()
                chunks = []
            elif name is None:
                raise ValueError(
                    f"{path.name}:{line_number}: sequence data before first header "
                    "(not a FASTA file?)"
                )
            else:
                chunks.append("".join(line.split()))

    if name is not None:
        records.append(Sequence(name, "".join(chunks)))

    logger.debug("Read %d sequences from %s", len(records), path)
    return records


def write_fasta(records: list[Sequence], path: Path | str, line_width: int = 60) -> None:
    """Write records to a FASTA file, wrapping sequence lines."""
    path = Path(path)
    with path.open("w") as handle:
        for record in records:
            handle.write(f">{record.name}\n")
            for i in range(0, len(record.sequence), line_width):
                handle.write(record.sequence[i : i + line_width] + "\n")


def select_pair(
    records: list[Sequence],
    first_match: str | None = None,
    second_match: str | None = None,
) -> tuple[Sequence, Sequence]:
    """Pick the two sequences to compare.

    Without patterns the first two records are used. With patterns, the
    first record whose name contains each pattern is used.

    Raises:
        ValueError: If two sequences cannot be selected
    """
    if first_match is None and second_match is None:
        if len(records) < 2:
            raise ValueError(f"Need at least 2 sequences, found {len(records)}")
        if len(records) > 2:
            logger.warning("Found %d sequences, comparing the first two", len(records))
        return records[0], records[1]

    if first_match is None or second_match is None:
        raise ValueError("Both sequence patterns must be given together")

    def find(pattern: str) -> Sequence:
        for record in records:
            if pattern in record.name:
                return record
        raise ValueError(f"No sequence matches pattern '{pattern}'")

    return find(first_match), find(second_match)
