"""Worker functions for parallel batch processing.

This module contains pure, picklable functions for use with ProcessPoolExecutor.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass
class BatchTask:
    """Task specification for batch processing.

    This dataclass holds all information needed to process a single
    alignment, and is designed to be picklable for multiprocessing.
    """

    file_path: Path
    """Path to the pairwise alignment FASTA file."""

    first_match: str | None = None
    """Pattern selecting the first sequence (first record if unset)."""

    second_match: str | None = None
    """Pattern selecting the second sequence (second record if unset)."""

    reading_frame: int = 1
    """Reading frame (1, 2, or 3)."""


@dataclass
class WorkerResult:
    """Result from a worker function.

    Designed to be picklable for return from worker processes.
    """

    name: str
    """Identifier for the alignment (usually filename stem)."""

    result: Any | None = None
    """The PairwiseCounts for the alignment."""

    error: str | None = None
    """Error message if processing failed."""

    warning: str | None = None
    """Warning message if there were issues."""


def process_alignment(task: BatchTask) -> WorkerResult:
    """Count sites and differences for one alignment file.

    This function is designed to be called from a ProcessPoolExecutor.
    It contains no side effects and returns a picklable result.

    Args:
        task: BatchTask containing all parameters for processing

    Returns:
        WorkerResult with the counts or an error message
    """
    # Import here to avoid pickling issues
    from dnds.analysis.aggregate import count_alignment
    from dnds.io.fasta import read_fasta, select_pair
    from dnds.io.parsing import pairwise_str_to_codon_columns

    name = task.file_path.stem

    try:
        records = read_fasta(task.file_path)
        if len(records) < 2:
            return WorkerResult(
                name=name,
                warning=f"Fewer than 2 sequences in {task.file_path.name}",
            )

        first, second = select_pair(records, task.first_match, task.second_match)
        columns = pairwise_str_to_codon_columns(
            first.in_frame(task.reading_frame),
            second.in_frame(task.reading_frame),
        )
        result = count_alignment(columns)

        if result.num_codons == 0:
            return WorkerResult(
                name=name,
                warning=f"No comparable codons in {task.file_path.name}",
            )
        return WorkerResult(name=name, result=result)

    except Exception as e:
        return WorkerResult(
            name=name,
            error=f"Error processing {task.file_path.name}: {e}",
        )
