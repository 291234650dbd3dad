"""Output formatting for counting results."""

from __future__ import annotations

import json
from enum import Enum

from dnds.analysis.aggregate import PairwiseCounts

TSV_COLUMNS = ["S", "N", "Sd", "Nd", "codons", "skipped"]


class OutputFormat(str, Enum):
    """Supported output formats."""

    PRETTY = "pretty"
    TSV = "tsv"
    JSON = "json"


def _tsv_row(result: PairwiseCounts) -> list[str]:
    return [
        f"{result.synonymous_sites:.6f}",
        f"{result.nonsynonymous_sites:.6f}",
        f"{result.synonymous_differences:.6f}",
        f"{result.nonsynonymous_differences:.6f}",
        str(result.num_codons),
        str(result.num_skipped),
    ]


def format_result(result: PairwiseCounts, fmt: OutputFormat = OutputFormat.PRETTY) -> str:
    """Format a single result.

    Args:
        result: Counts for one pair of sequences
        fmt: Output format

    Returns:
        Formatted string (header and one row for TSV)
    """
    if fmt == OutputFormat.JSON:
        return json.dumps(result.to_dict(), indent=2)
    if fmt == OutputFormat.TSV:
        return "\t".join(TSV_COLUMNS) + "\n" + "\t".join(_tsv_row(result))
    return str(result)


def format_batch_results(
    results: list[tuple[str, PairwiseCounts]],
    fmt: OutputFormat = OutputFormat.TSV,
) -> str:
    """Format results from multiple alignments.

    Args:
        results: List of (name, result) tuples
        fmt: Output format

    Returns:
        Formatted string
    """
    if fmt == OutputFormat.JSON:
        return json.dumps(
            [{"name": name, **result.to_dict()} for name, result in results],
            indent=2,
        )
    if fmt == OutputFormat.TSV:
        lines = ["\t".join(["name", *TSV_COLUMNS])]
        for name, result in results:
            lines.append("\t".join([name, *_tsv_row(result)]))
        return "\n".join(lines)

    blocks = []
    for name, result in results:
        blocks.append(f"=== {name} ===\n{result}")
    return "\n\n".join(blocks)
