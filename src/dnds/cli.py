"""Command-line interface for dnds."""

from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.style import Style

from dnds import __version__
from dnds.analysis.aggregate import count_alignment
from dnds.batch_workers import BatchTask, WorkerResult, process_alignment
from dnds.errors import DndsError
from dnds.io.output import OutputFormat, format_batch_results, format_result


class RainbowBarColumn(BarColumn):
    """A progress bar that cycles through rainbow colors."""

    RAINBOW_COLORS = [
        "#FF0000",  # Red
        "#FF7F00",  # Orange
        "#FFFF00",  # Yellow
        "#00FF00",  # Green
        "#0000FF",  # Blue
        "#4B0082",  # Indigo
        "#9400D3",  # Violet
    ]

    def __init__(self) -> None:
        super().__init__(bar_width=40)
        self._color_index = 0

    def render(self, task):  # type: ignore[no-untyped-def]
        """Render the bar with rainbow colors."""
        if task.total:
            progress = task.completed / task.total
            color_idx = int(progress * len(self.RAINBOW_COLORS) * 3) % len(
                self.RAINBOW_COLORS
            )
        else:
            color_idx = self._color_index
            self._color_index = (self._color_index + 1) % len(self.RAINBOW_COLORS)

        self.complete_style = Style(color=self.RAINBOW_COLORS[color_idx])
        self.finished_style = Style(color="#9400D3")
        return super().render(task)


def create_rainbow_progress() -> Progress:
    """Create a rainbow-colored progress bar."""
    return Progress(
        SpinnerColumn(style="bold magenta"),
        TextColumn("[bold blue]{task.description}"),
        RainbowBarColumn(),
        TaskProgressColumn(),
        TimeElapsedColumn(),
    )


def get_worker_count(requested: int, num_tasks: int) -> int:
    """Determine the optimal number of workers.

    Args:
        requested: Number of workers requested (0=auto, 1=sequential)
        num_tasks: Number of tasks to process

    Returns:
        Number of workers to use
    """
    # Sequential mode if explicitly requested or too few tasks
    if requested == 1 or num_tasks < 10:
        return 1

    cpu_count = os.cpu_count() or 4

    if requested > 0:
        return min(requested, cpu_count)

    # Auto mode: leave one CPU for the main process
    return max(1, min(cpu_count - 1, num_tasks))


def _collect(worker_result: WorkerResult, results: list[WorkerResult], warnings: list[str]) -> None:
    if worker_result.error:
        warnings.append(worker_result.error)
    elif worker_result.warning:
        warnings.append(f"Warning: {worker_result.warning}")
    elif worker_result.result is not None:
        results.append(worker_result)


def run_parallel_batch(
    tasks: list[BatchTask],
    num_workers: int,
    description: str,
) -> tuple[list[WorkerResult], list[str]]:
    """Run batch processing with ProcessPoolExecutor.

    Args:
        tasks: List of BatchTask objects to process
        num_workers: Number of worker processes (1 = sequential)
        description: Description for progress bar

    Returns:
        Tuple of (results, warnings) where results are WorkerResult objects
        and warnings are string messages
    """
    results: list[WorkerResult] = []
    warnings: list[str] = []

    if num_workers == 1:
        with create_rainbow_progress() as progress:
            task_id = progress.add_task(description, total=len(tasks))
            for task in tasks:
                _collect(process_alignment(task), results, warnings)
                progress.advance(task_id)
    else:
        with ProcessPoolExecutor(max_workers=num_workers) as executor:
            futures = {executor.submit(process_alignment, task): task for task in tasks}

            with create_rainbow_progress() as progress:
                task_id = progress.add_task(description, total=len(tasks))

                for future in as_completed(futures):
                    try:
                        _collect(future.result(), results, warnings)
                    except Exception as e:
                        task = futures[future]
                        warnings.append(f"Error processing {task.file_path.name}: {e}")
                    progress.advance(task_id)

    # as_completed yields in finishing order
    results.sort(key=lambda r: r.name)
    return results, warnings


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dnds {__version__}")
        raise typer.Exit()


def _parse_format(output_format: str) -> OutputFormat:
    if output_format not in ("pretty", "tsv", "json"):
        typer.echo(f"Error: Invalid format '{output_format}'. Must be pretty, tsv, or json.", err=True)
        raise typer.Exit(1)
    return OutputFormat(output_format)


app = typer.Typer(
    name="dnds",
    help="dnds: Nei-Gojobori site and difference counts.\n\n"
    "Counts synonymous and nonsynonymous sites and substitutions between "
    "two aligned protein-coding sequences.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug messages to stderr"),
    ] = False,
) -> None:
    """dnds: Nei-Gojobori site and difference counts."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


@app.command()
def count(
    fasta: Annotated[
        Path,
        typer.Argument(help="Path to FASTA file with two aligned coding sequences"),
    ],
    first_match: Annotated[
        Optional[str],
        typer.Option("--first-match", help="Name pattern for the first sequence"),
    ] = None,
    second_match: Annotated[
        Optional[str],
        typer.Option("--second-match", help="Name pattern for the second sequence"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format"),
    ] = "pretty",
    reading_frame: Annotated[
        int,
        typer.Option("--reading-frame", "-r", min=1, max=3, help="Reading frame (1, 2, or 3)"),
    ] = 1,
) -> None:
    """Count synonymous and nonsynonymous sites and differences.

    Columns with gaps, unknown (NNN) or unrecognized codons are skipped.
    A stop codon in a compared column is an error.

    Examples:

        dnds count pair.fa

        dnds count combined.fa --first-match "human" --second-match "mouse"
    """
    from dnds.io.fasta import read_fasta, select_pair
    from dnds.io.parsing import pairwise_str_to_codon_columns

    fmt = _parse_format(output_format)

    try:
        records = read_fasta(fasta)
        first, second = select_pair(records, first_match, second_match)
        columns = pairwise_str_to_codon_columns(
            first.in_frame(reading_frame), second.in_frame(reading_frame)
        )
        result = count_alignment(columns)
    except (DndsError, ValueError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(format_result(result, fmt))


@app.command()
def batch(
    input_dir: Annotated[
        Path,
        typer.Argument(help="Directory containing pairwise alignment FASTA files"),
    ],
    file_pattern: Annotated[
        str,
        typer.Option(help="Glob pattern to match alignment files"),
    ] = "*.fa",
    first_match: Annotated[
        Optional[str],
        typer.Option("--first-match", help="Name pattern for the first sequence"),
    ] = None,
    second_match: Annotated[
        Optional[str],
        typer.Option("--second-match", help="Name pattern for the second sequence"),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format"),
    ] = "tsv",
    reading_frame: Annotated[
        int,
        typer.Option("--reading-frame", "-r", min=1, max=3, help="Reading frame (1, 2, or 3)"),
    ] = 1,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-w",
            help="Number of parallel workers (0=auto, 1=sequential)",
            min=0,
        ),
    ] = 0,
) -> None:
    """Count sites and differences for every alignment in a directory.

    Examples:

        dnds batch alignments/

        dnds batch alignments/ --file-pattern "*.fasta" --first-match human --second-match mouse
    """
    fmt = _parse_format(output_format)

    if (first_match is None) != (second_match is None):
        typer.echo("Error: --first-match and --second-match must be used together", err=True)
        raise typer.Exit(1)

    alignment_files = sorted(input_dir.glob(file_pattern))
    if not alignment_files:
        typer.echo(f"No files matching '{file_pattern}' found in {input_dir}", err=True)
        raise typer.Exit(1)

    num_workers = get_worker_count(workers, len(alignment_files))

    tasks = [
        BatchTask(
            file_path=f,
            first_match=first_match,
            second_match=second_match,
            reading_frame=reading_frame,
        )
        for f in alignment_files
    ]

    worker_results, warnings = run_parallel_batch(tasks, num_workers, "Counting alignments")

    # Print warnings after progress bar completes
    for warning in warnings:
        typer.echo(warning, err=True)

    results = [(r.name, r.result) for r in worker_results]
    if results:
        typer.echo(format_batch_results(results, fmt))
    else:
        typer.echo("No results to display", err=True)


@app.command()
def codon(
    first: Annotated[
        str,
        typer.Argument(help="Codon, e.g. TTT"),
    ],
    second: Annotated[
        Optional[str],
        typer.Argument(help="Second codon to compare against"),
    ] = None,
) -> None:
    """Show site counts for a codon, or pathways and counts for a codon pair.

    Examples:

        dnds codon TTT

        dnds codon CCT CAG
    """
    from dnds.analysis.differences import count_differences
    from dnds.analysis.sites import count_sites, count_sites_single_codon
    from dnds.core.codons import Codon
    from dnds.core.mutations import count_base_changes, list_mutation_pathways

    try:
        codon1 = Codon.from_str(first)
        codon2 = Codon.from_str(second) if second is not None else None
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    try:
        if codon2 is None:
            aa = codon1.translate()
            typer.echo(f"Codon: {codon1} ({aa.three_letter})")
            s, n = count_sites_single_codon(codon1)
            typer.echo(f"Sites: S={s:.4f}, N={n:.4f}")
            return

        typer.echo(
            f"Codons: {codon1} ({codon1.translate().three_letter}) -> "
            f"{codon2} ({codon2.translate().three_letter})"
        )
        typer.echo(f"Differing positions: {count_base_changes(codon1, codon2)}")
        for path in list_mutation_pathways(codon1, codon2):
            typer.echo("  " + " -> ".join(str(c) for c in path))
        s, n = count_sites(codon1, codon2)
        sd, nd = count_differences(codon1, codon2)
    except DndsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Sites: S={s:.4f}, N={n:.4f}")
    typer.echo(f"Differences: Sd={sd:.4f}, Nd={nd:.4f}")


@app.command()
def info(
    fasta: Annotated[
        Path,
        typer.Argument(help="Path to FASTA file"),
    ],
    reading_frame: Annotated[
        int,
        typer.Option("--reading-frame", "-r", min=1, max=3, help="Reading frame (1, 2, or 3)"),
    ] = 1,
) -> None:
    """Display information about a FASTA file.

    Shows sequence count, lengths, and codon column statistics.
    """
    from dnds.core.alignment import Present
    from dnds.io.fasta import read_fasta
    from dnds.io.parsing import aligned_str_to_codons

    try:
        records = read_fasta(fasta)
    except (ValueError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"File: {fasta.name}")
    typer.echo(f"Sequences: {len(records)}")
    typer.echo(f"Reading frame: {reading_frame}")

    typer.echo("\nSequences:")
    for record in records:
        try:
            items = aligned_str_to_codons(record.in_frame(reading_frame))
        except DndsError as e:
            typer.echo(f"  {record.name} ({len(record)} bp): {e}")
            continue
        stops = sum(1 for item in items if isinstance(item, Present) and item.value.is_stop_codon())
        typer.echo(f"  {record.name} ({len(record)} bp, {len(items)} codons, {stops} stop)")


if __name__ == "__main__":
    app()
