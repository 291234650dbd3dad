"""Tests for the command-line interface."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dnds import __version__
from dnds.cli import app

runner = CliRunner()


@pytest.fixture
def pair_fasta(tmp_path: Path) -> Path:
    fasta = tmp_path / "pair.fa"
    fasta.write_text(""">human_1
CCTTTTATG
>mouse_1
CAGTTT---
""")
    return fasta


class TestCount:
    """Tests for the count command."""

    def test_pretty(self, pair_fasta: Path) -> None:
        result = runner.invoke(app, ["count", str(pair_fasta)])

        assert result.exit_code == 0
        assert "Sd=0.5000, Nd=1.5000" in result.output
        assert "1 columns skipped" in result.output

    def test_json(self, pair_fasta: Path) -> None:
        result = runner.invoke(app, ["count", str(pair_fasta), "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["synonymous_differences"] == pytest.approx(0.5)
        assert data["nonsynonymous_differences"] == pytest.approx(1.5)
        assert data["num_codons"] == 2
        assert data["synonymous_sites"] + data["nonsynonymous_sites"] == pytest.approx(6.0)

    def test_match_patterns(self, tmp_path: Path) -> None:
        fasta = tmp_path / "three.fa"
        fasta.write_text(">a_1\nATG\n>b_1\nATA\n>c_1\nATG\n")

        result = runner.invoke(
            app,
            ["count", str(fasta), "--first-match", "a_", "--second-match", "c_", "-f", "tsv"],
        )

        assert result.exit_code == 0
        values = result.output.strip().split("\n")[-1].split("\t")
        assert values[2] == "0.000000"
        assert values[3] == "0.000000"

    def test_invalid_format(self, pair_fasta: Path) -> None:
        result = runner.invoke(app, ["count", str(pair_fasta), "--format", "xml"])
        assert result.exit_code == 1
        assert "Invalid format" in result.output

    def test_stop_codon_error(self, tmp_path: Path) -> None:
        fasta = tmp_path / "stop.fa"
        fasta.write_text(">a\nATGTAA\n>b\nATGTAG\n")

        result = runner.invoke(app, ["count", str(fasta)])

        assert result.exit_code == 1
        assert "Stop codon" in result.output

    def test_length_not_multiple_of_3(self, tmp_path: Path) -> None:
        fasta = tmp_path / "short.fa"
        fasta.write_text(">a\nATGA\n>b\nATGA\n")

        result = runner.invoke(app, ["count", str(fasta)])

        assert result.exit_code == 1
        assert "not a multiple of 3" in result.output

    @pytest.mark.parametrize("frame", ["2", "3"])
    def test_shifted_reading_frame(self, tmp_path: Path, frame: str) -> None:
        """A full-length alignment is read in frames 2 and 3 without a length error."""
        fasta = tmp_path / "frame.fa"
        fasta.write_text(">a\nAATGCCTTT\n>b\nAATGCATTT\n")

        result = runner.invoke(app, ["count", str(fasta), "-r", frame, "-f", "json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["num_codons"] == 2
        assert data["synonymous_differences"] + data["nonsynonymous_differences"] == pytest.approx(1.0)


class TestCodon:
    """Tests for the codon command."""

    def test_single(self) -> None:
        result = runner.invoke(app, ["codon", "TTT"])
        assert result.exit_code == 0
        assert "Phe" in result.output
        assert "S=0.3333, N=2.6667" in result.output

    def test_pair(self) -> None:
        result = runner.invoke(app, ["codon", "AAG", "TTG"])
        assert result.exit_code == 0
        assert "AAG -> ATG -> TTG" in result.output
        assert "AAG -> TAG" not in result.output
        assert "Sd=0.0000, Nd=2.0000" in result.output

    def test_stop_codon(self) -> None:
        result = runner.invoke(app, ["codon", "TGA"])
        assert result.exit_code == 1

    def test_bad_codon(self) -> None:
        result = runner.invoke(app, ["codon", "XYZ"])
        assert result.exit_code == 1


class TestInfoAndVersion:
    """Tests for info and --version."""

    def test_info(self, pair_fasta: Path) -> None:
        result = runner.invoke(app, ["info", str(pair_fasta)])
        assert result.exit_code == 0
        assert "Sequences: 2" in result.output
        assert "human_1 (9 bp, 3 codons, 0 stop)" in result.output

    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestBatchCommand:
    """Tests for the batch command."""

    def test_batch_tsv(self, tmp_path: Path) -> None:
        for name, second in [("gene1", "CAG"), ("gene2", "CCT")]:
            (tmp_path / f"{name}.fa").write_text(f">a\nCCT\n>b\n{second}\n")

        result = runner.invoke(app, ["batch", str(tmp_path), "--workers", "1"])

        assert result.exit_code == 0
        lines = [line for line in result.output.splitlines() if line.startswith("gene")]
        assert lines[0].split("\t")[3] == "0.500000"
        assert lines[1].split("\t")[3] == "0.000000"

    def test_batch_no_files(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["batch", str(tmp_path)])
        assert result.exit_code == 1
        assert "No files matching" in result.output

    def test_batch_single_match_error(self, tmp_path: Path) -> None:
        (tmp_path / "gene1.fa").write_text(">a\nCCT\n>b\nCAG\n")
        result = runner.invoke(app, ["batch", str(tmp_path), "--first-match", "a"])
        assert result.exit_code == 1
