"""Shared test fixtures for vcfcheck tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pysam
import pytest

from vcfcheck.config import Config
from vcfcheck.content import Content

HEADER = "#CHROM\tPOS\tID\tREF\tALT\tQUAL\tFILTER\tINFO"

VALID_VCF_LINES = [
    "##fileformat=VCFv4.3",
    "##reference=GRCh37.p13",
    HEADER,
    "NC_000001.10\t10001\trs1570391677\tT\tA\t.\t.\t.",
    "NC_000001.10\t10002\trs1570391692\tA\tC\t.\t.\t.",
    "NC_000002.11\t10007\trs1572047073\tC\tA\t.\t.\t.",
]


def record_line(
    chrom: str = "NC_000001.10",
    pos: str = "10001",
    ref: str = "T",
    alt: str = "A",
    id_: str = "rs1570391677",
) -> str:
    """Build a tab-delimited data line with placeholder QUAL/FILTER/INFO."""
    return "\t".join([chrom, pos, id_, ref, alt, ".", ".", "."])


def as_contents(lines: list[str]) -> list[Content]:
    """Number lines from 1."""
    return [Content(i, line) for i, line in enumerate(lines, start=1)]


@pytest.fixture
def default_config() -> Config:
    return Config()


@pytest.fixture
def valid_vcf_lines() -> list[str]:
    """Lines of a small VCF that passes every rule."""
    return list(VALID_VCF_LINES)


@pytest.fixture
def make_record() -> Callable:
    """Factory fixture for data lines; see ``record_line``."""
    return record_line


@pytest.fixture
def make_contents() -> Callable:
    """Factory fixture numbering a list of lines from 1."""
    return as_contents


@pytest.fixture
def temp_vcf_file(tmp_path) -> Callable:
    """Factory fixture for creating temporary VCF files.

    Returns a function that writes the given lines to a VCF file, optionally
    bgzipped with pysam.

    Example:
        >>> vcf_path = temp_vcf_file(VALID_VCF_LINES, compress=True)
    """

    def _create_vcf(
        lines: list[str], compress: bool = False, filename: str = "test.vcf"
    ) -> Path:
        vcf_path = tmp_path / filename
        vcf_path.write_text("".join(line + "\n" for line in lines))

        if not compress:
            return vcf_path

        bgz_path = tmp_path / (filename + ".gz")
        pysam.tabix_compress(str(vcf_path), str(bgz_path), force=True)
        vcf_path.unlink()  # Remove uncompressed VCF
        return bgz_path

    return _create_vcf


@pytest.fixture
def temp_fasta_file(tmp_path) -> Callable:
    """Factory fixture for creating temporary FASTA files.

    Returns a function that creates a FASTA file with specified sequences,
    indexed unless ``index=False``.

    Example:
        >>> fasta_path = temp_fasta_file({
        ...     "chr1": "ACGTACGTACGT",
        ...     "chr2": "TGCATGCATGCA"
        ... })
    """

    def _create_fasta(sequences: dict[str, str], index: bool = True) -> Path:
        fasta_path = tmp_path / "test.fa"

        with open(fasta_path, "w") as f:
            for chrom, seq in sequences.items():
                f.write(f">{chrom}\n")
                # Write sequence in lines of 60 characters
                for i in range(0, len(seq), 60):
                    f.write(seq[i : i + 60] + "\n")

        if index:
            pysam.faidx(str(fasta_path))

        return fasta_path

    return _create_fasta
