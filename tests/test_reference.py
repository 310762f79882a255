"""Tests for reference FASTA access."""

from __future__ import annotations

import pytest

from vcfcheck.content import Content
from vcfcheck.engine import validate_contents
from vcfcheck.errors import IndexBuildError, InputFileError, ReferenceLookupError
from vcfcheck.reference import (
    ReferenceSequence,
    build_index,
    index_path,
    open_reference,
    validate_reference_indexed,
)


class TestValidateReferenceIndexed:
    """Tests for validate_reference_indexed function."""

    def test_indexed_fasta_passes(self, temp_fasta_file):
        """Test indexed FASTA passes validation."""
        fasta_path = temp_fasta_file({"chr1": "ACGT" * 100})
        validate_reference_indexed(fasta_path)  # Should not raise

    def test_missing_fasta_raises(self, tmp_path):
        """Test missing FASTA raises error."""
        with pytest.raises(InputFileError, match="not found"):
            validate_reference_indexed(tmp_path / "missing.fa")

    def test_missing_index_raises(self, temp_fasta_file):
        """Test FASTA without .fai raises error."""
        fasta_path = temp_fasta_file({"chr1": "ACGT"}, index=False)
        with pytest.raises(InputFileError, match="missing index"):
            validate_reference_indexed(fasta_path)

    def test_empty_index_raises(self, temp_fasta_file):
        """Test empty .fai raises error."""
        fasta_path = temp_fasta_file({"chr1": "ACGT"}, index=False)
        index_path(fasta_path).touch()
        with pytest.raises(InputFileError, match="is empty"):
            validate_reference_indexed(fasta_path)


class TestBuildIndex:
    """Tests for build_index function."""

    def test_builds_fai(self, temp_fasta_file):
        """Test the index is created next to the FASTA."""
        fasta_path = temp_fasta_file({"chr1": "ACGT" * 100}, index=False)
        fai_path = build_index(fasta_path)

        assert fai_path == index_path(fasta_path)
        assert fai_path.exists()
        assert fai_path.read_text().startswith("chr1\t400\t")

    def test_missing_fasta_raises(self, tmp_path):
        """Test indexing a missing file raises."""
        with pytest.raises(IndexBuildError, match="not found"):
            build_index(tmp_path / "missing.fa")


class TestReferenceSequence:
    """Tests for ReferenceSequence."""

    def test_fetch_inclusive_interval(self, temp_fasta_file):
        """Test fetch returns bases start..end inclusive."""
        fasta_path = temp_fasta_file({"chr1": "ACGTTGCA", "chr2": "TTTT"})
        with ReferenceSequence(fasta_path) as reference:
            assert reference.fetch("chr1", 0, 3) == "ACGT"
            assert reference.fetch("chr1", 4, 4) == "T"
            assert reference.fetch("chr2", 1, 2) == "TT"

    def test_fetch_across_line_wrap(self, temp_fasta_file):
        """Test sequences wrapped over several FASTA lines are joined."""
        fasta_path = temp_fasta_file({"chr1": "A" * 59 + "CG" + "T" * 10})
        with ReferenceSequence(fasta_path) as reference:
            assert reference.fetch("chr1", 58, 61) == "ACGT"

    def test_unknown_sequence_raises(self, temp_fasta_file):
        """Test an unknown contig raises ReferenceLookupError."""
        fasta_path = temp_fasta_file({"chr1": "ACGT"})
        with ReferenceSequence(fasta_path) as reference:
            with pytest.raises(ReferenceLookupError, match="chrUn"):
                reference.fetch("chrUn", 0, 1)

    def test_unindexed_raises(self, temp_fasta_file):
        """Test opening an unindexed FASTA raises."""
        fasta_path = temp_fasta_file({"chr1": "ACGT"}, index=False)
        with pytest.raises(InputFileError, match="missing index"):
            ReferenceSequence(fasta_path)


class TestOpenReference:
    """Tests for open_reference function."""

    def test_build_missing_index(self, temp_fasta_file):
        """Test build=True indexes an unindexed FASTA."""
        fasta_path = temp_fasta_file({"chr1": "ACGT"}, index=False)
        with open_reference(fasta_path, build=True) as reference:
            assert reference.fetch("chr1", 1, 2) == "CG"
        assert index_path(fasta_path).exists()


class TestMismatchWithFasta:
    """Tests for REF cross-checking against a FASTA file."""

    def test_mismatch_detected(self, temp_fasta_file, make_record):
        """Test REF differing from the FASTA is reported."""
        fasta_path = temp_fasta_file({"chr1": "ACGTACGTAC"})
        good = Content(1, make_record(chrom="chr1", pos="3", ref="GT", alt="G"))
        bad = Content(2, make_record(chrom="chr1", pos="5", ref="C", alt="G"))

        with ReferenceSequence(fasta_path) as reference:
            report = validate_contents([good, bad], reference=reference)

        assert good not in report.record
        (error,) = report.record[bad]
        assert error.name == "Record/MismatchReferenceBase"
        assert 'FASTA = "A"' in error.message
