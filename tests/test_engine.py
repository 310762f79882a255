"""Tests for the validation driver."""

from __future__ import annotations

import pytest

from vcfcheck.config import Config
from vcfcheck.constants import Category
from vcfcheck.content import Content
from vcfcheck.engine import classify, validate_contents, validate_vcf
from vcfcheck.errors import InputFileError
from vcfcheck.reader import InvalidEncoding


def record_names(report):
    return {
        content.line_number: [e.name for e in errors]
        for content, errors in report.record.items()
    }


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("##fileformat=VCFv4.3", Category.META_INFORMATION),
            ("##", Category.META_INFORMATION),
            ("#CHROM\tPOS", Category.HEADER),
            ("#", Category.HEADER),
            ("1\t100\t.\tA\tT", Category.RECORD),
            ("", Category.RECORD),
        ],
    )
    def test_prefixes(self, text, expected):
        """Test categories are decided by prefix alone."""
        assert classify(text) == expected


class TestValidateContents:
    """Tests for validate_contents."""

    def test_valid_file_has_no_findings(self, valid_vcf_lines, make_contents):
        """Test a well-formed file produces an empty report."""
        report = validate_contents(make_contents(valid_vcf_lines))

        assert report.count() == 0
        assert not report.has_errors()

    def test_empty_input(self):
        """Test an empty input reports EmptyVCF and missing structure."""
        report = validate_contents([])

        assert [e.name for e in report.global_errors[None]] == ["Global/EmptyVCF"]
        assert [e.name for e in report.meta_information] == ["MetaInformation/FileFormat"]
        assert [e.name for e in report.header] == [
            "Header/HeaderLine",
            "Header/HeaderColumn",
        ]
        assert report.record == {}

    def test_single_data_line(self, make_record):
        """Test a lone data line is not empty but precedes any header."""
        content = Content(1, make_record())
        report = validate_contents([content])

        assert None not in report.global_errors
        assert [e.name for e in report.global_errors[content]] == [
            "Global/DataBeforeHeader"
        ]

    def test_header_observed_before_following_lines(
        self, valid_vcf_lines, make_contents, make_record
    ):
        """Test DataBeforeHeader fires only for data preceding the header."""
        lines = [valid_vcf_lines[0], make_record(pos="1")] + valid_vcf_lines[1:]
        contents = make_contents(lines)
        report = validate_contents(contents)

        assert list(report.global_errors) == [contents[1]]

    def test_blank_line(self, valid_vcf_lines, make_contents):
        """Test a blank data line is reported by Global only."""
        contents = make_contents(valid_vcf_lines[:4] + [""] + valid_vcf_lines[4:])
        report = validate_contents(contents)

        assert [e.name for e in report.global_errors[contents[4]]] == [
            "Global/BlankLine"
        ]
        assert report.record == {}
        assert report.has_errors()

    def test_duplicate_header_routed_to_header(self, valid_vcf_lines, make_contents):
        """Test a second header line is not treated as a record."""
        lines = valid_vcf_lines[:3] + [valid_vcf_lines[2]] + valid_vcf_lines[3:]
        report = validate_contents(make_contents(lines))

        assert [e.name for e in report.header] == [
            "Header/DuplicatedHeader",
            "Header/HeaderColumn",
        ]
        assert report.record == {}

    def test_cross_record_findings(self, valid_vcf_lines, make_contents, make_record):
        """Test sortedness is tracked across the whole record stream."""
        lines = valid_vcf_lines[:3] + [
            make_record(pos="10026"),
            make_record(pos="10001"),
        ]
        report = validate_contents(make_contents(lines))
        assert record_names(report) == {5: ["Record/UnsortedPosition"]}

    def test_deterministic(self, valid_vcf_lines, make_contents, make_record):
        """Test the same input and config give identical reports."""
        lines = valid_vcf_lines + ["", make_record(ref="N", alt="N")]
        first = validate_contents(make_contents(lines))
        second = validate_contents(make_contents(lines))
        assert first.to_json() == second.to_json()

    def test_disabling_rule_leaves_others(self, valid_vcf_lines, make_contents, make_record):
        """Test disabling one rule removes only its findings."""
        lines = valid_vcf_lines + [make_record(chrom="NC_000002.11", pos="1", ref="A", alt="A")]
        contents = make_contents(lines)

        full = validate_contents(contents)
        reduced = validate_contents(
            contents,
            config=Config(rules={"Record/IdenticalBases": {"enabled": False}}),
        )

        expected = [
            (category, content, error)
            for category, content, error in full.findings()
            if error.name != "Record/IdenticalBases"
        ]
        assert list(reduced.findings()) == expected
        assert len(expected) < full.count()

    def test_stream_errors_carried(self):
        """Test stream errors passed in reach the report."""
        issue = InvalidEncoding(Content(2, "�"))
        report = validate_contents([Content(1, "##fileformat=VCFv4.3")], errors=[issue])

        assert report.errors == [issue]
        assert report.has_errors()


class TestValidateVcf:
    """Tests for validate_vcf."""

    def test_plain_and_bgzipped_agree(self, temp_vcf_file, valid_vcf_lines, make_record):
        """Test transport does not change findings."""
        lines = valid_vcf_lines + [make_record(chrom="NC_000001.10", pos="1")]
        plain = validate_vcf(temp_vcf_file(lines))
        bgzipped = validate_vcf(temp_vcf_file(lines, compress=True, filename="b.vcf"))

        assert plain.to_dict() == bgzipped.to_dict()
        assert record_names(plain) == {7: ["Record/DiscontiguousChromosome"]}

    def test_invalid_encoding_reported(self, tmp_path, valid_vcf_lines):
        """Test undecodable lines become stream errors and are skipped."""
        path = tmp_path / "bad.vcf"
        text = "\n".join(valid_vcf_lines).encode() + b"\nNC_000002.11\t1\t.\t\xff\tA\n"
        path.write_bytes(text)

        report = validate_vcf(path)

        assert len(report.errors) == 1
        assert report.errors[0].content.line_number == 7
        assert report.record == {}
        assert report.has_errors()

    def test_missing_file_raises(self, tmp_path):
        """Test a missing input raises InputFileError."""
        with pytest.raises(InputFileError):
            validate_vcf(tmp_path / "missing.vcf")
