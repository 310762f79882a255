"""Command-line entry point for validating a VCF file.

Usage:
    vcfcheck input.vcf.gz [--config rules.yaml] [--reference ref.fa]
             [--report-type {json,markdown,tsv}] [--output report.tsv]

Writes the report (TSV by default) to stdout or ``--output``. Exits with 1
when the report contains error-level findings or unreadable lines, or when
the configuration or input cannot be used.
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .constants import Level, ReportType
from .engine import validate_vcf
from .errors import VCFCheckError
from .reference import ReferenceSequence
from .report import ValidationReport

log = logging.getLogger(__name__)

DEFAULT_REPORT_TYPE = ReportType.TSV


def write_report(
    report: ValidationReport,
    output_path: str | Path | None = None,
    report_type: str = DEFAULT_REPORT_TYPE,
) -> None:
    """Render the report and write it to a file or stdout.

    Args:
        report: Finished validation report
        output_path: Destination file (stdout if None)
        report_type: One of json, markdown, tsv

    Raises:
        ConfigurationError: If the report type is unknown
    """
    text = report.render(report_type)

    if output_path is None:
        sys.stdout.write(text)
        return

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    log.info("Wrote %s report: %s", report_type, path)


def main(
    input_path: str | Path,
    config_path: str | Path | None = None,
    reference_path: str | Path | None = None,
    output_path: str | Path | None = None,
    report_type: str = DEFAULT_REPORT_TYPE,
) -> int:
    """Validate one VCF file and write its report.

    Args:
        input_path: VCF file to validate
        config_path: Optional YAML rule configuration
        reference_path: Optional indexed reference FASTA
        output_path: Report destination (stdout if None)
        report_type: Report format, one of json, markdown, tsv

    Returns:
        Exit code: 0 if no errors were found, 1 otherwise
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    reference = None
    try:
        config = Config.from_path(config_path) if config_path else Config()

        if reference_path:
            log.info("Using reference FASTA: %s", reference_path)
            reference = ReferenceSequence(reference_path)

        report = validate_vcf(input_path, config=config, reference=reference)
        write_report(report, output_path, report_type)

    except VCFCheckError as e:
        log.error("Validation could not run: %s", e)
        return 1

    finally:
        if reference is not None:
            reference.close()

    if report.has_errors():
        log.error(
            "Validation failed with %d error(s)",
            report.count(Level.ERROR) + len(report.errors),
        )
        return 1

    log.info("Validation completed with %d warning(s)", report.count(Level.WARNING))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vcfcheck",
        description="Validate a VCF file against a configurable rule catalogue",
    )
    parser.add_argument(
        "input",
        type=Path,
        help="VCF file to validate (.vcf, .vcf.gz or .vcf.bgz)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help="YAML rule configuration",
    )
    parser.add_argument(
        "--reference",
        "-r",
        type=Path,
        help="Indexed reference FASTA for REF base checks",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--report-type",
        "-t",
        type=str.lower,
        choices=sorted(ReportType.ALL),
        default=DEFAULT_REPORT_TYPE,
        help="Report format (default: %(default)s)",
    )
    return parser


def run(args: list[str] | None = None) -> None:
    """Console script entry; ``args`` defaults to ``sys.argv[1:]``."""
    parsed_args = build_parser().parse_args(args)
    sys.exit(
        main(
            parsed_args.input,
            config_path=parsed_args.config,
            reference_path=parsed_args.reference,
            output_path=parsed_args.output,
            report_type=parsed_args.report_type,
        )
    )


if __name__ == "__main__":
    run()
