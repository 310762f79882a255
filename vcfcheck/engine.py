"""Single-pass validation driver.

Every line goes to the Global validator first and then to exactly one of the
meta-information, header or record validators according to its prefix. Once
the input is exhausted all validators are finalized and their findings are
aggregated into a ``ValidationReport``.

Example:
    >>> report = validate_vcf("sample.vcf.gz", reference=ReferenceSequence("ref.fa"))
    >>> report.has_errors()
    False
"""

import logging
from pathlib import Path
from typing import Iterable

from .config import Config
from .constants import HEADER_PREFIX, META_PREFIX, Category, Level
from .content import Content
from .reader import InvalidEncoding, LineSource
from .report import ValidationReport
from .validators import (
    GlobalValidator,
    HeaderValidator,
    MetaInformationValidator,
    RecordValidator,
)

log = logging.getLogger(__name__)


def classify(text: str) -> str:
    """Return the category of a line from its prefix.

    Examples:
        >>> classify("##fileformat=VCFv4.3")
        'meta_information'
        >>> classify("#CHROM\\tPOS")
        'header'
        >>> classify("1\\t100\\t.\\tA\\tT")
        'record'
    """
    if text.startswith(META_PREFIX):
        return Category.META_INFORMATION
    if text.startswith(HEADER_PREFIX):
        return Category.HEADER
    return Category.RECORD


def validate_contents(
    contents: Iterable[Content],
    config: Config | None = None,
    reference=None,
    errors: list[InvalidEncoding] | None = None,
) -> ValidationReport:
    """Validate a sequence of lines.

    Args:
        contents: Lines in increasing line-number order
        config: Rule configuration (built-in defaults if None)
        reference: Optional reference lookup for MismatchReferenceBase
        errors: Stream-level errors to carry into the report. A list that is
            filled while ``contents`` is consumed (``LineSource.errors``) is
            read only after the scan.

    Returns:
        ValidationReport

    Raises:
        ConfigurationError: If a rule's message template is invalid
    """
    config = config or Config()

    global_ = GlobalValidator(config)
    meta_information = MetaInformationValidator(config)
    header = HeaderValidator(config)
    record = RecordValidator(config, reference=reference)

    for content in contents:
        global_.push(content)

        category = classify(content.text)
        if category == Category.META_INFORMATION:
            meta_information.push(content)
        elif category == Category.HEADER:
            header.push(content)
            global_.observe_header()
        else:
            record.push(content)

    global_.finalize()
    meta_information.finalize()
    header.finalize()
    record.finalize()

    report = ValidationReport.aggregate(
        errors if errors is not None else [],
        global_,
        meta_information,
        header,
        record,
    )
    log.info(
        "Validated %d lines: %d error(s), %d warning(s), %d unreadable line(s)",
        global_.count,
        report.count(Level.ERROR),
        report.count(Level.WARNING),
        len(report.errors),
    )
    return report


def validate_vcf(
    vcf_path: str | Path,
    config: Config | None = None,
    reference=None,
) -> ValidationReport:
    """Validate a plain (.vcf) or bgzipped (.vcf.gz, .vcf.bgz) VCF file.

    Args:
        vcf_path: Path to the VCF file
        config: Rule configuration (built-in defaults if None)
        reference: Optional reference lookup for MismatchReferenceBase

    Returns:
        ValidationReport

    Raises:
        InputFileError: If the file cannot be opened
        ConfigurationError: If a rule's message template is invalid
    """
    with LineSource.from_path(vcf_path) as source:
        return validate_contents(
            source, config=config, reference=reference, errors=source.errors
        )
