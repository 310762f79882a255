"""Streaming validation of VCF files against a configurable rule catalogue.

A file is read once, line by line. Each line is checked by the whole-file
validator and by the validator of its category (meta-information, header or
data record); findings are collected into a structured, severity-levelled
report.

Modules:
    content: Numbered input lines
    reader: Plain and bgzipped line sources
    config: Rule configuration (YAML) and message templates (Jinja2)
    validators: Category validators and the rule catalogue
    reference: Indexed FASTA lookup and index building
    engine: Line classification and the validation driver
    report: Report aggregation and JSON, TSV and Markdown output
    validate: Command-line entry point

Example:
    >>> from vcfcheck import Config, validate_vcf
    >>> report = validate_vcf("sample.vcf.gz", config=Config(language="ja"))
    >>> print(report.to_json())
"""

from .config import Config, RuleConfig
from .constants import Category, Language, Level, ReportType
from .content import Content
from .engine import classify, validate_contents, validate_vcf
from .errors import (
    ConfigurationError,
    IndexBuildError,
    InputFileError,
    ReferenceLookupError,
    VCFCheckError,
)
from .reader import InvalidEncoding, LineSource, open_input
from .reference import ReferenceSequence, build_index, open_reference
from .report import ValidationReport
from .validators import ValidationError

__version__ = "0.1.0"

__all__ = [
    # Model
    "Content",
    "ValidationError",
    "ValidationReport",
    "InvalidEncoding",
    # Constants
    "Category",
    "Language",
    "Level",
    "ReportType",
    # Configuration
    "Config",
    "RuleConfig",
    # Engine
    "classify",
    "validate_contents",
    "validate_vcf",
    # Input
    "LineSource",
    "open_input",
    # Reference
    "ReferenceSequence",
    "build_index",
    "open_reference",
    # Exceptions
    "VCFCheckError",
    "ConfigurationError",
    "InputFileError",
    "IndexBuildError",
    "ReferenceLookupError",
]
