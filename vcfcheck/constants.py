"""Constants and enumerations for vcfcheck.

Centralizes magic strings into named constants for type safety and IDE support.
"""


class Level:
    """Severity attached to every rule and echoed into every finding."""

    NONE = "none"
    WARNING = "warning"
    ERROR = "error"

    ALL = {NONE, WARNING, ERROR}


class Category:
    """Line categories, one validator each."""

    GLOBAL = "global"
    META_INFORMATION = "meta_information"
    HEADER = "header"
    RECORD = "record"

    ALL = {GLOBAL, META_INFORMATION, HEADER, RECORD}


class Language:
    """Languages of the built-in message templates."""

    EN = "en"
    JA = "ja"

    ALL = {EN, JA}


class ReportType:
    """Output formats of the validation report."""

    JSON = "json"
    MARKDOWN = "markdown"
    TSV = "tsv"

    ALL = {JSON, MARKDOWN, TSV}


# Line prefixes
META_PREFIX = "##"
HEADER_PREFIX = "#"

FIELD_DELIMITER = "\t"
ALLELE_SEPARATOR = ","

# Field indices of a data line
CHROM = 0
POS = 1
ID = 2
REF = 3
ALT = 4

HEADER_COLUMNS = ["CHROM", "POS", "ID", "REF", "ALT", "QUAL", "FILTER", "INFO"]

# IUPAC nucleotide codes, ambiguity codes included
NUCLEOTIDES = "ACGTURYSWKMBDHVN"

DEFAULT_FILE_FORMATS = ["VCFv4.2", "VCFv4.3"]
DEFAULT_ALLOWED_BASES = ["A", "C", "G", "T", "U"]
DEFAULT_AMBIGUOUS_BASES = ["R", "Y", "S", "W", "K", "M", "B", "D", "H", "V", "N"]
DEFAULT_MISSING_BASES = [".", "-"]
DEFAULT_MAX_INDEL_LENGTH = 50
