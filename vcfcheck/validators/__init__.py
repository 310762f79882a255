"""Category validators and the rule catalogue.

Modules:
    base: ValidationError finding, Rule and Validator base classes
    file: Whole-file checks (data before header, blank lines, empty file)
    meta_information: fileformat declaration and version checks
    header: Header line presence, duplication and mandatory columns
    record: Per-record field checks and cross-record invariants

Example:
    >>> from vcfcheck.config import Config
    >>> from vcfcheck.validators import HeaderValidator
    >>> header = HeaderValidator(Config())
    >>> header.finalize().errors[0].name
    'Header/HeaderLine'
"""

from .base import Rule, ValidationError, Validator
from .file import BlankLine, DataBeforeHeader, EmptyVCF, GlobalValidator
from .header import DuplicatedHeader, HeaderColumn, HeaderLine, HeaderValidator
from .meta_information import FileFormat, MetaInformationValidator, Version
from .record import (
    AllowedAlternateBase,
    AllowedReferenceBase,
    AmbiguousAlternateBase,
    AmbiguousReferenceBase,
    DeletionLength,
    DiscontiguousChromosome,
    IdenticalBases,
    InsertionLength,
    MismatchReferenceBase,
    MissingAlternateBase,
    MissingReferenceBase,
    MultipleAlternateAlleles,
    PositionFormat,
    RecordValidator,
    UnsortedPosition,
)

# Every rule, in category order
RULES = (
    GlobalValidator.line_rules
    + GlobalValidator.final_rules
    + MetaInformationValidator.final_rules
    + HeaderValidator.final_rules
    + RecordValidator.line_rules
)

__all__ = [
    # Base
    "Rule",
    "ValidationError",
    "Validator",
    "RULES",
    # Validators
    "GlobalValidator",
    "MetaInformationValidator",
    "HeaderValidator",
    "RecordValidator",
    # Global rules
    "DataBeforeHeader",
    "BlankLine",
    "EmptyVCF",
    # Meta-information rules
    "FileFormat",
    "Version",
    # Header rules
    "HeaderLine",
    "DuplicatedHeader",
    "HeaderColumn",
    # Record rules
    "AllowedReferenceBase",
    "AllowedAlternateBase",
    "AmbiguousReferenceBase",
    "AmbiguousAlternateBase",
    "MissingReferenceBase",
    "MissingAlternateBase",
    "IdenticalBases",
    "MultipleAlternateAlleles",
    "PositionFormat",
    "UnsortedPosition",
    "DiscontiguousChromosome",
    "InsertionLength",
    "DeletionLength",
    "MismatchReferenceBase",
]
