"""Exceptions raised by vcfcheck.

Rule findings are not exceptions (see ``validators.base.ValidationError``);
the classes here signal faults that stop a run or a lookup.
"""


class VCFCheckError(Exception):
    """Base class for all vcfcheck failures."""

    pass


class ConfigurationError(VCFCheckError):
    """Invalid rule configuration or message template."""

    pass


class InputFileError(VCFCheckError):
    """Input file missing, unsupported or unreadable."""

    pass


class IndexBuildError(VCFCheckError):
    """Building a FASTA index failed."""

    pass


class ReferenceLookupError(VCFCheckError):
    """A subsequence could not be fetched from the reference."""

    pass
