"""Per-record field checks and cross-record invariants for data lines.

Each data line is split on tabs; rules look at the current record and, for
sortedness and contiguity, at the previous one and at the set of CHROM values
seen so far. Only the current and previous record are kept in memory.

A missing REF, ALT or POS field fails the rules that inspect that field,
sortedness and indel length included. IdenticalBases and the reference
mismatch check abstain when their inputs are absent.

Rules run in alphabetical order of their names, which fixes the order of
findings within a line.
"""

import logging
import re

from ..config import Config
from ..constants import (
    ALLELE_SEPARATOR,
    ALT,
    CHROM,
    FIELD_DELIMITER,
    HEADER_PREFIX,
    NUCLEOTIDES,
    POS,
    REF,
)
from ..content import Content
from ..errors import ReferenceLookupError
from .base import Rule, ValidationError, Validator

log = logging.getLogger(__name__)

POSITION_PATTERN = re.compile(r"\+?[0-9]+")
NUCLEOTIDE_RUN = re.compile(f"[{NUCLEOTIDES}]*", re.IGNORECASE)

FETCH_FAILED = "Failed to obtain sequence from FASTA"


def parse_position(value: str | None) -> int | None:
    """Parse a POS value as a non-negative integer.

    Examples:
        >>> parse_position("10001")
        10001
        >>> parse_position("1e5") is None
        True
    """
    if value is None or not POSITION_PATTERN.fullmatch(value):
        return None
    return int(value)


def nucleotide_run_length(value: str) -> int:
    """Length of the leading run of IUPAC nucleotide characters.

    Examples:
        >>> nucleotide_run_length("ACGTN")
        5
        >>> nucleotide_run_length("A,CGT")
        1
        >>> nucleotide_run_length("<DEL>")
        0
    """
    return len(NUCLEOTIDE_RUN.match(value).group(0))


class AllowedReferenceBase(Rule):
    code = "JV_VR0030"
    name = "Record/AllowedReferenceBase"
    variables = ("allowed",)

    def check(self, state: "RecordValidator") -> ValidationError | None:
        allowed = self.params["allowed"]
        reference = state.current(REF)

        if reference is not None and all(base in allowed for base in reference):
            return None

        return self.error(allowed=", ".join(allowed))


class AllowedAlternateBase(Rule):
    """Every comma-separated ALT allele uses allowed characters only."""

    code = "JV_VR0036"
    name = "Record/AllowedAlternateBase"
    variables = ("allowed",)

    def check(self, state: "RecordValidator") -> ValidationError | None:
        allowed = self.params["allowed"]
        alternate = state.current(ALT)

        if alternate is not None and all(
            all(base in allowed for base in allele)
            for allele in alternate.split(ALLELE_SEPARATOR)
        ):
            return None

        return self.error(allowed=", ".join(allowed))


class DisallowedTokenRule(Rule):
    """Field at ``index`` contains none of the configured disallowed tokens."""

    index = REF
    variables = ("disallowed",)

    def check(self, state: "RecordValidator") -> ValidationError | None:
        disallowed = self.params["disallowed"]
        value = state.current(self.index)

        if value is not None and not any(token in value for token in disallowed):
            return None

        return self.error(disallowed=", ".join(disallowed))


class AmbiguousReferenceBase(DisallowedTokenRule):
    code = "JV_VR0028"
    name = "Record/AmbiguousReferenceBase"
    index = REF


class AmbiguousAlternateBase(DisallowedTokenRule):
    code = "JV_VR0034"
    name = "Record/AmbiguousAlternateBase"
    index = ALT


class MissingReferenceBase(DisallowedTokenRule):
    code = "JV_VR0029"
    name = "Record/MissingReferenceBase"
    index = REF


class MissingAlternateBase(DisallowedTokenRule):
    code = "JV_VR0035"
    name = "Record/MissingAlternateBase"
    index = ALT


class IdenticalBases(Rule):
    code = "JV_VR0027"
    name = "Record/IdenticalBases"

    def check(self, state: "RecordValidator") -> ValidationError | None:
        reference, alternate = state.current(REF), state.current(ALT)
        # Absent fields are reported by the Allowed/Missing rules
        if reference is None or alternate is None:
            return None

        if reference != alternate:
            return None

        return self.error()


class MultipleAlternateAlleles(Rule):
    code = "JV_VR0038"
    name = "Record/MultipleAlternateAlleles"

    def check(self, state: "RecordValidator") -> ValidationError | None:
        alternate = state.current(ALT)

        if alternate is not None and ALLELE_SEPARATOR not in alternate:
            return None

        return self.error()


class PositionFormat(Rule):
    code = "JV_VR0024"
    name = "Record/PositionFormat"

    def check(self, state: "RecordValidator") -> ValidationError | None:
        if parse_position(state.current(POS)) is not None:
            return None

        return self.error()


class UnsortedPosition(Rule):
    """POS does not decrease within a run of records sharing CHROM.

    Within one CHROM, a missing or non-numeric POS on either record cannot
    be shown to be sorted and is reported.
    """

    code = "JV_VR0026"
    name = "Record/UnsortedPosition"

    def check(self, state: "RecordValidator") -> ValidationError | None:
        if state.previous_record is None:
            return None

        if state.previous(CHROM) != state.current(CHROM):
            return None

        previous_pos = parse_position(state.previous(POS))
        current_pos = parse_position(state.current(POS))
        if previous_pos is not None and current_pos is not None:
            if previous_pos <= current_pos:
                return None

        return self.error()


class DiscontiguousChromosome(Rule):
    """A CHROM value reappears after records of another CHROM."""

    code = "JV_VR0025"
    name = "Record/DiscontiguousChromosome"

    def check(self, state: "RecordValidator") -> ValidationError | None:
        if state.previous_record is None:
            return None

        chrom = state.current(CHROM)
        if state.previous(CHROM) == chrom:
            return None

        if chrom not in state.chromosomes:
            return None

        return self.error()


class InsertionLength(Rule):
    code = "JV_VR0031"
    name = "Record/InsertionLength"
    variables = ("max",)

    def check(self, state: "RecordValidator") -> ValidationError | None:
        maximum = self.params["max"]
        reference, alternate = state.current(REF), state.current(ALT)

        if reference is not None and alternate is not None:
            length = nucleotide_run_length(alternate) - nucleotide_run_length(reference)
            if length < maximum:
                return None

        return self.error(max=maximum)


class DeletionLength(Rule):
    code = "JV_VR0037"
    name = "Record/DeletionLength"
    variables = ("max",)

    def check(self, state: "RecordValidator") -> ValidationError | None:
        maximum = self.params["max"]
        reference, alternate = state.current(REF), state.current(ALT)

        if reference is not None and alternate is not None:
            length = nucleotide_run_length(reference) - nucleotide_run_length(alternate)
            if length < maximum:
                return None

        return self.error(max=maximum)


class MismatchReferenceBase(Rule):
    """REF equals the reference sequence at POS, ignoring case.

    Only evaluated when the validator was given a reference. A failed lookup
    is reported as a mismatch against a placeholder sequence.
    """

    code = "JV_VR0033"
    name = "Record/MismatchReferenceBase"
    variables = ("vcf", "fasta")

    def check(self, state: "RecordValidator") -> ValidationError | None:
        if state.reference is None:
            return None

        chrom = state.current(CHROM)
        reference = state.current(REF)
        position = parse_position(state.current(POS))
        if chrom is None or reference is None or not position:
            return None

        # VCF POS is 1-based; the lookup takes a 0-based inclusive interval
        begin = position - 1
        end = begin + len(reference) - 1

        try:
            fasta = state.reference.fetch(chrom, begin, end)
        except ReferenceLookupError as e:
            log.debug("Reference lookup failed: %s", e)
            fasta = FETCH_FAILED

        if isinstance(fasta, bytes):
            fasta = fasta.decode("ascii", errors="replace")

        if reference.lower() == fasta.lower():
            return None

        return self.error(vcf=reference, fasta=fasta)


class RecordValidator(Validator):
    """Data line validator.

    Args:
        config: Configuration aggregate
        reference: Optional lookup with a ``fetch(chrom, start, end)`` method
            (zero-based, inclusive end); enables MismatchReferenceBase

    Attributes:
        current_record: Fields of the most recent data line
        previous_record: Fields of the data line before it
        chromosomes: CHROM values of all records before the current one
        errors: Findings keyed by line
    """

    line_rules = (
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
        UnsortedPosition,
    )

    def __init__(self, config: Config, reference=None):
        super().__init__(config)
        self.reference = reference
        self.chromosomes: set[str] = set()
        self.current_record: list[str] | None = None
        self.previous_record: list[str] | None = None
        self.errors: dict[Content | None, list[ValidationError]] = {}

    def current(self, index: int) -> str | None:
        """Field ``index`` of the current record, or None if absent."""
        return _field(self.current_record, index)

    def previous(self, index: int) -> str | None:
        """Field ``index`` of the previous record, or None if absent."""
        return _field(self.previous_record, index)

    def push(self, content: Content) -> None:
        if self.finalized:
            return

        # Blank lines are reported by Global/BlankLine and otherwise ignored
        if not content.text or content.text.startswith(HEADER_PREFIX):
            return

        self.current_record = content.text.split(FIELD_DELIMITER)

        for error in self.evaluate(self.rules):
            self.errors.setdefault(content, []).append(error)

        self.chromosomes.add(self.current_record[CHROM])
        self.previous_record = self.current_record


def _field(record: list[str] | None, index: int) -> str | None:
    if record is None or index >= len(record):
        return None
    return record[index]
