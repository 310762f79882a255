"""Line-by-line reading of plain and bgzipped VCF files.

This is the only module that knows about the transport format. Lines come out
as ``Content`` values in increasing line-number order; a line that is not
valid text is reported as an ``InvalidEncoding`` and skipped without stopping
the scan.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, NamedTuple

import pysam

from .content import Content
from .errors import InputFileError

log = logging.getLogger(__name__)

PLAIN_SUFFIXES = {".vcf"}
BGZF_SUFFIXES = {".gz", ".bgz"}

PROGRESS_INTERVAL = 100_000


class InvalidEncoding(NamedTuple):
    """Stream-level error for a line that could not be decoded."""

    content: Content

    def __str__(self) -> str:
        return f"Invalid UTF-8 character at {self.content}"

    def to_dict(self) -> dict:
        return {**self.content.to_dict(), "message": str(self)}


def open_input(vcf_path: str | Path) -> BinaryIO:
    """Open a VCF file for binary reading, choosing transport by extension.

    Args:
        vcf_path: Path to a .vcf, .vcf.gz or .vcf.bgz file

    Returns:
        Binary stream supporting readline() and close()

    Raises:
        InputFileError: If the file is missing, unsupported or unreadable

    Example:
        >>> stream = open_input("sample.vcf.gz")
        >>> stream.readline()
        b'##fileformat=VCFv4.2\\n'
    """
    path = Path(vcf_path)
    if not path.exists():
        raise InputFileError(f"VCF file not found: {path}")
    if not path.is_file():
        raise InputFileError(f"VCF file is not a file: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix in BGZF_SUFFIXES:
            return pysam.BGZFile(str(path), "rb")
        if suffix in PLAIN_SUFFIXES:
            return open(path, "rb")
    except OSError as e:
        raise InputFileError(f"VCF file {path.name} could not be opened: {e}") from e

    raise InputFileError(
        f"VCF file {path.name} has unsupported extension '{suffix}'. "
        f"Expected one of: {sorted(PLAIN_SUFFIXES | BGZF_SUFFIXES)}"
    )


class LineSource:
    """Forward-only sequence of ``Content`` read from a binary stream.

    Args:
        stream: Binary stream with a readline() method
        encoding: Text encoding every line must satisfy

    Attributes:
        errors: ``InvalidEncoding`` entries collected while iterating
        line_count: Number of physical lines read, set once exhausted
    """

    def __init__(self, stream: BinaryIO, encoding: str = "utf-8"):
        self.stream = stream
        self.encoding = encoding
        self.errors: list[InvalidEncoding] = []
        self.line_count = 0

    @classmethod
    @contextmanager
    def from_path(cls, vcf_path: str | Path, encoding: str = "utf-8") -> Iterator["LineSource"]:
        """Open a file and yield a source over it, closing the file afterwards."""
        stream = open_input(vcf_path)
        log.info("Reading VCF: %s", vcf_path)
        try:
            yield cls(stream, encoding=encoding)
        finally:
            stream.close()

    def __iter__(self) -> Iterator[Content]:
        line_number = 0

        while True:
            raw = self.stream.readline()
            if not raw:
                break
            line_number += 1

            try:
                text = raw.decode(self.encoding)
            except UnicodeDecodeError:
                lossy = raw.decode(self.encoding, errors="replace").rstrip()
                issue = InvalidEncoding(Content(line_number, lossy))
                self.errors.append(issue)
                log.warning("%s", issue)
                continue

            yield Content(line_number, text.rstrip())

            if line_number % PROGRESS_INTERVAL == 0:
                log.debug("Processed %d lines", line_number)

        self.line_count = line_number
        log.info("Processed %d lines", line_number)
