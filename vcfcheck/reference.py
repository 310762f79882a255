"""Reference FASTA access for REF base cross-checking.

Wraps an indexed FASTA behind a small lookup interface so that only the
mismatch rule depends on it, and provides index building through pysam.
"""

import logging
from pathlib import Path

import pysam
from pysam.utils import SamtoolsError

from .errors import IndexBuildError, InputFileError, ReferenceLookupError

log = logging.getLogger(__name__)


def index_path(ref_path: str | Path) -> Path:
    """Return the path of the .fai index belonging to a FASTA file."""
    return Path(str(ref_path) + ".fai")


def build_index(ref_path: str | Path) -> Path:
    """Build the .fai index of a FASTA file.

    Args:
        ref_path: Path to FASTA file

    Returns:
        Path to the created index

    Raises:
        IndexBuildError: If the FASTA is missing or cannot be indexed

    Example:
        >>> build_index("GRCh38.fa")
        PosixPath('GRCh38.fa.fai')
    """
    path = Path(ref_path)
    if not path.is_file():
        raise IndexBuildError(f"Reference FASTA not found: {path}")

    try:
        pysam.faidx(str(path))
    except (SamtoolsError, OSError) as e:
        raise IndexBuildError(f"Failed to index reference FASTA {path.name}: {e}") from e

    fai_path = index_path(path)
    if not fai_path.exists():
        raise IndexBuildError(f"Index for reference FASTA {path.name} was not created")

    log.info("Built reference index: %s", fai_path)
    return fai_path


def validate_reference_indexed(ref_path: str | Path) -> None:
    """Validate FASTA reference has .fai index.

    Args:
        ref_path: Path to FASTA file

    Raises:
        InputFileError: If FASTA is missing or not indexed
    """
    path = Path(ref_path)
    if not path.is_file():
        raise InputFileError(f"Reference FASTA not found: {path}")

    fai_path = index_path(path)

    if not fai_path.exists():
        raise InputFileError(
            f"Reference FASTA {path.name} is missing index. "
            f"Expected {path.name}.fai. "
            f"Run: samtools faidx {path.name}"
        )

    if fai_path.stat().st_size == 0:
        raise InputFileError(
            f"Reference FASTA index {fai_path.name} is empty. "
            f"Re-run: samtools faidx {path.name}"
        )


class ReferenceSequence:
    """Read-only lookup of subsequences from an indexed FASTA.

    Args:
        ref_path: Path to an indexed FASTA file
    """

    def __init__(self, ref_path: str | Path):
        self.path = Path(ref_path)
        validate_reference_indexed(self.path)
        try:
            self._fasta = pysam.FastaFile(str(self.path))
        except (OSError, ValueError) as e:
            raise InputFileError(
                f"Reference FASTA {self.path.name} cannot be opened: {e}"
            ) from e

    def fetch(self, chrom: str, start: int, end: int) -> str:
        """Fetch bases ``start`` to ``end`` of a sequence.

        Args:
            chrom: Sequence name
            start: Zero-based start offset
            end: Zero-based inclusive end offset

        Returns:
            Bases as stored in the FASTA (case preserved)

        Raises:
            ReferenceLookupError: If the sequence is unknown or the
                interval is invalid
        """
        try:
            return self._fasta.fetch(chrom, start, end + 1)
        except (KeyError, ValueError, IndexError, OSError) as e:
            raise ReferenceLookupError(
                f"Failed to fetch {chrom}:{start}-{end} from {self.path.name}: {e}"
            ) from e

    def close(self) -> None:
        self._fasta.close()

    def __enter__(self) -> "ReferenceSequence":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_reference(ref_path: str | Path, build: bool = False) -> ReferenceSequence:
    """Open a reference FASTA, optionally building a missing index first."""
    if build and not index_path(ref_path).exists():
        build_index(ref_path)
    return ReferenceSequence(ref_path)
