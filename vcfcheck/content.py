"""Numbered input lines passed through the validation pipeline."""

from typing import NamedTuple


class Content(NamedTuple):
    """One physical line of a VCF file.

    Ordered by line number; also used as the key findings are attributed to.
    """

    line_number: int
    text: str

    def __str__(self) -> str:
        return f"L{self.line_number}: {self.text}"

    def to_dict(self) -> dict:
        return {"line": self.line_number, "text": self.text}
