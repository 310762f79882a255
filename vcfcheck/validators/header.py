"""Checks over the column header line (prefixed ``#`` but not ``##``)."""

from ..config import Config
from ..constants import FIELD_DELIMITER, HEADER_COLUMNS, HEADER_PREFIX
from ..content import Content
from .base import Rule, ValidationError, Validator


class HeaderLine(Rule):
    code = "JV_VR0002"
    name = "Header/HeaderLine"

    def check(self, state: "HeaderValidator") -> ValidationError | None:
        if state.contents:
            return None

        return self.error()


class DuplicatedHeader(Rule):
    code = "JV_VR0005"
    name = "Header/DuplicatedHeader"

    def check(self, state: "HeaderValidator") -> ValidationError | None:
        if len(state.contents) <= 1:
            return None

        return self.error()


class HeaderColumn(Rule):
    """The single header line starts with the mandatory columns, in order.

    Columns after INFO (FORMAT and samples) are not inspected. Only a file
    with exactly one header line can pass; none or several always fail.
    """

    code = "JV_VR0003"
    name = "Header/HeaderColumn"
    variables = ("columns",)

    def check(self, state: "HeaderValidator") -> ValidationError | None:
        if len(state.contents) == 1:
            header = state.contents[0].text.removeprefix(HEADER_PREFIX)
            columns = header.split(FIELD_DELIMITER)[: len(HEADER_COLUMNS)]
            if columns == HEADER_COLUMNS:
                return None

        return self.error(columns=", ".join(HEADER_COLUMNS))


class HeaderValidator(Validator):
    """Accumulates header lines and checks them once the stream has ended."""

    final_rules = (HeaderLine, DuplicatedHeader, HeaderColumn)

    def __init__(self, config: Config):
        super().__init__(config)
        self.contents: list[Content] = []
        self.errors: list[ValidationError] = []

    def push(self, content: Content) -> None:
        if self.finalized:
            return
        self.contents.append(content)

    def complete(self) -> None:
        self.errors.extend(self.evaluate(self.finalize_rules))
