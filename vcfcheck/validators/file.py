"""Whole-file checks evaluated against every line regardless of category."""

from ..config import Config
from ..constants import HEADER_PREFIX
from ..content import Content
from .base import Rule, ValidationError, Validator


class DataBeforeHeader(Rule):
    """A line that is not a header or meta line appears before the header."""

    code = "JV_VR0004"
    name = "Global/DataBeforeHeader"

    def check(self, state: "GlobalValidator") -> ValidationError | None:
        if state.header:
            return None

        content = state.current_content
        if content is not None and content.text.startswith(HEADER_PREFIX):
            return None

        return self.error()


class BlankLine(Rule):
    code = "JV_VR0006"
    name = "Global/BlankLine"

    def check(self, state: "GlobalValidator") -> ValidationError | None:
        content = state.current_content
        if content is not None and content.text:
            return None

        return self.error()


class EmptyVCF(Rule):
    """No lines at all were read."""

    code = "JV_VR0007"
    name = "Global/EmptyVCF"

    def check(self, state: "GlobalValidator") -> ValidationError | None:
        if state.count > 0:
            return None

        return self.error()


class GlobalValidator(Validator):
    """Order-sensitive invariants over the whole file.

    Every line is pushed here before it is routed to its category. The
    driver calls ``observe_header`` whenever it routes a line to the header
    validator, so ``header`` reflects whether a header line has been seen
    so far.

    Attributes:
        header: Whether a header line has been observed
        count: Number of lines pushed
        errors: Findings keyed by line, or by None for whole-file findings
    """

    line_rules = (DataBeforeHeader, BlankLine)
    final_rules = (EmptyVCF,)

    def __init__(self, config: Config):
        super().__init__(config)
        self.header = False
        self.count = 0
        self.current_content: Content | None = None
        self.previous_content: Content | None = None
        self.errors: dict[Content | None, list[ValidationError]] = {}

    def observe_header(self) -> None:
        self.header = True

    def push(self, content: Content) -> None:
        if self.finalized:
            return

        self.count += 1
        self.current_content = content

        for error in self.evaluate(self.rules):
            self.errors.setdefault(content, []).append(error)

        self.previous_content = self.current_content

    def complete(self) -> None:
        for error in self.evaluate(self.finalize_rules):
            self.errors.setdefault(None, []).append(error)
