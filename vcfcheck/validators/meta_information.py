"""Checks over the meta-information lines (prefixed ``##``)."""

import re

from ..config import Config
from ..content import Content
from .base import Rule, ValidationError, Validator

FILE_FORMAT_PATTERN = re.compile(r"^##fileformat=(.*)$")


def file_format_declarations(contents: list[Content]) -> list[tuple[Content, str]]:
    """Return every ``##fileformat=`` line with its declared value.

    Example:
        >>> file_format_declarations([Content(1, "##fileformat=VCFv4.3")])
        [(Content(line_number=1, text='##fileformat=VCFv4.3'), 'VCFv4.3')]
    """
    declarations = []
    for content in contents:
        match = FILE_FORMAT_PATTERN.match(content.text)
        if match:
            declarations.append((content, match.group(1)))
    return declarations


class FileFormat(Rule):
    """Exactly one allowed ``fileformat`` declaration, on the first line."""

    code = "JV_VR0001"
    name = "MetaInformation/FileFormat"
    variables = ("allowed",)

    def check(self, state: "MetaInformationValidator") -> ValidationError | None:
        allowed = self.params["allowed"]
        declarations = file_format_declarations(state.contents)

        if len(declarations) == 1:
            content, value = declarations[0]
            if content.line_number == 1 and value in allowed:
                return None

        return self.error(allowed="/".join(allowed))


class Version(Rule):
    """The declared format version is one of the accepted versions.

    Only the value of the first declaration is inspected; a missing or
    misplaced declaration is left to ``FileFormat``.
    """

    code = "JV_VR0012"
    name = "MetaInformation/Version"
    variables = ("allowed",)

    def check(self, state: "MetaInformationValidator") -> ValidationError | None:
        allowed = self.params["allowed"]
        declarations = file_format_declarations(state.contents)

        if not declarations:
            return None

        _, value = declarations[0]
        if value in allowed:
            return None

        return self.error(allowed=", ".join(allowed))


class MetaInformationValidator(Validator):
    """Accumulates meta lines and checks them once the stream has ended."""

    final_rules = (FileFormat, Version)

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
