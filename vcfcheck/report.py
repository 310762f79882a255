"""Validation report assembled from the finalized category validators.

The report holds no rule logic. It keeps stream-level errors plus each
category's findings: keyed by line for Global and Record (None key for
whole-file findings), flat lists for Meta-information and Header.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pandas as pd
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .constants import Category, Level, ReportType
from .content import Content
from .errors import ConfigurationError
from .reader import InvalidEncoding
from .validators import (
    GlobalValidator,
    HeaderValidator,
    MetaInformationValidator,
    RecordValidator,
    ValidationError,
)

log = logging.getLogger(__name__)

REPORT_VERSION = "1.0"

STREAM = "stream"

TEMPLATES_DIR = Path(__file__).parent / "templates"

FRAME_COLUMNS = ["category", "line", "text", "code", "name", "level", "message"]


class ValidationReport:
    """Structured result of validating one file.

    Args:
        errors: Stream-level errors (lines that could not be decoded)
        global_errors: Global findings keyed by line or None
        meta_information: Meta-information findings
        header: Header findings
        record: Record findings keyed by line
    """

    def __init__(
        self,
        errors: list[InvalidEncoding] | None = None,
        global_errors: dict[Content | None, list[ValidationError]] | None = None,
        meta_information: list[ValidationError] | None = None,
        header: list[ValidationError] | None = None,
        record: dict[Content | None, list[ValidationError]] | None = None,
    ):
        self.errors = list(errors or [])
        self.global_errors = dict(global_errors or {})
        self.meta_information = list(meta_information or [])
        self.header = list(header or [])
        self.record = dict(record or {})

    @classmethod
    def aggregate(
        cls,
        errors: list[InvalidEncoding],
        global_: GlobalValidator,
        meta_information: MetaInformationValidator,
        header: HeaderValidator,
        record: RecordValidator,
    ) -> ValidationReport:
        """Compose a report from finalized validators."""
        return cls(
            errors=errors,
            global_errors=global_.errors,
            meta_information=meta_information.errors,
            header=header.errors,
            record=record.errors,
        )

    def findings(self) -> Iterator[tuple[str, Content | None, ValidationError]]:
        """Yield ``(category, content, finding)`` in report order."""
        for content, errors in self.global_errors.items():
            for error in errors:
                yield Category.GLOBAL, content, error
        for error in self.meta_information:
            yield Category.META_INFORMATION, None, error
        for error in self.header:
            yield Category.HEADER, None, error
        for content, errors in self.record.items():
            for error in errors:
                yield Category.RECORD, content, error

    def count(self, level: str | None = None) -> int:
        """Number of findings, optionally only those at ``level``."""
        return sum(
            1 for _, _, error in self.findings() if level is None or error.level == level
        )

    def has_errors(self) -> bool:
        """True if any line was unreadable or any finding is error-level."""
        return bool(self.errors) or self.count(Level.ERROR) > 0

    def to_dict(self) -> dict:
        """JSON-serialisable representation of the report."""

        def keyed(mapping: dict) -> list[dict]:
            return [
                {
                    "content": content.to_dict() if content is not None else None,
                    "errors": [error.to_dict() for error in errors],
                }
                for content, errors in mapping.items()
            ]

        return {
            "report_version": REPORT_VERSION,
            "summary": {
                "stream_errors": len(self.errors),
                "errors": self.count(Level.ERROR),
                "warnings": self.count(Level.WARNING),
            },
            "errors": [error.to_dict() for error in self.errors],
            "global": keyed(self.global_errors),
            "meta_information": [error.to_dict() for error in self.meta_information],
            "header": [error.to_dict() for error in self.header],
            "record": keyed(self.record),
        }

    def to_json(self) -> str:
        """Serialize the report to a pretty-printed JSON string."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    def rows(self) -> list[dict]:
        """One flat row per stream error and finding, in report order.

        Keys are ``FRAME_COLUMNS``; line and text are None for whole-file
        findings, code and name are None for stream errors.
        """
        rows = []
        for issue in self.errors:
            rows.append(
                {
                    "category": STREAM,
                    "line": issue.content.line_number,
                    "text": issue.content.text,
                    "code": None,
                    "name": None,
                    "level": Level.ERROR,
                    "message": str(issue),
                }
            )
        for category, content, error in self.findings():
            rows.append(
                {
                    "category": category,
                    "line": content.line_number if content is not None else None,
                    "text": content.text if content is not None else None,
                    **error.to_dict(),
                }
            )
        return rows

    def to_frame(self) -> pd.DataFrame:
        """Tabular view of ``rows()`` with a nullable integer line column."""
        df = pd.DataFrame(self.rows(), columns=FRAME_COLUMNS)
        df["line"] = df["line"].astype("Int64")
        return df

    def to_tsv(self) -> str:
        return self.to_frame().to_csv(sep="\t", index=False)

    def to_markdown(
        self,
        template_name: str = "report.md.j2",
        templates_dir: str | Path | None = None,
    ) -> str:
        """Render the report as Markdown.

        Args:
            template_name: Jinja2 template file name
            templates_dir: Override templates directory path

        Returns:
            Rendered Markdown string
        """
        tpl_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR
        env = Environment(
            loader=FileSystemLoader(str(tpl_dir)),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        env.filters["cell"] = _markdown_cell

        template = env.get_template(template_name)
        markdown = template.render(
            summary=self.to_dict()["summary"],
            rows=self.rows(),
        )

        log.debug("Rendered Markdown report (%d chars)", len(markdown))
        return markdown

    def render(self, report_type: str) -> str:
        """Serialize the report in one of ``ReportType.ALL``."""
        if report_type == ReportType.JSON:
            return self.to_json() + "\n"
        if report_type == ReportType.TSV:
            return self.to_tsv()
        if report_type == ReportType.MARKDOWN:
            return self.to_markdown()
        raise ConfigurationError(
            f"Invalid report type '{report_type}'. "
            f"Valid options are: {sorted(ReportType.ALL)}"
        )

    def __repr__(self) -> str:
        return (
            f"ValidationReport(stream_errors={len(self.errors)}, "
            f"findings={self.count()})"
        )


def _markdown_cell(value) -> str:
    """Make a value safe for a Markdown table cell."""
    if value is None:
        return ""
    return str(value).replace("|", "\\|").replace("\n", " ")
