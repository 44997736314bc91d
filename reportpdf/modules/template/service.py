"""
Template service - placeholder substitution for report tables and texts.

Substitution is literal, ordinal and case-sensitive: no HTML parsing happens
and, unless escaping is requested, values and metadata are inserted verbatim.
Callers that feed untrusted data should pass ``escape=True``.
"""

import html
from collections import Counter

from reportpdf.config import get_settings
from reportpdf.shared.logging import get_logger

from .schemas import Report, TableDefinition

logger = get_logger(__name__)


def _attrs(metadata: str) -> str:
    """Opening-tag attribute text with its leading space, empty when unset."""
    return f" {metadata}" if metadata else ""


class TemplateService:
    """Fills ``{{Table:...}}`` and ``{{Text:...}}`` placeholders in HTML templates."""

    def __init__(
        self,
        table_prefix: str | None = None,
        text_prefix: str | None = None,
        postfix: str | None = None,
        escape: bool | None = None,
    ) -> None:
        settings = get_settings()
        self.table_prefix = table_prefix if table_prefix is not None else settings.table_prefix
        self.text_prefix = text_prefix if text_prefix is not None else settings.text_prefix
        self.postfix = postfix if postfix is not None else settings.placeholder_postfix
        self.escape = escape if escape is not None else settings.escape_values

    # -------------------------------------------------------------------------
    # Placeholders
    # -------------------------------------------------------------------------

    def table_placeholder(self, name: str) -> str:
        return f"{self.table_prefix}{name}{self.postfix}"

    def text_placeholder(self, name: str) -> str:
        return f"{self.text_prefix}{name}{self.postfix}"

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def build_table_html(self, table: TableDefinition, escape: bool | None = None) -> str:
        """
        Build ``<table>`` markup for a table definition.

        Header labels and cell values are escaped only when ``escape`` is on;
        metadata attribute strings are never touched.
        """
        escape = self.escape if escape is None else escape

        def value(text: str) -> str:
            return html.escape(text) if escape else text

        parts = [
            f"<table{_attrs(table.table_metadata)}> <thead> "
            f"<tr{_attrs(table.header_row_metadata)}>"
        ]
        for label in table.headers:
            parts.append(f"<th{_attrs(table.header_cell_metadata)}>{value(label)}</th>")
        parts.append("</tr> </thead>")

        for row in table.rows:
            parts.append(f"<tr{_attrs(table.row_metadata)}>")
            for column in row.columns:
                parts.append(f"<td{_attrs(table.cell_metadata)}>{value(column)}</td>")
            parts.append("</tr>")

        parts.append("</table>")
        return "".join(parts)

    def substitute_tables(
        self, report: Report, template: str, escape: bool | None = None
    ) -> str:
        """
        Replace every table placeholder present in ``template`` with table markup.

        Tables are processed in report order; markup is only built for tables
        whose placeholder occurs in the (already partially substituted) template.
        """
        for table in report.report_data.tables:
            placeholder = self.table_placeholder(table.name)
            if placeholder in template:
                template = template.replace(
                    placeholder, self.build_table_html(table, escape=escape)
                )
        return template

    # -------------------------------------------------------------------------
    # Texts
    # -------------------------------------------------------------------------

    def substitute_texts(
        self, report: Report, template: str, escape: bool | None = None
    ) -> str:
        """Replace every text placeholder with its block's value."""
        escape = self.escape if escape is None else escape
        for block in report.report_data.texts:
            value = html.escape(block.value) if escape else block.value
            template = template.replace(self.text_placeholder(block.name), value)
        return template

    def fill(self, report: Report, template: str) -> str:
        """Substitute tables, then texts."""
        return self.substitute_texts(report, self.substitute_tables(report, template))

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def find_duplicate_names(self, report: Report) -> list[str]:
        """
        Placeholders defined more than once in ``report``.

        With duplicates the first definition in report order wins, because its
        replacement consumes the placeholder before the later one is tried.
        """
        placeholders = [self.table_placeholder(t.name) for t in report.report_data.tables]
        placeholders += [self.text_placeholder(t.name) for t in report.report_data.texts]
        return sorted(p for p, count in Counter(placeholders).items() if count > 1)
