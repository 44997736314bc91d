"""Template module - report model and placeholder substitution."""

from .schemas import (
    MarginBox,
    PageMargin,
    PageSetup,
    Report,
    ReportData,
    TableDefinition,
    TableRow,
    TextBlock,
    TextStyle,
)
from .service import TemplateService

__all__ = [
    "MarginBox",
    "PageMargin",
    "PageSetup",
    "Report",
    "ReportData",
    "TableDefinition",
    "TableRow",
    "TextBlock",
    "TextStyle",
    "TemplateService",
]
