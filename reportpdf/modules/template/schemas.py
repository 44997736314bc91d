"""
Report document model.

A report carries the tables and text blocks substituted into an HTML template
plus the page setup used to derive print options. Models are read-only input
to the pipeline.
"""

from pydantic import BaseModel, ConfigDict, Field


class ReportModel(BaseModel):
    """Base for report models: immutable, accepts unknown keys silently."""

    model_config = ConfigDict(frozen=True, extra="ignore")


# =============================================================================
# TABLES & TEXTS
# =============================================================================

class TableRow(ReportModel):
    """One data row, column values in display order."""
    columns: list[str] = Field(default_factory=list)


class TableDefinition(ReportModel):
    """
    Named table substituted at ``{table_prefix}{name}{postfix}``.

    The ``*_metadata`` strings are raw attribute text placed inside the
    corresponding opening tag, e.g. ``class="grid" border="1"``.
    """
    name: str
    table_metadata: str = ""
    header_row_metadata: str = ""
    header_cell_metadata: str = ""
    row_metadata: str = ""
    cell_metadata: str = ""
    headers: list[str] = Field(default_factory=list)
    rows: list[TableRow] = Field(default_factory=list)


class TextBlock(ReportModel):
    """Named text value substituted at ``{text_prefix}{name}{postfix}``."""
    name: str
    value: str = ""


# =============================================================================
# PAGE SETUP
# =============================================================================

class MarginBox(ReportModel):
    """Margin distances in pixels; zero or negative means "use default"."""
    height: float = 0
    left: float = 0
    right: float = 0


class PageMargin(ReportModel):
    header_margin: MarginBox | None = None
    footer_margin: MarginBox | None = None


class TextStyle(ReportModel):
    """Header or footer text with its styling."""
    font: str | None = None
    font_size: int = 0
    alignment: str | None = None
    text: str | None = None


class PageSetup(ReportModel):
    size: str | None = Field(None, description="A4, A3, A5, Letter, Legal or Tabloid")
    orientation: str | None = Field(None, description="portrait or landscape")
    page_margin: PageMargin | None = None
    header_text: TextStyle | None = None
    footer_text: TextStyle | None = None


# =============================================================================
# REPORT
# =============================================================================

class ReportData(ReportModel):
    tables: list[TableDefinition] = Field(default_factory=list)
    texts: list[TextBlock] = Field(default_factory=list)
    page_setup: PageSetup | None = None
    include_page_number: bool = False


class Report(ReportModel):
    report_data: ReportData = Field(default_factory=ReportData)
