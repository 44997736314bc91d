"""Render module schemas."""

from pydantic import BaseModel, Field


class RenderPdfRequest(BaseModel):
    """Request to render ready-made HTML to PDF."""

    html: str = Field(..., description="HTML content to render")
    paper_format: str = Field(
        default="A4",
        description="Paper size: A4, A3, A5, Letter, Legal, Tabloid"
    )
    landscape: bool = Field(default=False, description="Landscape orientation")
    margins: dict[str, str] | None = Field(
        default=None,
        description="Custom margins (top, bottom, left, right in CSS units)"
    )
    header_template: str | None = Field(
        default=None,
        description="Header HTML; spans with class pageNumber/totalPages are filled in"
    )
    footer_template: str | None = Field(default=None, description="Footer HTML")
    print_background: bool = Field(
        default=True,
        description="Include background colors and images"
    )


class BrowserStatus(BaseModel):
    """Browser binary acquisition status."""

    state: str
    browsers_path: str
    executable: str | None = None
