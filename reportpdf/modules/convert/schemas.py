"""
Convert module schemas.
"""

from pydantic import BaseModel, Field

from reportpdf.modules.template.schemas import Report


class FillTemplateRequest(BaseModel):
    """Report data plus the HTML template it is substituted into."""
    report: Report
    template: str = Field(..., description="HTML template with {{Table:..}}/{{Text:..}} placeholders")


class ConvertRequest(FillTemplateRequest):
    """Request to convert a report to PDF."""
    header_html: str | None = Field(None, description="Header HTML used instead of the report's header text")
    footer_html: str | None = Field(None, description="Footer HTML used instead of the report's footer text")
    filename: str = Field("report.pdf", min_length=1, max_length=255, description="Download filename")


class FilledTemplateResponse(BaseModel):
    html: str
    duplicate_placeholders: list[str] = Field(default_factory=list)
