"""
Convert module router.
"""

from fastapi import APIRouter, Depends, Response

from reportpdf.modules.render.router import pdf_response
from reportpdf.shared.errors import ValidationError

from .schemas import ConvertRequest, FilledTemplateResponse, FillTemplateRequest
from .service import ConvertService

router = APIRouter(prefix="/convert", tags=["convert"])


def get_service() -> ConvertService:
    """Dependency injection for service."""
    return ConvertService()


def _require_template(template: str) -> None:
    if not template.strip():
        raise ValidationError("HTML template is required")


@router.post("/pdf")
async def convert_pdf(
    req: ConvertRequest,
    service: ConvertService = Depends(get_service)
) -> Response:
    """Fill the template with report data and render it to PDF."""
    _require_template(req.template)
    pdf_bytes = await service.convert(
        req.report, req.template, req.header_html, req.footer_html
    )
    return pdf_response(pdf_bytes, req.filename)


@router.post("/html", response_model=FilledTemplateResponse)
def convert_html(
    req: FillTemplateRequest,
    service: ConvertService = Depends(get_service)
) -> FilledTemplateResponse:
    """Fill the template with report data without rendering (preview)."""
    _require_template(req.template)
    return FilledTemplateResponse(
        html=service.fill_template(req.report, req.template),
        duplicate_placeholders=service.templates.find_duplicate_names(req.report),
    )
