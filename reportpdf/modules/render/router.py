"""Render module routes."""

import re
from dataclasses import replace
from urllib.parse import quote

from fastapi import APIRouter, Response

from reportpdf.modules.layout.print_config import (
    MarginSet,
    build_print_config,
    resolve_paper_format,
)
from reportpdf.shared.errors import ValidationError
from reportpdf.shared.logging import get_logger

from .installer import get_installer
from .schemas import BrowserStatus, RenderPdfRequest
from .service import RenderService

logger = get_logger(__name__)
router = APIRouter(prefix="/render", tags=["render"])

MARGIN_SIDES = ("top", "bottom", "left", "right")

_UNSAFE_FILENAME_CHARS = re.compile(r"[^\w.\- ]", re.ASCII)


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and an RFC 5987 UTF-8 name."""
    fallback = _UNSAFE_FILENAME_CHARS.sub("_", filename).strip() or "report.pdf"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def pdf_response(pdf_bytes: bytes, filename: str) -> Response:
    """Binary PDF response with download headers."""
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": content_disposition(filename),
            "Content-Length": str(len(pdf_bytes)),
        }
    )


@router.post("/pdf")
async def render_pdf(request: RenderPdfRequest) -> Response:
    """
    Render ready-made HTML to PDF using Playwright.

    Returns the PDF as binary content with appropriate headers.
    """
    if not request.html.strip():
        raise ValidationError("HTML content is required")

    print_config = build_print_config(
        None, request.header_template, request.footer_template
    )
    print_config = replace(
        print_config,
        paper_format=resolve_paper_format(request.paper_format),
        landscape=request.landscape,
        margins=MarginSet(**{
            side: value for side, value in (request.margins or {}).items()
            if side in MARGIN_SIDES
        }),
        print_background=request.print_background,
    )

    service = RenderService()
    pdf_bytes = await service.html_to_pdf(request.html, print_config)
    return pdf_response(pdf_bytes, "export.pdf")


@router.get("/browser", response_model=BrowserStatus)
async def browser_status() -> BrowserStatus:
    """Report whether the Chromium binary has been acquired."""
    installer = get_installer()
    executable = installer.executable
    return BrowserStatus(
        state=installer.state.value,
        browsers_path=str(installer.browsers_path),
        executable=str(executable) if executable else None,
    )


@router.post("/browser/install", response_model=BrowserStatus)
async def install_browser() -> BrowserStatus:
    """Acquire the Chromium binary ahead of the first render."""
    await get_installer().ensure_ready()
    return await browser_status()
