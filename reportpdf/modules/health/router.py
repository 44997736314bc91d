"""Health check routes."""

from fastapi import APIRouter
from pydantic import BaseModel

from reportpdf import __version__
from reportpdf.modules.render.installer import get_installer

router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    browser_state: str


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness plus browser acquisition state (``unknown`` until first use)."""
    return HealthResponse(
        version=__version__,
        browser_state=get_installer().state.value,
    )
