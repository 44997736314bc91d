"""Convert module - report templates to PDF."""

from .router import router
from .schemas import ConvertRequest, FilledTemplateResponse, FillTemplateRequest
from .service import ConvertService

__all__ = [
    "router",
    "ConvertRequest",
    "ConvertService",
    "FilledTemplateResponse",
    "FillTemplateRequest",
]
