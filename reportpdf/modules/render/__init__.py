"""Render module - HTML to PDF rendering using Playwright."""

from .installer import AcquisitionState, BrowserInstaller, get_installer, reset_installer
from .router import router
from .schemas import BrowserStatus, RenderPdfRequest
from .service import RenderService

__all__ = [
    "router",
    "AcquisitionState",
    "BrowserInstaller",
    "BrowserStatus",
    "RenderPdfRequest",
    "RenderService",
    "get_installer",
    "reset_installer",
]
