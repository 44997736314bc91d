"""Render service - HTML to PDF using Playwright."""

import asyncio
from typing import Any, Callable

from playwright.async_api import async_playwright

from reportpdf.config import Settings, get_settings
from reportpdf.modules.layout.print_config import PrintConfig
from reportpdf.shared.errors import RenderError
from reportpdf.shared.logging import get_logger

from .installer import BrowserInstaller, get_installer

logger = get_logger(__name__)


class RenderService:
    """Service for rendering HTML to PDF with a per-request Chromium session."""

    def __init__(
        self,
        installer: BrowserInstaller | None = None,
        settings: Settings | None = None,
        playwright_factory: Callable[[], Any] | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.installer = installer or get_installer()
        self._playwright_factory = playwright_factory or async_playwright

    async def html_to_pdf(self, html: str, print_config: PrintConfig) -> bytes:
        """
        Render HTML content to PDF bytes.

        Args:
            html: Complete HTML document to render
            print_config: Paper, margins and header/footer templates

        Returns:
            PDF bytes

        Raises:
            AcquisitionError: Chromium could not be found or downloaded
            RenderError: Launch, page load or PDF generation failed
        """
        await self.installer.ensure_ready()

        timeout_ms = self.settings.render_timeout_ms
        logger.info(
            f"Rendering PDF: format={print_config.paper_format.value}, "
            f"landscape={print_config.landscape}, html={len(html)} chars"
        )

        try:
            session = self._render(html, print_config, timeout_ms)
            if timeout_ms:
                pdf_bytes = await asyncio.wait_for(session, timeout=timeout_ms / 1000)
            else:
                pdf_bytes = await session
        except asyncio.TimeoutError as e:
            logger.error(f"PDF render timed out after {timeout_ms}ms")
            raise RenderError(f"rendering timed out after {timeout_ms}ms", e) from e
        except Exception as e:
            logger.error(f"PDF render failed: {e}")
            raise RenderError(str(e), e) from e

        logger.info(f"Generated PDF: {len(pdf_bytes)} bytes")
        return pdf_bytes

    async def _render(self, html: str, print_config: PrintConfig, timeout_ms: int) -> bytes:
        """One isolated browser session; browser and page are always closed."""
        executable = self.installer.executable
        if executable is None:
            logger.warning(
                f"No Chromium executable under {self.installer.browsers_path}, "
                "using Playwright's default"
            )

        async with self._playwright_factory() as p:
            browser = await p.chromium.launch(
                headless=True,
                executable_path=str(executable) if executable else None,
                args=list(self.settings.launch_args),
            )

            try:
                page = await browser.new_page()

                try:
                    if timeout_ms:
                        page.set_default_timeout(timeout_ms)

                    # Load HTML content
                    await page.set_content(html, wait_until="networkidle")

                    # Generate PDF
                    return await page.pdf(**print_config.to_pdf_options())

                finally:
                    await page.close()

            finally:
                await browser.close()
