"""Tests for the Playwright render session (Playwright is mocked)."""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from reportpdf.config import Settings
from reportpdf.modules.layout.print_config import PrintConfig, PaperFormat
from reportpdf.modules.render.installer import BrowserInstaller
from reportpdf.modules.render.service import RenderService
from reportpdf.shared.errors import AcquisitionError, ConversionError, RenderError

from conftest import FAKE_PDF, FakePlaywright

HTML = "<html><body><p>hello</p></body></html>"


def _service(settings: Settings, installer: BrowserInstaller, fake: FakePlaywright) -> RenderService:
    return RenderService(installer=installer, settings=settings, playwright_factory=fake.factory)


class TestHtmlToPdf:

    def test_happy_path(self, settings, installer, fake_playwright: FakePlaywright) -> None:
        config = PrintConfig(paper_format=PaperFormat.LETTER, landscape=True)

        pdf = asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, config))

        assert pdf == FAKE_PDF
        fake_playwright.page.set_content.assert_awaited_once_with(HTML, wait_until="networkidle")
        fake_playwright.page.pdf.assert_awaited_once_with(**config.to_pdf_options())
        fake_playwright.page.close.assert_awaited_once()
        fake_playwright.browser.close.assert_awaited_once()

    def test_launch_options(self, settings, installer, fake_playwright: FakePlaywright) -> None:
        asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        fake_playwright.playwright.chromium.launch.assert_awaited_once_with(
            headless=True,
            executable_path=str(installer.find_executable()),
            args=["--no-sandbox", "--disable-setuid-sandbox"],
        )
        assert Path(
            fake_playwright.playwright.chromium.launch.await_args.kwargs["executable_path"]
        ).name == "chrome"
        fake_playwright.page.set_default_timeout.assert_called_once_with(5_000)

    def test_acquires_browser_first(self, settings, fake_playwright: FakePlaywright, tmp_path: Path) -> None:
        downloader = AsyncMock()
        installer = BrowserInstaller(browsers_path=tmp_path / "empty", downloader=downloader)

        asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        downloader.assert_awaited_once()
        assert installer.is_ready
        # Nothing was actually downloaded, so Playwright picks its own binary
        launch_kwargs = fake_playwright.playwright.chromium.launch.await_args.kwargs
        assert launch_kwargs["executable_path"] is None

    def test_acquisition_failure_skips_launch(
        self, settings, fake_playwright: FakePlaywright, tmp_path: Path
    ) -> None:
        installer = BrowserInstaller(
            browsers_path=tmp_path / "empty",
            downloader=AsyncMock(side_effect=RuntimeError("disk full")),
        )

        with pytest.raises(AcquisitionError) as exc_info:
            asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        assert exc_info.value.details["kind"] == "acquisition"
        fake_playwright.playwright.chromium.launch.assert_not_awaited()


class TestFailures:

    def test_pdf_failure_wrapped_and_session_closed(
        self, settings, installer, fake_playwright: FakePlaywright
    ) -> None:
        fake_playwright.page.pdf.side_effect = RuntimeError("Target closed")

        with pytest.raises(RenderError) as exc_info:
            asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        err = exc_info.value
        assert isinstance(err, ConversionError)
        assert err.kind == "render"
        assert err.code == "CONVERSION_FAILED"
        assert isinstance(err.__cause__, RuntimeError)
        assert "Target closed" in err.message
        fake_playwright.page.close.assert_awaited_once()
        fake_playwright.browser.close.assert_awaited_once()

    def test_navigation_failure_closes_session(
        self, settings, installer, fake_playwright: FakePlaywright
    ) -> None:
        fake_playwright.page.set_content.side_effect = ValueError("net::ERR_FAILED")

        with pytest.raises(RenderError):
            asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        fake_playwright.page.pdf.assert_not_awaited()
        fake_playwright.page.close.assert_awaited_once()
        fake_playwright.browser.close.assert_awaited_once()

    def test_launch_failure(self, settings, installer, fake_playwright: FakePlaywright) -> None:
        fake_playwright.playwright.chromium.launch.side_effect = OSError("spawn failed")

        with pytest.raises(RenderError) as exc_info:
            asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        assert isinstance(exc_info.value.__cause__, OSError)
        fake_playwright.browser.close.assert_not_awaited()

    def test_timeout_bounds_session(self, browsers_dir: Path, installer, fake_playwright: FakePlaywright) -> None:
        settings = Settings(browsers_path=browsers_dir, render_timeout_ms=50)

        async def never_idle(*args, **kwargs):
            await asyncio.sleep(10)

        fake_playwright.page.set_content.side_effect = never_idle

        with pytest.raises(RenderError) as exc_info:
            asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        assert "timed out after 50ms" in exc_info.value.message
        fake_playwright.page.close.assert_awaited_once()
        fake_playwright.browser.close.assert_awaited_once()

    def test_timeout_disabled(self, browsers_dir: Path, installer, fake_playwright: FakePlaywright) -> None:
        settings = Settings(browsers_path=browsers_dir, render_timeout_ms=0)

        pdf = asyncio.run(_service(settings, installer, fake_playwright).html_to_pdf(HTML, PrintConfig()))

        assert pdf == FAKE_PDF
        fake_playwright.page.set_default_timeout.assert_not_called()
