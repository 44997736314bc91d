"""Shared fixtures."""

from contextlib import asynccontextmanager
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from reportpdf.app import build_app
from reportpdf.config import Settings, init_settings, reset_settings
from reportpdf.modules.render.installer import (
    BrowserInstaller,
    reset_installer,
    set_installer,
)
from reportpdf.modules.template.schemas import (
    PageSetup,
    Report,
    ReportData,
    TableDefinition,
    TableRow,
    TextBlock,
)

FAKE_PDF = b"%PDF-1.4\n% fake pdf for tests\n%%EOF"


class FakePlaywright:
    """
    Stand-in for ``async_playwright`` with mock browser and page.

    Usage:
        fake = FakePlaywright()
        RenderService(playwright_factory=fake.factory)
        fake.page.pdf.assert_awaited_once()
    """

    def __init__(self, pdf_bytes: bytes = FAKE_PDF) -> None:
        self.page = MagicMock()
        self.page.set_content = AsyncMock()
        self.page.pdf = AsyncMock(return_value=pdf_bytes)
        self.page.close = AsyncMock()

        self.browser = MagicMock()
        self.browser.new_page = AsyncMock(return_value=self.page)
        self.browser.close = AsyncMock()

        self.playwright = MagicMock()
        self.playwright.chromium.launch = AsyncMock(return_value=self.browser)

    @asynccontextmanager
    async def factory(self):
        yield self.playwright


@pytest.fixture
def browsers_dir(tmp_path: Path) -> Path:
    """Browsers directory with a fake installed Chromium."""
    path = tmp_path / "chromium"
    exe = path / "chromium-1100" / "chrome-linux" / "chrome"
    exe.parent.mkdir(parents=True)
    exe.write_text("#!/bin/sh\n")
    return path


@pytest.fixture
def settings(browsers_dir: Path):
    """Test settings, installed process-wide for the duration of a test."""
    reset_settings()
    s = init_settings(Settings(browsers_path=browsers_dir, render_timeout_ms=5_000))
    yield s
    reset_settings()


@pytest.fixture
def downloader() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def installer(settings: Settings, downloader: AsyncMock):
    """Process-wide installer pointing at the fake browsers directory."""
    inst = set_installer(
        BrowserInstaller(browsers_path=settings.browsers_path, downloader=downloader)
    )
    yield inst
    reset_installer()


@pytest.fixture
def fake_playwright() -> FakePlaywright:
    return FakePlaywright()


@pytest.fixture
def client(settings: Settings, installer: BrowserInstaller):
    """Test client over a freshly built app."""
    app = build_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sales_report() -> Report:
    return Report(report_data=ReportData(
        tables=[
            TableDefinition(
                name="Sales",
                headers=["Name", "Amount"],
                rows=[TableRow(columns=["Alice", "10"])],
            ),
        ],
        texts=[TextBlock(name="Title", value="Quarterly Sales")],
        page_setup=PageSetup(size="A4", orientation="portrait"),
    ))
