"""
Convert service - report + HTML template to PDF.

Pipeline: substitute tables, substitute texts, compose header/footer, build
the print configuration, render. Only ConversionError leaves ``convert``.
"""

from reportpdf.config import get_settings
from reportpdf.modules.layout.header_footer import build_footer, build_header
from reportpdf.modules.layout.print_config import PrintConfig, build_print_config
from reportpdf.modules.render.service import RenderService
from reportpdf.modules.template.schemas import Report
from reportpdf.modules.template.service import TemplateService
from reportpdf.shared.logging import get_logger

logger = get_logger(__name__)


class ConvertService:
    """Runs the full template-to-PDF pipeline for one report."""

    def __init__(
        self,
        template_service: TemplateService | None = None,
        render_service: RenderService | None = None,
    ) -> None:
        self.settings = get_settings()
        self.templates = template_service or TemplateService()
        self.renderer = render_service or RenderService()

    def fill_template(self, report: Report, template: str) -> str:
        """Substitute the report's tables and texts into ``template``."""
        duplicates = self.templates.find_duplicate_names(report)
        if duplicates:
            logger.warning(
                f"Duplicate placeholder names, first definition wins: {', '.join(duplicates)}"
            )
        html = self.templates.substitute_tables(report, template)
        return self.templates.substitute_texts(report, html)

    def build_print_config(
        self,
        report: Report,
        header_html: str | None = None,
        footer_html: str | None = None,
    ) -> PrintConfig:
        """Header/footer templates and page options derived from the report."""
        escape = self.settings.escape_values
        header = build_header(report, header_html, escape=escape)
        footer = build_footer(report, footer_html, escape=escape)
        return build_print_config(report, header, footer)

    async def convert(
        self,
        report: Report,
        template: str,
        header_html: str | None = None,
        footer_html: str | None = None,
    ) -> bytes:
        """
        Convert a report to PDF bytes.

        Args:
            report: Tables, texts and page setup
            template: HTML template with placeholders
            header_html: Optional header template overriding the report's
            footer_html: Optional footer template overriding the report's

        Raises:
            ConversionError: Any acquisition or rendering failure, with the
                original exception as its cause
        """
        html = self.fill_template(report, template)
        print_config = self.build_print_config(report, header_html, footer_html)
        return await self.renderer.html_to_pdf(html, print_config)
