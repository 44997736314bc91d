"""
Print configuration - maps a report's page setup to Playwright PDF options.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from reportpdf.modules.template.schemas import PageMargin, Report

from .header_footer import EMPTY_TEMPLATE

DEFAULT_MARGIN = "20mm"


class PaperFormat(str, Enum):
    """Paper sizes; values are Playwright ``format`` names."""
    A4 = "A4"
    A3 = "A3"
    A5 = "A5"
    LETTER = "Letter"
    LEGAL = "Legal"
    TABLOID = "Tabloid"


# Lookup keyed by upper-cased size name
PAPER_FORMATS = {fmt.name: fmt for fmt in PaperFormat}


@dataclass(frozen=True)
class MarginSet:
    """Resolved page margins as CSS lengths."""
    top: str = DEFAULT_MARGIN
    bottom: str = DEFAULT_MARGIN
    left: str = DEFAULT_MARGIN
    right: str = DEFAULT_MARGIN

    def as_dict(self) -> dict[str, str]:
        return {"top": self.top, "bottom": self.bottom, "left": self.left, "right": self.right}


@dataclass(frozen=True)
class PrintConfig:
    """Everything Chromium needs to print one report."""
    paper_format: PaperFormat = PaperFormat.A4
    landscape: bool = False
    margins: MarginSet = field(default_factory=MarginSet)
    header_template: str = EMPTY_TEMPLATE
    footer_template: str = EMPTY_TEMPLATE
    display_header_footer: bool = False
    print_background: bool = True

    def to_pdf_options(self) -> dict[str, Any]:
        """Keyword arguments for ``playwright.async_api.Page.pdf``."""
        return {
            "format": self.paper_format.value,
            "landscape": self.landscape,
            "margin": self.margins.as_dict(),
            "print_background": self.print_background,
            "display_header_footer": self.display_header_footer,
            "header_template": self.header_template,
            "footer_template": self.footer_template,
        }


def resolve_paper_format(size_name: str | None) -> PaperFormat:
    """Case-insensitive paper size lookup; unknown or blank names give A4."""
    if not size_name or not size_name.strip():
        return PaperFormat.A4
    return PAPER_FORMATS.get(size_name.strip().upper(), PaperFormat.A4)


def _px(value: float) -> str:
    # 12.0 -> "12px", 12.5 -> "12.5px"
    if float(value).is_integer():
        return f"{int(value)}px"
    return f"{value:.10g}px"


def resolve_margins(page_margin: PageMargin | None) -> MarginSet:
    """
    Resolve the four page margins.

    Top comes from the header margin height, bottom from the footer margin
    height, left and right from the header margin. Each side falls back to
    the default on its own when unset or not positive.
    """
    if page_margin is None:
        return MarginSet()

    header = page_margin.header_margin
    footer = page_margin.footer_margin

    def side(box, attr: str) -> str:
        value = getattr(box, attr) if box is not None else 0
        return _px(value) if value and value > 0 else DEFAULT_MARGIN

    return MarginSet(
        top=side(header, "height"),
        bottom=side(footer, "height"),
        left=side(header, "left"),
        right=side(header, "right"),
    )


def _has_content(fragment: str) -> bool:
    """Non-blank and not just the empty placeholder div."""
    stripped = fragment.strip()
    return bool(stripped) and stripped != EMPTY_TEMPLATE


def build_print_config(
    report: Report | None,
    header_html: str | None,
    footer_html: str | None,
) -> PrintConfig:
    """
    Build the print configuration for a report.

    Blank fragments are replaced with the empty template. Header and footer
    are only displayed when at least one of them has content beyond that.
    """
    page_setup = report.report_data.page_setup if report else None

    # Chromium prints its own date/title header for an empty template
    header = header_html if header_html and header_html.strip() else EMPTY_TEMPLATE
    footer = footer_html if footer_html and footer_html.strip() else EMPTY_TEMPLATE
    display = _has_content(header) or _has_content(footer)

    orientation = (page_setup.orientation if page_setup else None) or ""

    return PrintConfig(
        paper_format=resolve_paper_format(page_setup.size if page_setup else None),
        landscape=orientation.lower() == "landscape",
        margins=resolve_margins(page_setup.page_margin if page_setup else None),
        header_template=header,
        footer_template=footer,
        display_header_footer=display,
    )
