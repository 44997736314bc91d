"""
Header and footer templates for Chromium's print header/footer slots.

Chromium renders these fragments in isolation from the page, so all styling
is inline. Inside them it fills ``<span class='pageNumber'>`` and
``<span class='totalPages'>`` with the current page and page count.
"""

import html
from datetime import date

from reportpdf.modules.template.schemas import Report, TextStyle

EMPTY_TEMPLATE = "<div></div>"

DEFAULT_FONT = "Arial"
DEFAULT_FONT_SIZE = 10
DEFAULT_ALIGNMENT = "center"

PAGE_NUMBER_HTML = (
    "<div>Page <span class='pageNumber'></span> of "
    "<span class='totalPages'></span></div>"
)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _style_values(style: TextStyle | None) -> tuple[str, int, str]:
    """Font family, size and alignment with defaults applied."""
    if style is None:
        return DEFAULT_FONT, DEFAULT_FONT_SIZE, DEFAULT_ALIGNMENT
    font = style.font if not _is_blank(style.font) else DEFAULT_FONT
    size = style.font_size if style.font_size > 0 else DEFAULT_FONT_SIZE
    alignment = style.alignment if not _is_blank(style.alignment) else DEFAULT_ALIGNMENT
    return font, size, alignment


def build_header(
    report: Report | None,
    override_html: str | None = None,
    escape: bool = False,
) -> str:
    """
    Header template for the report.

    A non-blank ``override_html`` is returned unchanged. Without a configured
    header text the empty template is returned.
    """
    if not _is_blank(override_html):
        return override_html

    page_setup = report.report_data.page_setup if report else None
    header = page_setup.header_text if page_setup else None
    if header is None:
        return EMPTY_TEMPLATE

    font, size, alignment = _style_values(header)
    text = header.text or ""
    if escape:
        text = html.escape(text)

    return (
        f"<div style='font-family: {font}, sans-serif; font-size: {size}px; width: 100%; "
        f"padding: 10px 20px; box-sizing: border-box; text-align: {alignment};'>"
        f"{text}"
        f"</div>"
    )


def build_footer(
    report: Report | None,
    override_html: str | None = None,
    today: date | None = None,
    escape: bool = False,
) -> str:
    """
    Footer template for the report.

    Holds the footer text, the render date and, when the report asks for
    page numbers, the page-number spans Chromium fills in.
    """
    if not _is_blank(override_html):
        return override_html

    data = report.report_data if report else None
    page_setup = data.page_setup if data else None
    footer = page_setup.footer_text if page_setup else None
    include_page_number = data.include_page_number if data else False

    if footer is None and not include_page_number:
        return EMPTY_TEMPLATE

    font, size, alignment = _style_values(footer)
    text = (footer.text if footer else None) or ""
    if escape:
        text = html.escape(text)
    stamp = (today or date.today()).strftime("%Y-%m-%d")
    page_numbers = PAGE_NUMBER_HTML if include_page_number else ""

    return (
        f"<div style='font-family: {font}, sans-serif; font-size: {size}px; width: 100%; "
        f"padding: 10px 20px; box-sizing: border-box;'>"
        f"<div style='display: flex; justify-content: space-between; "
        f"align-items: center; text-align: {alignment};'>"
        f"<div>{text}</div>"
        f"<div>Date: {stamp}</div>"
        f"{page_numbers}"
        f"</div>"
        f"</div>"
    )
