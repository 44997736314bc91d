"""Layout module - header/footer templates and print configuration."""

from .header_footer import EMPTY_TEMPLATE, build_footer, build_header
from .print_config import (
    DEFAULT_MARGIN,
    MarginSet,
    PaperFormat,
    PrintConfig,
    build_print_config,
    resolve_margins,
    resolve_paper_format,
)

__all__ = [
    "EMPTY_TEMPLATE",
    "DEFAULT_MARGIN",
    "MarginSet",
    "PaperFormat",
    "PrintConfig",
    "build_footer",
    "build_header",
    "build_print_config",
    "resolve_margins",
    "resolve_paper_format",
]
