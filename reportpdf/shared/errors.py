"""
Error types.

All service errors derive from ReportPdfError so the app can map them to a
consistent JSON body. Conversion failures are tagged by the stage that failed
(binary acquisition or rendering) and always carry the underlying cause.
"""

from typing import Any, Literal

ConversionKind = Literal["acquisition", "render"]


class ReportPdfError(Exception):
    """Base error with a code, message, details and HTTP status."""

    code = "INTERNAL_ERROR"
    http_status = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(ReportPdfError):
    """Request content that passed schema validation but cannot be used."""

    code = "VALIDATION_ERROR"
    http_status = 400


class ConversionError(ReportPdfError):
    """
    HTML to PDF conversion failed.

    This is the single failure kind callers need to handle. ``kind`` tells
    which stage failed; the original exception is chained as ``__cause__``.
    """

    code = "CONVERSION_FAILED"
    http_status = 500
    kind: ConversionKind = "render"

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        details: dict[str, Any] = {"kind": self.kind}
        if cause is not None:
            details["cause"] = f"{type(cause).__name__}: {cause}"
        super().__init__(f"Failed to convert HTML to PDF: {message}", details)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class AcquisitionError(ConversionError):
    """Browser binary could not be located or downloaded."""

    kind: ConversionKind = "acquisition"


class RenderError(ConversionError):
    """Browser launch, page load or PDF generation failed."""

    kind: ConversionKind = "render"
