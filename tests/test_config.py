import logging
from dataclasses import fields
from pathlib import Path

from reportpdf.config import Settings, get_settings, init_settings, reset_settings
from reportpdf.shared.errors import RenderError, ValidationError
from reportpdf.shared.logging import (
    RequestContextFilter,
    clear_request_context,
    set_request_context,
)
from reportpdf.shared.types import RequestContext


def test_settings_defaults(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    settings = Settings()
    assert settings.table_prefix == "{{Table:"
    assert settings.text_prefix == "{{Text:"
    assert settings.placeholder_postfix == "}}"
    assert settings.escape_values is False
    assert settings.get_browsers_path() == tmp_path / "chromium"


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("REPORTPDF_RENDER_TIMEOUT_MS", "1500")
    monkeypatch.setenv("REPORTPDF_BROWSERS_PATH", str(tmp_path / "browsers"))
    monkeypatch.setenv("REPORTPDF_ESCAPE_VALUES", "true")

    settings = Settings()

    assert settings.render_timeout_ms == 1500
    assert settings.get_browsers_path() == tmp_path / "browsers"
    assert settings.escape_values is True


def test_init_and_reset_settings():
    custom = Settings(browsers_path=Path("/opt/chromium"))
    try:
        init_settings(custom)
        assert get_settings() is custom
        reset_settings()
        assert get_settings() is not custom
    finally:
        reset_settings()


def test_error_to_dict():
    err = ValidationError("HTML content is required")
    assert err.http_status == 400
    assert err.to_dict() == {
        "code": "VALIDATION_ERROR",
        "message": "HTML content is required",
        "details": {},
    }


def test_conversion_error_carries_cause():
    cause = TimeoutError("networkidle")
    err = RenderError("page never settled", cause)

    assert err.message == "Failed to convert HTML to PDF: page never settled"
    assert err.details == {"kind": "render", "cause": "TimeoutError: networkidle"}
    assert err.__cause__ is cause


def test_log_records_carry_request_id():
    record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)
    log_filter = RequestContextFilter()

    set_request_context(RequestContext(request_id="req_abc"))
    try:
        log_filter.filter(record)
        assert record.request_id == "req_abc"
    finally:
        clear_request_context()

    log_filter.filter(record)
    assert record.request_id == "-"


def test_request_context_holds_only_request_id():
    assert [f.name for f in fields(RequestContext)] == ["request_id"]
