"""
Service settings loaded from environment variables (prefix ``REPORTPDF_``)
or a local ``.env`` file.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="REPORTPDF_",
        env_file=".env",
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8200
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Browser binary, relative paths resolve against the working directory
    browsers_path: Path = Path("chromium")
    launch_args: list[str] = Field(
        default_factory=lambda: ["--no-sandbox", "--disable-setuid-sandbox"]
    )
    # Upper bound for one render session in ms, 0 disables it
    render_timeout_ms: int = Field(default=60_000, ge=0)

    # Template placeholders
    table_prefix: str = "{{Table:"
    text_prefix: str = "{{Text:"
    placeholder_postfix: str = "}}"
    escape_values: bool = False

    def get_browsers_path(self) -> Path:
        """Absolute browsers directory."""
        path = self.browsers_path.expanduser()
        if not path.is_absolute():
            path = Path.cwd() / path
        return path


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the process settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def init_settings(settings: Settings) -> Settings:
    """Install explicit settings (tests, embedding)."""
    global _settings
    _settings = settings
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _settings
    _settings = None
