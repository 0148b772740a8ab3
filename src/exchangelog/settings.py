"""Application settings using pydantic-settings."""

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from exchangelog.models.output import FormatOptions


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Every formatter option can be preset as ``EXCHANGELOG_<OPTION>``, e.g.
    ``EXCHANGELOG_SHOW_ALL=true`` or ``EXCHANGELOG_MAX_CHARS=120``.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXCHANGELOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    show_exchange_id: bool = False
    show_properties: bool = False
    show_headers: bool = False
    show_body_type: bool = True
    show_body: bool = True
    show_out: bool = False
    show_exception: bool = False
    show_caught_exception: bool = False
    show_stack_trace: bool = False
    show_all: bool = False
    multiline: bool = False
    show_future: bool = False
    max_chars: int = Field(default=0, ge=0)

    log_level: str = "INFO"

    def format_options(self, **overrides: Any) -> FormatOptions:
        """Build formatter options from these settings.

        Args:
            overrides: Option values that take precedence; None values are ignored

        Returns:
            Immutable formatter options
        """
        values = self.model_dump(include=set(FormatOptions.model_fields))
        values.update({k: v for k, v in overrides.items() if v is not None})
        return FormatOptions(**values)


# Global settings instance
settings = Settings()
