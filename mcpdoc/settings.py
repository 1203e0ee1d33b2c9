"""Configuration management for mcpdoc using pydantic-settings."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Transport = Literal["stdio", "sse", "http"]


class McpdocSettings(BaseSettings):
    """Server defaults, overridable by MCPDOC_* env vars and then by CLI flags."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MCPDOC_",
        case_sensitive=False,
        extra="ignore",
    )

    # Fetch behaviour
    timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )
    follow_redirects: bool = Field(
        default=False,
        description="Follow HTTP redirects and one meta-refresh hop",
    )
    allowed_domains: list[str] = Field(
        default_factory=list,
        description='Extra origins fetch_docs may read from, e.g. ["https://example.com/"] or ["*"]',
    )

    # Server settings
    transport: Transport = Field(
        default="stdio",
        description="MCP transport: stdio, sse or http",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind to (network transports only)",
    )
    port: int = Field(
        default=8000,
        description="Port to bind to (network transports only)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level for mcpdoc and fastmcp loggers",
    )

    # Error reporting
    sentry_dsn: str | None = Field(
        default=None,
        validation_alias="SENTRY_DSN",
        description="Sentry DSN; error reporting is disabled when unset",
    )
    environment: str = Field(
        default="dev",
        description="Environment name attached to Sentry events",
    )
