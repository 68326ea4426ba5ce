"""Configuration management for the axe HTML fixer."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AXE_FIXER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Logging
    log_level: str = Field("INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(False, description="Render logs as JSON instead of console output")

    # Remediation
    accessible_label_attribute: str = Field(
        "arialabel",
        description="Attribute the component framework renders as aria-label"
    )
    contrast_target_ratio: float = Field(4.5, description="Minimum contrast ratio for color fixes")
    jsonrpc_id: int = Field(1, description="Id placed in the finalResult JSON-RPC envelope")

    # Inputs used when a caller passes neither a path nor inline content
    default_html_path: Optional[str] = Field(None, description="HTML document to remediate")
    default_report_path: Optional[str] = Field(None, description="Axe JSON report to apply")

    # Output
    fixed_file_suffix: str = Field("_fixed", description="Suffix for the CLI's remediated file")

    # MCP server
    server_name: str = Field("axe-html-fixer-mcp", description="Name announced by the MCP server")
    server_version: str = Field("1.0.0", description="Version announced by the MCP server")


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
