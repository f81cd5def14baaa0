"""
Configuration settings for the accessibility report bridge.
"""

from functools import lru_cache
from typing import FrozenSet, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Bridge configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    service_name: str = "a11y-bridge"
    log_level: str = "INFO"

    # Audit engine sidecar
    audit_engine_url: str = Field(
        default="http://host.docker.internal:3000",
        description="Base URL of the audit engine (POST /check)",
    )
    audit_engine_timeout_seconds: float = 120.0
    audit_engine_connect_timeout_seconds: float = 10.0

    # Scaffold styling (pass-through, never interpreted)
    background_color: str = "#ffffff"
    text_color: str = "#000000"

    # Suppression
    ignore_class_name: str = Field(
        default="phpally-ignore",
        description="Class token authors put on elements to opt them out of reporting",
    )
    skip_rule_ids: str = Field(
        default="",
        description="Comma-separated rule identifiers that are never reported",
    )

    # Rule identifier mapping
    rule_mapping_enabled: bool = False
    rule_mapping_path: Optional[str] = None

    @property
    def skip_rule_ids_set(self) -> FrozenSet[str]:
        return frozenset(r.strip() for r in self.skip_rule_ids.split(",") if r.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
