"""Application settings using Pydantic BaseSettings."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bootcheck.config.constants import ALL_TARGETS, Target

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Rustica Boot Check"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_VALID_LOG_LEVELS}, got '{v}'")
        return upper

    @field_validator("transcript_template")
    @classmethod
    def validate_transcript_template(cls, v: str) -> str:
        try:
            first = v.format(target="amd64")
            second = v.format(target="arm64")
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"transcript_template must only use the '{{target}}' field, got '{v}'") from e
        if first == second:
            raise ValueError(f"transcript_template must contain '{{target}}', got '{v}'")
        return v

    @model_validator(mode="after")
    def validate_qemu_limits_positive(self) -> "Settings":
        for field_name in ("qemu_smp", "qemu_timeout"):
            value = getattr(self, field_name)
            if value <= 0:
                raise ValueError(f"{field_name} must be positive, got {value}")
        return self

    @model_validator(mode="after")
    def warn_wildcard_origins(self) -> "Settings":
        if self.allowed_origins == ["*"]:
            logging.getLogger(__name__).warning(
                "allowed_origins is set to ['*'], consider restricting it outside the lab"
            )
        return self

    # CORS
    allowed_origins: list[str] = ["*"]

    # Transcripts (written by the QEMU log collector)
    transcript_dir: Path = Path("/tmp")
    transcript_template: str = "qemu-{target}-boot.log"
    transcript_encoding: str = "utf-8"

    # Classification
    targets: list[Target] = list(ALL_TARGETS)
    strict_installer_match: bool = False

    # Images and reports
    images_dir: Path = Path("images")
    write_report: bool = True

    # QEMU
    qemu_memory: str = "1G"
    qemu_smp: int = 2
    qemu_timeout: int = 60
    test_disk_size: str = "4G"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
