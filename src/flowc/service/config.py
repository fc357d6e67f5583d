"""
Configuration for the flowc service and runner.

Values come from the environment (``FLOWC_*``, plus the bare ``PORT``
used by most hosting platforms) or a local ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_prefix="FLOWC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(
        default=9602,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("FLOWC_PORT", "PORT"),
        description="Server port",
    )
    static_dir: str = Field(default="static", description="Directory served at / when present")

    # Compiler invocation
    compiler: str = Field(default="g++", description="C++ compiler executable")
    compiler_flags: list[str] = Field(
        default_factory=lambda: ["-std=c++17"],
        description="Flags passed to the compiler before -o",
    )
    compile_timeout: float = Field(default=5.0, gt=0, description="Compiler timeout in seconds")
    run_timeout: float = Field(default=5.0, gt=0, description="Program timeout in seconds")
    scratch_dir: Optional[str] = Field(
        default=None,
        description="Parent directory for per-compilation scratch dirs (system temp if unset)",
    )

    # History
    history_limit: int = Field(default=500, ge=1, description="Compilations kept for /ideas")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
